from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import EMPLOYEES_KEY
from ..storage.collection import JsonCollection
from ..storage.kv import KeyValueStore
from .model import Employee
from .repository import EmployeeRepository


class KeyValueEmployeeRepository(EmployeeRepository):
    def __init__(self, store: KeyValueStore):
        self._employees = JsonCollection(
            store,
            EMPLOYEES_KEY,
            from_dict=Employee.from_dict,
            to_dict=Employee.to_dict,
            get_id=lambda e: e.employee_id,
        )

    def list_all(self) -> Sequence[Employee]:
        return self._employees.load()

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._employees.get(employee_id)

    def add(self, employee: Employee) -> None:
        self._employees.add(employee)

    def update(self, employee: Employee) -> bool:
        return self._employees.update(employee)

    def delete_by_id(self, employee_id: str) -> bool:
        return self._employees.delete(employee_id)

    def list_active(self) -> Sequence[Employee]:
        return [e for e in self._employees.load() if e.is_active]

    def search(self, query: str) -> Sequence[Employee]:
        q = query.lower()
        # Phone and national ID use raw containment.
        return [
            e
            for e in self._employees.load()
            if q in e.first_name.lower()
            or q in e.last_name.lower()
            or q in e.email.lower()
            or query in e.phone
            or query in e.national_id
        ]
