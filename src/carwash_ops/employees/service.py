from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Dict, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..common.validators import require_email, require_image_data_uri, require_non_empty
from ..core.constants import MAX_ID_IMAGE_BYTES, UNKNOWN_EMPLOYEE
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee, EmployeeFormData
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def validate_employee_form(form: EmployeeFormData) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    require_non_empty(errors, form.first_name, "firstName", "First name is required")
    require_non_empty(errors, form.last_name, "lastName", "Last name is required")
    require_email(errors, form.email)
    require_non_empty(errors, form.phone, "phone", "Phone is required")
    require_non_empty(errors, form.national_id, "nationalId", "National ID is required")
    require_image_data_uri(errors, form.national_id_image, "nationalIdImage", MAX_ID_IMAGE_BYTES)
    return errors


class EmployeeService:
    """Use case: manage employees."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def register_employee(self, form: EmployeeFormData, *, now: Optional[datetime] = None) -> Employee:
        errors = validate_employee_form(form)
        if errors:
            raise ValidationError("Employee form is invalid", errors)

        employee = Employee(
            employee_id=new_id(),
            first_name=form.first_name.strip(),
            last_name=form.last_name.strip(),
            email=form.email.strip(),
            phone=form.phone.strip(),
            national_id=form.national_id.strip(),
            national_id_image=form.national_id_image,
            created_at=now or now_local(),
            is_active=True,
        )
        self._employees.add(employee)
        logger.info("Registered employee %s (%s)", employee.employee_id, employee.full_name)
        return employee

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_active_employees(self) -> Sequence[Employee]:
        return self._employees.list_active()

    def search_employees(self, query: str) -> Sequence[Employee]:
        return self._employees.search(query)

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def update_employee(self, employee: Employee) -> bool:
        return self._employees.update(employee)

    def set_active(self, employee_id: str, *, is_active: bool) -> Employee:
        updated = replace(self.get_employee(employee_id), is_active=is_active)
        self._employees.update(updated)
        logger.info("Employee %s is now %s", employee_id, "active" if is_active else "inactive")
        return updated

    def toggle_active(self, employee_id: str) -> Employee:
        current = self.get_employee(employee_id)
        return self.set_active(employee_id, is_active=not current.is_active)

    def delete_employee(self, employee_id: str) -> bool:
        # Carpets, assignments and attendance keep the dangling id.
        return self._employees.delete_by_id(employee_id)

    def employee_name(self, employee_id: Optional[str]) -> str:
        employee = self._employees.get_by_id(employee_id) if employee_id else None
        return employee.full_name if employee else UNKNOWN_EMPLOYEE
