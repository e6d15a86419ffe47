from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import CUSTOMERS_KEY
from ..storage.collection import JsonCollection
from ..storage.kv import KeyValueStore
from .model import Customer
from .repository import CustomerRepository


class KeyValueCustomerRepository(CustomerRepository):
    def __init__(self, store: KeyValueStore):
        self._customers = JsonCollection(
            store,
            CUSTOMERS_KEY,
            from_dict=Customer.from_dict,
            to_dict=Customer.to_dict,
            get_id=lambda c: c.customer_id,
        )

    def list_all(self) -> Sequence[Customer]:
        return self._customers.load()

    def get_by_id(self, customer_id: str) -> Optional[Customer]:
        return self._customers.get(customer_id)

    def add(self, customer: Customer) -> None:
        self._customers.add(customer)

    def update(self, customer: Customer) -> bool:
        return self._customers.update(customer)

    def delete_by_id(self, customer_id: str) -> bool:
        return self._customers.delete(customer_id)

    def search(self, query: str) -> Sequence[Customer]:
        q = query.lower()
        # Phone is matched against the raw query.
        return [
            c
            for c in self._customers.load()
            if q in c.first_name.lower()
            or q in c.last_name.lower()
            or q in c.email.lower()
            or query in c.phone
            or q in c.vehicle.license_plate.lower()
            or q in c.vehicle.make.lower()
            or q in c.vehicle.model.lower()
        ]
