from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Customer


class CustomerRepository(Protocol):
    """Repository interface for Customer.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    def list_all(self) -> Sequence[Customer]:
        raise NotImplementedError

    def get_by_id(self, customer_id: str) -> Optional[Customer]:
        raise NotImplementedError

    def add(self, customer: Customer) -> None:
        raise NotImplementedError

    def update(self, customer: Customer) -> bool:
        raise NotImplementedError

    def delete_by_id(self, customer_id: str) -> bool:
        raise NotImplementedError

    def search(self, query: str) -> Sequence[Customer]:
        raise NotImplementedError
