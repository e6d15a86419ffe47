from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Carpet


class CarpetRepository(Protocol):
    def list_all(self) -> Sequence[Carpet]:
        raise NotImplementedError

    def get_by_id(self, carpet_id: str) -> Optional[Carpet]:
        raise NotImplementedError

    def add(self, carpet: Carpet) -> None:
        raise NotImplementedError

    def update(self, carpet: Carpet) -> bool:
        raise NotImplementedError

    def delete_by_id(self, carpet_id: str) -> bool:
        raise NotImplementedError
