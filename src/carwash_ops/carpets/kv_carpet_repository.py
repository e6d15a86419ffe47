from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import CARPETS_KEY
from ..storage.collection import JsonCollection
from ..storage.kv import KeyValueStore
from .model import Carpet
from .repository import CarpetRepository


class KeyValueCarpetRepository(CarpetRepository):
    def __init__(self, store: KeyValueStore):
        self._carpets = JsonCollection(
            store,
            CARPETS_KEY,
            from_dict=Carpet.from_dict,
            to_dict=Carpet.to_dict,
            get_id=lambda c: c.carpet_id,
        )

    def list_all(self) -> Sequence[Carpet]:
        return self._carpets.load()

    def get_by_id(self, carpet_id: str) -> Optional[Carpet]:
        return self._carpets.get(carpet_id)

    def add(self, carpet: Carpet) -> None:
        self._carpets.add(carpet)

    def update(self, carpet: Carpet) -> bool:
        return self._carpets.update(carpet)

    def delete_by_id(self, carpet_id: str) -> bool:
        return self._carpets.delete(carpet_id)
