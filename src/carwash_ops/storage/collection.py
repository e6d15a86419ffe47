from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, Generic, List, TypeVar

from ..core.exceptions import StorageError
from .kv import KeyValueStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonCollection(Generic[T]):
    """A whole collection serialized as one JSON array under one key.

    Every read re-parses the stored array; every mutation rewrites it (last
    write wins). Failures are logged and degrade: reads yield ``[]`` and
    writes are dropped.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str,
        *,
        from_dict: Callable[[Dict[str, Any]], T],
        to_dict: Callable[[T], Dict[str, Any]],
        get_id: Callable[[T], str],
    ):
        self._store = store
        self._key = key
        self._from_dict = from_dict
        self._to_dict = to_dict
        self._get_id = get_id

    def load(self) -> List[T]:
        try:
            stored = self._store.get_item(self._key)
            if not stored:
                return []
            return [self._from_dict(item) for item in json.loads(stored)]
        except (StorageError, ValueError, TypeError, KeyError, AttributeError) as exc:
            logger.error("Error loading %s from storage: %s", self._key, exc)
            return []

    def save(self, records: List[T]) -> None:
        try:
            payload = json.dumps([self._to_dict(r) for r in records], ensure_ascii=False)
            self._store.set_item(self._key, payload)
        except (StorageError, ValueError, TypeError) as exc:
            logger.error("Error saving %s to storage: %s", self._key, exc)

    def add(self, record: T) -> None:
        records = self.load()
        records.append(record)
        self.save(records)

    def update(self, record: T) -> bool:
        records = self.load()
        record_id = self._get_id(record)
        for i, existing in enumerate(records):
            if self._get_id(existing) == record_id:
                records[i] = record
                self.save(records)
                return True
        return False

    def delete(self, record_id: str) -> bool:
        records = self.load()
        kept = [r for r in records if self._get_id(r) != record_id]
        if len(kept) == len(records):
            return False
        self.save(kept)
        return True

    def get(self, record_id: str):
        for r in self.load():
            if self._get_id(r) == record_id:
                return r
        return None
