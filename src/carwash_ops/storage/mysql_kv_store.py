from __future__ import annotations

from typing import Optional

from .connection import DatabaseConnection
from .kv import KeyValueStore
from .mysql_base import db_cursor


class MySQLKeyValueStore(KeyValueStore):
    """Key-value store on a single ``kv_store`` table (see bootstrap.py)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_item(self, key: str) -> Optional[str]:
        with db_cursor(self._conn_factory, action=f"read key {key!r}") as cur:
            cur.execute("SELECT store_value FROM kv_store WHERE store_key=%s", (key,))
            row = cur.fetchone()
        return row["store_value"] if row else None

    def set_item(self, key: str, value: str) -> None:
        with db_cursor(self._conn_factory, action=f"write key {key!r}") as cur:
            cur.execute(
                """
                INSERT INTO kv_store(store_key, store_value)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE store_value=VALUES(store_value)
                """,
                (key, value),
            )

    def remove_item(self, key: str) -> None:
        with db_cursor(self._conn_factory, action=f"remove key {key!r}") as cur:
            cur.execute("DELETE FROM kv_store WHERE store_key=%s", (key,))
