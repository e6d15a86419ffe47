from __future__ import annotations

from contextlib import contextmanager

import mysql.connector

from ..core.exceptions import StorageError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, action: str):
    """Short-lived connection + dict cursor; commits on success.

    Driver errors surface as ``StorageError`` tagged with ``action``.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as exc:
        raise StorageError(f"Could not {action}: {exc}") from exc
    try:
        cur = conn.cursor(dictionary=True)
        try:
            yield cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as exc:
        conn.rollback()
        raise StorageError(f"Could not {action}: {exc}") from exc
    finally:
        conn.close()
