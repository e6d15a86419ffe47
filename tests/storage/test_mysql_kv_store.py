from __future__ import annotations

import mysql.connector
import pytest

from carwash_ops.core.exceptions import StorageError
from carwash_ops.storage.mysql_kv_store import MySQLKeyValueStore


class FakeCursor:
    def __init__(self, table, fail=False):
        self._table = table
        self._fail = fail
        self._row = None

    def execute(self, sql, params=()):
        if self._fail:
            raise mysql.connector.Error("connection lost")
        statement = " ".join(sql.split())
        if statement.startswith("SELECT"):
            value = self._table.get(params[0])
            self._row = {"store_value": value} if value is not None else None
        elif statement.startswith("INSERT"):
            self._table[params[0]] = params[1]
        elif statement.startswith("DELETE"):
            self._table.pop(params[0], None)

    def fetchone(self):
        return self._row

    def close(self):
        pass


class FakeConnection:
    def __init__(self, table, fail):
        self._table = table
        self._fail = fail
        self.committed = False
        self.rolled_back = False

    def cursor(self, dictionary=False):
        return FakeCursor(self._table, self._fail)

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class FakeConnectionFactory:
    def __init__(self, fail=False):
        self.table = {}
        self.fail = fail
        self.connections = []

    def connect(self):
        conn = FakeConnection(self.table, self.fail)
        self.connections.append(conn)
        return conn


def test_set_get_remove():
    factory = FakeConnectionFactory()
    store = MySQLKeyValueStore(factory)

    assert store.get_item("carwash_carpets") is None
    store.set_item("carwash_carpets", "[]")
    assert store.get_item("carwash_carpets") == "[]"
    store.remove_item("carwash_carpets")
    assert store.get_item("carwash_carpets") is None
    assert all(c.committed for c in factory.connections)


def test_driver_errors_become_storage_errors():
    factory = FakeConnectionFactory(fail=True)
    store = MySQLKeyValueStore(factory)

    with pytest.raises(StorageError):
        store.set_item("carwash_carpets", "[]")
    assert factory.connections[0].rolled_back is True
