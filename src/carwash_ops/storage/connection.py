from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import mysql.connector


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "carwash_db")),
        )

    def describe(self) -> str:
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class DatabaseConnection:
    """Connection factory shared per database target.

    Each store operation opens its own short-lived connection.
    """

    _instances: Dict[Tuple[str, int, str, str], "DatabaseConnection"] = {}

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        key = (config.host, config.port, config.user, config.database)
        instance: Optional[DatabaseConnection] = cls._instances.get(key)
        if instance is None:
            instance = cls._instances[key] = DatabaseConnection(config)
        return instance

    def connect(self, *, with_database: bool = True):
        params = dict(
            host=self._config.host,
            port=self._config.port,
            user=self._config.user,
            password=self._config.password,
        )
        if with_database:
            params["database"] = self._config.database
        return mysql.connector.connect(**params)
