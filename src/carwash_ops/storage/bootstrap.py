from __future__ import annotations

import logging

from .connection import DatabaseConnection, DBConfig
from .mysql_base import db_cursor

logger = logging.getLogger(__name__)

KV_SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    store_key VARCHAR(191) NOT NULL PRIMARY KEY,
    store_value LONGTEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
) CHARACTER SET utf8mb4
"""


def apply_schema(db_config: dict) -> None:
    """Create the database (if missing) and the kv_store table. Idempotent."""
    target = DBConfig.from_dict(db_config)

    conn = DatabaseConnection(target).connect(with_database=False)
    try:
        cur = conn.cursor()
        try:
            cur.execute(
                f"CREATE DATABASE IF NOT EXISTS `{target.database}` "
                "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
            )
            cur.execute(f"USE `{target.database}`")
            cur.execute(KV_SCHEMA)
            conn.commit()
        finally:
            cur.close()
    finally:
        conn.close()

    logger.info("kv_store schema ready on %s", target.describe())


def list_keys(db_config: dict) -> list[str]:
    with db_cursor(DatabaseConnection(DBConfig.from_dict(db_config)), action="list keys") as cur:
        cur.execute("SELECT store_key FROM kv_store ORDER BY store_key")
        return [str(r["store_key"]) for r in cur.fetchall()]
