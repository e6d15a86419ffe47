from __future__ import annotations

import importlib

from carwash_ops.config import get_settings_module
from carwash_ops.core.logging import configure_logging
from carwash_ops.storage.bootstrap import apply_schema, list_keys
from carwash_ops.storage.connection import DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", None))
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config)
    keys = list_keys(db_config)
    print(f"OK: kv_store ready -> {DBConfig.from_dict(db_config).describe()} (keys={len(keys)})")


if __name__ == "__main__":
    main()
