from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from .common.http import register_error_handlers
from .config import get_settings_module
from .container import build_container, build_store
from .core.logging import configure_logging
from .storage.bootstrap import apply_schema

from .customers.controller import register as register_customers
from .employees.controller import register as register_employees
from .attendance.controller import register as register_attendance
from .assignments.controller import register as register_assignments
from .carpets.controller import register as register_carpets
from .performance.controller import register as register_performance
from .reports.controller import register as register_reports

logger = logging.getLogger(__name__)


def create_app(*, settings_module: str | None = None, container=None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    configure_logging(getattr(settings, "LOG_LEVEL", None))

    backend = str(getattr(settings, "STORAGE_BACKEND", "json"))
    db_config = getattr(settings, "DB_CONFIG", None)

    if container is None:
        if backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
        store = build_store(backend=backend, data_dir=str(getattr(settings, "DATA_DIR", "data")), db_config=db_config)
        container = build_container(store=store)

    logger.info("carwash-ops starting (settings=%s, storage=%s)", settings_module, backend)
    app.extensions["container"] = container
    register_error_handlers(app)

    register_customers(app, container)
    register_employees(app, container)
    register_attendance(app, container)
    register_assignments(app, container)
    register_carpets(app, container)
    register_performance(app, container)
    register_reports(app, container)

    return app
