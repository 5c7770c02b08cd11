from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging import configure_logging
from .container import build_container
from .database.bootstrap import apply_schema, ensure_demo_employees, list_tables
from .employees.controller import register as register_employees

logger = logging.getLogger(__name__)


def create_app(*, settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = dict(getattr(settings, "DB_CONFIG"))
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(db_config=db_config)
    logger.info("settings=%s db=%s", settings_module, container.conn.describe())

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(container.conn)
        logger.info("Schema ready (tables=%d)", len(list_tables(container.conn)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        ensure_demo_employees(container.conn)

    register_employees(app, container)

    return app
