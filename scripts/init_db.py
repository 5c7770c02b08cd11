from __future__ import annotations

import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.employee_store.employee_store.common.logging import configure_logging
from src.employee_store.employee_store.core.enums import Engine
from src.employee_store.employee_store.database.bootstrap import apply_schema, ensure_database_exists, list_tables
from src.employee_store.employee_store.database.connection import connection_from_config


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    db_config = dict(settings.DB_CONFIG)

    conn = connection_from_config(db_config)
    if conn.engine == Engine.MYSQL:
        ensure_database_exists(db_config)
    apply_schema(conn)
    tables = list_tables(conn)
    print(f"OK: Applied schema -> {conn.describe()} (tables={len(tables)})")


if __name__ == "__main__":
    main()
