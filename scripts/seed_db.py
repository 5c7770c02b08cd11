from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.employee_store.employee_store.common.logging import configure_logging
from src.employee_store.employee_store.database.bootstrap import ensure_demo_employees
from src.employee_store.employee_store.database.connection import connection_from_config


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    conn = connection_from_config(dict(settings.DB_CONFIG))

    added = ensure_demo_employees(conn)
    print(f"OK: Seeded database -> {conn.describe()} (added={added})")


if __name__ == "__main__":
    main()
