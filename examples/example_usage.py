"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the rules live in the services.
"""

import importlib

from config import get_settings_module

from src.employee_store.employee_store.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    service = container.employee_service

    service.apply_increment_rule()
    for e in service.list_employees():
        print(e.name, e.value)
    print(service.compute_abc_sums())


if __name__ == "__main__":
    main()
