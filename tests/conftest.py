from __future__ import annotations

from pathlib import Path

import pytest

from src.employee_store.employee_store.database.bootstrap import apply_schema
from src.employee_store.employee_store.database.connection import SQLiteConnection
from src.employee_store.employee_store.employees.sql_employee_repository import SQLEmployeeRepository


@pytest.fixture
def sqlite_db(tmp_path: Path) -> SQLiteConnection:
    conn = SQLiteConnection(tmp_path / "employees.db")
    apply_schema(conn)
    return conn


@pytest.fixture
def sqlite_repo(sqlite_db: SQLiteConnection) -> SQLEmployeeRepository:
    return SQLEmployeeRepository(sqlite_db)


@pytest.fixture
def seed(sqlite_repo: SQLEmployeeRepository):
    def _seed(*rows: tuple[str, int]) -> None:
        for name, value in rows:
            sqlite_repo.create(name=name, value=value)

    return _seed
