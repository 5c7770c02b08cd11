from __future__ import annotations

from dataclasses import dataclass

from .database.connection import ConnectionFactory, connection_from_config
from .employees.service import EmployeeService
from .employees.sql_employee_repository import SQLEmployeeRepository


@dataclass(frozen=True)
class Container:
    conn: ConnectionFactory

    employees_repo: SQLEmployeeRepository

    employee_service: EmployeeService


def build_container(*, db_config: dict) -> Container:
    conn = connection_from_config(db_config)

    employees_repo = SQLEmployeeRepository(conn)
    employee_service = EmployeeService(employees_repo)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        employee_service=employee_service,
    )
