from __future__ import annotations

from typing import Sequence

from ..core.constants import MAX_VALUE, MIN_VALUE
from ..core.enums import Engine
from ..core.exceptions import NotFoundError
from ..database.connection import ConnectionFactory
from ..database.sql_base import db_cursor, fetchall, placeholders
from .aggregation import grouped_sum
from .increment_rule import IncrementRule
from .model import AbcSum, Employee
from .repository import EmployeeRepository


class SQLEmployeeRepository(EmployeeRepository):
    """EmployeeRepository over any DB-API connection factory (MySQL or SQLite).

    The connection factory supplies the placeholder style; the SQL itself is
    portable between the two engines.
    """

    def __init__(self, conn_factory: ConnectionFactory):
        self._conn_factory = conn_factory
        self._ph = conn_factory.paramstyle

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT name, value FROM employees ORDER BY name")
            return [Employee(name=r[0], value=int(r[1])) for r in fetchall(cur)]

    def create(self, *, name: str, value: int) -> None:
        ph = self._ph
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO employees(name, value) VALUES({ph},{ph})",
                (name, int(value)),
            )

    def update(self, *, original_name: str, new_name: str, value: int) -> None:
        ph = self._ph
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE employees SET name={ph}, value={ph} WHERE name={ph}",
                (new_name, int(value), original_name),
            )
            if cur.rowcount == 0:
                raise NotFoundError(
                    f"Employee '{original_name}' not found",
                    details={"name": original_name},
                )

    def delete(self, name: str) -> None:
        ph = self._ph
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM employees WHERE name={ph}", (name,))
            if cur.rowcount == 0:
                raise NotFoundError(f"Employee '{name}' not found", details={"name": name})

    def apply_increment_rule(self, rule: IncrementRule) -> int:
        case_expr, params = rule.case_sql("name", self._ph)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE employees SET value = value + {case_expr}", params)
            return int(cur.rowcount)

    def grouped_sum(self, *, prefixes: Sequence[str], threshold: int) -> Sequence[AbcSum]:
        if not prefixes:
            return []

        # SQLite SUM() fails on totals past 64 bits and a threshold outside that
        # range cannot be bound; total the filtered rows in Python instead.
        if self._conn_factory.engine == Engine.SQLITE or not MIN_VALUE <= threshold <= MAX_VALUE:
            return grouped_sum(self._rows_with_initial(prefixes), prefixes, threshold)

        ph = self._ph
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT SUBSTR(name, 1, 1) AS initial, SUM(value) AS total
                FROM employees
                WHERE SUBSTR(name, 1, 1) IN ({placeholders(ph, len(prefixes))})
                GROUP BY SUBSTR(name, 1, 1)
                HAVING SUM(value) >= {ph}
                ORDER BY initial
                """,
                (*prefixes, int(threshold)),
            )
            # MySQL returns SUM() as Decimal.
            return [AbcSum(initial=r[0], sum=int(r[1])) for r in fetchall(cur)]

    def _rows_with_initial(self, prefixes: Sequence[str]) -> list[Employee]:
        ph = self._ph
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT name, value FROM employees "
                f"WHERE SUBSTR(name, 1, 1) IN ({placeholders(ph, len(prefixes))})",
                tuple(prefixes),
            )
            return [Employee(name=r[0], value=int(r[1])) for r in fetchall(cur)]
