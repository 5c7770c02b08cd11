from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

import mysql.connector

from ..core.enums import Engine
from .connection import ConnectionFactory, SQLiteConnection
from .sql_base import db_cursor, fetchall

logger = logging.getLogger(__name__)

SCHEMA_DIR = Path(__file__).resolve().parents[4] / "database"
SCHEMA_FILES = {
    Engine.MYSQL: "schema.sql",
    Engine.SQLITE: "schema_sqlite.sql",
}

DEMO_EMPLOYEES = (
    ("Abe", 5000),
    ("Ann", 6200),
    ("Bob", 20000),
    ("Cleo", 4100),
    ("Eve", 1),
    ("Gia", 2),
    ("Hugo", 3),
)


def default_schema_path(engine: Engine) -> Path:
    return SCHEMA_DIR / SCHEMA_FILES[engine]


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _strip_comments(sql: str) -> str:
    return re.sub(r"(?m)^\s*--.*$", "", sql)


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False

    for ch in sql:
        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue
        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(db_config: dict) -> None:
    """Create the MySQL database named in db_config if it is missing."""
    server = mysql.connector.connect(
        host=str(db_config.get("host", "localhost")),
        port=int(db_config.get("port", 3306)),
        user=str(db_config.get("user", "root")),
        password=str(db_config.get("password", "")),
    )
    try:
        cur = server.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{db_config['database']}` CHARACTER SET utf8mb4 COLLATE utf8mb4_bin"
        )
        server.commit()
    finally:
        server.close()
    logger.info("Database ready: %s@%s/%s", db_config.get("user"), db_config.get("host"), db_config["database"])


def apply_schema(conn_factory: ConnectionFactory, *, schema_path: str | Path | None = None) -> None:
    schema_path = Path(schema_path) if schema_path else default_schema_path(conn_factory.engine)
    sql = _strip_create_db_and_use(_strip_comments(schema_path.read_text(encoding="utf-8")))

    with db_cursor(conn_factory) as (_, cur):
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)

    if isinstance(conn_factory, SQLiteConnection):
        # WAL lets readers proceed while a writer holds the lock.
        with db_cursor(conn_factory) as (_, cur):
            cur.execute("PRAGMA journal_mode=WAL")
    logger.info("Schema applied to %s", conn_factory.describe())


def ensure_demo_employees(conn_factory: ConnectionFactory) -> int:
    """Insert the demo employees that are missing; returns how many were added."""
    ph = conn_factory.paramstyle
    added = 0
    with db_cursor(conn_factory) as (_, cur):
        for name, value in DEMO_EMPLOYEES:
            cur.execute(f"SELECT 1 FROM employees WHERE name={ph}", (name,))
            if fetchall(cur):
                continue
            cur.execute(f"INSERT INTO employees(name, value) VALUES({ph},{ph})", (name, value))
            added += 1
    logger.info("Seeded %d demo employees into %s", added, conn_factory.describe())
    return added


def list_tables(conn_factory: ConnectionFactory) -> list[str]:
    with db_cursor(conn_factory) as (_, cur):
        if conn_factory.engine == Engine.SQLITE:
            cur.execute("SELECT name FROM sqlite_master WHERE type='table' ORDER BY name")
        else:
            cur.execute("SHOW TABLES")
        return [row[0] for row in fetchall(cur)]
