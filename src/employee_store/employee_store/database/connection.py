from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import Union

import mysql.connector
from mysql.connector import errorcode
from mysql.connector.constants import ClientFlag

from ..core.constants import DEFAULT_SQLITE_TIMEOUT
from ..core.enums import Engine


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str


class DatabaseConnection:
    """MySQL connection factory.

    Note: We create short-lived connections per operation (safe for simple Flask apps).
    """

    engine = Engine.MYSQL
    paramstyle = "%s"
    IntegrityError = mysql.connector.errors.IntegrityError
    Error = mysql.connector.Error

    def __init__(self, config: DBConfig):
        self._config = config

    def connect(self):
        return mysql.connector.connect(
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
            database=self._config.database,
            autocommit=False,
            # rowcount reports matched rows, not only changed ones.
            client_flags=[ClientFlag.FOUND_ROWS],
        )

    def describe(self) -> str:
        return f"{self._config.user}@{self._config.host}:{self._config.port}/{self._config.database}"

    def is_unique_violation(self, exc: Exception) -> bool:
        return getattr(exc, "errno", None) == errorcode.ER_DUP_ENTRY


class SQLiteConnection:
    """SQLite connection factory with the same contract as DatabaseConnection."""

    engine = Engine.SQLITE
    paramstyle = "?"
    IntegrityError = sqlite3.IntegrityError
    Error = sqlite3.Error

    def __init__(self, path: Union[str, Path], *, timeout: float = DEFAULT_SQLITE_TIMEOUT):
        self._path = str(path)
        self._timeout = float(timeout)

    def connect(self):
        return sqlite3.connect(self._path, timeout=self._timeout)

    def describe(self) -> str:
        return f"sqlite:///{self._path}"

    def is_unique_violation(self, exc: Exception) -> bool:
        return "UNIQUE constraint failed" in str(exc)


ConnectionFactory = Union[DatabaseConnection, SQLiteConnection]


def connection_from_config(db_config: dict) -> ConnectionFactory:
    engine = Engine(str(db_config.get("engine", Engine.SQLITE.value)).lower())
    if engine == Engine.SQLITE:
        return SQLiteConnection(
            db_config.get("path", "employees.db"),
            timeout=float(db_config.get("timeout", DEFAULT_SQLITE_TIMEOUT)),
        )

    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    return DatabaseConnection(config)
