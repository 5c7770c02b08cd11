from __future__ import annotations

from enum import Enum


class Bucket(str, Enum):
    """Name-prefix class used by the increment rule."""

    E = "E"
    G = "G"
    OTHER = "OTHER"


class Engine(str, Enum):
    """Supported storage engines."""

    SQLITE = "sqlite"
    MYSQL = "mysql"
