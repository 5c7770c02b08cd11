from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, List, Sequence, Tuple

from ..core.exceptions import ConflictError, StorageError
from .connection import ConnectionFactory

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: ConnectionFactory) -> Iterator[Tuple[Any, Any]]:
    """Run the block as one transaction on a fresh connection.

    Commits when the block exits normally and rolls back on any exception.
    Driver errors are translated: unique-key violations become ConflictError,
    any other driver error (including other constraint failures) StorageError.
    """
    try:
        conn = conn_factory.connect()
    except conn_factory.Error as exc:
        logger.error("Cannot connect to %s: %s", conn_factory.describe(), exc)
        raise StorageError("Storage unavailable", details={"reason": str(exc)}) from exc

    try:
        cur = conn.cursor()
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except conn_factory.IntegrityError as exc:
        conn.rollback()
        if not conn_factory.is_unique_violation(exc):
            logger.error("Constraint failure on %s: %s", conn_factory.describe(), exc)
            raise StorageError("Constraint failure", details={"reason": str(exc)}) from exc
        raise ConflictError("Duplicate employee name", details={"reason": str(exc)}) from exc
    except conn_factory.Error as exc:
        conn.rollback()
        logger.error("Storage failure on %s: %s", conn_factory.describe(), exc)
        raise StorageError("Storage failure", details={"reason": str(exc)}) from exc
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchall(cur) -> List[Sequence[Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def placeholders(paramstyle: str, count: int) -> str:
    return ",".join([paramstyle] * count)
