from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Optional

from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield (conn, cursor) on a fresh connection; commit on success, roll back on error."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        logger.warning("Rolling back transaction on %s", conn_factory.database)
        conn.rollback()
        raise
    finally:
        conn.close()


def fetch_text(cur, column: str) -> Optional[str]:
    """First row's `column` as text; JSON columns may arrive as bytes."""
    row: Optional[dict[str, Any]] = cur.fetchone()
    if not row:
        return None
    value = row[column]
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8")
    return str(value)
