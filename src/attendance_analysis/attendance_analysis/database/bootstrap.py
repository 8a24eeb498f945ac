from __future__ import annotations

import logging

from .connection import DatabaseConnection
from .mysql_base import db_cursor

logger = logging.getLogger(__name__)

SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS analysis_preferences (
        profile VARCHAR(100) NOT NULL PRIMARY KEY,
        payload JSON NOT NULL,
        updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
    )
    """,
)


def ensure_schema(conn_factory: DatabaseConnection) -> None:
    """Create the tables this app owns (idempotent: CREATE IF NOT EXISTS)."""
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        for stmt in SCHEMA_STATEMENTS:
            cur.execute(stmt)
    logger.info("Schema ready in %s (%d table(s))", conn_factory.database, len(SCHEMA_STATEMENTS))
