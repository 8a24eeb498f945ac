from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetch_text
from .repository import PreferencesRepository


class MySQLPreferencesRepository(PreferencesRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load(self, profile: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT payload
                FROM analysis_preferences
                WHERE profile=%s
                """,
                (profile,),
            )
            return fetch_text(cur, "payload")

    def save(self, profile: str, payload: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO analysis_preferences (profile, payload)
                VALUES (%s, %s)
                ON DUPLICATE KEY UPDATE payload=VALUES(payload)
                """,
                (profile, payload),
            )

    def delete(self, profile: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM analysis_preferences WHERE profile=%s", (profile,))
            return cur.rowcount > 0
