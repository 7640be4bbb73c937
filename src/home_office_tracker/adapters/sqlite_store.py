"""SQLite day store adapter."""

import logging
import sqlite3
from datetime import date
from pathlib import Path

logger = logging.getLogger(__name__)

TABLE_DDL = """
CREATE TABLE IF NOT EXISTS home_office_days (
    date TEXT PRIMARY KEY
)
"""


class StoreError(RuntimeError):
    """Raised when the day database cannot be read or written."""

    pass


class SqliteDayStore:
    """
    SQLite-backed day store.

    Implements DayStore protocol. One row per day, stored as an ISO date
    string so that text order is date order.
    """

    def __init__(self, path: Path | str):
        self.path = path
        self._conn: sqlite3.Connection | None = None
        try:
            self._conn = sqlite3.connect(str(path))
            with self._conn:
                self._conn.execute(TABLE_DDL)
        except sqlite3.Error as e:
            self.close()
            raise StoreError(f"Cannot open database {path}: {e}") from e
        logger.debug(f"Opened day store at {path}")

    def __enter__(self) -> "SqliteDayStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StoreError("Day store is closed")
        return self._conn

    def add(self, day: date) -> bool:
        """Store a day. Returns False if it was already stored."""
        try:
            with self.conn:
                cursor = self.conn.execute(
                    "INSERT OR IGNORE INTO home_office_days (date) VALUES (?)",
                    (day.isoformat(),),
                )
        except sqlite3.Error as e:
            raise StoreError(f"Error adding date {day.isoformat()}: {e}") from e
        return cursor.rowcount > 0

    def remove(self, day: date) -> bool:
        """Delete a day. Returns False if it was not stored."""
        try:
            with self.conn:
                cursor = self.conn.execute(
                    "DELETE FROM home_office_days WHERE date = ?",
                    (day.isoformat(),),
                )
        except sqlite3.Error as e:
            raise StoreError(f"Error deleting date {day.isoformat()}: {e}") from e
        return cursor.rowcount > 0

    def all(self) -> list[date]:
        """All stored days in ascending order."""
        try:
            rows = self.conn.execute(
                "SELECT date FROM home_office_days ORDER BY date"
            ).fetchall()
        except sqlite3.Error as e:
            raise StoreError(f"Error reading dates: {e}") from e

        days = []
        for (value,) in rows:
            try:
                days.append(date.fromisoformat(value))
            except (TypeError, ValueError) as e:
                raise StoreError(f"Corrupt date in database: {value!r}") from e
        return days

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.debug(f"Closed day store at {self.path}")
