from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from gpacalc.core.errors import PersistenceFailure

logger = logging.getLogger(__name__)

MEMORY = ":memory:"


class Storage:
    """Single-table key/value store on sqlite, the local equivalent of browser localStorage."""

    def __init__(self, db_path: str = "data/gpacalc.db") -> None:
        self.db_path = db_path
        self.conn: sqlite3.Connection | None = None
        try:
            if db_path != MEMORY:
                Path(db_path).parent.mkdir(parents=True, exist_ok=True)
            self.conn = sqlite3.connect(db_path, check_same_thread=False)
            self._init_schema()
        except (OSError, sqlite3.Error) as exc:
            if self.conn is not None:
                self.conn.close()
            logger.exception("could not open storage at %s", db_path)
            raise PersistenceFailure(f"Could not open storage at {db_path}: {exc}") from exc

    def _init_schema(self) -> None:
        self.conn.execute(
            """
            CREATE TABLE IF NOT EXISTS kv (
              key TEXT PRIMARY KEY,
              value TEXT NOT NULL
            )
            """
        )
        self.conn.commit()

    def get_item(self, key: str) -> str | None:
        try:
            row = self.conn.execute("SELECT value FROM kv WHERE key=?", (key,)).fetchone()
        except sqlite3.Error as exc:
            logger.exception("read of %r failed", key)
            raise PersistenceFailure(f"Could not read {key!r}: {exc}") from exc
        return None if row is None else str(row[0])

    def set_item(self, key: str, value: str) -> None:
        try:
            self.conn.execute(
                """INSERT INTO kv(key, value) VALUES(?, ?)
                   ON CONFLICT(key) DO UPDATE SET value=excluded.value""",
                (key, value),
            )
            self.conn.commit()
        except sqlite3.Error as exc:
            logger.exception("write of %r failed", key)
            raise PersistenceFailure(f"Could not write {key!r}: {exc}") from exc

    def remove_item(self, key: str) -> None:
        try:
            self.conn.execute("DELETE FROM kv WHERE key=?", (key,))
            self.conn.commit()
        except sqlite3.Error as exc:
            logger.exception("delete of %r failed", key)
            raise PersistenceFailure(f"Could not delete {key!r}: {exc}") from exc

    def close(self) -> None:
        self.conn.close()

    def __enter__(self) -> "Storage":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
