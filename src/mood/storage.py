"""SQLite-backed key-value store holding the serialized mood history."""

import sqlite3
from pathlib import Path
from typing import Optional

import structlog

logger = structlog.get_logger()


def wal_connect(db_path: str | Path) -> sqlite3.Connection:
    """Open SQLite connection with WAL journal mode."""
    conn = sqlite3.connect(str(db_path))
    conn.execute("PRAGMA journal_mode=WAL")
    return conn


class KeyValueStore:
    """String keys to string values, the only persistence the app needs."""

    def __init__(self, db_path: str | Path):
        self.db_path = Path(db_path).expanduser()
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self):
        with wal_connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)

    async def get(self, key: str) -> Optional[str]:
        with wal_connect(self.db_path) as conn:
            row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        return row[0] if row else None

    async def set(self, key: str, value: str) -> None:
        with wal_connect(self.db_path) as conn:
            conn.execute(
                "INSERT INTO kv (key, value) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, value),
            )
        logger.debug("kv_set", key=key, size=len(value))

    async def remove(self, key: str) -> None:
        with wal_connect(self.db_path) as conn:
            conn.execute("DELETE FROM kv WHERE key = ?", (key,))
        logger.debug("kv_remove", key=key)
