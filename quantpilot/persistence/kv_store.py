"""Key-value persistence for dashboard state such as portfolios and price alerts."""

import sqlite3
import threading
from contextlib import contextmanager
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Optional, Protocol

import orjson

from ..errors import PersistenceError
from ..logging.config import get_logger


class KeyValueStore(Protocol):
    """Anything with JSON-compatible get/set by string key."""

    def get(self, key: str) -> Optional[Any]:
        ...

    def set(self, key: str, value: Any) -> None:
        ...


class InMemoryKeyValueStore:
    """Process-local store; values are kept as given."""

    def __init__(self):
        self._data: dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = value

    def delete(self, key: str) -> bool:
        with self._lock:
            if key not in self._data:
                return False
            del self._data[key]
            return True

    def keys(self) -> list[str]:
        with self._lock:
            return sorted(self._data)


class SQLiteKeyValueStore:
    """SQLite-backed key-value store with JSON-encoded values."""

    def __init__(self, db_path: str = "quantpilot.db"):
        self.db_path = Path(db_path)
        self.logger = get_logger("quantpilot.persistence")
        self._lock = threading.Lock()

        self._init_database()

    def _init_database(self) -> None:
        """Initialize database schema."""
        with self._get_connection("init") as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)
            conn.commit()

    @contextmanager
    def _get_connection(self, operation: str, key: Optional[str] = None):
        """Get database connection, translating sqlite errors to PersistenceError."""
        conn = None
        try:
            conn = sqlite3.connect(self.db_path, timeout=30.0)
            conn.row_factory = sqlite3.Row
            yield conn
        except sqlite3.Error as e:
            if conn:
                conn.rollback()
            self.logger.error("Database error", operation=operation, key=key, error=str(e))
            raise PersistenceError(
                f"Database error during {operation}: {e}", operation=operation, key=key
            ) from e
        finally:
            if conn:
                conn.close()

    def get(self, key: str) -> Optional[Any]:
        """Decoded value for key, or None if absent."""
        with self._get_connection("get", key) as conn:
            row = conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", (key,)
            ).fetchone()

        if row is None:
            return None

        try:
            return orjson.loads(row["value"])
        except orjson.JSONDecodeError as e:
            raise PersistenceError(
                f"Stored value is not valid JSON: {e}", operation="get", key=key
            ) from e

    def set(self, key: str, value: Any) -> None:
        """Store value under key, replacing any previous value."""
        try:
            encoded = orjson.dumps(value).decode()
        except TypeError as e:
            raise PersistenceError(
                f"Value is not JSON serializable: {e}", operation="set", key=key
            ) from e

        with self._lock:
            with self._get_connection("set", key) as conn:
                conn.execute("""
                    INSERT OR REPLACE INTO kv_store (key, value, updated_at)
                    VALUES (?, ?, ?)
                """, (key, encoded, datetime.now(UTC).isoformat()))
                conn.commit()

        self.logger.debug("Value stored", key=key, size=len(encoded))

    def delete(self, key: str) -> bool:
        with self._lock:
            with self._get_connection("delete", key) as conn:
                cursor = conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
                conn.commit()
                return cursor.rowcount > 0

    def keys(self) -> list[str]:
        with self._get_connection("keys") as conn:
            rows = conn.execute("SELECT key FROM kv_store ORDER BY key").fetchall()
        return [row["key"] for row in rows]
