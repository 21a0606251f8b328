"""Key-value storage for the calibration baseline (in-memory and SQLite)."""

import logging
import sqlite3
import threading
from pathlib import Path
from typing import Dict, Optional

import numpy as np

from calibration.config import BASELINE_KEY, DEFAULT_BASELINE, DB_NAME

logger = logging.getLogger(__name__)


class MemoryStore:
    """Dict-backed store, used in tests and for ephemeral sessions."""

    def __init__(self, initial: Optional[Dict[str, float]] = None):
        self._values: Dict[str, float] = dict(initial or {})

    def get_float(self, key: str, default: float) -> float:
        return float(self._values.get(key, default))

    def set_float(self, key: str, value: float):
        self._values[key] = float(value)

    def contains(self, key: str) -> bool:
        return key in self._values

    def clear(self):
        self._values.clear()


class SQLiteStore:
    """SQLite-based key-value store for float settings."""

    def __init__(self, data_dir: str = "data", db_name: str = DB_NAME):
        """
        Initialize settings store.

        Args:
            data_dir: Base directory for data storage
            db_name: SQLite database filename
        """
        self.data_dir = Path(data_dir)
        self.db_path = self.data_dir / db_name

        self.data_dir.mkdir(parents=True, exist_ok=True)

        # Thread lock for database access
        self._lock = threading.Lock()

        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(str(self.db_path), check_same_thread=False)

    def _init_db(self):
        """Initialize database schema."""
        with self._lock:
            conn = self._connect()
            try:
                cursor = conn.cursor()
                cursor.execute("""
                    CREATE TABLE IF NOT EXISTS kv_store (
                        key TEXT PRIMARY KEY,
                        value REAL NOT NULL
                    )
                """)
                conn.commit()
            finally:
                conn.close()

    def get_float(self, key: str, default: float) -> float:
        with self._lock:
            conn = self._connect()
            try:
                cursor = conn.cursor()
                cursor.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
                row = cursor.fetchone()
            finally:
                conn.close()

        if row is None:
            return float(default)
        return float(row[0])

    def set_float(self, key: str, value: float):
        with self._lock:
            conn = self._connect()
            try:
                cursor = conn.cursor()
                cursor.execute(
                    "INSERT OR REPLACE INTO kv_store (key, value) VALUES (?, ?)",
                    (key, float(value)),
                )
                conn.commit()
            finally:
                conn.close()

    def contains(self, key: str) -> bool:
        with self._lock:
            conn = self._connect()
            try:
                cursor = conn.cursor()
                cursor.execute("SELECT 1 FROM kv_store WHERE key = ?", (key,))
                found = cursor.fetchone() is not None
            finally:
                conn.close()
        return found

    def clear(self):
        with self._lock:
            conn = self._connect()
            try:
                conn.execute("DELETE FROM kv_store")
                conn.commit()
            finally:
                conn.close()


def read_baseline(store, key: str = BASELINE_KEY) -> Optional[float]:
    """
    Read the stored baseline.

    Returns:
        The baseline, or None when it is unset or outside [0, 1]
        (e.g. a hand-edited database)
    """
    if not store.contains(key):
        return None
    value = store.get_float(key, DEFAULT_BASELINE)
    if not np.isfinite(value) or value < 0.0 or value > 1.0:
        logger.warning("Ignoring stored baseline %r outside [0, 1]", value)
        return None
    return float(value)


def load_baseline(store, key: str = BASELINE_KEY, default: float = DEFAULT_BASELINE) -> float:
    """Stored baseline, or default when none is usable."""
    value = read_baseline(store, key)
    return float(default) if value is None else value


def save_baseline(store, value: float, key: str = BASELINE_KEY):
    store.set_float(key, value)
    logger.info("Saved baseline %.4f", value)


def has_baseline(store, key: str = BASELINE_KEY) -> bool:
    """True only when a usable baseline is stored."""
    return read_baseline(store, key) is not None
