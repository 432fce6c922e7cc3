from __future__ import annotations

import sqlite3
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping

from hotelres.exceptions import PersistenceError

logger = logging.getLogger(__name__)

class SQLiteSnapshotAdapter:
    """Koleksiyonları tek bir SQLite dosyasında tam snapshot olarak saklayan adaptör."""
    
    def __init__(self, db_url: str):
        # Format: sqlite:///path
        if db_url.startswith("sqlite:///"):
            self.db_path = db_url.replace("sqlite:///", "")
        else:
            self.db_path = db_url
            
        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        logger.info(f"SQLiteSnapshotAdapter started. Database path: {self.db_path}")

    def _conn(self) -> sqlite3.Connection:
        """Veritabanı bağlantısını döndürür."""
        try:
            return sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            logger.error(f"Database connection error: {e}")
            raise PersistenceError(f"Could not connect to database: {e}") from e

    # ------------------------------------
    # Lifecycle
    # ------------------------------------
    def init(self) -> None:
        """Snapshot tablosunu oluşturur."""
        try:
            conn = self._conn()
            try:
                with conn:
                    conn.execute(
                        """
                        CREATE TABLE IF NOT EXISTS snapshots (
                            name TEXT PRIMARY KEY,
                            payload TEXT NOT NULL,
                            updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
                        )
                        """
                    )
            finally:
                conn.close()
        except sqlite3.Error as e:
            logger.error(f"SQLite error while creating tables: {e}")
            raise PersistenceError(f"Table initialization failed: {e}") from e

    # ------------------------------------
    # Snapshots
    # ------------------------------------
    def save(self, name: str, items: List[Dict[str, Any]]) -> None:
        self.save_many({name: items})

    def save_many(self, snapshots: Mapping[str, List[Dict[str, Any]]]) -> None:
        """Birden fazla koleksiyonu tek bir transaction içinde yazar."""
        try:
            rows = [(name, json.dumps(items)) for name, items in snapshots.items()]
        except (TypeError, ValueError) as e:
            raise PersistenceError(f"Snapshot could not be encoded: {e}") from e

        try:
            conn = self._conn()
            try:
                with conn:
                    conn.executemany(
                        """
                        INSERT INTO snapshots (name, payload, updated_at)
                        VALUES (?, ?, CURRENT_TIMESTAMP)
                        ON CONFLICT(name) DO UPDATE SET
                            payload = excluded.payload,
                            updated_at = excluded.updated_at
                        """,
                        rows,
                    )
            finally:
                conn.close()
        except sqlite3.Error as e:
            logger.error(f"Error saving {list(snapshots)}: {e}")
            raise PersistenceError(f"Snapshot could not be saved: {e}") from e
        logger.debug(f"Saved snapshots: {list(snapshots)}")

    def load(self, name: str) -> List[Dict[str, Any]]:
        try:
            conn = self._conn()
            try:
                row = conn.execute("SELECT payload FROM snapshots WHERE name = ?", (name,)).fetchone()
            finally:
                conn.close()
        except (sqlite3.Error, PersistenceError) as e:
            logger.error(f"Error loading {name}: {e}")
            return []

        if row is None:
            return []

        try:
            items = json.loads(row[0])
        except ValueError as e:
            logger.error(f"Error loading {name}: {e}")
            return []

        if not isinstance(items, list):
            logger.error(f"Error loading {name}: snapshot is not a list")
            return []
        return items
