"""SQLite draft repository"""

import json
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ghana_legal_docs.db.base import DraftRepository, Record, storage_key
from ghana_legal_docs.exceptions import DraftStorageError
from ghana_legal_docs.models.records import DocumentType, record_from_snapshot

logger = logging.getLogger(__name__)


class SQLiteDraftRepository(DraftRepository):
    """One row per draft key holding the record's JSON snapshot"""

    def __init__(self, db_path: str | Path):
        self.db_path = Path(db_path)
        self._initialized = False

    @contextmanager
    def get_connection(self):
        """Get a database connection as context manager"""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init_db(self):
        """Initialize database with schema"""
        if self._initialized:
            return
        with self.get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS drafts (
                    key TEXT PRIMARY KEY,
                    snapshot TEXT NOT NULL,
                    saved_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)
        self._initialized = True

    def load(self, document_type: DocumentType | str) -> Optional[Record]:
        key = storage_key(document_type)
        try:
            self.init_db()
            with self.get_connection() as conn:
                row = conn.execute("SELECT snapshot FROM drafts WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as e:
            logger.error("Failed to load draft %s: %s", key, e)
            return None

        if row is None:
            return None
        try:
            return record_from_snapshot(document_type, json.loads(row["snapshot"]))
        except (ValueError, ValidationError) as e:
            logger.error("Failed to load draft %s: %s", key, e)
            return None

    def save(self, document_type: DocumentType | str, record: Record) -> None:
        key = storage_key(document_type)
        snapshot = json.dumps(record.to_snapshot(), ensure_ascii=False)
        try:
            self.init_db()
            with self.get_connection() as conn:
                conn.execute(
                    """
                    INSERT INTO drafts (key, snapshot, saved_at) VALUES (?, ?, CURRENT_TIMESTAMP)
                    ON CONFLICT(key) DO UPDATE SET snapshot = excluded.snapshot,
                                                   saved_at = excluded.saved_at
                    """,
                    (key, snapshot),
                )
        except (sqlite3.Error, OSError) as e:
            logger.error("Failed to save draft %s: %s", key, e)
            raise DraftStorageError("Failed to save draft. Storage may be full.") from e

    def clear(self, document_type: DocumentType | str) -> None:
        key = storage_key(document_type)
        try:
            self.init_db()
            with self.get_connection() as conn:
                conn.execute("DELETE FROM drafts WHERE key = ?", (key,))
        except (sqlite3.Error, OSError) as e:
            logger.error("Failed to clear draft %s: %s", key, e)
            raise DraftStorageError("Failed to clear draft.") from e
