"""Draft persistence"""

from typing import Optional

from ghana_legal_docs.db.base import DRAFT_PREFIX, DraftRepository, storage_key
from ghana_legal_docs.db.memory import MemoryDraftRepository
from ghana_legal_docs.db.sqlite import SQLiteDraftRepository
from ghana_legal_docs.utils.config import Settings, get_settings


def get_draft_repository(settings: Optional[Settings] = None) -> DraftRepository:
    """Draft repository backed by the configured SQLite file"""
    settings = settings or get_settings()
    return SQLiteDraftRepository(settings.drafts_path)


__all__ = [
    "DRAFT_PREFIX",
    "DraftRepository",
    "storage_key",
    "MemoryDraftRepository",
    "SQLiteDraftRepository",
    "get_draft_repository",
]
