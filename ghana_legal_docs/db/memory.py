"""In-memory draft repository (tests and throwaway sessions)"""

import json
import logging
from typing import Dict, Optional

from pydantic import ValidationError

from ghana_legal_docs.db.base import DraftRepository, Record, storage_key
from ghana_legal_docs.models.records import DocumentType, record_from_snapshot

logger = logging.getLogger(__name__)


class MemoryDraftRepository(DraftRepository):
    """Keeps serialized snapshots in a dict, like browser local storage"""

    def __init__(self):
        self._items: Dict[str, str] = {}

    def load(self, document_type: DocumentType | str) -> Optional[Record]:
        raw = self._items.get(storage_key(document_type))
        if raw is None:
            return None
        try:
            return record_from_snapshot(document_type, json.loads(raw))
        except (ValueError, ValidationError) as e:
            logger.error("Failed to load draft %s: %s", document_type, e)
            return None

    def save(self, document_type: DocumentType | str, record: Record) -> None:
        self._items[storage_key(document_type)] = json.dumps(record.to_snapshot(), ensure_ascii=False)

    def clear(self, document_type: DocumentType | str) -> None:
        self._items.pop(storage_key(document_type), None)
