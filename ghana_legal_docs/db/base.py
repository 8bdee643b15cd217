"""Abstract draft repository used by the form layer"""

from abc import ABC, abstractmethod
from typing import Optional, Union

from ghana_legal_docs.models.records import DocumentType, TenancyRecord, VehicleTransferRecord

DRAFT_PREFIX = "legal_doc_draft_"

Record = Union[TenancyRecord, VehicleTransferRecord]


def storage_key(document_type: DocumentType | str) -> str:
    """``tenancy`` -> ``legal_doc_draft_tenancy``"""
    return f"{DRAFT_PREFIX}{DocumentType(document_type).value}"


class DraftRepository(ABC):
    """Stores one JSON snapshot per document type.

    Injected into the CLI and API; the document core never touches it.
    Snapshots carry no schema version: they must match the current record
    fields, and a snapshot that does not is treated as absent.
    """

    @abstractmethod
    def load(self, document_type: DocumentType | str) -> Optional[Record]:
        """Saved record, or None when there is none (or it cannot be read)."""

    @abstractmethod
    def save(self, document_type: DocumentType | str, record: Record) -> None:
        """Persist the record. Raises DraftStorageError on failure."""

    @abstractmethod
    def clear(self, document_type: DocumentType | str) -> None:
        """Remove the saved record. Raises DraftStorageError on failure."""

    def has_draft(self, document_type: DocumentType | str) -> bool:
        return self.load(document_type) is not None
