"""Request/response schemas for the documents API"""

from typing import Dict, List, Optional

from pydantic import BaseModel

from ghana_legal_docs.models.document import DocumentIR


class PreviewResponse(BaseModel):
    """Composed agreement plus its HTML body for on-screen display"""
    document: DocumentIR
    html: str
    filename_stem: str


class ClauseLibraryResponse(BaseModel):
    categories: Dict[str, List[str]]


class DraftResponse(BaseModel):
    document_type: str
    has_draft: bool
    snapshot: Optional[dict] = None


class MessageResponse(BaseModel):
    title: str
    message: str


class HealthResponse(BaseModel):
    """Health check response"""
    status: str  # "ok" | "error"
    version: str = "0.1.0"
