"""Draft routes for saving, restoring and clearing form drafts"""

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import ValidationError

from ghana_legal_docs.api.schemas import DraftResponse, MessageResponse
from ghana_legal_docs.db import DraftRepository, get_draft_repository
from ghana_legal_docs.exceptions import DraftStorageError
from ghana_legal_docs.models.records import DocumentType, record_from_snapshot

router = APIRouter()


def draft_repository() -> DraftRepository:
    """Repository dependency; overridden in tests"""
    return get_draft_repository()


@router.get("/api/drafts/{document_type}", response_model=DraftResponse)
async def get_draft(document_type: DocumentType, repo: DraftRepository = Depends(draft_repository)):
    record = repo.load(document_type)
    return DraftResponse(
        document_type=document_type.value,
        has_draft=record is not None,
        snapshot=record.to_snapshot() if record else None,
    )


@router.put("/api/drafts/{document_type}", response_model=MessageResponse)
async def save_draft(
    document_type: DocumentType,
    snapshot: dict = Body(...),
    repo: DraftRepository = Depends(draft_repository),
):
    try:
        record = record_from_snapshot(document_type, snapshot)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))
    try:
        repo.save(document_type, record)
    except DraftStorageError as e:
        raise HTTPException(status_code=507, detail=str(e))
    return MessageResponse(title="Draft Saved", message="Your progress has been saved locally.")


@router.delete("/api/drafts/{document_type}", response_model=MessageResponse)
async def clear_draft(document_type: DocumentType, repo: DraftRepository = Depends(draft_repository)):
    try:
        repo.clear(document_type)
    except DraftStorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return MessageResponse(title="Draft Cleared", message="Your saved draft has been removed.")
