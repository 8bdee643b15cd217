"""Document routes: clause library, preview and export"""

import asyncio
import logging
from urllib.parse import quote

from fastapi import APIRouter, Body, HTTPException, Query
from fastapi.responses import HTMLResponse, Response
from pydantic import ValidationError

from ghana_legal_docs.api.schemas import ClauseLibraryResponse, PreviewResponse
from ghana_legal_docs.models.records import DocumentType, record_from_snapshot
from ghana_legal_docs.services.clause_library import CLAUSE_LIBRARY
from ghana_legal_docs.services.composer import compose
from ghana_legal_docs.services.docx_generator import render_docx
from ghana_legal_docs.services.exporter import FAILURE_MESSAGE, ExportFormat
from ghana_legal_docs.services.html_generator import render_body, render_print_html
from ghana_legal_docs.services.pdf_generator import render_pdf

logger = logging.getLogger(__name__)

router = APIRouter()

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def _parse_record(document_type: DocumentType, snapshot: dict):
    try:
        return record_from_snapshot(document_type, snapshot)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))


@router.get("/api/clauses", response_model=ClauseLibraryResponse)
async def list_clauses():
    """Clause library grouped by category"""
    return ClauseLibraryResponse(categories=CLAUSE_LIBRARY)


@router.post("/api/documents/{document_type}/preview", response_model=PreviewResponse)
async def preview_document(document_type: DocumentType, snapshot: dict = Body(...)):
    """Compose the agreement for on-screen preview"""
    ir = compose(_parse_record(document_type, snapshot))
    return PreviewResponse(document=ir, html=render_body(ir), filename_stem=ir.filename_stem)


@router.post("/api/documents/{document_type}/export")
async def export_document(
    document_type: DocumentType,
    snapshot: dict = Body(...),
    fmt: ExportFormat = Query(ExportFormat.DOCX, alias="format"),
):
    """Download as .docx / .pdf, or get the print page"""
    ir = compose(_parse_record(document_type, snapshot))

    try:
        if fmt == ExportFormat.PRINT:
            return HTMLResponse(render_print_html(ir))
        if fmt == ExportFormat.DOCX:
            content, media_type = await asyncio.to_thread(render_docx, ir), DOCX_MEDIA_TYPE
        else:
            content, media_type = await asyncio.to_thread(render_pdf, ir), "application/pdf"
    except Exception:
        logger.exception("Export to %s failed", fmt.value)
        raise HTTPException(status_code=500, detail=FAILURE_MESSAGE)

    filename = f"{ir.filename_stem}.{fmt.value}"
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}"},
    )
