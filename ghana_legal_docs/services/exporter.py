"""Export entry point: record + format -> file download or print view.

Renderer failures stop here. The cause is logged and the caller gets a
generic failure notice; no exception escapes ``export``.
"""

import asyncio
import logging
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel

from ghana_legal_docs.models.records import DocumentType, TenancyRecord, VehicleTransferRecord
from ghana_legal_docs.services.composer import compose
from ghana_legal_docs.services.docx_generator import DocxGenerator
from ghana_legal_docs.services.html_generator import open_print_view
from ghana_legal_docs.services.pdf_generator import PDFGenerator
from ghana_legal_docs.utils.config import Settings, get_settings

logger = logging.getLogger(__name__)

Record = Union[TenancyRecord, VehicleTransferRecord]

FAILURE_MESSAGE = "Failed to generate document. Please try again."
BUSY_MESSAGE = "Another export is still in progress."

_AGREEMENT_NAMES = {
    DocumentType.TENANCY: "tenancy agreement",
    DocumentType.VEHICLE_TRANSFER: "vehicle transfer agreement",
}


class ExportFormat(str, Enum):
    DOCX = "docx"
    PDF = "pdf"
    PRINT = "print"


class ExportResult(BaseModel):
    """Outcome of one export, shaped as a user-facing notice"""
    success: bool
    format: ExportFormat
    title: str
    message: str
    path: Optional[str] = None


class DocumentExporter:
    """Runs exports one at a time and tracks the loading state.

    ``is_generating`` and ``loading_format`` drive the UI's loading indicator;
    a second export requested while one is in flight is rejected rather than
    queued. In-flight exports cannot be cancelled.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.is_generating = False
        self.loading_format: Optional[ExportFormat] = None

    async def export(self, record: Record, fmt: ExportFormat | str) -> ExportResult:
        fmt = ExportFormat(fmt)
        if self.is_generating:
            return ExportResult(success=False, format=fmt, title="Busy", message=BUSY_MESSAGE)

        self.is_generating = True
        self.loading_format = fmt
        try:
            ir = compose(record)
            path = await asyncio.to_thread(self._render, ir, fmt)
            return self._success(ir.document_type, fmt, path)
        except Exception:
            logger.exception("Export to %s failed", fmt.value)
            return ExportResult(success=False, format=fmt, title="Error", message=FAILURE_MESSAGE)
        finally:
            self.is_generating = False
            self.loading_format = None

    def _render(self, ir, fmt: ExportFormat) -> Path:
        output_dir = Path(self.settings.output_dir)
        if fmt == ExportFormat.DOCX:
            return DocxGenerator().generate(ir, output_dir)
        if fmt == ExportFormat.PDF:
            return PDFGenerator().generate(ir, output_dir)
        return open_print_view(ir, self.settings)

    def _success(self, document_type: DocumentType, fmt: ExportFormat, path: Path) -> ExportResult:
        name = _AGREEMENT_NAMES[document_type]
        if fmt == ExportFormat.DOCX:
            title = "Document Generated!"
            message = f"Your {name} has been downloaded as Word document."
        elif fmt == ExportFormat.PDF:
            title = "PDF Generated!"
            message = f"Your {name} has been downloaded as PDF."
        else:
            title = "Print Dialog Opened"
            message = f"Your {name} is ready to print."
        return ExportResult(success=True, format=fmt, title=title, message=message, path=str(path))


def export_document(record: Record, fmt: ExportFormat | str,
                    settings: Optional[Settings] = None) -> ExportResult:
    """Synchronous wrapper around DocumentExporter.export"""
    return asyncio.run(DocumentExporter(settings).export(record, fmt))
