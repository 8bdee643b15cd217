"""PDF renderer for composed agreements.

Page geometry and type follow the print stylesheet: A4, 15mm margins,
serif 11pt body, justified paragraphs, signatures in two columns.
"""

import io
import logging
import tempfile
from pathlib import Path
from xml.sax.saxutils import escape

from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import KeepTogether, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ghana_legal_docs.exceptions import DocumentGenerationError
from ghana_legal_docs.models.document import DocumentIR, SignatureSection, heading_text
from ghana_legal_docs.utils.files import write_atomically
from ghana_legal_docs.utils.pdf_fonts import get_font_name, register_serif_fonts

logger = logging.getLogger(__name__)


class PDFGenerator:
    """Render a DocumentIR as an A4 PDF"""

    def __init__(self):
        register_serif_fonts()
        self.font_name = get_font_name()
        self.font_bold = get_font_name(bold=True)
        self._init_styles()

    def _init_styles(self):
        """Initialize paragraph styles"""
        self.styles = {
            'title': ParagraphStyle('Title', fontName=self.font_bold,
                fontSize=14, leading=18, alignment=TA_CENTER, spaceAfter=15),
            'heading': ParagraphStyle('Heading', fontName=self.font_bold,
                fontSize=11, leading=16, spaceBefore=11, spaceAfter=6),
            'normal': ParagraphStyle('Normal', fontName=self.font_name,
                fontSize=11, leading=16.5, alignment=TA_JUSTIFY, spaceAfter=7),
            'role': ParagraphStyle('Role', fontName=self.font_bold,
                fontSize=11, leading=16.5),
            'signature': ParagraphStyle('Signature', fontName=self.font_name,
                fontSize=11, leading=16.5),
        }

    def render(self, ir: DocumentIR, target) -> None:
        """Build the PDF into ``target`` (a path or binary file object)"""
        doc = SimpleDocTemplate(target, pagesize=A4, title=ir.title.title(),
            rightMargin=15*mm, leftMargin=15*mm, topMargin=15*mm, bottomMargin=15*mm)
        doc.build(self._build_story(ir))

    def generate(self, ir: DocumentIR, output_dir: str | Path) -> Path:
        """Render and save as ``{Label}_{Party}.pdf`` in ``output_dir``.

        Each call builds inside its own temporary directory, removed on both
        success and failure; the final file appears only once complete.
        """
        output_path = Path(output_dir) / f"{ir.filename_stem}.pdf"
        with tempfile.TemporaryDirectory(prefix="agreement-pdf-") as work_dir:
            scratch = Path(work_dir) / output_path.name
            try:
                self.render(ir, str(scratch))
                data = scratch.read_bytes()
            except Exception as e:
                raise DocumentGenerationError(f"Could not build PDF: {e}", "pdf") from e
        write_atomically(output_path, data)
        logger.info("PDF written to %s", output_path)
        return output_path

    def _build_story(self, ir: DocumentIR) -> list:
        story = [Paragraph(escape(ir.title), self.styles['title'])]

        for section in ir.sections:
            heading = heading_text(section)
            if heading:
                story.append(Paragraph(escape(heading), self.styles['heading']))
            if isinstance(section, SignatureSection):
                story.append(self._build_signatures(section))
                story.append(Spacer(1, 10))
            else:
                for paragraph in section.paragraphs:
                    story.append(Paragraph(escape(paragraph), self.styles['normal']))

        return story

    def _build_signatures(self, section: SignatureSection):
        """Two-column grid of signature blocks"""
        cells = []
        for block in section.blocks:
            role, name_line, signature = block.lines()
            cells.append([
                Paragraph(escape(role), self.styles['role']),
                Paragraph(escape(name_line), self.styles['signature']),
                Spacer(1, 12),
                Paragraph(escape(signature), self.styles['signature']),
            ])

        rows = [cells[i:i + 2] for i in range(0, len(cells), 2)]
        if rows and len(rows[-1]) == 1:
            rows[-1].append("")

        table = Table(rows, colWidths=[90*mm, 90*mm])
        table.setStyle(TableStyle([
            ('VALIGN', (0, 0), (-1, -1), 'TOP'),
            ('LEFTPADDING', (0, 0), (-1, -1), 0),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 12),
        ]))
        return KeepTogether([table])


def render_pdf(ir: DocumentIR) -> bytes:
    """Render a DocumentIR to PDF bytes"""
    buffer = io.BytesIO()
    PDFGenerator().render(ir, buffer)
    return buffer.getvalue()
