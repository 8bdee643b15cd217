"""Word (.docx) renderer for composed agreements"""

import io
import logging
from pathlib import Path

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt

from ghana_legal_docs.exceptions import DocumentGenerationError
from ghana_legal_docs.models.document import DocumentIR, SignatureSection, heading_text
from ghana_legal_docs.utils.files import write_atomically

logger = logging.getLogger(__name__)

FONT_NAME = "Times New Roman"
TITLE_SIZE = Pt(16)
HEADING_SIZE = Pt(12)
BODY_SIZE = Pt(12)


class DocxGenerator:
    """Render a DocumentIR as a Word document"""

    def render(self, ir: DocumentIR) -> bytes:
        document = Document()
        normal = document.styles["Normal"]
        normal.font.name = FONT_NAME
        normal.font.size = BODY_SIZE

        title = self._add_text(document, ir.title, bold=True, size=TITLE_SIZE, space_after=20)
        title.alignment = WD_ALIGN_PARAGRAPH.CENTER

        for section in ir.sections:
            heading = heading_text(section)
            if heading:
                self._add_text(document, heading, bold=True, size=HEADING_SIZE,
                               space_before=15, space_after=10)

            if isinstance(section, SignatureSection):
                for block in section.blocks:
                    role, name_line, signature = block.lines()
                    self._add_text(document, role, bold=True)
                    self._add_text(document, name_line, space_after=5)
                    self._add_text(document, signature, space_after=15)
            else:
                for paragraph in section.paragraphs:
                    self._add_text(document, paragraph, space_after=10)

        buffer = io.BytesIO()
        document.save(buffer)
        return buffer.getvalue()

    def generate(self, ir: DocumentIR, output_dir: str | Path) -> Path:
        """Render and save as ``{Label}_{Party}.docx`` in ``output_dir``"""
        try:
            data = self.render(ir)
        except Exception as e:
            raise DocumentGenerationError(f"Could not build Word document: {e}", "docx") from e

        output_path = Path(output_dir) / f"{ir.filename_stem}.docx"
        write_atomically(output_path, data)
        logger.info("Word document written to %s", output_path)
        return output_path

    def _add_text(self, document, text: str, bold: bool = False, size: Pt = BODY_SIZE,
                  space_before: int = 0, space_after: int = 0):
        paragraph = document.add_paragraph()
        run = paragraph.add_run(text)
        run.bold = bold
        run.font.name = FONT_NAME
        run.font.size = size
        paragraph.paragraph_format.space_before = Pt(space_before)
        paragraph.paragraph_format.space_after = Pt(space_after)
        return paragraph


def render_docx(ir: DocumentIR) -> bytes:
    """Render a DocumentIR to .docx bytes"""
    return DocxGenerator().render(ir)
