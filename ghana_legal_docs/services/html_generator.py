"""Print-ready HTML renderer and the print view launcher"""

import logging
import tempfile
import webbrowser
from html import escape
from pathlib import Path
from typing import List, Optional

from ghana_legal_docs.exceptions import DocumentGenerationError
from ghana_legal_docs.models.document import DocumentIR, SignatureSection, heading_text
from ghana_legal_docs.utils.config import Settings, get_settings
from ghana_legal_docs.utils.files import write_atomically

logger = logging.getLogger(__name__)

PRINT_STYLESHEET = """
    @page {
      size: A4;
      margin: 15mm;
    }
    body {
      font-family: "Times New Roman", Times, serif;
      font-size: 11pt;
      line-height: 1.5;
      max-width: 100%;
      margin: 0;
      padding: 0;
    }
    h1 {
      text-align: center;
      font-size: 14pt;
      font-weight: bold;
      margin-bottom: 20px;
    }
    h2 {
      font-size: 11pt;
      font-weight: bold;
      margin-top: 15px;
      margin-bottom: 8px;
    }
    p {
      margin-bottom: 10px;
      text-align: justify;
    }
    .signature-grid {
      display: grid;
      grid-template-columns: 1fr 1fr;
      gap: 20px;
    }
    .signature-block {
      margin-bottom: 15px;
    }
    .signature-role {
      font-weight: bold;
      margin-bottom: 2px;
    }
    .signature-name {
      margin-bottom: 2px;
    }
    .clause-item {
      margin-bottom: 6px;
    }
    @media print {
      body { padding: 0; }
    }
"""


def _section_html(section) -> List[str]:
    parts = []
    heading = heading_text(section)
    if heading:
        parts.append(f"<h2>{escape(heading)}</h2>")

    if isinstance(section, SignatureSection):
        parts.append('<div class="signature-grid">')
        for block in section.blocks:
            role, name_line, signature = block.lines()
            parts.append(
                '<div class="signature-block">'
                f'<p class="signature-role">{escape(role)}</p>'
                f'<p class="signature-name">{escape(name_line)}</p>'
                f'<p class="signature-line">{escape(signature)}</p>'
                "</div>"
            )
        parts.append("</div>")
    elif section.kind == "numbered_list":
        parts.extend(f'<p class="clause-item">{escape(p)}</p>' for p in section.paragraphs)
    else:
        parts.extend(f"<p>{escape(p)}</p>" for p in section.paragraphs)
    return parts


def render_body(ir: DocumentIR) -> str:
    """Document content without the surrounding page (used by the API preview)"""
    parts = [f"<h1>{escape(ir.title)}</h1>"]
    for section in ir.sections:
        parts.extend(_section_html(section))
    return "\n".join(parts)


def render_print_html(ir: DocumentIR) -> str:
    """Full print page: fixed A4 stylesheet around the document content"""
    title = escape(ir.title.title())
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="UTF-8">\n'
        f"<title>{title}</title>\n"
        f"<style>{PRINT_STYLESHEET}</style>\n"
        "</head>\n"
        '<body onload="window.print()">\n'
        f"{render_body(ir)}\n"
        "</body>\n"
        "</html>\n"
    )


def open_print_view(ir: DocumentIR, settings: Optional[Settings] = None) -> Path:
    """Open the print page in a browser tab; returns the page's path.

    The page is written to a temporary file and opened with ``webbrowser``.
    When no browser can be opened, the page is saved to the output directory
    instead so it can be printed from there.
    """
    settings = settings or get_settings()
    html = render_print_html(ir).encode("utf-8")

    if settings.open_print_view:
        print_dir = Path(tempfile.gettempdir()) / "ghana_legal_docs"
        page = write_atomically(print_dir / f"{ir.filename_stem}.html", html)
        try:
            opened = webbrowser.open_new_tab(page.resolve().as_uri())
        except webbrowser.Error as e:
            logger.warning("Browser could not be started: %s", e)
            opened = False
        if opened:
            logger.info("Print view opened from %s", page)
            return page
        page.unlink(missing_ok=True)
        logger.info("Print view blocked; saving print page instead")

    try:
        page = write_atomically(Path(settings.output_dir) / f"{ir.filename_stem}.html", html)
    except OSError as e:
        raise DocumentGenerationError(f"Could not save print page: {e}", "print") from e
    logger.info("Print page saved to %s", page)
    return page
