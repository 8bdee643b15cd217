"""Serif font support for ReportLab PDF generation.

Agreements print amounts as ``GH₵``, which the built-in Times fonts cannot
draw, so PDFs are set in a TrueType face that carries the cedi sign.

Lookup order per weight:
1. Path from settings (PDF_FONT_PATH / PDF_BOLD_FONT_PATH)
2. Bundled fonts (ghana_legal_docs/fonts/)
3. Windows and Linux system serif fonts
4. The DejaVu faces shipped inside matplotlib's data directory

A candidate without the cedi glyph is skipped. When no candidate is usable a
DocumentGenerationError is raised instead of silently dropping the glyph.
"""

import logging
import threading
from pathlib import Path
from typing import Dict, List, Optional

import matplotlib
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from ghana_legal_docs.exceptions import DocumentGenerationError
from ghana_legal_docs.utils.config import get_settings

logger = logging.getLogger(__name__)

REGULAR_FACE = "AgreementSerif"
BOLD_FACE = "AgreementSerif-Bold"
CEDI_SIGN = 0x20B5

_BUNDLED_FONTS_DIR = Path(__file__).resolve().parent.parent / "fonts"
_MATPLOTLIB_FONTS_DIR = Path(matplotlib.get_data_path()) / "fonts" / "ttf"

_FONT_FILES: Dict[str, Dict[str, List[str]]] = {
    REGULAR_FACE: {
        "bundled": ["DejaVuSerif.ttf"],
        "system": [
            "C:/Windows/Fonts/times.ttf",
            "/usr/share/fonts/truetype/dejavu/DejaVuSerif.ttf",
            "/usr/share/fonts/dejavu-serif/DejaVuSerif.ttf",
            "/usr/share/fonts/dejavu/DejaVuSerif.ttf",
            "/usr/share/fonts/truetype/liberation/LiberationSerif-Regular.ttf",
        ],
        "matplotlib": ["DejaVuSerif.ttf", "DejaVuSans.ttf"],
    },
    BOLD_FACE: {
        "bundled": ["DejaVuSerif-Bold.ttf"],
        "system": [
            "C:/Windows/Fonts/timesbd.ttf",
            "/usr/share/fonts/truetype/dejavu/DejaVuSerif-Bold.ttf",
            "/usr/share/fonts/dejavu-serif/DejaVuSerif-Bold.ttf",
            "/usr/share/fonts/dejavu/DejaVuSerif-Bold.ttf",
            "/usr/share/fonts/truetype/liberation/LiberationSerif-Bold.ttf",
        ],
        "matplotlib": ["DejaVuSerif-Bold.ttf", "DejaVuSans-Bold.ttf"],
    },
}

# face name -> registered; published in one assignment once complete
_faces: Optional[Dict[str, bool]] = None
_lock = threading.Lock()


def _search_paths(face: str) -> List[Path]:
    settings = get_settings()
    configured = settings.pdf_bold_font_path if face == BOLD_FACE else settings.pdf_font_path
    files = _FONT_FILES[face]
    paths = [Path(configured)] if configured else []
    paths += [_BUNDLED_FONTS_DIR / name for name in files["bundled"]]
    paths += [Path(p) for p in files["system"]]
    paths += [_MATPLOTLIB_FONTS_DIR / name for name in files["matplotlib"]]
    return paths


def _register_face(face: str) -> bool:
    for path in _search_paths(face):
        if not path.exists():
            continue
        try:
            font = TTFont(face, str(path))
        except Exception as e:
            logger.warning("Skipping font %s for %s: %s", path, face, e)
            continue
        if CEDI_SIGN not in font.face.charToGlyph:
            logger.debug("Skipping font %s for %s: no cedi sign", path, face)
            continue
        pdfmetrics.registerFont(font)
        logger.debug("Registered %s from %s", face, path)
        return True
    return False


def register_serif_fonts() -> bool:
    """Register the agreement font family once; True when a regular face is available."""
    global _faces

    faces = _faces
    if faces is None:
        with _lock:
            if _faces is None:
                found = {face: _register_face(face) for face in (REGULAR_FACE, BOLD_FACE)}
                if found[REGULAR_FACE]:
                    bold = BOLD_FACE if found[BOLD_FACE] else REGULAR_FACE
                    pdfmetrics.registerFontFamily(
                        REGULAR_FACE, normal=REGULAR_FACE, bold=bold, italic=REGULAR_FACE, boldItalic=bold
                    )
                else:
                    logger.error("No TrueType font with the cedi sign found; set PDF_FONT_PATH")
                _faces = found
            faces = _faces

    return faces[REGULAR_FACE]


def get_font_name(bold: bool = False) -> str:
    """Font name to use in paragraph styles."""
    if not register_serif_fonts():
        raise DocumentGenerationError(
            "No TrueType font with the cedi sign is available for PDF output; set PDF_FONT_PATH", "pdf"
        )
    if bold and _faces[BOLD_FACE]:
        return BOLD_FACE
    return REGULAR_FACE
