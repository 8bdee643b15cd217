"""Tests for PDF font registration"""

import threading

from reportlab.pdfbase import pdfmetrics

from ghana_legal_docs.utils import pdf_fonts


def test_registered_font_has_cedi_sign():
    assert pdf_fonts.register_serif_fonts()
    font = pdfmetrics.getFont(pdf_fonts.get_font_name())
    assert pdf_fonts.CEDI_SIGN in font.face.charToGlyph


def test_concurrent_first_lookup(monkeypatch):
    for _ in range(10):
        monkeypatch.setattr(pdf_fonts, "_faces", None)
        start = threading.Barrier(8)
        names, errors = [], []

        def lookup():
            start.wait()
            try:
                names.append(pdf_fonts.get_font_name(bold=True))
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=lookup) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert len(set(names)) == 1


def test_unreadable_configured_font_is_skipped(tmp_path, monkeypatch):
    broken = tmp_path / "broken.ttf"
    broken.write_bytes(b"not a font")
    monkeypatch.setenv("PDF_FONT_PATH", str(broken))
    monkeypatch.setattr(pdf_fonts, "_faces", None)

    assert pdf_fonts._search_paths(pdf_fonts.REGULAR_FACE)[0] == broken
    assert pdf_fonts.register_serif_fonts()
    assert pdf_fonts.get_font_name() == pdf_fonts.REGULAR_FACE
