"""Tests for the Word, print HTML and PDF renderers"""

import io
from html.parser import HTMLParser
from pathlib import Path

import pytest
from docx import Document
from pypdf import PdfReader

from ghana_legal_docs.exceptions import DocumentGenerationError
from ghana_legal_docs.services.composer import compose
from ghana_legal_docs.services.docx_generator import DocxGenerator, render_docx
from ghana_legal_docs.services.html_generator import open_print_view, render_print_html
from ghana_legal_docs.services.pdf_generator import PDFGenerator, render_pdf
from ghana_legal_docs.utils import pdf_fonts
from ghana_legal_docs.utils.config import get_settings


class _BlockText(HTMLParser):
    """Collects the text of each h1/h2/p element"""

    BLOCKS = {"h1", "h2", "p"}

    def __init__(self):
        super().__init__()
        self.lines = []
        self._buffer = None

    def handle_starttag(self, tag, attrs):
        if tag in self.BLOCKS:
            self._buffer = []

    def handle_endtag(self, tag):
        if tag in self.BLOCKS and self._buffer is not None:
            self.lines.append("".join(self._buffer))
            self._buffer = None

    def handle_data(self, data):
        if self._buffer is not None:
            self._buffer.append(data)


def html_lines(html: str) -> list:
    parser = _BlockText()
    parser.feed(html)
    return parser.lines


def docx_lines(data: bytes) -> list:
    return [p.text for p in Document(io.BytesIO(data)).paragraphs]


@pytest.fixture(params=["tenancy", "tenancy_full", "vehicle", "vehicle_paid"])
def ir(request, tenancy_record, vehicle_record):
    records = {
        "tenancy": tenancy_record,
        "tenancy_full": tenancy_record.model_copy(update={
            "caution_fee": 300,
            "custom_clauses": ["No pets <dogs & cats>.", "Quiet after \"10 PM\"."],
            "witness1_name": "N/A",
        }),
        "vehicle": vehicle_record,
        "vehicle_paid": vehicle_record.model_copy(update={"amount_paid": 85000}),
    }
    return compose(records[request.param])


def test_print_html_matches_ir_text(ir):
    assert html_lines(render_print_html(ir)) == ir.text_lines()


def test_docx_matches_ir_text(ir):
    assert docx_lines(render_docx(ir)) == ir.text_lines()


def test_docx_and_print_html_have_same_text(ir):
    assert docx_lines(render_docx(ir)) == html_lines(render_print_html(ir))


def test_print_html_stylesheet(ir):
    html = render_print_html(ir)
    assert "size: A4;" in html
    assert "margin: 15mm;" in html
    assert "text-align: justify;" in html
    assert "serif" in html


def test_print_html_escapes_text(tenancy_record):
    record = tenancy_record.model_copy(update={"custom_clauses": ["<script>alert(1)</script>"]})
    html = render_print_html(compose(record))
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_docx_headings_bold(tenancy_record):
    document = Document(io.BytesIO(render_docx(compose(tenancy_record))))
    by_text = {p.text: p for p in document.paragraphs}
    assert by_text["TENANCY AGREEMENT"].runs[0].bold
    assert by_text["1. PROPERTY DESCRIPTION"].runs[0].bold
    assert by_text["1. PROPERTY DESCRIPTION"].runs[0].font.name == "Times New Roman"
    assert by_text["GOVERNING LAW"].runs[0].font.size is not None


def test_docx_generate_writes_named_file(tmp_path, tenancy_record):
    path = DocxGenerator().generate(compose(tenancy_record), tmp_path)
    assert path == tmp_path / "Tenancy_Agreement_Ama Owusu.docx"
    assert path.exists()
    assert [p.name for p in tmp_path.iterdir()] == [path.name]


def test_pdf_render(ir):
    assert render_pdf(ir).startswith(b"%PDF")


def _squash(text):
    return "".join(text.split())


def test_pdf_text_matches_ir(ir):
    reader = PdfReader(io.BytesIO(render_pdf(ir)))
    pdf_text = "".join(page.extract_text() for page in reader.pages)
    # line wrapping differs between formats, so whitespace is ignored
    assert _squash(pdf_text) == _squash("".join(ir.text_lines()))
    assert "GH₵" in pdf_text


def test_pdf_without_cedi_font_fails_loudly(monkeypatch, tenancy_record):
    monkeypatch.setattr(pdf_fonts, "_faces", {pdf_fonts.REGULAR_FACE: False, pdf_fonts.BOLD_FACE: False})
    with pytest.raises(DocumentGenerationError):
        render_pdf(compose(tenancy_record))


def test_pdf_generate_writes_named_file(tmp_path, vehicle_record):
    path = PDFGenerator().generate(compose(vehicle_record), tmp_path)
    assert path.name == "Vehicle_Transfer_Agreement_Abena Darko.pdf"
    assert path.read_bytes().startswith(b"%PDF")


def test_pdf_failure_cleans_up(tmp_path, monkeypatch, tenancy_record):
    seen = {}

    def broken_render(self, ir, target):
        seen["target"] = Path(target)
        Path(target).write_bytes(b"%PDF-partial")
        raise RuntimeError("rasterization failed")

    monkeypatch.setattr(PDFGenerator, "render", broken_render)

    with pytest.raises(DocumentGenerationError):
        PDFGenerator().generate(compose(tenancy_record), tmp_path / "out")

    assert not seen["target"].parent.exists()
    assert not (tmp_path / "out").exists() or not any((tmp_path / "out").iterdir())


def test_concurrent_pdf_builds_use_separate_work_dirs(tmp_path, monkeypatch, tenancy_record):
    targets = []
    real_render = PDFGenerator.render

    def recording_render(self, ir, target):
        targets.append(Path(target).parent)
        return real_render(self, ir, target)

    monkeypatch.setattr(PDFGenerator, "render", recording_render)
    ir = compose(tenancy_record)
    PDFGenerator().generate(ir, tmp_path / "a")
    PDFGenerator().generate(ir, tmp_path / "b")

    assert targets[0] != targets[1]
    assert not any(t.exists() for t in targets)


def test_print_view_fallback_saves_page(monkeypatch, tenancy_record):
    monkeypatch.setenv("OPEN_PRINT_VIEW", "true")
    monkeypatch.setattr("webbrowser.open_new_tab", lambda url: False)
    settings = get_settings()

    page = open_print_view(compose(tenancy_record), settings)

    assert page == Path(settings.output_dir) / "Tenancy_Agreement_Ama Owusu.html"
    assert "TENANCY AGREEMENT" in page.read_text(encoding="utf-8")


def test_print_view_opens_browser(monkeypatch, tenancy_record):
    monkeypatch.setenv("OPEN_PRINT_VIEW", "true")
    opened = []
    monkeypatch.setattr("webbrowser.open_new_tab", lambda url: opened.append(url) or True)

    page = open_print_view(compose(tenancy_record))

    assert opened == [page.resolve().as_uri()]
    assert not (Path(get_settings().output_dir) / page.name).exists()
