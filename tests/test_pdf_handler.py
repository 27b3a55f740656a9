# tests/test_pdf_handler.py
"""
Rendering pages to PDF with ReportLab and stamping onto existing files.
"""

from __future__ import annotations

from io import BytesIO

import pytest
from PyPDF2 import PdfReader

from models import FillMode, FillRule, Units
from pdf_handler import PdfDocument, stamp_pdf


def _sample_document() -> PdfDocument:
    document = PdfDocument(title="test")
    page = document.new_page("letter", Units.INCH)
    page.set_all_margins(1)
    page.set_line_dashing_pattern([5, 3])
    page.draw_rectangle(0, 0, page.get_inner_width(), page.get_inner_height(), FillMode.STROKE)
    page.draw_rounded_rectangle(0.5, 0.5, 2, 1, 0.1)
    page.draw_circle(3, 3, 0.5)
    page.draw_polygon([0, 1, 0.5], [4, 4, 5], FillMode.FILL, FillRule.EVEN_ODD)
    page.draw_line(0, 6, 6.5, 6)
    page.draw_text_block("Lorem ipsum dolor sit amet " * 10, 0.2, "center")
    document.new_page("A4_landscape", Units.CENTIMETER).write_text(1, 1, "second page")
    return document


def test_render_pages_with_own_sizes() -> None:
    reader = PdfReader(BytesIO(_sample_document().to_bytes()))
    assert len(reader.pages) == 2
    assert float(reader.pages[0].mediabox.width) == pytest.approx(612)
    assert float(reader.pages[0].mediabox.height) == pytest.approx(792)
    assert float(reader.pages[1].mediabox.width) == pytest.approx(841.89, abs=0.01)


def test_text_lands_in_pdf() -> None:
    reader = PdfReader(BytesIO(_sample_document().to_bytes()))
    assert "second page" in reader.pages[1].extract_text()


def test_save(tmp_path) -> None:
    out = tmp_path / "out.pdf"
    _sample_document().save(str(out))
    assert out.read_bytes().startswith(b"%PDF")


def test_empty_document_rejected() -> None:
    with pytest.raises(ValueError):
        PdfDocument().to_bytes()


def test_stamp_onto_existing(tmp_path) -> None:
    base = PdfDocument()
    for label in ("one", "two", "three"):
        base.new_page("letter", Units.POINT).write_line(10, 10, f"base {label}")
    source = tmp_path / "base.pdf"
    base.save(str(source))

    stamp = PdfDocument()
    stamp.new_page("letter", Units.POINT).write_line(10, 100, "STAMP")
    out = tmp_path / "stamped.pdf"
    result = stamp_pdf(stamp, str(source), str(out))

    assert result.success
    assert result.pages_stamped == 1
    reader = PdfReader(str(out))
    assert len(reader.pages) == 3
    assert "STAMP" in reader.pages[0].extract_text()
    assert "STAMP" not in reader.pages[1].extract_text()


def test_stamp_reports_failure(tmp_path) -> None:
    stamp = PdfDocument()
    stamp.new_page()
    result = stamp_pdf(stamp, str(tmp_path / "missing.pdf"), str(tmp_path / "out.pdf"))
    assert not result.success
    assert result.error
    assert result.output is None
