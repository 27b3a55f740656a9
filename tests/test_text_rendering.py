# tests/test_text_rendering.py
"""
Multi-line text on a page: anchor placement, alignment, wrapping and
text blocks, checked through the recorded draw_text calls.
"""

from __future__ import annotations

import pytest

from models import LayoutError, TextAlign, Units
from page import Page


def _texts(page: Page):
    return [op.args for op in page.native.operations if op.name == "draw_text"]


def test_write_line_shifts_baseline_by_font_size(cm_page) -> None:
    cm_page.write_line(1, 2, "Hello")
    (text, x, y), = _texts(cm_page)
    x_n, y_n = cm_page.to_native(1, 2)
    assert text == "Hello"
    assert x == pytest.approx(x_n)
    assert y == pytest.approx(y_n - cm_page.get_font_size())


def test_write_line_decodes_bytes(cm_page) -> None:
    cm_page.write_line(0, 0, "Grüße".encode("latin-1"), "latin-1")
    assert _texts(cm_page)[0][0] == "Grüße"


@pytest.mark.parametrize("align,fraction", [(TextAlign.LEFT, 0), (TextAlign.CENTER, 0.5), (TextAlign.RIGHT, 1), (0.25, 0.25)])
def test_alignment_anchor(cm_page, align, fraction) -> None:
    cm_page.write_text(8, 3, "Some text", align)
    (text, x, _), = _texts(cm_page)
    anchor_x, _ = cm_page.to_native(8, 3)
    width_pt = cm_page.get_text_width(text) * cm_page.get_unit_conversion()
    assert x + fraction * width_pt == pytest.approx(anchor_x)


def test_lines_advance_by_line_height() -> None:
    page = Page("A4", Units.POINT)
    page.set_font_size(10)
    page.set_line_spacing(2)
    page.write_text(0, 0, "first\n\nthird")
    ops = _texts(page)
    assert [op[0] for op in ops] == ["first", "third"]
    # Blank line takes a slot: two line heights of 24 pt
    assert ops[0][2] - ops[1][2] == pytest.approx(48)


def test_write_text_wraps(cm_page) -> None:
    text = "alpha beta gamma delta epsilon zeta eta theta iota kappa"
    width = cm_page.get_text_width("alpha beta gamma")
    cm_page.write_text(0, 0, text, wrap_width=width)
    lines = [op[0] for op in _texts(cm_page)]
    assert lines[0] == "alpha beta gamma"
    assert " ".join(lines) == text
    assert all(cm_page.get_text_width(line) <= width for line in lines)


def test_zero_wrap_width_means_no_wrapping(cm_page) -> None:
    cm_page.write_text(0, 0, "a b c d e f g", wrap_width=0)
    assert [op[0] for op in _texts(cm_page)] == ["a b c d e f g"]


def test_word_wrap_returns_newline_joined(cm_page) -> None:
    wrapped = cm_page.word_wrap("word " * 40, 5)
    assert "\n" in wrapped
    assert cm_page.word_wrap(wrapped, 5) == wrapped


def test_text_block_centered(cm_page) -> None:
    cm_page.draw_text_block("Centered title", 1, TextAlign.CENTER)
    (text, x, _), = _texts(cm_page)
    k = cm_page.get_unit_conversion()
    width_pt = cm_page.get_text_width(text) * k
    center_native, _ = cm_page.to_native(cm_page.get_inner_width() / 2, 1)
    assert x + width_pt / 2 == pytest.approx(center_native)


def test_text_block_between_bounds(cm_page) -> None:
    cm_page.draw_text_block("x " * 200, 0, "right", 2, 6)
    k = cm_page.get_unit_conversion()
    right_native, _ = cm_page.to_native(6, 0)
    for text, x, _ in _texts(cm_page):
        assert x + cm_page.get_text_width(text) * k == pytest.approx(right_native)
        assert cm_page.get_text_width(text) <= 4 + 1e-9


@pytest.mark.parametrize("x1,x2", [(5, 5), (6, 2)])
def test_text_block_needs_positive_width(cm_page, x1, x2) -> None:
    with pytest.raises(LayoutError):
        cm_page.draw_text_block("text", 0, TextAlign.LEFT, x1, x2)


def test_draw_text_keeps_native_argument_order(cm_page) -> None:
    cm_page.draw_text("Hi", 10, 20)
    (text, x, y), = _texts(cm_page)
    x_n, y_n = cm_page.to_native(10, 20)
    assert text == "Hi"
    assert x == pytest.approx(x_n)
    assert y == pytest.approx(y_n - cm_page.get_font_size())


def test_draw_text_decodes_with_given_encoding(cm_page) -> None:
    cm_page.draw_text("Grüße".encode("utf-16-be"), 0, 0, "utf-16-be")
    assert _texts(cm_page)[0][0] == "Grüße"
