# page.py
"""
Margin and unit aware page on top of a native PDF page.

All coordinates passed to Page are user coordinates: measured in the page's
units, from the top-left corner of the margin box, with y growing downward.
Page converts them and delegates to the wrapped native page, which works in
points from the bottom-left corner of the physical page. Calls Page does not
define itself (line width, dash pattern, colours ...) are forwarded to the
native page unchanged.
"""

from typing import Optional, Sequence, Union

from config import (
    DEFAULT_FONT_NAME,
    DEFAULT_FONT_SIZE,
    DEFAULT_LINE_SPACING,
    DEFAULT_PAGE_SIZE,
    DEFAULT_TEXT_ENCODING,
    DEFAULT_UNITS,
    LINE_HEIGHT_FACTOR,
)
from font_manager import TextMeasurer, get_font_metrics
from geometry_context import GeometryContext, PageSizeSpec, bounding_box_for_circle, resolve_page_size
from logger import logger
from models import FillMode, FillRule, LayoutError, PageConfigurationError, TextAlign
from native_page import NativePage
from position_utils import AlignSpec, block_origin, resolve_alignment
from text_layout import layout_lines, word_wrap, wrap_lines
from unit_converter import UnitConverter, UnitSpec, resolve_unit_conversion


class Page:
    def __init__(
        self,
        page_size: PageSizeSpec = DEFAULT_PAGE_SIZE,
        units: UnitSpec = DEFAULT_UNITS,
        native: Optional[NativePage] = None,
    ):
        if native is None:
            width, height = resolve_page_size(page_size)
            native = NativePage(width, height, DEFAULT_FONT_NAME, DEFAULT_FONT_SIZE)
        self.native = native
        self._converter = UnitConverter(resolve_unit_conversion(units))
        self._line_spacing = DEFAULT_LINE_SPACING
        # Margins are kept in points so they keep their physical size when units change
        self._margin_left = 0.0
        self._margin_right = 0.0
        self._margin_top = 0.0
        self._margin_bottom = 0.0

    def __getattr__(self, name):
        # Only reached for attributes Page does not define itself
        native = self.__dict__.get("native")
        if native is None:
            raise AttributeError(name)
        return getattr(native, name)

    # --- coordinate system ---
    @property
    def geometry(self) -> GeometryContext:
        return GeometryContext(
            page_height=self.native.get_height(),
            converter=self._converter,
            margin_left=self._margin_left,
            margin_top=self._margin_top,
        )

    def to_native(self, x: float, y: float):
        return self.geometry.to_native(x, y)

    def to_user(self, x: float, y: float):
        return self.geometry.to_user(x, y)

    def get_unit_conversion(self) -> float:
        return self._converter.unit_conversion

    def set_unit_conversion(self, units: UnitSpec):
        self._converter = UnitConverter(resolve_unit_conversion(units))
        logger.debug(f"[Page] Unit conversion set to {self._converter.unit_conversion:.6f} pt/unit")

    def get_width(self) -> float:
        """Page width in user units."""
        return self._converter.from_points(self.native.get_width())

    def get_height(self) -> float:
        """Page height in user units."""
        return self._converter.from_points(self.native.get_height())

    def get_inner_width(self) -> float:
        """Width of the margin box in user units."""
        return self.get_width() - self.get_left_margin() - self.get_right_margin()

    def get_inner_height(self) -> float:
        """Height of the margin box in user units."""
        return self.get_height() - self.get_top_margin() - self.get_bottom_margin()

    # --- margins ---
    def get_left_margin(self) -> float:
        return self._converter.from_points(self._margin_left)

    def get_right_margin(self) -> float:
        return self._converter.from_points(self._margin_right)

    def get_top_margin(self) -> float:
        return self._converter.from_points(self._margin_top)

    def get_bottom_margin(self) -> float:
        return self._converter.from_points(self._margin_bottom)

    def set_left_margin(self, margin: float):
        self._margin_left = self._converter.to_points(margin)

    def set_right_margin(self, margin: float):
        self._margin_right = self._converter.to_points(margin)

    def set_top_margin(self, margin: float):
        self._margin_top = self._converter.to_points(margin)

    def set_bottom_margin(self, margin: float):
        self._margin_bottom = self._converter.to_points(margin)

    def set_margins(self, top: float, right: float, bottom: float, left: float):
        """Set all four margins, in CSS order."""
        self.set_top_margin(top)
        self.set_right_margin(right)
        self.set_bottom_margin(bottom)
        self.set_left_margin(left)

    def set_all_margins(self, margin: float):
        self.set_margins(margin, margin, margin, margin)

    # --- font & spacing ---
    def get_font(self):
        return self.native.get_font()

    def get_font_size(self) -> float:
        return self.native.get_font_size()

    def set_font(self, font, font_size: Optional[float] = None):
        """Set a new font, keeping the current size when none is given."""
        if font_size is None:
            font_size = self.get_font_size()
        self.native.set_font(font, font_size)

    def set_font_size(self, font_size: float):
        self.native.set_font(self.get_font(), font_size)

    def get_line_spacing(self) -> float:
        return self._line_spacing

    def set_line_spacing(self, line_spacing: float):
        if not line_spacing > 0:
            raise PageConfigurationError(f"Line spacing must be positive, got {line_spacing}")
        self._line_spacing = float(line_spacing)

    def get_line_height(self) -> float:
        """Distance between consecutive lines, in user units."""
        return self._converter.from_points(self.get_font_size() * LINE_HEIGHT_FACTOR * self._line_spacing)

    # --- text measurement & wrapping ---
    def text_measurer(self) -> TextMeasurer:
        return TextMeasurer(get_font_metrics(self.get_font()), self.get_font_size(), self._converter)

    def get_text_width(self, text: Union[str, bytes], encoding: str = DEFAULT_TEXT_ENCODING) -> float:
        """
        Width the text would take when written with the current font settings.

        Args:
            text: A single line; newlines are not treated specially.
            encoding: Used to decode bytes input.

        Returns:
            float: Width in user units.
        """
        return self.text_measurer().measure_width(text, encoding)

    def word_wrap(self, text: str, wrap_width: float) -> str:
        """Insert newlines so no line is wider than wrap_width (unless a single word is)."""
        return word_wrap(text, wrap_width, self.text_measurer())

    # --- text drawing ---
    def write_line(self, x: float, y: float, line: Union[str, bytes], encoding: str = DEFAULT_TEXT_ENCODING):
        """
        Write a single line with its top-left corner at (x, y). The line is
        neither wrapped nor split on newlines.
        """
        x_native, y_native = self.geometry.to_native(x, y)
        # The native primitive places the baseline, move it down one font size
        self.native.draw_text(line, x_native, y_native - self.get_font_size(), encoding)

    def draw_text(self, text: Union[str, bytes], x: float, y: float, encoding: str = DEFAULT_TEXT_ENCODING):
        """Margin-aware version of the native draw_text, same argument order."""
        self.write_line(x, y, text, encoding)

    def write_text(
        self,
        x: float,
        y: float,
        text: str,
        align: AlignSpec = TextAlign.LEFT,
        wrap_width: float = 0,
    ):
        """
        Write a multi-line text anchored at (x, y).

        Args:
            x, y: Anchor point in user units.
            text: Text to write, may contain newlines.
            align: TextAlign, its name, or a fraction between 0 (left) and 1 (right).
            wrap_width: Width to wrap at; 0 or less disables wrapping.
        """
        alignment = resolve_alignment(align)
        measure = self.text_measurer()
        if wrap_width > 0:
            lines = wrap_lines(text, wrap_width, measure)
        else:
            lines = text.split("\n")
        for line_x, line_y, line in layout_lines(lines, x, y, alignment, self.get_line_height(), measure):
            self.write_line(line_x, line_y, line)

    def draw_text_block(
        self,
        text: str,
        y: float,
        align: AlignSpec = TextAlign.LEFT,
        x1: float = 0,
        x2: Optional[float] = None,
    ):
        """
        Write a word-wrapped text between x1 and x2 (defaults: the full margin box).
        """
        if x2 is None:
            x2 = self.get_inner_width()
        if not x2 > x1:
            raise LayoutError(f"Text block needs x2 > x1, got x1={x1}, x2={x2}")
        alignment = resolve_alignment(align)
        self.write_text(block_origin(x1, x2, alignment), y, text, alignment, x2 - x1)

    # --- shapes ---
    def draw_line(self, x1: float, y1: float, x2: float, y2: float):
        x1, y1 = self.geometry.to_native(x1, y1)
        x2, y2 = self.geometry.to_native(x2, y2)
        self.native.draw_line(x1, y1, x2, y2)

    def draw_rectangle(self, x1, y1, x2, y2, fill_mode: FillMode = FillMode.FILL_AND_STROKE):
        self.native.draw_rectangle(*self.geometry.to_native_box(x1, y1, x2, y2), fill_mode)

    def draw_rounded_rectangle(self, x1, y1, x2, y2, radius: float,
                               fill_mode: FillMode = FillMode.FILL_AND_STROKE):
        geometry = self.geometry
        self.native.draw_rounded_rectangle(
            *geometry.to_native_box(x1, y1, x2, y2),
            geometry.to_native_length(radius),
            fill_mode,
        )

    def draw_ellipse(self, x1, y1, x2, y2, fill_mode: FillMode = FillMode.FILL_AND_STROKE):
        self.native.draw_ellipse(*self.geometry.to_native_box(x1, y1, x2, y2), fill_mode)

    def draw_circle(self, x: float, y: float, radius: float, fill_mode: FillMode = FillMode.FILL_AND_STROKE):
        self.draw_ellipse(*bounding_box_for_circle(x, y, radius), fill_mode)

    def draw_polygon(self, xs: Sequence[float], ys: Sequence[float],
                     fill_mode: FillMode = FillMode.FILL_AND_STROKE,
                     fill_rule: FillRule = FillRule.NON_ZERO):
        native_xs, native_ys = self.geometry.to_native_polygon(xs, ys)
        self.native.draw_polygon(native_xs, native_ys, fill_mode, fill_rule)

    def draw_image(self, image, x1, y1, x2, y2):
        """Draw an image (file path or ReportLab ImageReader) into the given box."""
        self.native.draw_image(image, *self.geometry.to_native_box(x1, y1, x2, y2))
