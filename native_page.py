# native_page.py
"""
PDF 原生页面：以点为单位、原点在左下角的绘图原语。

NativePage 不直接绘制，而是按顺序记录每次调用（DrawOperation），
在 render() 时重放到 ReportLab Canvas 上。这样页面可以先于文档创建，
也便于检查实际写入的原生坐标。
"""

from typing import List, Optional, Sequence

from reportlab.pdfgen.canvas import Canvas, FILL_EVEN_ODD, FILL_NON_ZERO

from config import DEFAULT_FONT_NAME, DEFAULT_FONT_SIZE, DEFAULT_TEXT_ENCODING
from font_manager import resolve_font
from logger import logger
from models import DrawOperation, FillMode, FillRule, PageConfigurationError


class NativePage:
    def __init__(self, width: float, height: float, font=DEFAULT_FONT_NAME, font_size: float = DEFAULT_FONT_SIZE):
        self._width = float(width)
        self._height = float(height)
        self._font = None
        self._font_size = None
        self.operations: List[DrawOperation] = []
        self.set_font(font, font_size)

    def _record(self, name: str, *args):
        self.operations.append(DrawOperation(name, args))

    # --- page info ---
    def get_width(self) -> float:
        return self._width

    def get_height(self) -> float:
        return self._height

    def get_font(self):
        return self._font

    def get_font_size(self) -> float:
        return self._font_size

    # --- state ---
    def set_font(self, font, font_size: float):
        if not font_size > 0:
            raise PageConfigurationError(f"Font size must be positive, got {font_size}")
        self._font = resolve_font(font)
        self._font_size = float(font_size)
        self._record("set_font", self._font.fontName, self._font_size)

    def set_line_width(self, width: float):
        self._record("set_line_width", width)

    def set_line_dashing_pattern(self, pattern: Optional[Sequence[float]] = None, phase: float = 0):
        self._record("set_line_dashing_pattern", tuple(pattern or ()), phase)

    def set_line_color(self, color):
        self._record("set_line_color", color)

    def set_fill_color(self, color):
        self._record("set_fill_color", color)

    # --- drawing ---
    def draw_line(self, x1: float, y1: float, x2: float, y2: float):
        self._record("draw_line", x1, y1, x2, y2)

    def draw_rectangle(self, x1, y1, x2, y2, fill_mode: FillMode = FillMode.FILL_AND_STROKE):
        self._record("draw_rectangle", x1, y1, x2, y2, FillMode(fill_mode))

    def draw_rounded_rectangle(self, x1, y1, x2, y2, radius, fill_mode: FillMode = FillMode.FILL_AND_STROKE):
        self._record("draw_rounded_rectangle", x1, y1, x2, y2, radius, FillMode(fill_mode))

    def draw_ellipse(self, x1, y1, x2, y2, fill_mode: FillMode = FillMode.FILL_AND_STROKE):
        self._record("draw_ellipse", x1, y1, x2, y2, FillMode(fill_mode))

    def draw_polygon(self, xs, ys, fill_mode: FillMode = FillMode.FILL_AND_STROKE,
                     fill_rule: FillRule = FillRule.NON_ZERO):
        if len(xs) < 2 or len(xs) != len(ys):
            raise ValueError("Polygon needs at least two vertices and matching x/y lists")
        self._record("draw_polygon", tuple(xs), tuple(ys), FillMode(fill_mode), FillRule(fill_rule))

    def draw_image(self, image, x1, y1, x2, y2):
        self._record("draw_image", image, x1, y1, x2, y2)

    def draw_text(self, text, x: float, y: float, encoding: str = DEFAULT_TEXT_ENCODING):
        if isinstance(text, bytes):
            text = text.decode(encoding)
        self._record("draw_text", text, x, y)

    # --- output ---
    def render(self, canvas: Canvas):
        """在 canvas 的当前页上重放记录的所有操作（不调用 showPage）。"""
        canvas.setPageSize((self._width, self._height))
        for op in self.operations:
            handler = getattr(self, f"_render_{op.name}")
            handler(canvas, *op.args)
        logger.debug(f"[NativePage] 已重放 {len(self.operations)} 个操作")

    @staticmethod
    def _render_set_font(canvas, font_name, font_size):
        canvas.setFont(font_name, font_size)

    @staticmethod
    def _render_set_line_width(canvas, width):
        canvas.setLineWidth(width)

    @staticmethod
    def _render_set_line_dashing_pattern(canvas, pattern, phase):
        canvas.setDash(list(pattern), phase)

    @staticmethod
    def _render_set_line_color(canvas, color):
        canvas.setStrokeColor(color)

    @staticmethod
    def _render_set_fill_color(canvas, color):
        canvas.setFillColor(color)

    @staticmethod
    def _render_draw_line(canvas, x1, y1, x2, y2):
        canvas.line(x1, y1, x2, y2)

    @staticmethod
    def _render_draw_rectangle(canvas, x1, y1, x2, y2, fill_mode):
        stroke, fill = fill_mode.flags
        canvas.rect(x1, y1, x2 - x1, y2 - y1, stroke=stroke, fill=fill)

    @staticmethod
    def _render_draw_rounded_rectangle(canvas, x1, y1, x2, y2, radius, fill_mode):
        stroke, fill = fill_mode.flags
        canvas.roundRect(x1, y1, x2 - x1, y2 - y1, radius, stroke=stroke, fill=fill)

    @staticmethod
    def _render_draw_ellipse(canvas, x1, y1, x2, y2, fill_mode):
        stroke, fill = fill_mode.flags
        canvas.ellipse(x1, y1, x2, y2, stroke=stroke, fill=fill)

    @staticmethod
    def _render_draw_polygon(canvas, xs, ys, fill_mode, fill_rule):
        stroke, fill = fill_mode.flags
        path = canvas.beginPath()
        path.moveTo(xs[0], ys[0])
        for x, y in zip(xs[1:], ys[1:]):
            path.lineTo(x, y)
        path.close()
        mode = FILL_EVEN_ODD if fill_rule == FillRule.EVEN_ODD else FILL_NON_ZERO
        canvas.drawPath(path, stroke=stroke, fill=fill, fillMode=mode)

    @staticmethod
    def _render_draw_image(canvas, image, x1, y1, x2, y2):
        canvas.drawImage(image, x1, y1, width=x2 - x1, height=y2 - y1)

    @staticmethod
    def _render_draw_text(canvas, text, x, y):
        canvas.drawString(x, y, text)
