from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from reportlab.lib import pagesizes

from models import PageConfigurationError
from unit_converter import UnitConverter

# Page size presets, in PDF points
PAGE_SIZES = {
    "A3": pagesizes.A3,
    "A4": pagesizes.A4,
    "A5": pagesizes.A5,
    "letter": pagesizes.LETTER,
    "legal": pagesizes.LEGAL,
}
PAGE_SIZES.update({f"{name}_landscape": pagesizes.landscape(size) for name, size in list(PAGE_SIZES.items())})

PageSizeSpec = Union[str, Tuple[float, float]]


def resolve_page_size(value: PageSizeSpec) -> Tuple[float, float]:
    """
    Return (width, height) in points for a preset name or a size tuple.
    Preset names are case-insensitive, e.g. "a4" or "Letter_Landscape".
    """
    if isinstance(value, str):
        for name, size in PAGE_SIZES.items():
            if name.lower() == value.strip().lower():
                return float(size[0]), float(size[1])
        raise PageConfigurationError(f"Unknown page size: {value!r}")
    try:
        width, height = (float(v) for v in value)
    except (TypeError, ValueError):
        raise PageConfigurationError(f"Invalid page size: {value!r}") from None
    if width <= 0 or height <= 0:
        raise PageConfigurationError(f"Page size must be positive, got {width}x{height}")
    return width, height


@dataclass(frozen=True)
class GeometryContext:
    """
    Transform parameters of one page, mapping user coordinates to native PDF
    coordinates and back.

    User space: origin at the top-left of the margin box, y grows downward,
    units set by the converter.
    Native space: origin at the bottom-left of the physical page, y grows
    upward, units are PDF points.
    Margins are kept in points so they keep their physical size when units change.
    """
    page_height: float
    converter: UnitConverter
    margin_left: float = 0.0
    margin_top: float = 0.0

    def to_native(self, x: float, y: float) -> Tuple[float, float]:
        x_native = self.converter.to_points(x) + self.margin_left
        y_native = self.page_height - (self.converter.to_points(y) + self.margin_top)
        return x_native, y_native

    def to_user(self, x_native: float, y_native: float) -> Tuple[float, float]:
        x = self.converter.from_points(x_native - self.margin_left)
        y = self.converter.from_points(self.page_height - y_native - self.margin_top)
        return x, y

    def to_native_length(self, n: float) -> float:
        return self.converter.to_points(n)

    def to_native_box(self, x1: float, y1: float, x2: float, y2: float) -> Tuple[float, float, float, float]:
        """
        Convert two opposite corners of a box.

        The vertical axis flips, so the converted y values are swapped: a box
        given top-left to bottom-right in user space arrives at the backend as
        bottom-left to top-right.
        """
        nx1, ny1 = self.to_native(x1, y1)
        nx2, ny2 = self.to_native(x2, y2)
        return nx1, ny2, nx2, ny1

    def to_native_polygon(self, xs: Sequence[float], ys: Sequence[float]) -> Tuple[list, list]:
        """Convert polygon vertices; order is reversed to keep the winding direction."""
        if len(xs) != len(ys):
            raise ValueError(f"Polygon needs as many x as y values ({len(xs)} != {len(ys)})")
        points = [self.to_native(x, y) for x, y in zip(xs, ys)]
        points.reverse()
        return [p[0] for p in points], [p[1] for p in points]


def bounding_box_for_circle(x: float, y: float, radius: float) -> Tuple[float, float, float, float]:
    """Square bounding box of a circle, in the same coordinate space as its centre."""
    return x - radius, y - radius, x + radius, y + radius
