from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class PageConfigurationError(ValueError):
    """Raised when a page setting would make geometry math meaningless."""


class LayoutError(ValueError):
    """Raised for text layout requests that cannot produce lines."""


class Units(str, Enum):
    POINT = "point"
    INCH = "inch"
    MILLIMETER = "millimeter"
    CENTIMETER = "centimeter"

    @property
    def factor(self) -> float:
        """Number of PDF points in one unit."""
        return _UNIT_FACTORS[self]


# A point is 1/72 of an inch, an inch is 2.54 centimeters
_UNIT_FACTORS = {
    Units.POINT: 1.0,
    Units.INCH: 72.0,
    Units.MILLIMETER: 72.0 / 25.4,
    Units.CENTIMETER: 72.0 / 2.54,
}

UNIT_ALIASES = {
    "pt": Units.POINT,
    "points": Units.POINT,
    "in": Units.INCH,
    "inches": Units.INCH,
    "mm": Units.MILLIMETER,
    "cm": Units.CENTIMETER,
}


class TextAlign(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @property
    def fraction(self) -> float:
        return {TextAlign.LEFT: 0.0, TextAlign.CENTER: 0.5, TextAlign.RIGHT: 1.0}[self]


class FillMode(str, Enum):
    STROKE = "stroke"
    FILL = "fill"
    FILL_AND_STROKE = "fill_and_stroke"

    @property
    def flags(self) -> Tuple[int, int]:
        """(stroke, fill) flags as ReportLab expects them."""
        return {
            FillMode.STROKE: (1, 0),
            FillMode.FILL: (0, 1),
            FillMode.FILL_AND_STROKE: (1, 1),
        }[self]


class FillRule(str, Enum):
    NON_ZERO = "non_zero"
    EVEN_ODD = "even_odd"


@dataclass
class DrawOperation:
    """
    A single call recorded by the native page, in PDF points with the origin
    at the bottom-left corner of the page.
    """
    name: str                      # backend method, e.g. "draw_line"
    args: tuple = field(default_factory=tuple)


@dataclass
class StampResult:
    """
    Represents the result of stamping rendered pages onto an existing PDF.
    """
    input: str                          # Source PDF file path
    output: Optional[str] = None        # Output PDF file path
    success: bool = True                # Whether stamping was successful
    error: Optional[str] = None         # Error message if stamping failed
    pages_stamped: int = 0
