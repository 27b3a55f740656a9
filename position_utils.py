from typing import Union

from models import TextAlign

AlignSpec = Union[TextAlign, str, float, int]


def resolve_alignment(align: AlignSpec) -> float:
    """
    Return the alignment fraction for an alignment value:
    - 'left'   → 0.0
    - 'center' → 0.5
    - 'right'  → 1.0
    Numbers are used as-is, so 0.25 anchors a line a quarter into its width.
    """
    if isinstance(align, TextAlign):
        return align.fraction
    if isinstance(align, str):
        try:
            return TextAlign(align.strip().lower()).fraction
        except ValueError:
            raise ValueError("Invalid alignment: expected 'left', 'center', 'right' or a number") from None
    return float(align)


def alignment_offset(alignment: float, text_width: float) -> float:
    """
    Horizontal offset from the anchor point to the start of a line.

    Args:
        alignment (float): Alignment fraction, 0 for left and 1 for right.
        text_width (float): Measured width of the line.

    Returns:
        float: Offset to add to the anchor x.
    """
    if alignment == 0:
        return 0.0
    return -alignment * text_width


def block_origin(x1: float, x2: float, alignment: float) -> float:
    """Anchor x for a text block between x1 and x2."""
    return x1 + alignment * (x2 - x1)
