# text_layout.py
"""
Greedy word wrapping and line placement for single font, single size text.

Words are separated by single spaces and are never broken: a word wider than
the wrap width ends up alone on its own, too wide, line. Explicit newlines in
the input are kept, and blank lines survive wrapping so callers can use them
as paragraph spacing.
"""

from typing import Callable, Iterator, List, Tuple

from models import LayoutError
from position_utils import alignment_offset

Measure = Callable[[str], float]


def wrap_lines(text: str, max_width: float, measure: Measure) -> List[str]:
    """
    Word-wrap a text to a maximum width.

    Args:
        text: Text to wrap, may already contain newlines.
        max_width: Widest a line may be, in the units `measure` returns.
        measure: Returns the rendered width of a single line.

    Returns:
        List of lines, one entry per output line.
    """
    if not max_width > 0:
        raise LayoutError(f"Wrap width must be positive, got {max_width}")

    lines = []
    for paragraph in text.split("\n"):
        words = paragraph.split(" ")
        current = words[0]
        for word in words[1:]:
            candidate = f"{current} {word}"
            if measure(candidate) > max_width:
                lines.append(current)
                current = word
            else:
                current = candidate
        lines.append(current)
    return lines


def word_wrap(text: str, max_width: float, measure: Measure) -> str:
    """Same as wrap_lines, joined back together with newlines."""
    return "\n".join(wrap_lines(text, max_width, measure))


def layout_lines(
    lines: List[str],
    x: float,
    y: float,
    alignment: float,
    line_height: float,
    measure: Measure,
) -> Iterator[Tuple[float, float, str]]:
    """
    Yield (x, y, line) for every line that should be drawn.

    Empty lines produce nothing but still take up a line slot.
    """
    for index, line in enumerate(lines):
        if not line:
            continue
        offset = alignment_offset(alignment, measure(line)) if alignment else 0.0
        yield x + offset, y + index * line_height, line
