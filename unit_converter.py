from dataclasses import dataclass
from typing import Union

from models import PageConfigurationError, Units, UNIT_ALIASES

UnitSpec = Union[Units, str, float, int]


def resolve_unit_conversion(value: UnitSpec) -> float:
    """
    Turn a unit preset, unit name or raw factor into a points-per-unit factor.

    Args:
        value: A Units member, a unit name ("cm", "inch", ...) or a positive number.

    Returns:
        float: Number of PDF points in one user unit.

    Raises:
        PageConfigurationError: for unknown names and non-positive factors.
    """
    if isinstance(value, Units):
        return value.factor
    if isinstance(value, str):
        key = value.strip().lower()
        if key in UNIT_ALIASES:
            return UNIT_ALIASES[key].factor
        try:
            return Units(key).factor
        except ValueError:
            raise PageConfigurationError(f"Unknown unit: {value!r}") from None
    if isinstance(value, bool):
        raise PageConfigurationError(f"Invalid unit conversion factor: {value!r}")
    try:
        factor = float(value)
    except (TypeError, ValueError):
        raise PageConfigurationError(f"Invalid unit conversion factor: {value!r}") from None
    if not factor > 0:
        raise PageConfigurationError(f"Unit conversion factor must be positive, got {factor}")
    return factor


@dataclass(frozen=True)
class UnitConverter:
    """Scalar conversion between user units and PDF points."""
    unit_conversion: float

    def __post_init__(self):
        if not self.unit_conversion > 0:
            raise PageConfigurationError(
                f"Unit conversion factor must be positive, got {self.unit_conversion}"
            )

    def to_points(self, n: float) -> float:
        return n * self.unit_conversion

    def from_points(self, n: float) -> float:
        return n / self.unit_conversion
