"""Memory unit conversion and human-readable formatting."""

from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass(frozen=True)
class MemoryUnit:
    """A memory unit expressed as a power of 1024 bytes."""

    name: str
    label: str
    magnitude: int


BYTE = MemoryUnit(name="byte", label="B", magnitude=1)
KILOBYTE = MemoryUnit(name="kilobyte", label="KB", magnitude=1024)
MEGABYTE = MemoryUnit(name="megabyte", label="MB", magnitude=1024**2)
GIGABYTE = MemoryUnit(name="gigabyte", label="GB", magnitude=1024**3)
TERABYTE = MemoryUnit(name="terabyte", label="TB", magnitude=1024**4)

# Ordered smallest to largest; best_unit relies on this order.
UNITS = (BYTE, KILOBYTE, MEGABYTE, GIGABYTE, TERABYTE)


def unit_for(unit: Union[str, MemoryUnit]) -> MemoryUnit:
    """Look up a unit by name ("kilobyte") or label ("KB").

    Raises:
        ValueError: If no unit matches.
    """
    if isinstance(unit, MemoryUnit):
        return unit
    key = unit.strip().lower()
    for candidate in UNITS:
        if key in (candidate.name, candidate.label.lower()):
            return candidate
    raise ValueError(f"Unknown memory unit: {unit!r}")


def convert(
    count: Number,
    from_unit: Union[str, MemoryUnit],
    to_unit: Union[str, MemoryUnit],
) -> Number:
    """Convert a count between memory units.

    Integral results are returned as ``int`` so that e.g. kilobytes to bytes
    stays exact.
    """
    source = unit_for(from_unit)
    target = unit_for(to_unit)
    total = count * source.magnitude
    if isinstance(total, int) and total % target.magnitude == 0:
        return total // target.magnitude
    return total / target.magnitude


def best_unit(byte_count: Number) -> MemoryUnit:
    """Return the largest unit that keeps the scaled value at or above 1."""
    chosen = BYTE
    for unit in UNITS:
        if byte_count >= unit.magnitude:
            chosen = unit
    return chosen


def scale(byte_count: Number) -> tuple[Number, MemoryUnit]:
    """Scale a byte count into its best unit."""
    unit = best_unit(byte_count)
    return convert(byte_count, BYTE, unit), unit


def format_memory(byte_count: Number, precision: int = 2) -> str:
    """Render a byte count as e.g. ``"1 KB"``, ``"1.5 KB"`` or ``"7.68 GB"``.

    The value is rounded to ``precision`` decimals; trailing zeros and a
    dangling decimal point are dropped, so exact unit boundaries render as
    ``"1 <label>"``.
    """
    value, unit = scale(byte_count)
    rendered = f"{value:.{precision}f}"
    if "." in rendered:
        rendered = rendered.rstrip("0").rstrip(".")
    return f"{rendered} {unit.label}"
