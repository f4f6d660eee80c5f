"""Presentation formatting for conversion results."""
import math

from unitconv.config.config import (
    SCIENTIFIC_DIGITS,
    SCIENTIFIC_LOWER_BOUND,
    SCIENTIFIC_UPPER_BOUND,
)

# (minimum magnitude, decimal places), checked in order
_DECIMAL_STEPS = (
    (1000, 0),
    (100, 1),
    (10, 2),
    (1, 3),
)


def decimal_places(magnitude: float) -> int:
    """Return how many fractional digits to show for a magnitude in normal range."""
    for threshold, places in _DECIMAL_STEPS:
        if magnitude >= threshold:
            return places
    return 4


def uses_scientific(magnitude: float) -> bool:
    return magnitude < SCIENTIFIC_LOWER_BOUND or magnitude > SCIENTIFIC_UPPER_BOUND


def format_result(result: float, unit: str) -> str:
    """
    Format a converted value for display.

    Very small or very large magnitudes use scientific notation, e.g.
    '1.234500e+07 km'. Everything else gets fewer decimals as it grows,
    e.g. '42.50 kg'.

    Args:
        result: Converted value
        unit: Unit symbol appended after the number

    Returns:
        Display string '<value> <unit>'
    """
    if not math.isfinite(result):
        return f"{result} {unit}"

    magnitude = abs(result)
    if uses_scientific(magnitude):
        return f"{result:.{SCIENTIFIC_DIGITS}e} {unit}"

    return f"{result:.{decimal_places(magnitude)}f} {unit}"
