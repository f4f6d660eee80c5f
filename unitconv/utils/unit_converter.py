"""Unit conversion utilities."""
import math

from unitconv.config.config import CONVERSION_ROUND_DIGITS
from unitconv.units.definitions import Scale
from unitconv.units.registry import UnitRegistry
from unitconv.utils.errors import (
    DimensionMismatchError,
    InvalidSourceUnitError,
    InvalidTargetUnitError,
    ResultOutOfRangeError,
)


def round_drift(value: float, digits: int = CONVERSION_ROUND_DIGITS) -> float:
    """
    Round away multiply/divide noise.

    Keeps `digits` places after the decimal point, or `digits` significant
    digits when the value is too small to survive that. Zero and non-finite
    values pass through.
    """
    if value == 0 or not math.isfinite(value):
        return value
    return round(value, max(digits, digits - 1 - math.floor(math.log10(abs(value)))))


class UnitConverter:
    """Convert values between units of the same dimension."""

    def __init__(self, registry: UnitRegistry):
        """
        Initialize converter.

        Args:
            registry: Unit registry to resolve symbols against
        """
        self.registry = registry

    def convert(self, value: float, from_unit: str, to_unit: str) -> float:
        """
        Convert a value from one unit to another.

        Conversion goes through the dimension's base unit. Temperature-like
        (affine) dimensions apply each unit's offset on the way in and out.

        Args:
            value: Value expressed in from_unit
            from_unit: Source unit symbol
            to_unit: Target unit symbol

        Returns:
            Converted value

        Raises:
            InvalidSourceUnitError: If from_unit is not registered
            InvalidTargetUnitError: If to_unit is not registered
            DimensionMismatchError: If the units measure different quantities
            ResultOutOfRangeError: If the result does not fit in a float
        """
        source = self.registry.lookup(from_unit)
        if source is None:
            raise InvalidSourceUnitError(from_unit)

        target = self.registry.lookup(to_unit)
        if target is None:
            raise InvalidTargetUnitError(to_unit)

        if source.dimension != target.dimension:
            raise DimensionMismatchError(from_unit, source.dimension, to_unit, target.dimension)

        if from_unit == to_unit:
            return value

        dimension = self.registry.dimension(source.dimension)
        if dimension.scale is Scale.AFFINE:
            result = target.from_base(source.to_base(value))
        elif dimension.scale is Scale.RATIO:
            result = value * source.factor / target.factor
        else:
            raise ValueError(f"Unsupported scale for {dimension.tag}: {dimension.scale}")

        if not math.isfinite(result):
            raise ResultOutOfRangeError(value, from_unit, to_unit)

        if dimension.scale is Scale.AFFINE:
            # Offsets cancel around zero, so drift is absolute rather than relative
            return round(result, CONVERSION_ROUND_DIGITS)
        return round_drift(result)
