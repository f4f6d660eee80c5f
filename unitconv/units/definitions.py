"""Unit and dimension value types."""
import enum
from dataclasses import dataclass


class Scale(enum.Enum):
    """How a dimension's units map onto its base unit."""

    RATIO = 'ratio'  # base = value * factor
    AFFINE = 'affine'  # base = value * factor + offset


@dataclass(frozen=True)
class Dimension:
    """A physical quantity whose units are mutually convertible."""

    tag: str
    display_name: str
    scale: Scale = Scale.RATIO


@dataclass(frozen=True)
class UnitDefinition:
    """
    A single unit, expressed relative to its dimension's base unit.

    Attributes:
        symbol: Unique key, e.g. 'kg'
        factor: Multiplier from this unit to the base unit (positive)
        dimension: Dimension tag, e.g. 'mass'
        display_name: Full name, e.g. 'Kilogram'
        offset: Additive term to reach the base unit (affine scales only)
    """

    symbol: str
    factor: float
    dimension: str
    display_name: str
    offset: float = 0.0

    def to_base(self, value: float) -> float:
        return value * self.factor + self.offset

    def from_base(self, base_value: float) -> float:
        return (base_value - self.offset) / self.factor

    def to_dict(self) -> dict:
        """Describe the unit for the /unit-info endpoint."""
        return {
            'symbol': self.symbol,
            'name': self.display_name,
            'dimension': self.dimension,
            'factor': self.factor,
        }
