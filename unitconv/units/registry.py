"""Read-only registry of units grouped by dimension."""
import logging
import math
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from unitconv.units.definitions import Dimension, Scale, UnitDefinition

logger = logging.getLogger(__name__)


class UnitRegistry:
    """
    Immutable lookup table from unit symbol to definition.

    The registry is built once and shared by every request. There is no
    write path after construction.
    """

    def __init__(self, dimensions: Iterable[Dimension], units: Iterable[UnitDefinition]):
        """
        Build and validate the registry.

        Args:
            dimensions: Every dimension a unit may refer to
            units: Unit definitions, in display order

        Raises:
            ValueError: If the table breaks a registry invariant
        """
        dimension_map: Dict[str, Dimension] = {}
        for dimension in dimensions:
            if dimension.tag in dimension_map:
                raise ValueError(f"Duplicate dimension: {dimension.tag}")
            dimension_map[dimension.tag] = dimension

        unit_map: Dict[str, UnitDefinition] = {}
        for unit in units:
            self._check_unit(unit, dimension_map)
            if unit.symbol in unit_map:
                raise ValueError(f"Duplicate unit symbol: {unit.symbol}")
            unit_map[unit.symbol] = unit

        self._dimensions = MappingProxyType(dimension_map)
        self._units = MappingProxyType(unit_map)
        logger.debug(f"Unit registry built with {len(unit_map)} units "
                     f"in {len(self.all_dimensions())} dimensions")

    @staticmethod
    def _check_unit(unit: UnitDefinition, dimension_map: Dict[str, Dimension]):
        dimension = dimension_map.get(unit.dimension)
        if dimension is None:
            raise ValueError(f"Unit {unit.symbol} refers to unknown dimension: {unit.dimension}")
        if not math.isfinite(unit.factor) or unit.factor <= 0:
            raise ValueError(f"Unit {unit.symbol} must have a positive factor, got {unit.factor}")
        if not math.isfinite(unit.offset):
            raise ValueError(f"Unit {unit.symbol} has a non-finite offset")
        if unit.offset != 0 and dimension.scale is not Scale.AFFINE:
            raise ValueError(
                f"Unit {unit.symbol} has an offset but {unit.dimension} is a ratio scale"
            )

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._units

    def __iter__(self) -> Iterator[UnitDefinition]:
        return iter(self._units.values())

    def __len__(self) -> int:
        return len(self._units)

    def lookup(self, symbol: str) -> Optional[UnitDefinition]:
        """Return the unit for a symbol, or None if it is not registered."""
        return self._units.get(symbol)

    def dimension(self, tag: str) -> Optional[Dimension]:
        return self._dimensions.get(tag)

    def units_in_dimension(self, tag: str) -> Tuple[UnitDefinition, ...]:
        """Return the units of a dimension in registration order (empty if unknown)."""
        return tuple(unit for unit in self._units.values() if unit.dimension == tag)

    def all_dimensions(self) -> Tuple[str, ...]:
        """Return every dimension tag used by a registered unit, first-seen order."""
        return tuple(dict.fromkeys(unit.dimension for unit in self._units.values()))

    def dimension_display_name(self, tag: str) -> str:
        """Return the human-friendly name of a dimension, or the tag itself."""
        dimension = self._dimensions.get(tag)
        return dimension.display_name if dimension else tag

    def units_by_dimension(self) -> Dict[str, List[Dict[str, str]]]:
        """
        Group unit symbols and names by dimension for the selection form.

        Returns:
            Mapping of dimension tag to a list of {'symbol', 'name'} entries
        """
        return {
            tag: [{'symbol': unit.symbol, 'name': unit.display_name}
                  for unit in self.units_in_dimension(tag)]
            for tag in self.all_dimensions()
        }
