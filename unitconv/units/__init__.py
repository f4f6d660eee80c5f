"""Unit registry package."""
from unitconv.units.definitions import Dimension, Scale, UnitDefinition
from unitconv.units.registry import UnitRegistry
from unitconv.units.defaults import build_default_registry

__all__ = [
    'Dimension',
    'Scale',
    'UnitDefinition',
    'UnitRegistry',
    'build_default_registry',
]
