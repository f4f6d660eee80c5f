"""Utility functions package."""
from unitconv.utils.formatter import format_result
from unitconv.utils.unit_converter import UnitConverter
from unitconv.utils.validator import ConversionFormValidator

__all__ = [
    'format_result',
    'UnitConverter',
    'ConversionFormValidator',
]
