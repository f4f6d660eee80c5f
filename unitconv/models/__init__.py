"""Request and response models."""
from unitconv.models.conversion import ConversionOutcome, ConversionRequest

__all__ = [
    'ConversionRequest',
    'ConversionOutcome',
]
