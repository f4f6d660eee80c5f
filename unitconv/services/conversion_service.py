"""Conversion workflow behind the /convert endpoint."""
import logging
from typing import Mapping, Optional

from unitconv.models.conversion import ConversionOutcome, ConversionRequest
from unitconv.utils.errors import ConversionError
from unitconv.utils.formatter import format_result
from unitconv.utils.unit_converter import UnitConverter
from unitconv.utils.validator import ConversionFormValidator

logger = logging.getLogger(__name__)


class ConversionService:
    """Validate a submitted form, convert the value and format the result."""

    def __init__(self, converter: UnitConverter,
                 validator: Optional[ConversionFormValidator] = None):
        """
        Initialize conversion service.

        Args:
            converter: Converter bound to the unit registry
            validator: Form validator (default: value/from/to fields)
        """
        self.converter = converter
        self.validator = validator or ConversionFormValidator()

    @property
    def registry(self):
        return self.converter.registry

    def convert(self, request: ConversionRequest) -> ConversionOutcome:
        """
        Convert a validated request.

        Raises:
            ConversionError: If either unit is unknown or the dimensions differ
        """
        result = self.converter.convert(request.value, request.from_symbol, request.to_symbol)
        return ConversionOutcome.succeeded(request, result, format_result(result, request.to_symbol))

    def convert_form(self, form: Mapping[str, str]) -> ConversionOutcome:
        """
        Run a full conversion from raw form fields.

        Validation and conversion errors are reported in the outcome
        rather than raised.
        """
        try:
            request = self.validator.parse(form)
            outcome = self.convert(request)
        except ConversionError as e:
            logger.warning(f"Conversion rejected: {e}")
            return ConversionOutcome.failed(str(e))

        logger.debug(f"Converted {request.value} {request.from_symbol} "
                     f"-> {outcome.formatted_result}")
        return outcome
