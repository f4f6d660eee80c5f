"""Validation of submitted conversion forms."""
import math
from typing import Mapping, Optional, Sequence, Tuple

from unitconv.models.conversion import ConversionRequest
from unitconv.utils.errors import InvalidNumericInputError, MissingFieldError

REQUIRED_FIELDS = ('value', 'from', 'to')


class ConversionFormValidator:
    """Turn raw form fields into a ConversionRequest."""

    def __init__(self, required_fields: Sequence[str] = REQUIRED_FIELDS):
        self.required_fields = tuple(required_fields)

    def missing_fields(self, form: Mapping[str, str]) -> Tuple[str, ...]:
        """Return the required fields that are absent or blank."""
        return tuple(
            name for name in self.required_fields
            if not (form.get(name) or '').strip()
        )

    def validate_value(self, raw_value: str) -> Tuple[Optional[float], Optional[str]]:
        """
        Parse the numeric value field.

        Args:
            raw_value: Text submitted in the value field

        Returns:
            Tuple of (value, error_message)
        """
        try:
            value = float(raw_value.strip())
        except (AttributeError, TypeError, ValueError):
            return None, f"Invalid value: {raw_value!r} is not a number"

        if not math.isfinite(value):
            return None, f"Invalid value: {raw_value!r} is not a finite number"

        return value, None

    def parse(self, form: Mapping[str, str]) -> ConversionRequest:
        """
        Validate a form and build the conversion request.

        Raises:
            MissingFieldError: If a required field is absent or blank
            InvalidNumericInputError: If the value is not a finite number
        """
        missing = self.missing_fields(form)
        if missing:
            raise MissingFieldError(
                missing,
                f"All fields ({', '.join(self.required_fields)}) are required",
            )

        raw_value = form['value']
        value, error = self.validate_value(raw_value)
        if error:
            raise InvalidNumericInputError(raw_value, error)

        return ConversionRequest(
            value=value,
            from_symbol=form['from'].strip(),
            to_symbol=form['to'].strip(),
        )
