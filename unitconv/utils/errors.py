"""Conversion error types.

Every error here is request scoped and recoverable. Each carries the HTTP
status the API layer answers with.
"""


class ConversionError(Exception):
    """Base class for errors reported back to the caller."""

    status_code = 400


class InvalidUnitError(ConversionError):
    """A unit symbol is not in the registry."""

    role = 'unit'

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"invalid {self.role}: {symbol}")


class InvalidSourceUnitError(InvalidUnitError):
    role = 'source unit'


class InvalidTargetUnitError(InvalidUnitError):
    role = 'target unit'


class DimensionMismatchError(ConversionError):
    """Source and target units measure different quantities."""

    def __init__(self, from_symbol: str, from_dimension: str,
                 to_symbol: str, to_dimension: str):
        self.from_symbol = from_symbol
        self.from_dimension = from_dimension
        self.to_symbol = to_symbol
        self.to_dimension = to_dimension
        super().__init__(
            f"cannot convert between different dimensions: "
            f"{from_symbol} ({from_dimension}) and {to_symbol} ({to_dimension})"
        )


class ResultOutOfRangeError(ConversionError):
    """The converted value overflows a float."""

    def __init__(self, value: float, from_symbol: str, to_symbol: str):
        self.value = value
        self.from_symbol = from_symbol
        self.to_symbol = to_symbol
        super().__init__(f"result out of range: {value} {from_symbol} in {to_symbol}")


class InvalidNumericInputError(ConversionError):
    """The value field is not a finite number."""

    def __init__(self, raw_value: str, message: str = None):
        self.raw_value = raw_value
        super().__init__(message or "Invalid value: must be a number")


class MissingFieldError(ConversionError):
    """One or more required fields are absent or blank."""

    def __init__(self, fields, message: str = None):
        self.fields = tuple(fields)
        if message is None:
            message = f"Missing required field(s): {', '.join(self.fields)}"
        super().__init__(message)


class UnknownDimensionError(ConversionError):
    def __init__(self, dimension: str):
        self.dimension = dimension
        super().__init__("Invalid dimension")


class MethodNotAllowedError(ConversionError):
    status_code = 405

    def __init__(self, allowed=('POST',)):
        self.allowed = tuple(allowed)
        super().__init__(f"Method not allowed. Please use {', '.join(self.allowed)}.")
