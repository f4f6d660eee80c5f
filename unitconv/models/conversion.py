"""Per-request conversion data."""
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ConversionRequest:
    """A validated conversion form submission."""

    value: float
    from_symbol: str
    to_symbol: str


@dataclass(frozen=True)
class ConversionOutcome:
    """Result of one conversion attempt, either a value or an error message."""

    success: bool
    result: Optional[float] = None
    formatted_result: Optional[str] = None
    error: Optional[str] = None
    from_unit: Optional[str] = None
    to_unit: Optional[str] = None
    input_value: Optional[float] = None

    @classmethod
    def succeeded(cls, request: ConversionRequest, result: float,
                  formatted_result: str) -> 'ConversionOutcome':
        return cls(
            success=True,
            result=result,
            formatted_result=formatted_result,
            from_unit=request.from_symbol,
            to_unit=request.to_symbol,
            input_value=request.value,
        )

    @classmethod
    def failed(cls, error: str) -> 'ConversionOutcome':
        return cls(success=False, error=error)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for JSON responses, leaving out unset fields."""
        if not self.success:
            return {'success': False, 'error': self.error}
        return {
            'success': True,
            'result': self.result,
            'formattedResult': self.formatted_result,
            'fromUnit': self.from_unit,
            'toUnit': self.to_unit,
            'inputValue': self.input_value,
        }
