from typing import Optional

from .validation import ValidationResult


class BookingValidationError(ValueError):
    """Client-input error. The message is the first validation error."""

    def __init__(self, message: str, result: Optional[ValidationResult] = None):
        super().__init__(message)
        self.result = result

    @classmethod
    def from_result(cls, result: ValidationResult) -> "BookingValidationError":
        return cls(result.errors[0] if result.errors else "Validation failed", result)
