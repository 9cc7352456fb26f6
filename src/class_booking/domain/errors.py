"""Domain errors raised by the booking services."""

from enum import StrEnum


class ErrorReason(StrEnum):
    """Machine-readable reason codes for rejected requests."""

    MISSING_FIELD = "missing_field"
    INVALID_CAPACITY = "invalid_capacity"
    INVALID_DATE_RANGE = "invalid_date_range"
    INVALID_DATE = "invalid_date"
    DATE_OUT_OF_RANGE = "date_out_of_range"
    CLASS_NOT_FOUND = "class_not_found"


class BookingServiceError(Exception):
    """Base error carrying a reason code and the offending field."""

    def __init__(
        self, reason: ErrorReason, message: str, field: str | None = None
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.message = message
        self.field = field

    def to_payload(self) -> dict[str, str | None]:
        """Return the JSON error body for this error."""
        return {"error": self.message, "reason": str(self.reason), "field": self.field}


class ValidationError(BookingServiceError):
    """Raised when submitted input is missing or malformed."""


class NotFoundError(BookingServiceError):
    """Raised when a referenced entity does not exist."""
