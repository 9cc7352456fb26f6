"""Pydantic response models for the JSON endpoints."""

from pydantic import BaseModel

from class_booking.domain.bookings import BookingRecord
from class_booking.domain.classes import ClassRecord
from class_booking.domain.dates import format_iso_date


class ClassOut(BaseModel):
    """Class payload with ISO date strings."""

    id: str
    name: str
    start_date: str
    end_date: str
    capacity: int

    @classmethod
    def from_record(cls, record: ClassRecord) -> "ClassOut":
        """Build the payload from a stored class."""
        return cls(
            id=record.id,
            name=record.name,
            start_date=format_iso_date(record.start_date),
            end_date=format_iso_date(record.end_date),
            capacity=record.capacity,
        )


class BookingOut(BaseModel):
    """Booking payload with an ISO date string."""

    class_id: str
    name: str
    date: str

    @classmethod
    def from_record(cls, record: BookingRecord) -> "BookingOut":
        """Build the payload from a stored booking."""
        return cls(
            class_id=record.class_id,
            name=record.name,
            date=format_iso_date(record.date),
        )


class ErrorOut(BaseModel):
    """Error payload returned for rejected requests."""

    error: str
    reason: str
    field: str | None = None
