"""Booking creation against existing classes."""

import logging
from dataclasses import dataclass
from typing import Protocol

from class_booking.domain.bookings import BookingRecord
from class_booking.domain.dates import parse_iso_date
from class_booking.domain.errors import (
    BookingServiceError,
    ErrorReason,
    NotFoundError,
    ValidationError,
)
from class_booking.services.classes import MISSING_FIELDS_MESSAGE, ClassService

_logger = logging.getLogger(__name__)

INVALID_DATE_MESSAGE = "Invalid date format. Use YYYY-MM-DD"
DATE_OUT_OF_RANGE_MESSAGE = "Booking date is outside the class schedule"


class BookingRepository(Protocol):
    """Storage interface for bookings."""

    def add_booking(self, record: BookingRecord) -> None:
        """Append a booking record."""

    def list_bookings(self, class_id: str) -> list[BookingRecord]:
        """Return bookings for a class in insertion order."""


@dataclass
class BookingService:
    """Application service that validates bookings against their class."""

    class_service: ClassService
    repository: BookingRepository

    def create_booking(self, class_id: str, name: str, date: str) -> BookingRecord:
        """Validate submitted form values and store a new booking.

        Checks run in a fixed order: required fields, date format, class
        existence, then the class schedule. Classes are never removed, so a
        class found here is still valid when the booking is appended.
        """
        class_id = class_id.strip()
        name = name.strip()
        date = date.strip()

        for field, value in (("class_id", class_id), ("name", name), ("date", date)):
            if not value:
                raise _rejected(
                    ValidationError(
                        ErrorReason.MISSING_FIELD, MISSING_FIELDS_MESSAGE, field
                    )
                )

        day = parse_iso_date(date)
        if day is None:
            raise _rejected(
                ValidationError(ErrorReason.INVALID_DATE, INVALID_DATE_MESSAGE, "date")
            )

        try:
            booked_class = self.class_service.require_class(class_id)
        except NotFoundError as error:
            _rejected(error)
            raise
        if not booked_class.contains(day):
            raise _rejected(
                ValidationError(
                    ErrorReason.DATE_OUT_OF_RANGE, DATE_OUT_OF_RANGE_MESSAGE, "date"
                )
            )

        record = BookingRecord(class_id=booked_class.id, name=name, date=day)
        self.repository.add_booking(record)
        _logger.info("Booking created: class_id=%s date=%s", class_id, day)
        return record

    def list_bookings(self, class_id: str) -> list[BookingRecord]:
        """Return bookings for a class in creation order."""
        return self.repository.list_bookings(class_id)


def _rejected(error: BookingServiceError) -> BookingServiceError:
    _logger.info("Booking rejected: reason=%s field=%s", error.reason, error.field)
    return error
