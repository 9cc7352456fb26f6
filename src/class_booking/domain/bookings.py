"""Domain models for bookings."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class BookingRecord:
    """Represents a booking made against a class."""

    class_id: str
    name: str
    date: date
