"""In-memory booking repository."""

from dataclasses import dataclass, field
from threading import Lock

from class_booking.domain.bookings import BookingRecord
from class_booking.services.bookings import BookingRepository


@dataclass
class InMemoryBookingRepository(BookingRepository):
    """Process-local booking storage guarded by a lock."""

    _bookings: list[BookingRecord] = field(default_factory=list)
    _lock: Lock = field(default_factory=Lock, repr=False)

    def add_booking(self, record: BookingRecord) -> None:
        """Append a booking record."""
        with self._lock:
            self._bookings.append(record)

    def list_bookings(self, class_id: str) -> list[BookingRecord]:
        """Return bookings for a class in insertion order."""
        with self._lock:
            return [record for record in self._bookings if record.class_id == class_id]
