"""Dependency container wiring for the application."""

from dataclasses import dataclass

from class_booking.adapters.memory_booking_repository import (
    InMemoryBookingRepository,
)
from class_booking.adapters.memory_class_repository import InMemoryClassRepository
from class_booking.config import Settings
from class_booking.services.bookings import BookingService
from class_booking.services.classes import ClassService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    class_service: ClassService
    booking_service: BookingService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container with empty stores."""
    resolved_settings = settings or Settings()
    class_service = ClassService(InMemoryClassRepository())
    booking_service = BookingService(
        class_service=class_service,
        repository=InMemoryBookingRepository(),
    )
    return AppContainer(
        settings=resolved_settings,
        class_service=class_service,
        booking_service=booking_service,
    )
