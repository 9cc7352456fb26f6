"""Shared test fixtures."""

import pytest

from class_booking.adapters.memory_booking_repository import (
    InMemoryBookingRepository,
)
from class_booking.adapters.memory_class_repository import InMemoryClassRepository
from class_booking.config import Settings
from class_booking.containers import AppContainer
from class_booking.services.bookings import BookingService
from class_booking.services.classes import ClassService


@pytest.fixture
def settings() -> Settings:
    return Settings(app_title="Test Booking", log_level="DEBUG")


@pytest.fixture
def class_repository() -> InMemoryClassRepository:
    return InMemoryClassRepository()


@pytest.fixture
def booking_repository() -> InMemoryBookingRepository:
    return InMemoryBookingRepository()


@pytest.fixture
def class_service(class_repository: InMemoryClassRepository) -> ClassService:
    return ClassService(class_repository)


@pytest.fixture
def booking_service(
    class_service: ClassService, booking_repository: InMemoryBookingRepository
) -> BookingService:
    return BookingService(class_service=class_service, repository=booking_repository)


@pytest.fixture
def container(
    settings: Settings,
    class_service: ClassService,
    booking_service: BookingService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        class_service=class_service,
        booking_service=booking_service,
    )
