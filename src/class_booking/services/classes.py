"""Class creation and lookup."""

import logging
import re
from dataclasses import dataclass
from typing import Protocol
from uuid import uuid4

from class_booking.domain.classes import ClassRecord
from class_booking.domain.dates import parse_iso_date
from class_booking.domain.errors import (
    BookingServiceError,
    ErrorReason,
    NotFoundError,
    ValidationError,
)

_logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]{1,19}")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

MISSING_FIELDS_MESSAGE = "Missing or invalid fields"
INVALID_CAPACITY_MESSAGE = "Invalid capacity"
INVALID_DATE_RANGE_MESSAGE = "Invalid date range. Use YYYY-MM-DD format"
CLASS_NOT_FOUND_MESSAGE = "Class not found"


class ClassRepository(Protocol):
    """Storage interface for classes."""

    def add_class(self, record: ClassRecord) -> None:
        """Append a class record."""

    def get_class(self, class_id: str) -> ClassRecord | None:
        """Return the first class with the given id, if present."""

    def list_classes(self) -> list[ClassRecord]:
        """Return all classes in insertion order."""


@dataclass
class ClassService:
    """Application service that validates and stores classes."""

    repository: ClassRepository

    def create_class(
        self, name: str, start_date: str, end_date: str, capacity: str
    ) -> ClassRecord:
        """Validate submitted form values and store a new class."""
        name = name.strip()
        start_date = start_date.strip()
        end_date = end_date.strip()
        capacity = capacity.strip()

        for field, value in (
            ("name", name),
            ("start_date", start_date),
            ("end_date", end_date),
            ("capacity", capacity),
        ):
            if not value:
                raise _rejected(
                    ValidationError(
                        ErrorReason.MISSING_FIELD, MISSING_FIELDS_MESSAGE, field
                    )
                )

        seats = int(capacity) if _INTEGER.fullmatch(capacity) else None
        if seats is None or not _INT64_MIN <= seats <= _INT64_MAX:
            raise _rejected(
                ValidationError(
                    ErrorReason.MISSING_FIELD, MISSING_FIELDS_MESSAGE, "capacity"
                )
            )
        if seats <= 0:
            raise _rejected(
                ValidationError(
                    ErrorReason.INVALID_CAPACITY, INVALID_CAPACITY_MESSAGE, "capacity"
                )
            )

        start = parse_iso_date(start_date)
        end = parse_iso_date(end_date)
        if start is None or end is None or start > end:
            field = "end_date" if start is not None and end is None else "start_date"
            raise _rejected(
                ValidationError(
                    ErrorReason.INVALID_DATE_RANGE, INVALID_DATE_RANGE_MESSAGE, field
                )
            )

        record = ClassRecord(
            id=str(uuid4()),
            name=name,
            start_date=start,
            end_date=end,
            capacity=seats,
        )
        self.repository.add_class(record)
        _logger.info("Class created: id=%s start=%s end=%s", record.id, start, end)
        return record

    def get_class(self, class_id: str) -> ClassRecord | None:
        """Return a class by id, or None when it does not exist."""
        return self.repository.get_class(class_id)

    def require_class(self, class_id: str) -> ClassRecord:
        """Return a class by id, raising NotFoundError when it does not exist."""
        record = self.repository.get_class(class_id)
        if record is None:
            raise NotFoundError(
                ErrorReason.CLASS_NOT_FOUND, CLASS_NOT_FOUND_MESSAGE, "class_id"
            )
        return record

    def list_classes(self) -> list[ClassRecord]:
        """Return all classes in creation order."""
        return self.repository.list_classes()


def _rejected(error: BookingServiceError) -> BookingServiceError:
    _logger.info("Class rejected: reason=%s field=%s", error.reason, error.field)
    return error
