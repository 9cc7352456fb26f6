"""Tests for class service."""

import logging
from datetime import date

import pytest

from class_booking.domain.errors import ErrorReason, NotFoundError, ValidationError
from class_booking.services.classes import ClassService


def test_create_class_returns_record_with_new_id(class_service: ClassService) -> None:
    record = class_service.create_class(
        name="Yoga", start_date="2024-01-01", end_date="2024-01-31", capacity="10"
    )

    assert record.id
    assert record.name == "Yoga"
    assert record.start_date == date(2024, 1, 1)
    assert record.end_date == date(2024, 1, 31)
    assert record.capacity == 10
    assert class_service.list_classes() == [record]


def test_create_class_rejects_start_after_end(class_service: ClassService) -> None:
    with pytest.raises(ValidationError) as exc_info:
        class_service.create_class(
            name="Yoga", start_date="2024-02-01", end_date="2024-01-01", capacity="10"
        )

    assert exc_info.value.reason == ErrorReason.INVALID_DATE_RANGE
    assert class_service.list_classes() == []


def test_create_class_accepts_single_day_range(class_service: ClassService) -> None:
    record = class_service.create_class(
        name="Workshop", start_date="2024-05-05", end_date="2024-05-05", capacity="1"
    )

    assert record.start_date == record.end_date


@pytest.mark.parametrize("capacity", ["-5", "0"])
def test_create_class_rejects_non_positive_capacity(
    class_service: ClassService, capacity: str
) -> None:
    with pytest.raises(ValidationError) as exc_info:
        class_service.create_class(
            name="Yoga",
            start_date="2024-01-01",
            end_date="2024-01-31",
            capacity=capacity,
        )

    assert exc_info.value.reason == ErrorReason.INVALID_CAPACITY
    assert exc_info.value.field == "capacity"


@pytest.mark.parametrize(
    ("fields", "missing"),
    [
        ({"name": ""}, "name"),
        ({"start_date": ""}, "start_date"),
        ({"end_date": "   "}, "end_date"),
        ({"capacity": ""}, "capacity"),
        ({"capacity": "ten"}, "capacity"),
        ({"capacity": "2.5"}, "capacity"),
        ({"capacity": "9" * 5000}, "capacity"),
        ({"capacity": "99999999999999999999"}, "capacity"),
    ],
)
def test_create_class_reports_missing_field(
    class_service: ClassService, fields: dict[str, str], missing: str
) -> None:
    values = {
        "name": "Yoga",
        "start_date": "2024-01-01",
        "end_date": "2024-01-31",
        "capacity": "10",
    }
    values.update(fields)

    with pytest.raises(ValidationError) as exc_info:
        class_service.create_class(**values)

    assert exc_info.value.reason == ErrorReason.MISSING_FIELD
    assert exc_info.value.field == missing


@pytest.mark.parametrize(
    ("start_date", "end_date", "field"),
    [
        ("2024/01/01", "2024-01-31", "start_date"),
        ("2024-01-01", "Jan 31", "end_date"),
        ("2024-02-30", "2024-03-01", "start_date"),
    ],
)
def test_create_class_rejects_unparseable_dates(
    class_service: ClassService, start_date: str, end_date: str, field: str
) -> None:
    with pytest.raises(ValidationError) as exc_info:
        class_service.create_class(
            name="Yoga", start_date=start_date, end_date=end_date, capacity="10"
        )

    assert exc_info.value.reason == ErrorReason.INVALID_DATE_RANGE
    assert exc_info.value.field == field


def test_capacity_is_checked_before_dates(class_service: ClassService) -> None:
    with pytest.raises(ValidationError) as exc_info:
        class_service.create_class(
            name="Yoga", start_date="bad", end_date="bad", capacity="0"
        )

    assert exc_info.value.reason == ErrorReason.INVALID_CAPACITY


def test_created_ids_are_unique(class_service: ClassService) -> None:
    ids = {
        class_service.create_class(
            name=f"Class {index}",
            start_date="2024-01-01",
            end_date="2024-12-31",
            capacity="5",
        ).id
        for index in range(200)
    }

    assert len(ids) == 200


def test_repeated_lookups_return_identical_records(
    class_service: ClassService,
) -> None:
    record = class_service.create_class(
        name="Pilates", start_date="2024-03-01", end_date="2024-03-31", capacity="8"
    )

    first = class_service.get_class(record.id)
    second = class_service.get_class(record.id)

    assert first == second == record
    assert class_service.list_classes() == [record]


def test_get_class_returns_none_for_unknown_id(class_service: ClassService) -> None:
    assert class_service.get_class("nonexistent") is None


def test_require_class_raises_for_unknown_id(class_service: ClassService) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        class_service.require_class("nonexistent")

    assert exc_info.value.reason == ErrorReason.CLASS_NOT_FOUND
    assert exc_info.value.to_payload() == {
        "error": "Class not found",
        "reason": "class_not_found",
        "field": "class_id",
    }


def test_rejection_is_logged_with_reason(
    class_service: ClassService, caplog, monkeypatch
) -> None:
    monkeypatch.setattr(logging.getLogger("class_booking"), "propagate", True)
    caplog.set_level(logging.INFO, logger="class_booking")

    with pytest.raises(ValidationError):
        class_service.create_class(
            name="Yoga", start_date="2024-01-01", end_date="2024-01-31", capacity="0"
        )

    assert "Class rejected: reason=invalid_capacity field=capacity" in caplog.text
