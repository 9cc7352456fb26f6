"""Domain models for bookable classes."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ClassRecord:
    """Represents a created class."""

    id: str
    name: str
    start_date: date
    end_date: date
    capacity: int

    def contains(self, day: date) -> bool:
        """Return True when the day falls within the class schedule."""
        return self.start_date <= day <= self.end_date
