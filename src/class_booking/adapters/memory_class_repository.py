"""In-memory class repository."""

from dataclasses import dataclass, field
from threading import Lock

from class_booking.domain.classes import ClassRecord
from class_booking.services.classes import ClassRepository


@dataclass
class InMemoryClassRepository(ClassRepository):
    """Process-local class storage guarded by a lock."""

    _classes: list[ClassRecord] = field(default_factory=list)
    _lock: Lock = field(default_factory=Lock, repr=False)

    def add_class(self, record: ClassRecord) -> None:
        """Append a class record."""
        with self._lock:
            self._classes.append(record)

    def get_class(self, class_id: str) -> ClassRecord | None:
        """Return the first class with the given id, if present."""
        with self._lock:
            for record in self._classes:
                if record.id == class_id:
                    return record
        return None

    def list_classes(self) -> list[ClassRecord]:
        """Return a copy of all classes in insertion order."""
        with self._lock:
            return list(self._classes)
