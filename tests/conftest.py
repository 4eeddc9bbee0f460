from datetime import date
from typing import List

import pytest

from student_records.domain import StudentRecord
from student_records.events import RecordEvent
from student_records.store import RecordStore


class CollectingObserver:
    """Merkt sich alle Ereignisse für Assertions."""

    def __init__(self) -> None:
        self.events: List[RecordEvent] = []

    def __call__(self, event: RecordEvent) -> None:
        self.events.append(event)


@pytest.fixture
def observer() -> CollectingObserver:
    return CollectingObserver()


@pytest.fixture
def store(observer: CollectingObserver) -> RecordStore:
    return RecordStore(observer)


@pytest.fixture
def ann() -> StudentRecord:
    return StudentRecord("Ann", 1, "ann@x.com", date(2000, 1, 1))


@pytest.fixture
def roster() -> List[StudentRecord]:
    """Drei Studenten, einer mit 'jo' nur in der E-Mail."""
    return [
        StudentRecord("John", 10, "john@uni.de", date(1999, 5, 17)),
        StudentRecord("Mia", 11, "jo.mia@uni.de", date(2001, 12, 31)),
        StudentRecord("Jolene", 12, "jolene@uni.de", date(1968, 2, 29)),
    ]
