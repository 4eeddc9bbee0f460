"""
Record Store

Hält die Studenten im Speicher, in Einfügereihenfolge.
- Keine Prüfung auf doppelte IDs.
- Änderungen nur durch add/extend/remove, es gibt kein Update.
- Ereignisse gehen an den Observer, nicht direkt ins Log.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from .domain import StudentRecord
from .errors import NotFoundError
from .events import EventKind, EventObserver, NullObserver, RecordEvent


class RecordStore:
    """
    Die In-Memory-Sammlung.
    Wird nur vom Kontroll-Thread verändert, deshalb ohne Locking.
    """

    def __init__(self, observer: Optional[EventObserver] = None) -> None:
        self._records: List[StudentRecord] = []
        self._observer = observer or NullObserver()

    def add(self, record: StudentRecord) -> None:
        """Hängt einen Studenten an."""
        self._records.append(record)
        self._observer(RecordEvent(EventKind.info, f"Student hinzugefügt: {record.name}"))

    def extend(self, records: Iterable[StudentRecord]) -> int:
        """
        Hängt mehrere Studenten in Reihenfolge an.
        Liefert die Anzahl.
        Einzelne Ereignisse gibt es hier nicht, der Aufrufer meldet das Ergebnis.
        """
        neu = list(records)
        self._records.extend(neu)
        return len(neu)

    def take(self, student_id: int) -> StudentRecord:
        """
        Entfernt den ersten Studenten mit dieser ID und gibt ihn zurück.

        Raises:
            NotFoundError: Sammlung bleibt gleich. Dieselbe Instanz steht
            als Ursache in der Warnung an den Observer.
        """
        for index, record in enumerate(self._records):
            if record.student_id == student_id:
                del self._records[index]
                self._observer(RecordEvent(EventKind.info, f"Student entfernt: {record.name}"))
                return record

        err = NotFoundError(student_id)
        self._observer(RecordEvent(EventKind.warning, str(err), err))
        raise err

    def remove(self, student_id: int) -> bool:
        """
        Entfernt den ersten Studenten mit dieser ID.
        - Gefunden: True
        - Nicht gefunden: Sammlung bleibt gleich, Warnung, False
        """
        try:
            self.take(student_id)
        except NotFoundError:
            return False
        return True

    def search(self, term: str) -> List[StudentRecord]:
        """
        Sucht im Namen (Teilstring, Groß/Klein egal).
        E-Mail und andere Felder werden nicht durchsucht.
        """
        needle = term.casefold()
        return [r for r in self._records if needle in r.name.casefold()]

    def list_all(self) -> List[StudentRecord]:
        """Kopie aller Studenten in Einfügereihenfolge."""
        return list(self._records)

    def report_lines(self) -> List[str]:
        """Berichtszeilen aller Studenten."""
        return [r.report_line() for r in self._records]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[StudentRecord]:
        return iter(list(self._records))
