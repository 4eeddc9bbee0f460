"""
Application/Use-Case layer

Der StudentService ist die Grenze zwischen Kern und Shell.
Alle Fehler werden hier abgefangen, als Ereignis gemeldet und als Outcome zurückgegeben.
Der Controller bekommt also nie eine unbehandelte Exception aus dem Kern.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .domain import StudentRecord
from .errors import NotFoundError, ParseError
from .events import EventKind, EventObserver, NullObserver, RecordEvent
from .persistence import RecordRepository, TextRecordRepository
from .store import RecordStore


@dataclass(frozen=True, slots=True)
class Outcome:
    """
    Ergebnis einer Operation für die Anzeige.
    count: betroffene Datensätze (z.B. geladene Zeilen)
    """
    success: bool
    message: str
    count: int = 0
    error: Optional[BaseException] = None


class StudentService:
    """
    Use-Cases der Studentenverwaltung.
    Verbindet Store, Repository und Observer.
    """

    def __init__(
        self,
        store: RecordStore,
        repo: Optional[RecordRepository] = None,
        observer: Optional[EventObserver] = None
    ) -> None:
        self._store = store
        self._repo = repo or TextRecordRepository()
        self._observer = observer or NullObserver()

    @property
    def store(self) -> RecordStore:
        return self._store

    def add_student(self, record: StudentRecord) -> Outcome:
        """Legt einen Studenten an."""
        self._store.add(record)
        return Outcome(True, f"Student hinzugefügt: {record.name}", count=1)

    def remove_student(self, student_id: int) -> Outcome:
        """
        Entfernt den ersten Studenten mit der ID.
        Fehlt die ID, ist das kein Abbruch, nur ein negatives Ergebnis.
        """
        try:
            self._store.take(student_id)
        except NotFoundError as e:
            return Outcome(False, str(e), error=e)
        return Outcome(True, f"Student mit ID {student_id} entfernt.", count=1)

    def search_students(self, term: str) -> List[StudentRecord]:
        """Namenssuche, leeres Ergebnis ist erlaubt."""
        return self._store.search(term)

    def generate_report(self) -> List[str]:
        """Berichtszeilen in Einfügereihenfolge."""
        return self._store.report_lines()

    def save_records_to_file(self, pfad: str) -> Outcome:
        """
        Speichert alle Studenten.
        OSError wird gemeldet, nicht weitergereicht.
        """
        records = self._store.list_all()
        try:
            self._repo.save(pfad, records)
        except OSError as e:
            msg = f"Fehler beim Speichern der Studentendaten in Datei: {pfad}"
            self._observer(RecordEvent(EventKind.error, msg, e))
            return Outcome(False, f"{msg} ({e})", error=e)

        msg = f"Studentendaten in Datei gespeichert: {pfad}"
        self._observer(RecordEvent(EventKind.info, msg))
        return Outcome(True, msg, count=len(records))

    def load_records_from_file(self, pfad: str) -> Outcome:
        """
        Lädt Studenten und hängt sie an die vorhandenen an (kein Ersetzen).

        Eine fehlerhafte Zeile bricht das ganze Laden ab, auch wenn die
        anderen Zeilen in Ordnung wären. Es wird dann nichts übernommen.
        """
        try:
            records = self._repo.load(pfad)
        except ParseError as e:
            msg = f"Fehlerhafte Daten in Datei: {pfad}"
            self._observer(RecordEvent(EventKind.error, msg, e))
            return Outcome(False, f"{msg} ({e})", error=e)
        except (OSError, UnicodeDecodeError) as e:
            msg = f"Fehler beim Laden der Studentendaten aus Datei: {pfad}"
            self._observer(RecordEvent(EventKind.error, msg, e))
            return Outcome(False, f"{msg} ({e})", error=e)

        count = self._store.extend(records)
        msg = f"Studentendaten aus Datei geladen: {pfad} ({count} Datensätze)"
        self._observer(RecordEvent(EventKind.info, msg))
        return Outcome(True, msg, count=count)
