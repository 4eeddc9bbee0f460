"""
Persistence layer (Textdatei)

Hier liegt die Speicherung als Textdatei. Die Domain selbst bleibt frei von Datei-Details.
- RecordRepository: Schnittstelle (laden / speichern)
- TextRecordRepository: Datei-Repository
- FileStorage: Datei lesen/schreiben
- TextCodec (codec.py): Mapping zwischen Studenten und Text

Dateihandles werden immer mit "with" geöffnet und auf jedem Weg geschlossen.
Fehler (OSError, ParseError) werden hier nicht abgefangen, das macht der Service.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Protocol

from .codec import TextCodec
from .domain import StudentRecord


class RecordRepository(Protocol):
    """
    Schnittstelle für Persistenz.
    """
    def load(self, pfad: str) -> List[StudentRecord]:
        """Lädt alle Studenten aus einer Datei."""
        ...

    def save(self, pfad: str, records: Iterable[StudentRecord]) -> None:
        """Speichert alle Studenten in eine Datei."""
        ...


class FileStorage:
    """
    Klasse für Dateihandling beim Laden und Speichern.
    - Nur lesen/schreiben.
    - UTF-8 wird fest genutzt.
    """

    def read_text(self, pfad: str) -> str:
        """
        Liest eine Datei als Text.
        Fehlerbehandlung:
        - FileNotFoundError, wenn Datei fehlt
        - OSError bei sonstigen Leseproblemen
        - UnicodeDecodeError bei falscher Kodierung
        """
        with open(pfad, "r", encoding="utf-8", newline="") as f:
            return f.read()

    def write_text(self, pfad: str, content: str) -> None:
        """
        Schreibt Text in eine Datei.
        Zeilenumbrüche werden nicht übersetzt (immer \\n).
        """
        with open(pfad, "w", encoding="utf-8", newline="") as f:
            f.write(content)


class TextRecordRepository:
    """
    Repository für Textdateien.
    - FileStorage für Datei-Zugriff
    - TextCodec für Mapping
    """

    def __init__(
        self,
        storage: Optional[FileStorage] = None,
        codec: Optional[TextCodec] = None
    ) -> None:
        self._storage = storage or FileStorage()
        self._codec = codec or TextCodec()

    def load(self, pfad: str) -> List[StudentRecord]:
        """
        Liest die Datei und baut die Domain-Objekte.
        Die ganze Datei wird gelesen, bevor etwas zurückgegeben wird.
        """
        raw = self._storage.read_text(pfad)
        return self._codec.deserialize(raw)

    def save(self, pfad: str, records: Iterable[StudentRecord]) -> None:
        """
        Serialisiert und schreibt in die Datei.
        """
        raw = self._codec.serialize(records)
        self._storage.write_text(pfad, raw)
