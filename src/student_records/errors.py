"""Fehlerklassen der Studentenverwaltung."""

from __future__ import annotations


class RecordError(Exception):
    """Basisklasse für alle fachlichen Fehler dieses Pakets."""


class NotFoundError(RecordError):
    """Es gibt keinen Datensatz mit der gesuchten Matrikelnummer."""

    def __init__(self, student_id: int) -> None:
        super().__init__(f"Kein Student mit ID {student_id} gefunden.")
        self.student_id = student_id


class ParseError(RecordError):
    """
    Eine Zeile der Datei kann nicht gelesen werden.
    line_number ist 1-basiert.
    """

    def __init__(self, message: str, line_number: int = 0, line: str = "") -> None:
        if line_number:
            message = f"Zeile {line_number}: {message} ({line!r})"
        super().__init__(message)
        self.line_number = line_number
        self.line = line
