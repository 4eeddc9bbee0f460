"""
Domain beinhaltet die Entity StudentRecord

Dieses Modul enthält nur die Fachdaten.
Es enthält keine UI- oder Datei-Logik.

- Die Entity ist eine unveränderliche Dataclass.
- Das Geburtsdatum ist ein reines Kalenderdatum (keine Uhrzeit, keine Zeitzone).
- Das Anzeigeformat (TT/MM/JJJJ) ist unabhängig vom Speicherformat.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

DISPLAY_DATE_FORMAT = "%d/%m/%Y"


@dataclass(frozen=True, slots=True)
class StudentRecord:
    """
    Ein Student.
    Die ID ist als eindeutig gedacht, wird aber nicht geprüft.
    """
    name: str
    student_id: int
    email: str
    date_of_birth: date

    def formatiertes_geburtsdatum(self) -> str:
        """Geburtsdatum im Anzeigeformat TT/MM/JJJJ."""
        return self.date_of_birth.strftime(DISPLAY_DATE_FORMAT)

    def report_line(self) -> str:
        """Eine Zeile für den Bericht."""
        return (
            f"Name: {self.name}, Student ID: {self.student_id}, "
            f"Email: {self.email}, Date of Birth: {self.formatiertes_geburtsdatum()}"
        )

    def __str__(self) -> str:
        return self.report_line()
