"""
Controller layer

Der StudentController steuert die App. Er verbindet Service und View über den AppContext.

Aufgaben:
- Menü anzeigen und Eingaben verarbeiten
- Eingaben so lange abfragen, bis sie gültig sind
- Ergebnisse des Service anzeigen
"""

from __future__ import annotations

from typing import Callable, Dict, TypeVar

from .context import AppContext
from .domain import StudentRecord
from .parsing import ParseResult, parse_date, parse_int, parse_text

T = TypeVar("T")


class StudentController:
    """
    Hauptcontroller für die Studentenverwaltung.

    Aufgaben:
    - Menü-Schleife
    - Aufrufe an Service und View
    """

    def __init__(self, ctx: AppContext) -> None:
        self._ctx = ctx
        self._view = ctx.view
        self._service = ctx.service
        self._handlers: Dict[int, Callable[[], None]] = {
            1: self.add_student,
            2: self.remove_student,
            3: self.search_students,
            4: self.generate_report,
            5: self.save_records_to_file,
            6: self.load_records_from_file,
        }

    def starte_app(self) -> None:
        """
        Menü-Schleife bis "7) Beenden".
        Fehler einzelner Aktionen beenden die Schleife nicht.
        """
        while True:
            self._view.render_menue()
            choice = self._ask(
                "Auswahl: ",
                parse_int,
            )

            if choice == 7:
                self._view.show_message("Anwendung wird beendet.")
                break

            handler = self._handlers.get(choice)
            if handler is None:
                self._view.show_message("Ungültige Auswahl. Bitte erneut versuchen.")
                continue
            handler()

    def add_student(self) -> None:
        """Fragt alle Felder ab und legt den Studenten an."""
        fmt = self._ctx.config.input_date_format
        name = self._ask("Name: ", parse_text)
        student_id = self._ask("Student ID: ", parse_int)
        email = self._ask("E-Mail: ", parse_text)
        geburtsdatum = self._ask(
            "Geburtsdatum (TT/MM/JJJJ): ",
            lambda raw: parse_date(raw, fmt),
        )

        outcome = self._service.add_student(
            StudentRecord(
                name=name,
                student_id=student_id,
                email=email,
                date_of_birth=geburtsdatum,
            )
        )
        self._view.show_message(outcome.message)

    def remove_student(self) -> None:
        """Entfernt per ID."""
        student_id = self._ask("Student ID zum Entfernen: ", parse_int)
        outcome = self._service.remove_student(student_id)
        self._view.show_message(outcome.message)

    def search_students(self) -> None:
        """Sucht im Namen."""
        term = self._view.prompt("Suchbegriff: ").strip()
        treffer = self._service.search_students(term)
        if not treffer:
            self._view.show_message("Keine Studenten zum Suchbegriff gefunden.")
            return
        self._view.render_records("SUCHERGEBNIS", treffer)

    def generate_report(self) -> None:
        """Zeigt alle Studenten in Einfügereihenfolge."""
        self._view.render_report(self._service.generate_report())

    def save_records_to_file(self) -> None:
        pfad = self._ask("Dateiname zum Speichern: ", parse_text)
        outcome = self._service.save_records_to_file(pfad)
        self._view.show_message(outcome.message)

    def load_records_from_file(self) -> None:
        pfad = self._ask("Dateiname zum Laden: ", parse_text)
        outcome = self._service.load_records_from_file(pfad)
        self._view.show_message(outcome.message)

    def _ask(self, frage: str, parse: Callable[[str], ParseResult[T]]) -> T:
        """
        Fragt so lange, bis parse ein gültiges Ergebnis liefert.
        Die Fehlermeldung des Parsers wird angezeigt.
        """
        while True:
            result = parse(self._view.prompt(frage))
            if result.ok:
                return result.value  # type: ignore[return-value]
            self._view.show_message(result.error or "Ungültige Eingabe.")
