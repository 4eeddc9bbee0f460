"""
UI layer für die Console

Diese View zeigt Menü, Meldungen und Studentenlisten in der Konsole.
- Text formatieren und ausgeben
- Eingaben lesen
"""

from __future__ import annotations

from typing import Iterable, List

from .domain import StudentRecord


class ConsoleView:
    """
    View für die Konsole.
    """

    def render_menue(self) -> None:
        """Zeigt das Hauptmenü."""
        print()
        print("╔═══════════════════════════════════════╗")
        print("║   STUDENTENVERWALTUNG                 ║")
        print("╠═══════════════════════════════════════╣")
        print("║  1) Student hinzufügen                ║")
        print("║  2) Student entfernen                 ║")
        print("║  3) Studenten suchen                  ║")
        print("║  4) Bericht erstellen                 ║")
        print("║  5) In Datei speichern                ║")
        print("║  6) Aus Datei laden                   ║")
        print("║  7) Beenden                           ║")
        print("╚═══════════════════════════════════════╝")

    def prompt(self, frage: str) -> str:
        """
        Fragt den Nutzer nach Eingabe.
        """
        return input(frage)

    def show_message(self, text: str) -> None:
        """
        Gibt eine Nachricht aus.
        """
        print(text)

    def render_records(self, titel: str, records: Iterable[StudentRecord]) -> None:
        """Zeigt eine Liste von Studenten als Tabelle."""
        print(self.build_table(titel, records))

    def render_report(self, lines: List[str]) -> None:
        """Zeigt die Berichtszeilen."""
        print("Studentendaten:")
        for line in lines:
            print(line)

    def build_table(self, titel: str, records: Iterable[StudentRecord]) -> str:
        """
        Baut die Tabelle als Text.

        Spalten:
        - Name
        - ID
        - E-Mail
        - Geburtsdatum
        """
        rows = list(records)
        cols = [
            ("Name", max([4] + [len(r.name) for r in rows])),
            ("ID", max([2] + [len(str(r.student_id)) for r in rows])),
            ("E-Mail", max([6] + [len(r.email) for r in rows])),
            ("Geburtsdatum", 12),
        ]

        lines: List[str] = [f"=== {titel} ==="]
        lines.append(" │ ".join(name.ljust(width) for name, width in cols))
        lines.append("─┼─".join("─" * width for _, width in cols))

        for r in rows:
            lines.append(
                f"{r.name.ljust(cols[0][1])} │ "
                f"{str(r.student_id).rjust(cols[1][1])} │ "
                f"{r.email.ljust(cols[2][1])} │ "
                f"{r.formatiertes_geburtsdatum().ljust(cols[3][1])}"
            )

        return "\n".join(lines)
