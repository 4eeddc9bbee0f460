"""
Text Codec

Das Dateiformat ist zeilenbasiert:
    <name>,<id>,<email>,<geburtsdatum als epoch-millisekunden>

Beispiel:
    Ann,1,ann@x.com,946684800000

Hinweise:
- Kommas in den Feldern werden nicht maskiert. Ein Name mit Komma lässt sich
  also speichern, aber nicht wieder laden.
- Die erste fehlerhafte Zeile bricht das ganze Laden ab (kein Überspringen).
- Das Datum wird als Mitternacht UTC gespeichert.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timezone
from typing import Iterable, List

from .domain import StudentRecord
from .errors import ParseError

DELIMITER = ","
FIELD_COUNT = 4

_INT_RE = re.compile(r"[+-]?[0-9]+")
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def date_to_epoch_millis(value: date) -> int:
    """Mitternacht UTC des Datums in Millisekunden seit 1970."""
    delta = datetime(value.year, value.month, value.day, tzinfo=timezone.utc) - _EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1000


def epoch_millis_to_date(millis: int) -> date:
    """
    Kalenderdatum (UTC) eines Zeitpunkts.
    Zeitanteile werden abgeschnitten.
    """
    try:
        return date.fromordinal(_EPOCH.date().toordinal() + millis // 86_400_000)
    except (ValueError, OverflowError) as e:
        raise ParseError(f"Zeitstempel außerhalb des gültigen Bereichs: {millis}") from e


def _parse_int(raw: str, feld: str, line_number: int, line: str) -> int:
    """Strenge Ganzzahl: optionales Vorzeichen und Ziffern, sonst nichts."""
    if not _INT_RE.fullmatch(raw):
        raise ParseError(f"{feld} ist keine Ganzzahl: {raw!r}", line_number, line)
    return int(raw)


class TextCodec:
    """
    Wandelt Studenten <-> Text.
    Speicherformat und Anzeigeformat sind getrennt.
    """

    def serialize(self, records: Iterable[StudentRecord]) -> str:
        """Eine Zeile pro Student, jede mit Zeilenumbruch abgeschlossen."""
        return "".join(self.format_line(r) + "\n" for r in records)

    def format_line(self, record: StudentRecord) -> str:
        """Eine Zeile ohne Zeilenumbruch."""
        return DELIMITER.join(
            (
                record.name,
                str(record.student_id),
                record.email,
                str(date_to_epoch_millis(record.date_of_birth)),
            )
        )

    def deserialize(self, text: str) -> List[StudentRecord]:
        """
        Liest alle Zeilen.
        Getrennt wird nur an "\\n", ein "\\r" am Zeilenende (CRLF) wird entfernt.
        Andere Steuerzeichen bleiben Teil des Feldes.

        Raises:
            ParseError: bei der ersten fehlerhaften Zeile. Es gibt kein Teilergebnis.
        """
        return [
            self.parse_line(line, number)
            for number, line in enumerate(self.split_lines(text), 1)
        ]

    def split_lines(self, text: str) -> List[str]:
        """Zerlegt den Text in Zeilen, der letzte Zeilenumbruch erzeugt keine leere Zeile."""
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return [line[:-1] if line.endswith("\r") else line for line in lines]

    def parse_line(self, line: str, line_number: int = 0) -> StudentRecord:
        """
        Liest eine Zeile.
        Es müssen genau 4 Felder sein.
        """
        parts = line.split(DELIMITER)
        if len(parts) != FIELD_COUNT:
            raise ParseError(
                f"{FIELD_COUNT} Felder erwartet, {len(parts)} gefunden",
                line_number,
                line,
            )

        name, raw_id, email, raw_millis = parts
        student_id = _parse_int(raw_id, "ID", line_number, line)
        millis = _parse_int(raw_millis, "Geburtsdatum", line_number, line)

        try:
            geburtsdatum = epoch_millis_to_date(millis)
        except ParseError as e:
            raise ParseError(str(e), line_number, line) from e

        return StudentRecord(
            name=name,
            student_id=student_id,
            email=email,
            date_of_birth=geburtsdatum,
        )
