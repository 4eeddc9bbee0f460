"""
Eingaben parsen

Die Funktionen werfen keine Exceptions.
Sie liefern ein ParseResult. Der Aufrufer fragt so lange nach, bis ok gesetzt ist.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ParseResult(Generic[T]):
    """Wert oder Fehlermeldung, nie beides."""
    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_int(raw: str) -> ParseResult[int]:
    """Ganzzahl aus Text."""
    s = raw.strip()
    try:
        return ParseResult(value=int(s))
    except ValueError:
        return ParseResult(error=f"Ungültige Eingabe. Bitte eine ganze Zahl eingeben: {s!r}")


def parse_date(raw: str, fmt: str = "%d/%m/%Y") -> ParseResult[date]:
    """
    Datum aus Text.
    Standardformat ist TT/MM/JJJJ.
    """
    s = raw.strip()
    try:
        return ParseResult(value=datetime.strptime(s, fmt).date())
    except ValueError:
        return ParseResult(error=f"Ungültiges Datum: {s!r}")


def parse_text(raw: str) -> ParseResult[str]:
    """Nicht leerer Text ohne Rand-Leerzeichen."""
    s = raw.strip()
    if not s:
        return ParseResult(error="Eingabe darf nicht leer sein.")
    return ParseResult(value=s)
