"""
Ereignisse für Beobachter

Der Kern schreibt nicht selbst ins Log.
Er meldet strukturierte Ereignisse (Art, Text, optionale Ursache) an einen Observer.
Welches Logging dahinter steckt, entscheidet die Anwendung (siehe main.py).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol


class EventKind(Enum):
    """Schwere eines Ereignisses."""
    info = "info"
    warning = "warning"
    error = "error"


@dataclass(frozen=True, slots=True)
class RecordEvent:
    """Ein Ereignis aus Store oder Service."""
    kind: EventKind
    message: str
    cause: Optional[BaseException] = None


class EventObserver(Protocol):
    """
    Schnittstelle für Beobachter.
    Jede Funktion mit passender Signatur reicht aus.
    """
    def __call__(self, event: RecordEvent) -> None:
        ...


class NullObserver:
    """Verwirft alle Ereignisse."""

    def __call__(self, event: RecordEvent) -> None:
        return None
