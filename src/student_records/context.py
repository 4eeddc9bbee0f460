"""
Konfiguration und Anwendungskontext

Alle Bausteine werden beim Start einmal erzeugt und im AppContext gebündelt.
Es gibt keine globalen Instanzen.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .codec import TextCodec
from .events import EventObserver, NullObserver
from .persistence import FileStorage, TextRecordRepository
from .service import StudentService
from .store import RecordStore
from .view import ConsoleView


@dataclass(slots=True)
class AppConfig:
    """Einstellungen der Anwendung (feste Defaults, keine CLI-Flags)."""
    log_file: Optional[str] = "application.log"
    log_level: int = logging.DEBUG
    input_date_format: str = "%d/%m/%Y"


@dataclass(slots=True)
class AppContext:
    """Alles, was Controller und Handler brauchen."""
    config: AppConfig
    store: RecordStore
    service: StudentService
    view: ConsoleView
    observer: EventObserver = field(default_factory=NullObserver)


def build_context(
    config: Optional[AppConfig] = None,
    observer: Optional[EventObserver] = None,
    view: Optional[ConsoleView] = None
) -> AppContext:
    """
    Baut den Kontext.
    - Store und Service teilen sich denselben Observer.
    """
    config = config or AppConfig()
    observer = observer or NullObserver()

    store = RecordStore(observer)
    repo = TextRecordRepository(FileStorage(), TextCodec())
    service = StudentService(store, repo, observer)

    return AppContext(
        config=config,
        store=store,
        service=service,
        view=view or ConsoleView(),
        observer=observer,
    )
