"""
Logging-Anbindung

Der Kern kennt nur den EventObserver.
Hier werden Ereignisse auf das Standard-Logging abgebildet und die Handler eingerichtet.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .events import EventKind, RecordEvent

LOGGER_NAME = "student_records"

_LEVELS = {
    EventKind.info: logging.INFO,
    EventKind.warning: logging.WARNING,
    EventKind.error: logging.ERROR,
}


class LoggingObserver:
    """Leitet Ereignisse an einen Logger weiter."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(LOGGER_NAME)

    def __call__(self, event: RecordEvent) -> None:
        exc_info = None
        if event.cause is not None:
            exc_info = (type(event.cause), event.cause, event.cause.__traceback__)
        self._logger.log(_LEVELS[event.kind], event.message, exc_info=exc_info)


def configure_logging(log_file: Optional[str], level: int = logging.INFO) -> logging.Logger:
    """
    Richtet den Logger ein.
    - Konsole (stderr)
    - Datei, wenn log_file gesetzt ist

    Kann die Datei nicht geöffnet werden, läuft die App nur mit Konsole weiter.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(fmt)
    logger.addHandler(console)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError:
            logger.error("Fehler beim Einrichten der Log-Datei: %s", log_file, exc_info=True)
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(fmt)
            logger.addHandler(file_handler)

    return logger
