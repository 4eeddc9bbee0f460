"""
Entry point für die Studentenverwaltung.
Dieses Modul startet die Anwendung.
"""

from __future__ import annotations

import sys
from typing import Optional

from .context import AppConfig, build_context
from .controller import StudentController
from .logging_setup import LoggingObserver, configure_logging


def main(config: Optional[AppConfig] = None) -> None:
    """
    Startpunkt der Anwendung.
    Ablauf:
    - Logging einrichten
    - Kontext bauen
    - Controller starten
    """
    config = config or AppConfig()
    try:
        logger = configure_logging(config.log_file, config.log_level)

        # Bausteine der App erstellen.
        ctx = build_context(config, observer=LoggingObserver(logger))
        controller = StudentController(ctx)

        # App starten.
        controller.starte_app()

    except (KeyboardInterrupt, EOFError):
        # Sauberer Abbruch per Strg+C oder Strg+D.
        print("\nAnwendung beendet.")
        sys.exit(0)


if __name__ == "__main__":
    main()
