###     Logging (structlog-Konfiguration + Logger-Zugriff)
### __________________________________________________________________________
#
#  - Einmalige Konfiguration beim Start (CLI) über konfiguriere_logging()
#  - Ausgabeformat: Konsole (Default) oder JSON (ENV PRUEFBEREICHE_LOG_FORMAT=json)
#  - Level: INFO, im Debug-Modus DEBUG
#  - Bibliothekscode holt Logger nur über get_logger() und loggt auf debug-Level
#  - Import konfiguriert nichts: die Anwendung (CLI) bzw. der Aufrufer entscheidet


from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from .einstellungen import ENV_LOG_FORMAT


# sys.stderr wird pro Aufruf aufgelöst (umgeleitete Streams, z. B. CliRunner)
def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    return structlog.PrintLogger(sys.stderr)


# Konfiguriert structlog global (Konsole oder JSON, stderr)
def konfiguriere_logging(debug: bool = False, json: bool | None = None) -> None:
    if json is None:
        json = os.getenv(ENV_LOG_FORMAT, "").lower() == "json"

    level = logging.DEBUG if debug else logging.INFO

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if json:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


# Liefert einen Logger mit gebundenem Modulnamen
def get_logger(name: str) -> Any:
    return structlog.get_logger(logger_name=name)
