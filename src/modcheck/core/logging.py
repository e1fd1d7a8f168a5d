"""Logging a stderr con Rich.

Sin timestamps: la salida es para una persona mirando la terminal, no para
agregadores. El nivel viene de `AppSettings.log_level` o de `--verbose`.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger("modcheck")


def configure_logging(level: str | int = "WARNING", *, console: Console | None = None) -> None:
    """Configura el logger raíz una vez por proceso (reinvocable en tests)."""

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    # httpx/httpcore loguean cada request en INFO; solo interesan en DEBUG.
    noisy_level = logging.DEBUG if root.level <= logging.DEBUG else logging.WARNING
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(noisy_level)

    logger.debug("logging configured at %s", logging.getLevelName(root.level))
