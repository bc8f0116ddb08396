"""Loggningsinställningar för appen.

En handler mot stderr på rotloggern. På DEBUG-nivå tas tidsstämpel och
loggernamn med i formatet.
"""

from __future__ import annotations

import logging
import sys

DEFAULT_FORMAT = "%(levelname)s %(name)s: %(message)s"
DEBUG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: int | str = logging.INFO, format_str: str | None = None) -> None:
    """Konfigurera rotloggern. Kan anropas igen för att byta nivå."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    if format_str is None:
        format_str = DEBUG_FORMAT if level <= logging.DEBUG else DEFAULT_FORMAT

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(format_str))
    root_logger.addHandler(console_handler)


__all__ = ["configure_logging"]
