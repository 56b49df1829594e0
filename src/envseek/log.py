"""Logging setup for the envseek CLI.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed here, by the CLI, and nowhere else.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from envseek.ui.console import get_console

LOGGER_NAME = "envseek"


def configure_logging(verbose: bool = False) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = RichHandler(console=get_console(), show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger
