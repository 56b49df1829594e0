"""Shared console for the envseek CLI."""

from __future__ import annotations

from rich.console import Console

from envseek.ui.theme import THEME

_CONSOLE = Console(theme=THEME, highlight=False)


def get_console() -> Console:
    return _CONSOLE
