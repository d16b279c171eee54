"""Shared console and logging setup for the embedkit CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from embedkit.ui.theme import THEME

_CONSOLE = Console(theme=THEME, highlight=False)
_ERR_CONSOLE = Console(theme=THEME, highlight=False, stderr=True)


def get_console() -> Console:
    return _CONSOLE


def configure_logging(verbose: bool) -> None:
    handler = RichHandler(console=_ERR_CONSOLE, show_path=False, markup=False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        handlers=[handler],
        force=True,
    )
    logging.getLogger("httpx").setLevel(logging.INFO if verbose else logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
