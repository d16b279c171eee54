"""Rich theme for the embedkit CLI."""

from __future__ import annotations

from rich.theme import Theme

THEME = Theme(
    {
        "accent": "bright_blue",
        "step": "bold bright_blue",
        "subtitle": "dim",
        "info": "dim",
        "warning": "red3",
        "error": "bold red3",
        "border": "bright_black",
        "label": "dim",
        "value": "white",
        "index": "cyan",
        "logging.level.debug": "dim",
    }
)
