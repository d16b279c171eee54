"""Render helpers for the embedkit CLI."""

from __future__ import annotations

from typing import Mapping, Sequence

from rich import box
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from embedkit.embeddings.types import EmbeddingResponse
from embedkit.ui.console import get_console

_PREVIEW_VALUES = 3


def render_banner(title: str, subtitle: str) -> None:
    console = get_console()
    panel = Panel(
        Group(Text(subtitle, style="subtitle")),
        title=Text(title, style="step"),
        title_align="left",
        box=box.ROUNDED,
        border_style="border",
        padding=(0, 2),
        expand=True,
    )
    console.print(panel)


def render_info(text: str) -> None:
    console = get_console()
    console.print(text, style="info", markup=False)


def render_error(text: str) -> None:
    console = get_console()
    panel = Panel(
        Text(text, style="error"),
        box=box.ROUNDED,
        border_style="error",
        padding=(0, 2),
        expand=True,
    )
    console.print(panel)


def render_summary_table(rows: Mapping[str, str] | Sequence[tuple[str, str]], title: str = "Summary") -> None:
    console = get_console()
    table = Table(
        show_header=False,
        box=None,
        pad_edge=False,
    )
    table.add_column(style="label", no_wrap=True, justify="right")
    table.add_column(style="value")

    items = rows.items() if hasattr(rows, "items") else rows
    for key, value in items:
        table.add_row(Text(str(key), style="label"), Text(str(value), style="value"))

    panel = Panel(
        table,
        title=Text(title, style="step"),
        title_align="left",
        border_style="border",
        box=box.ROUNDED,
        padding=(0, 2),
        expand=True,
    )
    console.print(panel)


def render_embeddings_table(response: EmbeddingResponse, texts: Sequence[str]) -> None:
    console = get_console()
    table = Table(box=box.SIMPLE_HEAD, pad_edge=False, header_style="label")
    table.add_column("#", style="index", justify="right")
    table.add_column("Input", style="value", overflow="ellipsis", max_width=40)
    table.add_column("Dims", justify="right")
    table.add_column("Vector", style="label", no_wrap=True)

    for embedding in response.embeddings:
        preview = ", ".join(f"{value:.6f}" for value in embedding.vector[:_PREVIEW_VALUES])
        if len(embedding.vector) > _PREVIEW_VALUES:
            preview += ", ..."
        table.add_row(
            str(embedding.index),
            Text(texts[embedding.index]),
            str(len(embedding.vector)),
            Text(f"[{preview}]"),
        )
    console.print(table)
