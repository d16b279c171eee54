"""CLI entrypoint for embedkit."""

from __future__ import annotations

import asyncio
import json
from typing import List, Optional

import httpx
import typer

from embedkit.config import EmbedderSettings, load_settings
from embedkit.embeddings.client import create_embedder_from_settings
from embedkit.embeddings.errors import APIStatusError, EmbeddingError
from embedkit.embeddings.openai import OpenAIEmbedder
from embedkit.embeddings.options import EmbeddingOption, build_call, with_batch, with_dimensions
from embedkit.ui.console import configure_logging
from embedkit.ui.render import (
    render_banner,
    render_embeddings_table,
    render_error,
    render_info,
    render_summary_table,
)

app = typer.Typer(add_completion=False, help="Text embeddings through a uniform call shape.")


@app.callback(invoke_without_command=True)
def root(ctx: typer.Context) -> None:
    """embedkit command line."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)


@app.command("embed")
def embed_command(
    texts: Optional[List[str]] = typer.Argument(None, help="Texts to embed; one embedding per argument."),
    model: Optional[str] = typer.Option(None, "--model", "-m", help="Model identifier passed to the backend."),
    dimensions: Optional[int] = typer.Option(None, "--dimensions", "-d", min=1, help="Target embedding length."),
    backend: Optional[str] = typer.Option(None, "--backend", "-b", help="Backend: openai or mock."),
    as_json: bool = typer.Option(False, "--json", help="Print the normalized response as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log request and response details."),
) -> None:
    """Embed one or more texts and show the normalized result."""
    configure_logging(verbose)
    settings = _resolve_settings(backend=backend, model=model)
    inputs = list(texts or [])
    options = _build_options(inputs, dimensions)

    try:
        embedder = create_embedder_from_settings(settings)
        response = asyncio.run(embedder.embed(settings.model, *options))
    except (EmbeddingError, APIStatusError, httpx.HTTPError, ValueError) as exc:
        render_error(str(exc) or type(exc).__name__)
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(json.dumps(response.to_dict(), ensure_ascii=True))
        return

    render_banner("embedkit", f"{settings.backend} backend")
    render_summary_table(
        {
            "Model": response.model,
            "Embeddings": str(len(response.embeddings)),
            "Dims": str(response.dims),
            "Input tokens": str(response.usage.input_tokens),
            "Total tokens": str(response.usage.total_tokens),
            "Provider": ", ".join(sorted(response.provider_metadata)),
        }
    )
    render_embeddings_table(response, inputs)


@app.command("dry-run")
def dry_run_command(
    texts: Optional[List[str]] = typer.Argument(None, help="Texts to include in the request."),
    model: Optional[str] = typer.Option(None, "--model", "-m"),
    dimensions: Optional[int] = typer.Option(None, "--dimensions", "-d", min=1),
) -> None:
    """Print the request body the OpenAI-compatible backend would send, without network access."""
    settings = _resolve_settings(backend="openai", model=model)
    embedder = OpenAIEmbedder(
        base_url=settings.base_url,
        encoding_format=settings.encoding_format,
    )
    try:
        call = build_call(settings.model, _build_options(list(texts or []), dimensions))
    except EmbeddingError as exc:
        render_error(str(exc))
        raise typer.Exit(code=1) from exc

    typer.echo(json.dumps(embedder.describe_request(call), indent=2, sort_keys=True, ensure_ascii=True))
    if call.dimensions is None:
        render_info("dimensions omitted; the backend default applies.")


def _resolve_settings(*, backend: str | None, model: str | None) -> EmbedderSettings:
    try:
        return load_settings(backend=backend, model=model)
    except ValueError as exc:
        render_error(str(exc))
        raise typer.Exit(code=1) from exc


def _build_options(texts: list[str], dimensions: int | None) -> list[EmbeddingOption]:
    options: list[EmbeddingOption] = []
    if texts:
        options.append(with_batch(texts))
    if dimensions is not None:
        options.append(with_dimensions(dimensions))
    return options


def main() -> None:
    app()


if __name__ == "__main__":
    main()
