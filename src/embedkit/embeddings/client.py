"""Embedder interface and factory."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from embedkit.embeddings.context import CallContext
from embedkit.embeddings.options import EmbeddingOption
from embedkit.embeddings.types import EmbeddingResponse

if TYPE_CHECKING:
    from embedkit.config import EmbedderSettings


@runtime_checkable
class Embedder(Protocol):
    async def embed(
        self,
        model_id: str,
        *options: EmbeddingOption,
        ctx: CallContext | None = None,
    ) -> EmbeddingResponse:
        """Embed every configured input text, ordered by input position."""


def create_embedder(backend: str, **kwargs: Any) -> Embedder:
    if backend == "mock":
        from embedkit.embeddings.mock import MockEmbedder

        return MockEmbedder(**kwargs)
    if backend == "openai":
        from embedkit.embeddings.openai import OpenAIEmbedder

        if not kwargs.get("api_key"):
            raise ValueError("An API key is required for the openai embeddings backend.")
        return OpenAIEmbedder(**kwargs)
    raise ValueError(f"Unsupported embeddings backend: {backend}")


def create_embedder_from_settings(settings: EmbedderSettings) -> Embedder:
    if settings.backend == "mock":
        return create_embedder("mock")
    return create_embedder(
        settings.backend,
        api_key=settings.api_key,
        base_url=settings.base_url,
        headers=settings.headers,
        timeout_s=settings.timeout_s,
        encoding_format=settings.encoding_format,
    )
