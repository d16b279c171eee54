"""Provider-agnostic text embeddings."""

from embedkit.embeddings import (
    Embedder,
    Embedding,
    EmbeddingResponse,
    Usage,
    create_embedder,
    with_batch,
    with_dimensions,
    with_input,
)

__all__ = [
    "Embedder",
    "Embedding",
    "EmbeddingResponse",
    "Usage",
    "create_embedder",
    "with_batch",
    "with_dimensions",
    "with_input",
]
