"""Embedder interfaces, options and backends."""

from embedkit.embeddings.client import Embedder, create_embedder, create_embedder_from_settings
from embedkit.embeddings.context import CallContext
from embedkit.embeddings.errors import (
    APIStatusError,
    DeadlineExceededError,
    EmbeddingError,
    InputRequiredError,
    MalformedResponseError,
)
from embedkit.embeddings.mock import MockEmbedder, MockEmbeddingMetadata
from embedkit.embeddings.openai import OpenAIEmbedder, OpenAIEmbeddingMetadata
from embedkit.embeddings.options import EmbeddingOption, build_call, with_batch, with_dimensions, with_input
from embedkit.embeddings.types import Embedding, EmbeddingCall, EmbeddingResponse, Usage

__all__ = [
    "APIStatusError",
    "CallContext",
    "DeadlineExceededError",
    "Embedder",
    "Embedding",
    "EmbeddingCall",
    "EmbeddingError",
    "EmbeddingOption",
    "EmbeddingResponse",
    "InputRequiredError",
    "MalformedResponseError",
    "MockEmbedder",
    "MockEmbeddingMetadata",
    "OpenAIEmbedder",
    "OpenAIEmbeddingMetadata",
    "Usage",
    "build_call",
    "create_embedder",
    "create_embedder_from_settings",
    "with_batch",
    "with_dimensions",
    "with_input",
]
