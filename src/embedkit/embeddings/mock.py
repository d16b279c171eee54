"""Mock embedder for offline runs and tests."""

from __future__ import annotations

from dataclasses import dataclass
import hashlib
import math
import random
from typing import Any

from embedkit.embeddings.context import CallContext, fail_if_expired
from embedkit.embeddings.normalize import normalize_embeddings
from embedkit.embeddings.options import EmbeddingOption, build_call
from embedkit.embeddings.types import EmbeddingResponse, Usage


@dataclass(frozen=True)
class MockEmbeddingMetadata:
    seeded: bool = True


class MockEmbedder:
    def __init__(self, *, name: str = "mock", default_dims: int = 1536) -> None:
        self._name = name
        self._default_dims = default_dims

    @property
    def name(self) -> str:
        return self._name

    async def embed(
        self,
        model_id: str,
        *options: EmbeddingOption,
        ctx: CallContext | None = None,
    ) -> EmbeddingResponse:
        call = build_call(model_id, options)
        fail_if_expired(ctx)
        dims = call.dimensions or self._default_dims

        entries: list[dict[str, Any]] = []
        for index, text in enumerate(call.input):
            entries.append({"index": index, "embedding": _mock_vector(call.model, text, dims)})

        input_tokens = sum(_mock_tokens(text) for text in call.input)
        return EmbeddingResponse(
            embeddings=normalize_embeddings(entries, len(call.input)),
            model=call.model,
            usage=Usage(input_tokens=input_tokens, total_tokens=input_tokens),
            provider_metadata={self._name: MockEmbeddingMetadata()},
        )


def _mock_vector(model: str, text: str, dims: int) -> list[float]:
    seed = int(hashlib.sha256((model + "|" + text).encode("utf-8")).hexdigest(), 16) % (2**32)
    rng = random.Random(seed)
    vec = [rng.gauss(0, 1) for _ in range(dims)]
    norm = math.sqrt(sum(value * value for value in vec)) or 1.0
    return [value / norm for value in vec]


def _mock_tokens(text: str) -> int:
    return max(1, len(text) // 4)
