"""Embedding request/response types."""

from __future__ import annotations

from array import array
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


@dataclass
class EmbeddingCall:
    model: str
    input: list[str] = field(default_factory=list)
    dimensions: int | None = None


@dataclass(frozen=True)
class Embedding:
    vector: array
    index: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "vector": list(self.vector),
        }


@dataclass(frozen=True)
class Usage:
    input_tokens: int = 0
    total_tokens: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "input_tokens": self.input_tokens,
            "total_tokens": self.total_tokens,
        }


@dataclass(frozen=True)
class EmbeddingResponse:
    embeddings: tuple[Embedding, ...]
    model: str
    usage: Usage
    provider_metadata: Mapping[str, Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "provider_metadata", MappingProxyType(dict(self.provider_metadata)))

    @property
    def dims(self) -> int:
        if not self.embeddings:
            return 0
        return len(self.embeddings[0].vector)

    def to_dict(self) -> dict[str, Any]:
        return {
            "model": self.model,
            "usage": self.usage.to_dict(),
            "embeddings": [embedding.to_dict() for embedding in self.embeddings],
        }
