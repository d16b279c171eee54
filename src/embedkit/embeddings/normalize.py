"""Reshape raw backend entries into order-stable, float32 embeddings."""

from __future__ import annotations

import base64
from array import array
import binascii
import logging
import sys
from typing import Any, Mapping, Sequence

from embedkit.embeddings.errors import MalformedResponseError
from embedkit.embeddings.types import Embedding

logger = logging.getLogger(__name__)


def narrow_vector(raw: Any) -> array:
    """Convert a wire vector to 32-bit floats, keeping element order.

    Accepts a JSON list of numbers or a base64 string of little-endian
    float32 values. This is the single place where precision is reduced.
    """
    if isinstance(raw, list):
        try:
            return array("f", raw)
        except TypeError as exc:
            raise MalformedResponseError("Embedding vector contains non-numeric values.") from exc
    if isinstance(raw, str):
        try:
            data = base64.b64decode(raw, validate=True)
        except binascii.Error as exc:
            raise MalformedResponseError("Embedding vector is not valid base64.") from exc
        if len(data) % 4:
            raise MalformedResponseError("Base64 embedding length is not a multiple of 4 bytes.")
        vector = array("f")
        vector.frombytes(data)
        if sys.byteorder == "big":
            vector.byteswap()
        return vector
    raise MalformedResponseError(f"Unsupported embedding format: {type(raw).__name__}")


def normalize_embeddings(entries: Sequence[Mapping[str, Any]], expected_count: int) -> tuple[Embedding, ...]:
    embeddings: list[Embedding] = []
    for position, item in enumerate(entries):
        if not isinstance(item, Mapping):
            raise MalformedResponseError(f"Embedding entry {position} must be an object.")
        index = item.get("index")
        if index is None:
            index = position
        if isinstance(index, bool) or not isinstance(index, int):
            raise MalformedResponseError(f"Embedding entry {position} has a non-integer index.")
        embeddings.append(Embedding(vector=narrow_vector(item.get("embedding")), index=index))

    _check_indices(embeddings, expected_count)

    if any(embedding.index != position for position, embedding in enumerate(embeddings)):
        logger.debug("Backend returned %d embeddings out of order; reordered by index.", len(embeddings))
    ordered = sorted(embeddings, key=lambda embedding: embedding.index)
    return tuple(ordered)


def _check_indices(embeddings: list[Embedding], expected_count: int) -> None:
    if len(embeddings) != expected_count:
        raise MalformedResponseError(
            f"Expected {expected_count} embeddings, backend returned {len(embeddings)}."
        )
    seen: set[int] = set()
    for embedding in embeddings:
        if embedding.index < 0 or embedding.index >= expected_count:
            raise MalformedResponseError(
                f"Embedding index {embedding.index} is outside 0..{expected_count - 1}."
            )
        if embedding.index in seen:
            raise MalformedResponseError(f"Duplicate embedding index {embedding.index}.")
        seen.add(embedding.index)
