"""Composable options for building an embedding call."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

from embedkit.embeddings.errors import InputRequiredError
from embedkit.embeddings.types import EmbeddingCall

EmbeddingOption = Callable[[EmbeddingCall], None]


def with_input(text: str) -> EmbeddingOption:
    def apply(call: EmbeddingCall) -> None:
        call.input = [text]

    return apply


def with_batch(texts: Sequence[str]) -> EmbeddingOption:
    if isinstance(texts, str):
        raise TypeError("with_batch expects a sequence of strings; use with_input for a single text.")

    def apply(call: EmbeddingCall) -> None:
        call.input = list(texts)

    return apply


def with_dimensions(n: int) -> EmbeddingOption:
    def apply(call: EmbeddingCall) -> None:
        call.dimensions = n

    return apply


def build_call(model_id: str, options: Iterable[EmbeddingOption]) -> EmbeddingCall:
    """Apply options in order to a fresh call and check it is dispatchable.

    Later options win over earlier ones touching the same field. The only
    check is that at least one input text is present.
    """
    call = EmbeddingCall(model=model_id, input=[])
    for option in options:
        option(call)
    if not call.input:
        raise InputRequiredError()
    return call
