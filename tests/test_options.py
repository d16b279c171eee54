from __future__ import annotations

import pytest

from embedkit.embeddings.errors import EmbeddingError, InputRequiredError
from embedkit.embeddings.options import build_call, with_batch, with_dimensions, with_input


def test_build_call_seeds_model_and_applies_options_in_order() -> None:
    call = build_call("model-a", [with_input("hello"), with_dimensions(64)])
    assert call.model == "model-a"
    assert call.input == ["hello"]
    assert call.dimensions == 64


def test_later_input_option_discards_earlier_batch() -> None:
    call = build_call("m", [with_batch(["a", "b", "c"]), with_input("z")])
    assert call.input == ["z"]

    call = build_call("m", [with_input("z"), with_batch(["a", "b"])])
    assert call.input == ["a", "b"]


def test_batch_preserves_order_and_duplicates() -> None:
    texts = ["same", "other", "same"]
    call = build_call("m", [with_batch(texts)])
    assert call.input == ["same", "other", "same"]
    texts.append("late")
    assert call.input == ["same", "other", "same"]


def test_last_dimensions_wins() -> None:
    call = build_call("m", [with_input("x"), with_dimensions(512), with_dimensions(256)])
    assert call.dimensions == 256


def test_dimensions_absent_by_default() -> None:
    call = build_call("m", [with_input("x")])
    assert call.dimensions is None


def test_no_options_requires_input() -> None:
    with pytest.raises(InputRequiredError):
        build_call("m", [])


def test_empty_batch_requires_input() -> None:
    with pytest.raises(InputRequiredError) as exc_info:
        build_call("m", [with_dimensions(8), with_batch([])])
    assert isinstance(exc_info.value, EmbeddingError)
    assert isinstance(exc_info.value, ValueError)


def test_each_build_starts_from_fresh_call() -> None:
    options = [with_input("x")]
    first = build_call("m", options)
    second = build_call("m", options)
    assert first is not second
    first.input.append("mutated")
    assert second.input == ["x"]


def test_batch_rejects_a_bare_string() -> None:
    with pytest.raises(TypeError):
        with_batch("abc")
