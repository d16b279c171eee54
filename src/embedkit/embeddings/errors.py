"""Error types raised by embedders."""

from __future__ import annotations

from dataclasses import dataclass


class EmbeddingError(Exception):
    """Base error for failures raised by embedkit itself."""


class InputRequiredError(EmbeddingError, ValueError):
    def __init__(self, message: str = "embedding input is required") -> None:
        super().__init__(message)


class MalformedResponseError(EmbeddingError):
    pass


class DeadlineExceededError(EmbeddingError, TimeoutError):
    pass


@dataclass
class APIStatusError(RuntimeError):
    status_code: int
    response_text: str
    request_id: str | None
    request: dict

    def __str__(self) -> str:
        return f"APIStatusError(status={self.status_code}, request_id={self.request_id})"
