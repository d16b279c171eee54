"""Canned embeddings backend for tests."""

from __future__ import annotations

import json
from typing import Any, Awaitable, Callable

import httpx

BASE_URL = "https://api.example.test/v1"
MODEL = "text-embedding-3-small"


def embeddings_payload(
    entries: list[tuple[int, list[float]]],
    *,
    model: str = MODEL,
    prompt_tokens: int = 5,
    total_tokens: int = 5,
) -> dict[str, Any]:
    return {
        "object": "list",
        "data": [
            {"object": "embedding", "index": index, "embedding": vector}
            for index, vector in entries
        ],
        "model": model,
        "usage": {"prompt_tokens": prompt_tokens, "total_tokens": total_tokens},
    }


class StubBackend:
    """Records outgoing requests and replies with a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload: Any = embeddings_payload([(0, [0.1, 0.2])])
        self.headers: dict[str, str] = {}
        self.before_reply: Callable[[httpx.Request], Awaitable[None]] | None = None

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.before_reply is not None:
            await self.before_reply(request)
        if isinstance(self.payload, bytes):
            return httpx.Response(self.status_code, content=self.payload, headers=self.headers)
        return httpx.Response(self.status_code, json=self.payload, headers=self.headers)

    @property
    def bodies(self) -> list[dict[str, Any]]:
        return [json.loads(request.content) for request in self.requests]
