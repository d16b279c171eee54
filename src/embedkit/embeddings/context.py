"""Per-call context carrying deadlines and correlation ids."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
import time
from typing import Awaitable, TypeVar

from embedkit.embeddings.errors import DeadlineExceededError

T = TypeVar("T")


@dataclass(frozen=True)
class CallContext:
    """Caller-supplied context for a single ``embed`` call.

    ``deadline_ms`` is an absolute epoch timestamp in milliseconds. When it
    passes, the in-flight request is aborted and ``DeadlineExceededError`` is
    raised. ``request_id`` is forwarded to the backend as ``X-Request-Id``.
    """

    request_id: str | None = None
    deadline_ms: int | None = None

    @classmethod
    def with_timeout(cls, timeout_s: float, request_id: str | None = None) -> "CallContext":
        deadline_ms = int((time.time() + timeout_s) * 1000)
        return cls(request_id=request_id, deadline_ms=deadline_ms)

    def remaining_ms(self) -> int | None:
        if self.deadline_ms is None:
            return None
        now_ms = int(time.time() * 1000)
        return max(0, self.deadline_ms - now_ms)


def fail_if_expired(ctx: CallContext | None) -> None:
    if ctx is None:
        return
    remaining = ctx.remaining_ms()
    if remaining is not None and remaining <= 0:
        raise DeadlineExceededError("deadline already exceeded")


async def run_with_deadline(awaitable: Awaitable[T], ctx: CallContext | None) -> T:
    remaining = ctx.remaining_ms() if ctx is not None else None
    if remaining is None:
        return await awaitable
    try:
        return await asyncio.wait_for(awaitable, timeout=remaining / 1000.0)
    except asyncio.TimeoutError as exc:
        raise DeadlineExceededError("embedding request timed out") from exc
