"""OpenAI-compatible embeddings backend."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import time
from typing import Any, Mapping

import httpx

from embedkit.embeddings.context import CallContext, fail_if_expired, run_with_deadline
from embedkit.embeddings.errors import APIStatusError, MalformedResponseError
from embedkit.embeddings.normalize import normalize_embeddings
from embedkit.embeddings.options import EmbeddingOption, build_call
from embedkit.embeddings.types import EmbeddingCall, EmbeddingResponse, Usage

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com/v1"
_RESERVED_HEADERS = {"authorization", "content-type"}


@dataclass(frozen=True)
class OpenAIEmbeddingMetadata:
    request_id: str | None
    latency_ms: int


class OpenAIEmbedder:
    """Embedder speaking the OpenAI ``/embeddings`` wire format.

    Settings are fixed at construction and only read afterwards, so one
    instance can serve concurrent ``embed`` calls. When ``http_client`` is
    omitted a short-lived client with retries disabled is created per call.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        headers: Mapping[str, str] | None = None,
        http_client: httpx.AsyncClient | None = None,
        name: str = "openai",
        timeout_s: float = 60.0,
        encoding_format: str | None = None,
    ) -> None:
        self._api_key = api_key or ""
        self._base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self._headers = dict(headers or {})
        self._http_client = http_client
        self._name = name
        self._timeout_s = timeout_s
        self._encoding_format = encoding_format

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

        body = self.describe_request(call)
        headers = self._request_headers(ctx)
        url = f"{self._base_url}/embeddings"
        logger.debug(
            "Embedding request model=%s inputs=%d dimensions=%s",
            call.model,
            len(call.input),
            call.dimensions,
        )

        start = time.monotonic()
        response = await run_with_deadline(self._post(url, body, headers), ctx)
        latency_ms = int((time.monotonic() - start) * 1000)
        request_id = _extract_request_id(response.headers)
        logger.debug(
            "Embedding response status=%d latency_ms=%d request_id=%s",
            response.status_code,
            latency_ms,
            request_id,
        )

        if response.status_code < 200 or response.status_code >= 300:
            raise APIStatusError(
                status_code=response.status_code,
                response_text=response.text,
                request_id=request_id,
                request=_sanitize_request(body, headers),
            )

        payload = response.json()
        if not isinstance(payload, dict):
            raise MalformedResponseError("Embeddings response must be a JSON object.")
        data = payload.get("data")
        if not isinstance(data, list):
            raise MalformedResponseError("Embeddings response is missing the 'data' list.")

        return EmbeddingResponse(
            embeddings=normalize_embeddings(data, len(call.input)),
            model=str(payload.get("model") or call.model),
            usage=_extract_usage(payload.get("usage")),
            provider_metadata={
                self._name: OpenAIEmbeddingMetadata(request_id=request_id, latency_ms=latency_ms),
            },
        )

    def describe_request(self, call: EmbeddingCall) -> dict[str, Any]:
        body: dict[str, Any] = {
            "model": call.model,
            "input": list(call.input),
        }
        if call.dimensions is not None:
            body["dimensions"] = call.dimensions
        if self._encoding_format is not None:
            body["encoding_format"] = self._encoding_format
        return body

    def _request_headers(self, ctx: CallContext | None) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        for key, value in self._headers.items():
            if key.lower() in _RESERVED_HEADERS:
                continue
            headers[key] = value
        if ctx is not None and ctx.request_id:
            headers["X-Request-Id"] = ctx.request_id
        return headers

    async def _post(self, url: str, body: dict[str, Any], headers: dict[str, str]) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.post(url, json=body, headers=headers)
        transport = httpx.AsyncHTTPTransport(retries=0)
        async with httpx.AsyncClient(transport=transport, timeout=self._timeout_s) as client:
            return await client.post(url, json=body, headers=headers)


def _extract_request_id(headers: httpx.Headers) -> str | None:
    return headers.get("x-request-id")


def _extract_usage(raw: Any) -> Usage:
    if not isinstance(raw, dict):
        return Usage()
    return Usage(
        input_tokens=int(raw.get("prompt_tokens") or 0),
        total_tokens=int(raw.get("total_tokens") or 0),
    )


def _sanitize_request(body: dict[str, Any], headers: dict[str, str]) -> dict[str, Any]:
    scrubbed_headers = {key: value for key, value in headers.items() if key.lower() != "authorization"}
    return {
        "body": body,
        "headers": scrubbed_headers,
    }
