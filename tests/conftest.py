from __future__ import annotations

import httpx
import pytest
import pytest_asyncio

from embedkit.embeddings.openai import OpenAIEmbedder
from tests.stubs import BASE_URL, StubBackend


@pytest.fixture
def backend() -> StubBackend:
    return StubBackend()


@pytest_asyncio.fixture
async def http_client(backend: StubBackend):
    client = httpx.AsyncClient(transport=httpx.MockTransport(backend.handler))
    yield client
    await client.aclose()


@pytest.fixture
def embedder(http_client: httpx.AsyncClient) -> OpenAIEmbedder:
    return OpenAIEmbedder(api_key="test-key", base_url=BASE_URL, http_client=http_client)
