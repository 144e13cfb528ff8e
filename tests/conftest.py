"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - test_config: ClientConfig pointing at a fake host
    - success_payload: Minimal successful /file_parse JSON body
    - sample_document: Small in-memory document to upload
    - mock_client_factory: Builds MineruClients backed by httpx.MockTransport
    - fake_service_client: MineruClient wired to the fake MinerU FastAPI app

Async fixtures close every httpx client they create.
"""

from collections.abc import AsyncGenerator, Callable
from typing import Any

import httpx
import pytest

from mineru_client.client import MineruClient
from mineru_client.config import ClientConfig
from tests.fake_service import create_app

TEST_BASE_URL = "http://test"


@pytest.fixture
def test_config() -> ClientConfig:
    """Return configuration for the fake MinerU host."""
    return ClientConfig(base_url=TEST_BASE_URL, timeout=5.0)


@pytest.fixture
def success_payload() -> dict[str, Any]:
    """Return the smallest realistic successful response body."""
    return {
        "backend": "pipeline",
        "version": "2.6.3",
        "results": {"file0": {"md_content": "Test content"}},
    }


@pytest.fixture
def sample_document() -> bytes:
    """Return a small document to upload."""
    return b"Hello MinerU"


@pytest.fixture
async def mock_client_factory(
    test_config: ClientConfig,
) -> AsyncGenerator[Callable[..., MineruClient]]:
    """Create MineruClients whose transport is an httpx.MockTransport.

    Yields:
        Factory taking a MockTransport handler and returning a MineruClient.
    """
    http_clients: list[httpx.AsyncClient] = []

    def factory(handler: Callable[[httpx.Request], Any], base_url: str = TEST_BASE_URL) -> MineruClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        http_clients.append(http_client)
        return MineruClient(base_url, http_client=http_client, config=test_config)

    yield factory

    for http_client in http_clients:
        await http_client.aclose()


@pytest.fixture
async def fake_service_client(test_config: ClientConfig) -> AsyncGenerator[MineruClient]:
    """Create a MineruClient talking to the fake MinerU app over ASGI.

    Yields:
        MineruClient bound to the fake service.
    """
    transport = httpx.ASGITransport(app=create_app())
    async with httpx.AsyncClient(transport=transport, base_url=TEST_BASE_URL) as http_client:
        async with MineruClient(TEST_BASE_URL, http_client=http_client, config=test_config) as client:
            yield client
