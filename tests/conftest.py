"""Pytest fixtures and shared test configuration.

Fixtures:
    - gateway_config: GatewayConfig with test values
    - ollama_reply: Factory for Ollama /api/chat success payloads
    - stub_ollama: OllamaClient backed by a stub server replying "hi there"
    - unreachable_ollama: OllamaClient whose server refuses connections
    - make_transport: Factory for an ASGI transport into the app
    - make_client: Factory for an API client wired to a given OllamaClient
"""

import json
from collections.abc import AsyncGenerator, Callable

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from ollama_chat.api.app import create_app
from ollama_chat.gateway.config import GatewayConfig
from ollama_chat.gateway.ollama_client import OllamaClient, get_ollama_client


@pytest.fixture
def gateway_config() -> GatewayConfig:
    """Return a config pointing at a fake Ollama host."""
    return GatewayConfig(endpoint="http://ollama.test:11434", model="llama2", timeout=5.0)


@pytest.fixture
def ollama_reply() -> Callable[[str], dict]:
    """Return a factory building Ollama chat response bodies."""

    def build(content: str) -> dict:
        return {
            "model": "llama2",
            "created_at": "2024-01-01T00:00:00Z",
            "message": {"role": "assistant", "content": content},
            "done": True,
        }

    return build


@pytest.fixture
def captured_requests() -> list[dict]:
    """Collect JSON bodies received by the stub Ollama server."""
    return []


@pytest.fixture
def stub_ollama(
    gateway_config: GatewayConfig,
    ollama_reply: Callable[[str], dict],
    captured_requests: list[dict],
) -> OllamaClient:
    """OllamaClient talking to a stub server that always replies "hi there"."""

    def handler(request: httpx.Request) -> httpx.Response:
        captured_requests.append(json.loads(request.content))
        return httpx.Response(200, json=ollama_reply("hi there"))

    return OllamaClient(config=gateway_config, transport=httpx.MockTransport(handler))


@pytest.fixture
def unreachable_ollama(gateway_config: GatewayConfig) -> OllamaClient:
    """OllamaClient whose server refuses every connection."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    return OllamaClient(config=gateway_config, transport=httpx.MockTransport(handler))


@pytest.fixture
def make_transport() -> Callable[[OllamaClient], ASGITransport]:
    """Return a factory for ASGI transports into an app using the given OllamaClient."""

    def build(ollama: OllamaClient) -> ASGITransport:
        app = create_app()
        app.dependency_overrides[get_ollama_client] = lambda: ollama
        return ASGITransport(app=app)

    return build


@pytest.fixture
def make_client(
    make_transport: Callable[[OllamaClient], ASGITransport],
) -> Callable[[OllamaClient], AsyncClient]:
    """Return a factory for API clients whose gateway uses the given OllamaClient."""

    def build(ollama: OllamaClient) -> AsyncClient:
        return AsyncClient(transport=make_transport(ollama), base_url="http://test")

    return build


@pytest.fixture
async def async_client(
    make_client: Callable[[OllamaClient], AsyncClient],
    stub_ollama: OllamaClient,
) -> AsyncGenerator[AsyncClient]:
    """API client backed by the "hi there" stub server."""
    async with make_client(stub_ollama) as client:
        yield client
