"""HTTP client the chat page uses to reach the completion gateway."""

import os
from collections.abc import Sequence

import httpx

from ollama_chat.gateway.config import DEFAULT_TIMEOUT
from ollama_chat.models.schemas import ChatMessage, ChatRequest, ChatResponse

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")
# Added to the gateway's upstream timeout when API_TIMEOUT is unset
TIMEOUT_MARGIN = 10.0


def default_request_timeout() -> float:
    """Seconds to wait for /api/chat: API_TIMEOUT, else OLLAMA_TIMEOUT plus a margin."""
    if api_timeout := os.getenv("API_TIMEOUT"):
        return float(api_timeout)
    return float(os.getenv("OLLAMA_TIMEOUT", str(DEFAULT_TIMEOUT))) + TIMEOUT_MARGIN


async def request_completion(
    messages: Sequence[ChatMessage],
    base_url: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """POST the transcript to /api/chat and return the reply text.

    Raises:
        httpx.HTTPError: Connection failure, timeout or non-2xx status.
        ValueError: The body is not a valid ChatResponse.
    """
    body = ChatRequest(messages=list(messages))
    async with httpx.AsyncClient(
        base_url=base_url or API_BASE_URL,
        timeout=default_request_timeout(),
        transport=transport,
    ) as client:
        response = await client.post("/api/chat", json=body.model_dump(mode="json"))
        response.raise_for_status()
        return ChatResponse.model_validate(response.json()).message
