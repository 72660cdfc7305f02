"""Ollama chat client used by the completion gateway.

Each call forwards the transcript verbatim and asks for a single,
non-streamed completion. No system prompt, sampling options or retrieval
context is added.
"""

import logging
from collections.abc import Sequence

import httpx
from pydantic import BaseModel, ValidationError

from ollama_chat.gateway.config import GatewayConfig, get_gateway_config
from ollama_chat.models.schemas import ChatMessage, ChatResponse

logger = logging.getLogger(__name__)


class OllamaError(Exception):
    """Raised when the Ollama server cannot produce a completion."""

    pass


class _UpstreamMessage(BaseModel):
    role: str
    content: str


class _UpstreamReply(BaseModel):
    """Subset of Ollama's /api/chat response that the gateway relies on."""

    model: str | None = None
    message: _UpstreamMessage
    done: bool = True


class OllamaClient:
    """Thin async client for Ollama's chat endpoint.

    Holds only configuration; an httpx client is opened per call so that
    concurrent gateway requests share no mutable state.
    """

    def __init__(
        self,
        config: GatewayConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional gateway configuration.
                    Loads from environment if not provided.
            transport: Optional httpx transport, used to stub the server.
        """
        self._config = config or get_gateway_config()
        self._transport = transport

    @property
    def config(self) -> GatewayConfig:
        return self._config

    async def chat(self, messages: Sequence[ChatMessage]) -> ChatResponse:
        """Request one completion for a transcript.

        Args:
            messages: The transcript, oldest message first.

        Returns:
            The normalized reply.

        Raises:
            OllamaError: On connection failure, timeout, non-success status
                or a malformed response body.
        """
        payload = {
            "model": self._config.model,
            "messages": [m.model_dump(mode="json") for m in messages],
            "stream": False,
        }

        try:
            async with httpx.AsyncClient(
                base_url=self._config.endpoint,
                timeout=self._config.timeout,
                transport=self._transport,
            ) as client:
                response = await client.post("/api/chat", json=payload)
                response.raise_for_status()
                reply = _UpstreamReply.model_validate(response.json())
        except httpx.HTTPError as e:
            raise OllamaError(f"Request to Ollama failed: {e!r}") from e
        except (ValueError, ValidationError) as e:
            raise OllamaError(f"Malformed response from Ollama: {e}") from e

        logger.debug(
            f"Ollama replied with {len(reply.message.content)} characters "
            f"for {len(messages)} messages"
        )
        return ChatResponse(message=reply.message.content, model=reply.model)


# Module-level singleton instance
_ollama_client: OllamaClient | None = None


def get_ollama_client() -> OllamaClient:
    """Get or create the global Ollama client.

    Returns:
        The OllamaClient instance.
    """
    global _ollama_client
    if _ollama_client is None:
        _ollama_client = OllamaClient()
    return _ollama_client
