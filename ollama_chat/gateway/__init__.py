"""Completion gateway internals: Ollama configuration and upstream client.

Responsibilities:
    - Endpoint, model and timeout configuration from the environment
    - Forwarding a transcript to Ollama for a single non-streamed completion
    - Collapsing every upstream failure into one error type

Maintains clean separation from the HTTP layer.
"""

from ollama_chat.gateway.config import GatewayConfig, get_gateway_config
from ollama_chat.gateway.ollama_client import OllamaClient, OllamaError, get_ollama_client

__all__ = [
    "GatewayConfig",
    "OllamaClient",
    "OllamaError",
    "get_gateway_config",
    "get_ollama_client",
]
