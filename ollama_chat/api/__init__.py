"""FastAPI endpoints for the Ollama chat front-end.

Endpoints:
    - GET /health: Service health status
    - POST /api/chat: Completion gateway to the local Ollama server
"""

from ollama_chat.api.app import app, create_app

__all__ = ["app", "create_app"]
