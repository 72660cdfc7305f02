"""Ollama Chat - a minimal browser chat front-end for a local Ollama server.

Combines FastAPI for the completion gateway, httpx for upstream calls,
NiceGUI for the chat page, and Pydantic for data validation.

Components:
    - api: HTTP endpoints (completion gateway, health)
    - gateway: Ollama configuration and upstream client
    - state: Session store and submission controller
    - ui: Web interface for chat interactions
    - models: Request/response schemas
"""

__version__ = "0.1.0"
