"""Pydantic models for API requests and responses.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - Role: Speaker of a message (user or assistant)
    - ChatMessage: Individual message in a transcript
    - ChatRequest: Transcript sent to the completion gateway
    - ChatResponse: Normalized assistant reply
    - ErrorResponse: Gateway failure payload
"""

from ollama_chat.models.schemas import (
    ChatMessage,
    ChatRequest,
    ChatResponse,
    ErrorResponse,
    Role,
)

__all__ = ["ChatMessage", "ChatRequest", "ChatResponse", "ErrorResponse", "Role"]
