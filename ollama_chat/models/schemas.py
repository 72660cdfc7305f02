from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Speaker of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """A single message in a transcript.

    Messages are immutable once created.

    Attributes:
        role: Who produced the message (user or assistant).
        content: The message text.
    """

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    role: Role
    content: str


class ChatRequest(BaseModel):
    """Request payload for the completion gateway.

    Attributes:
        messages: The transcript so far, ending with the newest user message.
    """

    messages: list[ChatMessage] = Field(..., min_length=1)


class ChatResponse(BaseModel):
    """Normalized reply from the completion gateway.

    Attributes:
        message: The assistant's reply text.
        model: Model identifier reported by the upstream service.
    """

    message: str
    model: str | None = None


class ErrorResponse(BaseModel):
    """Body returned when the upstream model service call fails."""

    error: str
