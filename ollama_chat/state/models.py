"""Immutable state models rendered by the chat page."""

from pydantic import BaseModel, ConfigDict

from ollama_chat.models.schemas import ChatMessage


class ChatSession(BaseModel):
    """An entry in the sidebar.

    Attributes:
        id: Opaque, time-derived identifier.
        title: Display title, fixed at creation ("Chat N").
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str


class ChatSnapshot(BaseModel):
    """Point-in-time view of everything the chat page renders."""

    model_config = ConfigDict(frozen=True)

    sessions: tuple[ChatSession, ...] = ()
    current_session_id: str | None = None
    transcript: tuple[ChatMessage, ...] = ()
    pending: bool = False
    draft: str = ""
    language: str = "English"
    dark_mode: bool = False

    @property
    def input_placeholder(self) -> str:
        return f"Say something in {self.language}..."
