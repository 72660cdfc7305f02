"""Client-side chat state.

Responsibilities:
    - Session list and the active transcript (SessionStore)
    - Message submission and the pending flag (ChatController)
    - Immutable snapshots for the view layer

The view never mutates state directly; it calls ChatController methods
and re-renders from ChatController.snapshot().
"""

from ollama_chat.state.controller import ERROR_REPLY, LANGUAGES, ChatController
from ollama_chat.state.models import ChatSession, ChatSnapshot
from ollama_chat.state.store import SessionStore

__all__ = [
    "ERROR_REPLY",
    "LANGUAGES",
    "ChatController",
    "ChatSession",
    "ChatSnapshot",
    "SessionStore",
]
