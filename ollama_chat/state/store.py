"""Session store: chat sessions and the active transcript."""

import logging
import time

from ollama_chat.models.schemas import ChatMessage
from ollama_chat.state.models import ChatSession

logger = logging.getLogger(__name__)


class SessionStore:
    """Holds the session list, the current session and its transcript.

    Selecting or creating a session resets the transcript; nothing is
    restored or persisted. Each reset advances ``epoch`` so that an
    in-flight reply can tell whether its transcript is still the active one.
    """

    def __init__(self) -> None:
        self._sessions: list[ChatSession] = []
        self._current_id: str | None = None
        self._transcript: list[ChatMessage] = []
        self._epoch = 0

    @property
    def sessions(self) -> tuple[ChatSession, ...]:
        return tuple(self._sessions)

    @property
    def current_session_id(self) -> str | None:
        return self._current_id

    @property
    def transcript(self) -> tuple[ChatMessage, ...]:
        return tuple(self._transcript)

    @property
    def epoch(self) -> int:
        return self._epoch

    def _new_id(self) -> str:
        # Nanosecond clock, bumped past any id already handed out
        candidate = time.time_ns()
        taken = {s.id for s in self._sessions}
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    def _reset_transcript(self) -> None:
        self._transcript = []
        self._epoch += 1

    def create_session(self) -> str:
        """Start a new chat, make it current and clear the transcript.

        Returns:
            The new session's id.
        """
        session = ChatSession(id=self._new_id(), title=f"Chat {len(self._sessions) + 1}")
        self._sessions.append(session)
        self._current_id = session.id
        self._reset_transcript()
        logger.debug(f"Created session {session.id} ({session.title})")
        return session.id

    def select_session(self, session_id: str) -> None:
        """Make a known session current. Unknown ids are ignored."""
        if not any(s.id == session_id for s in self._sessions):
            logger.debug(f"Ignoring selection of unknown session {session_id}")
            return
        self._current_id = session_id
        self._reset_transcript()

    def clear_all(self) -> None:
        """Drop every session and the transcript."""
        self._sessions = []
        self._current_id = None
        self._reset_transcript()

    def append(self, message: ChatMessage) -> None:
        """Append a message to the active transcript."""
        self._transcript.append(message)
