"""Top-level chat controller.

Owns the session store plus the pending flag, draft input, language and
dark-mode choice. Its methods are the only way to change chat state; views
read ``snapshot()`` and re-render when notified.
"""

import logging
from collections.abc import Awaitable, Callable, Sequence

from ollama_chat.models.schemas import ChatMessage, Role
from ollama_chat.state.models import ChatSnapshot
from ollama_chat.state.store import SessionStore

logger = logging.getLogger(__name__)

ERROR_REPLY = "Sorry, I encountered an error."

# Display label -> language name used in the input placeholder
LANGUAGES: dict[str, str] = {
    "English": "English",
    "Español": "Spanish",
    "Français": "French",
}

CompletionFn = Callable[[Sequence[ChatMessage]], Awaitable[str]]
Listener = Callable[[], None]


class ChatController:
    """Chat state container with a single in-flight submission.

    State machine: idle -> pending -> idle. ``submit`` always returns to
    idle, whether the completion call succeeds or fails.
    """

    def __init__(self, complete: CompletionFn, store: SessionStore | None = None) -> None:
        """Initialize the controller.

        Args:
            complete: Coroutine function sending a transcript to the
                completion gateway and returning the reply text.
            store: Optional pre-populated session store.
        """
        self._complete = complete
        self._store = store or SessionStore()
        self._pending = False
        self._draft = ""
        self._language = "English"
        self._dark_mode = False
        self._listeners: list[Listener] = []

    @property
    def store(self) -> SessionStore:
        return self._store

    @property
    def pending(self) -> bool:
        return self._pending

    def snapshot(self) -> ChatSnapshot:
        """Return an immutable view of the current state."""
        return ChatSnapshot(
            sessions=self._store.sessions,
            current_session_id=self._store.current_session_id,
            transcript=self._store.transcript,
            pending=self._pending,
            draft=self._draft,
            language=self._language,
            dark_mode=self._dark_mode,
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` after every state change.

        Returns:
            A function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        # Listener errors are logged, never propagated
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception(f"Chat state listener {listener!r} failed")

    # --- session operations ---

    def new_chat(self) -> str:
        session_id = self._store.create_session()
        self._notify()
        return session_id

    def select_chat(self, session_id: str) -> None:
        self._store.select_session(session_id)
        self._notify()

    def clear_history(self) -> None:
        self._store.clear_all()
        self._notify()

    # --- cosmetic settings ---

    def set_draft(self, text: str) -> None:
        # No notify: the input widget already shows what was typed
        self._draft = text

    def set_language(self, language: str) -> None:
        self._language = language
        self._notify()

    def toggle_dark_mode(self) -> bool:
        self._dark_mode = not self._dark_mode
        self._notify()
        return self._dark_mode

    # --- submission ---

    async def submit(self, text: str | None = None) -> ChatMessage | None:
        """Send a message and append the reply to the transcript.

        Args:
            text: Message to send. Defaults to the current draft.

        Returns:
            The assistant message that was appended, or None when nothing
            was sent (blank input, a submission already pending) or the
            reply arrived after the transcript had been reset.
        """
        text = self._draft if text is None else text
        if not text.strip() or self._pending:
            return None

        user_message = ChatMessage(role=Role.USER, content=text)
        self._pending = True
        try:
            self._store.append(user_message)
            self._draft = ""
            epoch = self._store.epoch
            transcript = self._store.transcript
            self._notify()

            try:
                content = await self._complete(transcript)
                reply = ChatMessage(role=Role.ASSISTANT, content=content)
            except Exception:
                logger.warning("Completion request failed", exc_info=True)
                reply = ChatMessage(role=Role.ASSISTANT, content=ERROR_REPLY)

            if self._store.epoch != epoch:
                logger.info("Transcript was reset while waiting for a reply; discarding it")
                return None

            self._store.append(reply)
            return reply
        finally:
            self._pending = False
            self._notify()
