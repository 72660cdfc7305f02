"""End-to-end chat workflow: controller -> gateway -> stub Ollama."""

from collections.abc import Callable, Sequence

from httpx import ASGITransport

from ollama_chat.gateway.ollama_client import OllamaClient
from ollama_chat.models.schemas import ChatMessage, Role
from ollama_chat.state.controller import ERROR_REPLY, ChatController
from ollama_chat.ui.api_client import request_completion

MakeTransport = Callable[[OllamaClient], ASGITransport]


def _controller_for(make_transport: MakeTransport, ollama: OllamaClient) -> ChatController:
    """Build a controller whose completions go through the real gateway app."""
    transport = make_transport(ollama)

    async def complete(messages: Sequence[ChatMessage]) -> str:
        return await request_completion(messages, base_url="http://test", transport=transport)

    return ChatController(complete=complete)


class TestChatWorkflow:
    """Full submission flow through the HTTP gateway."""

    async def test_hello_hi_there(
        self, make_transport: MakeTransport, stub_ollama: OllamaClient
    ) -> None:
        """New chat, send "hello", get "hi there" back from the stub."""
        controller = _controller_for(make_transport, stub_ollama)
        assert controller.snapshot().sessions == ()

        controller.new_chat()
        await controller.submit("hello")

        snapshot = controller.snapshot()
        assert snapshot.transcript == (
            ChatMessage(role=Role.USER, content="hello"),
            ChatMessage(role=Role.ASSISTANT, content="hi there"),
        )
        assert snapshot.pending is False

    async def test_unreachable_ollama_shows_error_bubble(
        self, make_transport: MakeTransport, unreachable_ollama: OllamaClient
    ) -> None:
        """A gateway 500 ends as the error bubble, not an exception."""
        controller = _controller_for(make_transport, unreachable_ollama)
        controller.new_chat()

        await controller.submit("hello")

        snapshot = controller.snapshot()
        assert snapshot.transcript[-1] == ChatMessage(role=Role.ASSISTANT, content=ERROR_REPLY)
        assert snapshot.pending is False
