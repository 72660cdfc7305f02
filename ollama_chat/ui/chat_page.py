"""NiceGUI chat page."""

from nicegui import ui

from ollama_chat.models.schemas import Role
from ollama_chat.state.controller import LANGUAGES, ChatController
from ollama_chat.state.models import ChatSnapshot
from ollama_chat.ui.api_client import request_completion

PAGE_TITLE = "AI Chatbot with Ollama and RAG"

CUSTOM_CSS = """
<style>
    .message-user { border-radius: 18px 18px 4px 18px; }
    .message-assistant { border-radius: 18px 18px 18px 4px; }
</style>
"""


def render_sidebar(snapshot: ChatSnapshot, controller: ChatController) -> None:
    """Session list and settings panel."""
    ui.button("New Chat", on_click=controller.new_chat).classes("w-full mb-4")

    with ui.column().classes("w-full flex-grow gap-2 overflow-y-auto"):
        for session in snapshot.sessions:
            is_current = session.id == snapshot.current_session_id
            ui.button(
                session.title,
                on_click=lambda sid=session.id: controller.select_chat(sid),
            ).props("unelevated" if is_current else "flat").classes("w-full justify-start")

    with ui.row().classes("w-full mt-4 p-2 rounded-lg justify-between items-center"):
        theme_icon = "light_mode" if snapshot.dark_mode else "dark_mode"
        ui.button(icon=theme_icon, on_click=controller.toggle_dark_mode).props(
            "flat round"
        ).tooltip("Toggle dark mode")
        ui.button(icon="delete", on_click=controller.clear_history).props(
            "flat round"
        ).tooltip("Clear chat history")
        with ui.button(icon="language").props("flat round").tooltip("Change language"):
            with ui.menu():
                for label, language in LANGUAGES.items():
                    ui.menu_item(
                        label,
                        on_click=lambda lang=language: controller.set_language(lang),
                    )


def render_transcript(snapshot: ChatSnapshot) -> None:
    """Message bubbles, newest last."""
    for message in snapshot.transcript:
        is_user = message.role == Role.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user bg-primary text-white" if is_user else "message-assistant"
        with ui.row().classes(f"w-full {align}"):
            with ui.element("div").classes(f"px-4 py-2 max-w-[75%] {bubble}"):
                if is_user:
                    ui.label(message.content).classes("whitespace-pre-wrap")
                else:
                    ui.markdown(message.content)

    if snapshot.pending:
        with ui.row().classes("w-full justify-start"):
            with ui.element("div").classes("message-assistant px-4 py-2 italic"):
                ui.label("Thinking...")


@ui.page("/")
def chat_page() -> None:
    """Main chat page. State lives only as long as the browser tab."""
    ui.add_head_html(CUSTOM_CSS)
    controller = ChatController(complete=request_completion)
    dark = ui.dark_mode(False)

    @ui.refreshable
    def sidebar() -> None:
        render_sidebar(controller.snapshot(), controller)

    @ui.refreshable
    def transcript() -> None:
        render_transcript(controller.snapshot())

    def on_change() -> None:
        snapshot = controller.snapshot()
        dark.value = snapshot.dark_mode
        input_field.value = snapshot.draft
        input_field.props(f'placeholder="{snapshot.input_placeholder}"')
        send_btn.set_enabled(not snapshot.pending)
        sidebar.refresh()
        transcript.refresh()
        messages_area.scroll_to(percent=1.0)

    async def send_message() -> None:
        await controller.submit()

    with ui.row().classes("w-full min-h-screen no-wrap gap-0"):
        with ui.column().classes("w-64 p-4 border-r min-h-screen"):
            sidebar()

        with ui.column().classes("flex-1 p-4 items-center"):
            with ui.card().classes("w-full max-w-2xl"):
                ui.label(PAGE_TITLE).classes("text-xl font-semibold")
                with ui.scroll_area().classes("w-full h-[400px]") as messages_area:
                    with ui.column().classes("w-full gap-4"):
                        transcript()
                with ui.row().classes("w-full no-wrap gap-2 items-center"):
                    input_field = (
                        ui.input(
                            placeholder=controller.snapshot().input_placeholder,
                            on_change=lambda e: controller.set_draft(e.value or ""),
                        )
                        .classes("flex-grow")
                        .on("keydown.enter", send_message)
                    )
                    send_btn = ui.button("Send", on_click=send_message)

    controller.subscribe(on_change)

