"""Main application entry point.

Serves the completion gateway and the NiceGUI chat page from one uvicorn
server. Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from ollama_chat.gateway.config import get_gateway_config

load_dotenv()

logger = logging.getLogger(__name__)


class ServerSettings(BaseModel):
    """Process-level settings for the chat server.

    Attributes:
        host: Interface uvicorn binds to.
        port: Port serving both /api/chat and the chat page.
        log_level: Root logging level name.
        storage_secret: Secret NiceGUI uses to sign its storage.
    """

    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(default_factory=lambda: int(os.getenv("PORT", "8000")), ge=1, le=65535)
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    storage_secret: str = Field(
        default_factory=lambda: os.getenv("NICEGUI_STORAGE_SECRET", "ollama-chat-secret")
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def serve(settings: ServerSettings) -> None:
    """Mount the chat page on the gateway app and run uvicorn."""
    import uvicorn
    from nicegui import ui

    from ollama_chat.api.app import create_app
    from ollama_chat.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()
    ui.run_with(app, title="Ollama Chat", favicon="💬", storage_secret=settings.storage_secret)

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


def main() -> None:
    """Validate configuration, then start the server.

    Invalid OLLAMA_* settings fail here, before anything is served.
    """
    settings = ServerSettings()
    configure_logging(settings.log_level)
    gateway = get_gateway_config()

    logger.info(f"Relaying chats to {gateway.endpoint} (model={gateway.model})")
    logger.info(f"Chat UI available at http://localhost:{settings.port}/")
    serve(settings)


if __name__ == "__main__":
    main()
