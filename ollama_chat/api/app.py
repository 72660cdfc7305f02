"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ollama_chat import __version__
from ollama_chat.api.chat import router as chat_router
from ollama_chat.gateway.ollama_client import get_ollama_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    config = get_ollama_client().config
    logger.info(f"Starting Ollama Chat API (model={config.model}, endpoint={config.endpoint})")
    yield
    logger.info("Shutting down Ollama Chat API...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Ollama Chat API",
        description=(
            "Completion gateway for a browser chat front-end. Forwards the "
            "conversation transcript to a locally running Ollama server and "
            "returns the whole reply."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    application.include_router(chat_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "ollama-chat"}

    return application


app = create_app()
