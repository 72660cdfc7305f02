"""Completion gateway endpoint.

Relays a transcript to the Ollama server and returns the reply as
``{"message": ...}``. Upstream failures are logged and collapsed into a
single 500 response.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ollama_chat.gateway.ollama_client import OllamaClient, OllamaError, get_ollama_client
from ollama_chat.models.schemas import ChatRequest, ChatResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])

UPSTREAM_ERROR_MESSAGE = "Failed to get response from Ollama"


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def chat(
    request: ChatRequest,
    client: OllamaClient = Depends(get_ollama_client),
) -> ChatResponse | JSONResponse:
    """Get a single completion for the transcript.

    Args:
        request: The transcript, ending with the newest user message.
        client: Ollama client (overridable for tests).

    Returns:
        ChatResponse with the assistant's reply text.

    Raises:
        422: Malformed request body.
        500: Ollama unreachable, timed out, or replied with garbage.
    """
    try:
        return await client.chat(request.messages)
    except OllamaError as e:
        logger.error(f"Error calling Ollama: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=UPSTREAM_ERROR_MESSAGE).model_dump(),
        )
