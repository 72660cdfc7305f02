"""Gateway configuration with environment variable loading.

Pydantic-based configuration for the Ollama model service.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_ENDPOINT = "http://localhost:11434"
DEFAULT_MODEL = "llama2"
DEFAULT_TIMEOUT = 120.0


class GatewayConfig(BaseModel):
    """Configuration for the Ollama completion gateway.

    Attributes:
        endpoint: Base URL of the Ollama server.
        model: Model identifier to request completions from.
        timeout: Seconds to wait for the upstream reply.
    """

    endpoint: str = Field(
        default_factory=lambda: os.getenv("OLLAMA_HOST", DEFAULT_ENDPOINT),
        description="Base URL of the Ollama server",
    )
    model: str = Field(
        default_factory=lambda: os.getenv("OLLAMA_MODEL", DEFAULT_MODEL),
        description="Model to use",
    )
    timeout: float = Field(
        default_factory=lambda: float(os.getenv("OLLAMA_TIMEOUT", str(DEFAULT_TIMEOUT))),
        gt=0.0,
        description="Upstream request timeout in seconds",
    )

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("OLLAMA_HOST must be an http:// or https:// URL")
        return v.rstrip("/")

    @field_validator("model")
    @classmethod
    def validate_model(cls, v: str) -> str:
        """Validate that a model identifier is provided."""
        if not v or not v.strip():
            raise ValueError("Model name required. Set OLLAMA_MODEL in .env")
        return v.strip()


def get_gateway_config() -> GatewayConfig:
    """Create gateway configuration from environment.

    Returns:
        Configured GatewayConfig instance.

    Raises:
        ValueError: If the endpoint or model is invalid.
    """
    return GatewayConfig()
