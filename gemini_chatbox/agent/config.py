"""Agent configuration with environment variable loading.

Pydantic-based configuration for the Gemini chat agent.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_REQUEST_TIMEOUT = 60.0


class AgentConfig(BaseModel):
    """Configuration for the Gemini chat agent.

    A missing API key is not rejected here: the empty key is passed on
    and the first request fails at the transport layer instead.

    Attributes:
        api_key: Gemini API key.
        model_name: Gemini model identifier to use.
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        max_output_tokens: Maximum tokens in generated response (None = model default).
        request_timeout: Seconds to wait for a reply before giving up (None = no limit).
    """

    model_config = ConfigDict(validate_default=True)

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY", ""),
        description="API key for the Gemini API",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        min_length=1,
        description="Model to use",
    )
    temperature: float = Field(
        default=1.0,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    max_output_tokens: int | None = Field(
        default=None,
        ge=1,
        description="Maximum tokens in generated response",
    )
    request_timeout: float | None = Field(
        default_factory=lambda: os.getenv("LLM_REQUEST_TIMEOUT", ""),
        gt=0,
        description="Seconds to wait for a model reply",
    )

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Strip surrounding whitespace from the API key."""
        return v.strip()

    @field_validator("request_timeout", mode="before")
    @classmethod
    def parse_timeout(cls, v: object) -> object:
        """Read blank as the default and "none" as no limit."""
        if isinstance(v, str):
            v = v.strip()
            if not v:
                return DEFAULT_REQUEST_TIMEOUT
            if v.lower() == "none":
                return None
        return v

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)


def get_agent_config() -> AgentConfig:
    """Create agent configuration from environment.

    Returns:
        Configured AgentConfig instance.

    Raises:
        ValidationError: If a setting is malformed or out of range.
    """
    return AgentConfig()
