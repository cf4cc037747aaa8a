"""Oracle configuration.

All settings for the LLM call live in one ``OracleConfig`` value that is
passed to the mapping requester at construction time.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

DEFAULT_MODEL = "claude-sonnet-4-20250514"


class OracleConfig(BaseModel):
    """Settings for the header-mapping LLM call."""

    api_key: str | None = Field(
        default=None,
        description="Anthropic API key. None lets the SDK read ANTHROPIC_API_KEY.",
        repr=False,
    )
    model: str = Field(default=DEFAULT_MODEL, description="Claude model ID")
    temperature: float = Field(default=0.0, ge=0.0, le=1.0, description="Sampling temperature")
    max_tokens: int = Field(default=1024, ge=1, description="Maximum tokens in the response")
    timeout: float = Field(default=60.0, gt=0, description="Request timeout in seconds")
    max_attempts: int = Field(
        default=1, ge=1, description="Attempts for transient API errors (1 = no retry)"
    )

    @classmethod
    def from_env(cls, **overrides: object) -> OracleConfig:
        """Build a config from ANTHROPIC_API_KEY and HEADERMAP_MODEL.

        Keyword overrides take precedence over the environment.
        """
        values: dict[str, object] = {"api_key": os.environ.get("ANTHROPIC_API_KEY")}
        model = os.environ.get("HEADERMAP_MODEL")
        if model:
            values["model"] = model
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)
