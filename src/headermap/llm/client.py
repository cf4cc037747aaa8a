"""Anthropic client wrapper for forced tool-use calls.

Sends a single tool definition together with a forced ``tool_choice`` so
the model can only answer by calling that tool, and returns the tool's
argument payload. SDK errors are translated into ``OracleTransportFailure``;
answers outside the tool contract raise ``MalformedOracleResponse``.
"""

from __future__ import annotations

import json
import time
from typing import Any

import anthropic
from loguru import logger
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

_TRANSIENT_ERRORS = (
    anthropic.APITimeoutError,
    anthropic.APIConnectionError,
    anthropic.RateLimitError,
)


class OracleTransportFailure(Exception):
    """The call to the LLM could not be completed (network, auth, rate limit, timeout)."""


class MalformedOracleResponse(Exception):
    """The LLM answered, but not through the required tool with a JSON object payload."""


class HeaderMapLLMClient:
    """Anthropic API client that forces a single tool call.

    Usage::

        client = HeaderMapLLMClient(timeout=30.0)
        payload = client.invoke_tool(
            model="claude-sonnet-4-20250514",
            messages=[{"role": "user", "content": "..."}],
            tool_name="mapCsvHeaders",
            tool_description="...",
            input_schema={"type": "object", "properties": {...}},
        )
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        timeout: float = 60.0,
        max_attempts: int = 1,
    ) -> None:
        """Initialize the Anthropic client.

        Args:
            api_key: Optional API key. If None, reads from ANTHROPIC_API_KEY env var.
            timeout: Request timeout in seconds, enforced by the SDK.
            max_attempts: Attempts for transient errors. 1 disables retrying.
        """
        # The SDK has its own retry loop; retries are governed by max_attempts only.
        self._client = anthropic.Anthropic(api_key=api_key, timeout=timeout, max_retries=0)
        self._max_attempts = max_attempts

    def invoke_tool(
        self,
        *,
        model: str,
        messages: list[dict[str, str]],
        tool_name: str,
        tool_description: str,
        input_schema: dict[str, Any],
        max_tokens: int = 1024,
        temperature: float = 0.0,
        system: str | None = None,
    ) -> dict[str, Any]:
        """Call the model with one forced tool and return the tool arguments.

        Args:
            model: Claude model ID (e.g., "claude-sonnet-4-20250514").
            messages: List of message dicts with "role" and "content" keys.
            tool_name: Name of the only tool the model may call.
            tool_description: Tool description shown to the model.
            input_schema: JSON schema of the tool's parameter object.
            max_tokens: Maximum tokens in the response.
            temperature: Sampling temperature (0.0-1.0).
            system: Optional system prompt.

        Returns:
            The argument payload of the tool call as a dict.

        Raises:
            OracleTransportFailure: If the API call fails.
            MalformedOracleResponse: If the response has no call to ``tool_name``
                or its payload is not a JSON object.
        """
        kwargs: dict[str, object] = {
            "model": model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": messages,
            "tools": [
                {
                    "name": tool_name,
                    "description": tool_description,
                    "input_schema": input_schema,
                }
            ],
            "tool_choice": {"type": "tool", "name": tool_name},
        }
        if system is not None:
            kwargs["system"] = system

        start = time.monotonic()
        try:
            for attempt in Retrying(
                stop=stop_after_attempt(self._max_attempts),
                wait=wait_exponential(min=1, max=30),
                retry=retry_if_exception_type(_TRANSIENT_ERRORS),
                reraise=True,
            ):
                with attempt:
                    response = self._client.messages.create(**kwargs)  # type: ignore[call-overload]
        except anthropic.APIError as e:
            raise OracleTransportFailure(f"LLM call to {model} failed: {e}") from e
        elapsed = time.monotonic() - start

        logger.info(
            "LLM call | model={model} tool={tool} "
            "input_tokens={inp} output_tokens={out} latency={lat:.2f}s",
            model=model,
            tool=tool_name,
            inp=response.usage.input_tokens,
            out=response.usage.output_tokens,
            lat=elapsed,
        )

        for block in response.content:
            if block.type == "tool_use" and block.name == tool_name:
                return _decode_payload(block.input, tool_name)

        raise MalformedOracleResponse(
            f"No tool_use block found in response for {tool_name}. "
            f"Response content types: {[b.type for b in response.content]}"
        )


def _decode_payload(payload: object, tool_name: str) -> dict[str, Any]:
    """Return the tool payload as a dict, decoding a JSON string if needed."""
    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as e:
            raise MalformedOracleResponse(
                f"Arguments of {tool_name} are not valid JSON: {e}"
            ) from e
    if not isinstance(payload, dict):
        raise MalformedOracleResponse(
            f"Arguments of {tool_name} must be a JSON object, got {type(payload).__name__}"
        )
    return payload
