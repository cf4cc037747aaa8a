"""Mapping requester: asks the LLM to assign headers to internal fields.

Builds the German instruction around the header list, forces the
``mapCsvHeaders`` tool, and validates the returned arguments into a
``RawMappingResponse``. Exactly one call per request; no retries here.
"""

from __future__ import annotations

import json

from loguru import logger
from pydantic import ValidationError

from headermap.config import OracleConfig
from headermap.llm.client import HeaderMapLLMClient, MalformedOracleResponse
from headermap.mapping.prompts import (
    MAP_TOOL_DESCRIPTION,
    MAP_TOOL_INPUT_SCHEMA,
    MAP_TOOL_NAME,
    MAPPING_SYSTEM_PROMPT,
    MAPPING_USER_INSTRUCTIONS,
)
from headermap.models.mapping import RawMappingResponse


def build_user_message(headers: list[str]) -> str:
    """Embed the headers verbatim (JSON, umlauts unescaped) in the instruction."""
    return MAPPING_USER_INSTRUCTIONS.format(
        headers_json=json.dumps(headers, ensure_ascii=False)
    )


class MappingRequester:
    """Sends one header list to the oracle and returns its raw mapping.

    Usage::

        requester = MappingRequester(OracleConfig.from_env())
        raw = requester.request_mapping(["E-Mail-Adresse", "Vorname", "Nachname"])
    """

    def __init__(
        self,
        config: OracleConfig,
        llm_client: HeaderMapLLMClient | None = None,
    ) -> None:
        """Initialize the requester.

        Args:
            config: Oracle settings (credentials, model, sampling, timeout).
            llm_client: Client to use instead of one built from ``config``.
                Tests pass a fake here.
        """
        self._config = config
        if llm_client is None:
            llm_client = HeaderMapLLMClient(
                api_key=config.api_key,
                timeout=config.timeout,
                max_attempts=config.max_attempts,
            )
        self._llm = llm_client

    @property
    def config(self) -> OracleConfig:
        return self._config

    def request_mapping(self, headers: list[str]) -> RawMappingResponse:
        """Ask the oracle which header belongs to which internal field.

        Args:
            headers: Trimmed headers in column order.

        Returns:
            The validated tool arguments.

        Raises:
            OracleTransportFailure: If the oracle call could not complete.
            MalformedOracleResponse: If the oracle did not call the tool or
                its arguments do not match the declared shape.
        """
        logger.info(
            "Requesting header mapping | headers={n} model={model}",
            n=len(headers),
            model=self._config.model,
        )
        payload = self._llm.invoke_tool(
            model=self._config.model,
            messages=[{"role": "user", "content": build_user_message(headers)}],
            tool_name=MAP_TOOL_NAME,
            tool_description=MAP_TOOL_DESCRIPTION,
            input_schema=MAP_TOOL_INPUT_SCHEMA,
            max_tokens=self._config.max_tokens,
            temperature=self._config.temperature,
            system=MAPPING_SYSTEM_PROMPT,
        )

        try:
            raw = RawMappingResponse.model_validate(payload)
        except ValidationError as e:
            raise MalformedOracleResponse(
                f"Arguments of {MAP_TOOL_NAME} do not match the expected shape: {e}"
            ) from e

        logger.debug("Raw mapping response: {}", raw.model_dump(by_alias=True))
        return raw
