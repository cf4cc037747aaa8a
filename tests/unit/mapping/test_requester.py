"""Tests for MappingRequester.

Uses a mock LLM client to verify the request contract without API calls.
"""

from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

import pytest

from headermap.config import OracleConfig
from headermap.llm.client import MalformedOracleResponse, OracleTransportFailure
from headermap.mapping.prompts import MAP_TOOL_INPUT_SCHEMA, MAP_TOOL_NAME, MAPPING_SYSTEM_PROMPT
from headermap.mapping.requester import MappingRequester, build_user_message
from headermap.models.mapping import RawMappingResponse


@pytest.fixture()
def config() -> OracleConfig:
    return OracleConfig(api_key="sk-test", model="claude-test", temperature=0.0, max_tokens=256)


@pytest.fixture()
def mock_llm() -> MagicMock:
    llm = MagicMock()
    llm.invoke_tool.return_value = {
        "email": "E-Mail-Adresse",
        "firstName": "Vorname",
        "lastName": "Nachname",
    }
    return llm


class TestBuildUserMessage:
    def test_embeds_headers_verbatim(self) -> None:
        headers = ["E-Mail-Adresse", "Straße", "", "Name"]
        message = build_user_message(headers)
        assert json.dumps(headers, ensure_ascii=False) in message
        assert "Straße" in message

    def test_contains_name_rule(self) -> None:
        message = build_user_message(["Name"])
        assert '"Name"' in message
        assert '"lastName"' in message
        assert "Nachname" in message

    def test_requires_error_on_null(self) -> None:
        message = build_user_message(["Mail"])
        assert "null" in message
        assert '"error"' in message
        assert "MUSST" in message


class TestMappingRequesterRequest:
    def test_invokes_forced_tool(
        self, config: OracleConfig, mock_llm: MagicMock
    ) -> None:
        requester = MappingRequester(config, llm_client=mock_llm)
        requester.request_mapping(["E-Mail-Adresse", "Vorname", "Nachname"])

        mock_llm.invoke_tool.assert_called_once()
        kwargs = mock_llm.invoke_tool.call_args.kwargs
        assert kwargs["model"] == "claude-test"
        assert kwargs["tool_name"] == MAP_TOOL_NAME == "mapCsvHeaders"
        assert kwargs["input_schema"] == MAP_TOOL_INPUT_SCHEMA
        assert kwargs["system"] == MAPPING_SYSTEM_PROMPT
        assert kwargs["max_tokens"] == 256
        assert kwargs["temperature"] == 0.0
        expected_content = build_user_message(["E-Mail-Adresse", "Vorname", "Nachname"])
        assert kwargs["messages"] == [{"role": "user", "content": expected_content}]

    def test_returns_validated_response(
        self, config: OracleConfig, mock_llm: MagicMock
    ) -> None:
        raw = MappingRequester(config, llm_client=mock_llm).request_mapping(["E-Mail-Adresse"])
        assert isinstance(raw, RawMappingResponse)
        assert raw.email == "E-Mail-Adresse"
        assert raw.first_name == "Vorname"
        assert raw.last_name == "Nachname"
        assert raw.error is None

    def test_wrong_payload_shape_is_malformed(
        self, config: OracleConfig, mock_llm: MagicMock
    ) -> None:
        mock_llm.invoke_tool.return_value = {"email": {"header": "Mail"}}
        requester = MappingRequester(config, llm_client=mock_llm)

        with pytest.raises(MalformedOracleResponse, match="expected shape"):
            requester.request_mapping(["Mail"])

    def test_client_malformed_error_propagates(
        self, config: OracleConfig, mock_llm: MagicMock
    ) -> None:
        mock_llm.invoke_tool.side_effect = MalformedOracleResponse("no tool call")

        with pytest.raises(MalformedOracleResponse):
            MappingRequester(config, llm_client=mock_llm).request_mapping(["Mail"])

    def test_transport_failure_propagates_without_retry(
        self, config: OracleConfig, mock_llm: MagicMock
    ) -> None:
        mock_llm.invoke_tool.side_effect = OracleTransportFailure("timeout")

        with pytest.raises(OracleTransportFailure):
            MappingRequester(config, llm_client=mock_llm).request_mapping(["Mail"])
        assert mock_llm.invoke_tool.call_count == 1


class TestMappingRequesterConstruction:
    @patch("headermap.mapping.requester.HeaderMapLLMClient")
    def test_builds_client_from_config(self, mock_client_cls: MagicMock) -> None:
        config = OracleConfig(api_key="sk-abc", timeout=12.5, max_attempts=2)
        requester = MappingRequester(config)

        mock_client_cls.assert_called_once_with(api_key="sk-abc", timeout=12.5, max_attempts=2)
        assert requester.config is config


class TestToolSchema:
    def test_required_fields(self) -> None:
        assert MAP_TOOL_INPUT_SCHEMA["required"] == ["email", "firstName", "lastName"]

    def test_field_types(self) -> None:
        props = MAP_TOOL_INPUT_SCHEMA["properties"]
        assert isinstance(props, dict)
        for key in ("email", "firstName", "lastName"):
            assert props[key]["type"] == ["string", "null"]
        assert props["error"]["type"] == "string"
