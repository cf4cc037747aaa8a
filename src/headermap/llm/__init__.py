"""LLM client infrastructure for headermap.

Provides the Anthropic API client wrapper with forced tool use, optional
retry, and call logging, plus the oracle failure types it raises.
"""

from headermap.llm.client import (
    HeaderMapLLMClient,
    MalformedOracleResponse,
    OracleTransportFailure,
)

__all__ = ["HeaderMapLLMClient", "OracleTransportFailure", "MalformedOracleResponse"]
