"""Header mapping pipeline.

Runs extraction, the oracle request and reconciliation once, in order.
Hard failures (no headers, transport failure, malformed response)
propagate unchanged; unresolved fields end up in the returned result.
"""

from __future__ import annotations

from loguru import logger

from headermap.io.csv_headers import NoHeadersFound, extract_headers
from headermap.llm.client import MalformedOracleResponse, OracleTransportFailure
from headermap.mapping.reconciler import reconcile
from headermap.mapping.requester import MappingRequester
from headermap.models.mapping import FieldKey, MappingResult


def map_headers(raw_text: str, requester: MappingRequester) -> MappingResult:
    """Map the header row of CSV text onto email, firstName and lastName.

    Args:
        raw_text: Full CSV file content.
        requester: Configured requester used for the single oracle call.

    Returns:
        Reconciled MappingResult.

    Raises:
        NoHeadersFound: If the CSV text has no header row.
        OracleTransportFailure: If the oracle could not be reached.
        MalformedOracleResponse: If the oracle answered in the wrong shape.
    """
    # Step 1: Extract headers
    try:
        headers = extract_headers(raw_text)
    except NoHeadersFound as e:
        logger.error("Header extraction failed: {}", e)
        raise
    logger.info("Found {} headers: {}", len(headers), headers)

    # Step 2: Ask the oracle
    try:
        raw = requester.request_mapping(headers)
    except OracleTransportFailure as e:
        logger.error("Oracle unavailable: {}", e)
        raise
    except MalformedOracleResponse as e:
        logger.error("Oracle response rejected: {}", e)
        raise

    # Step 3: Reconcile
    result = reconcile(raw)

    for name in find_unknown_headers(result, headers):
        logger.warning("Mapped header {!r} is not in the CSV header row", name)

    logger.info(
        "Header mapping complete | resolved={resolved}/{total}",
        resolved=len(FieldKey) - len(result.unresolved_fields),
        total=len(FieldKey),
    )
    return result


def find_unknown_headers(result: MappingResult, headers: list[str]) -> list[str]:
    """Return mapped header names that do not occur in ``headers``.

    The result is not altered; callers decide what to do with these.
    """
    known = set(headers)
    unknown: list[str] = []
    for field in FieldKey:
        name = result.header_for(field)
        if name is not None and name not in known:
            unknown.append(name)
    return unknown
