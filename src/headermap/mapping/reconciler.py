"""Result reconciliation for raw oracle mappings.

The oracle is told to explain every null field in ``error``, but that is
not relied upon: when no explanation is given, one is derived here from
the unresolved fields.
"""

from __future__ import annotations

from loguru import logger

from headermap.models.mapping import FieldKey, MappingResult, RawMappingResponse

UNRESOLVED_PREFIX = "Folgende Felder konnten nicht zugeordnet werden: "


def reconcile(raw: RawMappingResponse) -> MappingResult:
    """Turn a raw oracle mapping into a complete ``MappingResult``.

    A non-empty ``raw.error`` is adopted verbatim, even when every field is
    resolved. Otherwise a diagnostic listing the unresolved field keys in
    order email, firstName, lastName is synthesized. With nothing
    unresolved and no error, the diagnostic stays None.

    Args:
        raw: Validated tool arguments returned by the oracle.

    Returns:
        MappingResult with every field present.
    """
    diagnostic: str | None = None
    source: str | None = None

    if raw.error:
        diagnostic = raw.error
        source = "oracle"
    else:
        missing = [f.value for f in FieldKey if raw.header_for(f) is None]
        if missing:
            diagnostic = UNRESOLVED_PREFIX + ", ".join(missing)
            source = "synthesized"

    if source == "oracle":
        logger.warning("Diagnostic from LLM: {}", diagnostic)
    elif source == "synthesized":
        logger.warning("Diagnostic (auto-filled): {}", diagnostic)

    return MappingResult(
        email=raw.email,
        first_name=raw.first_name,
        last_name=raw.last_name,
        diagnostic=diagnostic,
        diagnostic_source=source,
    )
