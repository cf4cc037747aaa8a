"""Pydantic data models shared across headermap components.

Re-exported for convenient imports:
    from headermap.models import FieldKey, MappingResult, RawMappingResponse
"""

from headermap.models.mapping import FieldKey, MappingResult, RawMappingResponse

__all__ = [
    "FieldKey",
    "RawMappingResponse",
    "MappingResult",
]
