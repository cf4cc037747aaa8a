"""Header mapping models.

These models define the contract between the oracle call and the
reconciliation step. ``RawMappingResponse`` is the tool-argument payload
as the LLM returns it; ``MappingResult`` is the reconciled record handed
back to callers.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class FieldKey(StrEnum):
    """Internal fields a CSV header can be mapped to.

    Iteration order is the fixed reporting order used in diagnostics.
    """

    EMAIL = "email"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"


_ATTRIBUTE_BY_FIELD: dict[FieldKey, str] = {
    FieldKey.EMAIL: "email",
    FieldKey.FIRST_NAME: "first_name",
    FieldKey.LAST_NAME: "last_name",
}


class RawMappingResponse(BaseModel):
    """Arguments of the oracle's ``mapCsvHeaders`` tool call.

    A key missing from the payload is read as ``None`` and therefore
    counts as unresolved downstream.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    email: str | None = Field(default=None, description="Header holding the e-mail address")
    first_name: str | None = Field(
        default=None, alias="firstName", description="Header holding the first name"
    )
    last_name: str | None = Field(
        default=None, alias="lastName", description="Header holding the last name"
    )
    error: str | None = Field(
        default=None, description="Oracle explanation for fields it could not map"
    )

    def header_for(self, field: FieldKey) -> str | None:
        return getattr(self, _ATTRIBUTE_BY_FIELD[field])


class MappingResult(BaseModel):
    """Final header mapping for one CSV file.

    ``None`` marks an unresolved field. Whenever at least one field is
    unresolved, ``diagnostic`` explains which, and ``diagnostic_source``
    records whether the text came from the oracle or was synthesized
    locally.
    """

    model_config = ConfigDict(populate_by_name=True)

    email: str | None = Field(..., description="Header mapped to email, or None")
    first_name: str | None = Field(
        ..., alias="firstName", description="Header mapped to firstName, or None"
    )
    last_name: str | None = Field(
        ..., alias="lastName", description="Header mapped to lastName, or None"
    )
    diagnostic: str | None = Field(
        default=None, description="Human-readable note on unresolved fields"
    )
    diagnostic_source: Literal["oracle", "synthesized"] | None = Field(
        default=None, description="Where the diagnostic text came from"
    )

    def header_for(self, field: FieldKey) -> str | None:
        """Return the header assigned to ``field``, or None if unresolved."""
        return getattr(self, _ATTRIBUTE_BY_FIELD[field])

    @property
    def unresolved_fields(self) -> list[FieldKey]:
        """Unresolved field keys in fixed enumeration order."""
        return [f for f in FieldKey if self.header_for(f) is None]

    @property
    def is_complete(self) -> bool:
        return not self.unresolved_fields

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize with camelCase field keys, keeping unresolved fields as null."""
        return self.model_dump(by_alias=True, exclude={"diagnostic_source"})
