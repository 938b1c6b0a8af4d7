"""Wire models for the structured query result.

Every optional field is always serialized (as ``null`` when unset) so that
consumers can rely on a fixed shape. Keys are camelCase on the wire while the
Python attributes stay snake_case.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

BLOCKER = "BLOCKER"

INVALID_HEADER = "INVALID_HEADER"
MISSING_HEADER = "MISSING_HEADER"
PROCESSING_ERROR = "PROCESSING_ERROR"


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InputTracking(_WireModel):
    original_input: str
    corrected_input: str | None = None
    correction_confidence: float = Field(default=0.0, ge=0.0, le=1.0)


class Header(_WireModel):
    contract_number: str | None = None
    part_number: str | None = None
    customer_number: str | None = None
    customer_name: str | None = None
    created_by: str | None = None
    input_tracking: InputTracking


class QueryMetadata(_WireModel):
    query_type: str
    action_type: str
    processing_time_ms: float = 0.0


class EntityFilter(_WireModel):
    """A non-identifier predicate such as a status or date constraint."""

    attribute: str
    operation: str
    value: str
    source: str


class ValidationError(_WireModel):
    code: str
    message: str
    severity: str = BLOCKER

    @property
    def is_blocker(self) -> bool:
        return self.severity == BLOCKER


class QueryResult(_WireModel):
    """Top-level result handed to the UI layer."""

    header: Header
    query_metadata: QueryMetadata
    entities: list[EntityFilter] = Field(default_factory=list)
    display_entities: list[str] = Field(default_factory=list)
    errors: list[ValidationError] = Field(default_factory=list)

    @property
    def has_blockers(self) -> bool:
        return any(error.is_blocker for error in self.errors)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

    def to_json(self, *, indent: int | None = 2) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)

    @classmethod
    def from_json(cls, payload: str | bytes) -> "QueryResult":
        return cls.model_validate_json(payload)
