"""Configuration models for the query understanding pipeline."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class IdentifierRules(BaseModel):
    """Format constraints applied to extracted identifiers."""

    contract_min_digits: int = Field(default=6, ge=1)
    part_min_length: int = Field(default=3, ge=1)
    customer_min_digits: int = Field(default=4, ge=1)
    customer_max_digits: int = Field(default=8, ge=1)

    @model_validator(mode="after")
    def _check_customer_range(self) -> "IdentifierRules":
        if self.customer_max_digits < self.customer_min_digits:
            raise ValueError("customer_max_digits must be >= customer_min_digits")
        return self


class PipelineConfig(BaseModel):
    """Configures pipeline stages and per-query telemetry."""

    identifiers: IdentifierRules = Field(default_factory=IdentifierRules)
    spell_correction: bool = True
    entity_source: str = Field(default="user_input", min_length=1)
    trace_capacity: int = Field(default=1000, ge=1)
