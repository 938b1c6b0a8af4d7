"""Per-query working models shared between pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class CorrectionResult:
    """Spell-correction outcome for one raw query."""

    original_text: str
    corrected_text: str | None
    confidence: float

    @property
    def effective_text(self) -> str:
        return self.corrected_text if self.corrected_text is not None else self.original_text


@dataclass(slots=True)
class ExtractedHeader:
    """Identifier fields collected while scanning tokens."""

    contract_number: str | None = None
    part_number: str | None = None
    customer_number: str | None = None
    customer_name: str | None = None
    created_by: str | None = None

    def has_any(self) -> bool:
        return any(
            value is not None
            for value in (
                self.contract_number,
                self.part_number,
                self.customer_number,
                self.customer_name,
                self.created_by,
            )
        )


@dataclass(slots=True)
class HeaderAnalysis:
    """Extracted header plus the format issues found on the way."""

    header: ExtractedHeader
    issues: list[str] = field(default_factory=list)


@dataclass(slots=True)
class IntentDecision:
    """Coarse intent routing result for a query."""

    route: str
    reason: str
    intent_type: str
    original_input: str
    corrected_input: str | None = None
    contract_id: str | None = None
    parts_keywords: list[str] = field(default_factory=list)
    create_keywords: list[str] = field(default_factory=list)
    past_tense: bool = False
    context_score: float = 0.0
    business_rule_violation: str | None = None
    message: str | None = None
    explanation: str | None = None
    suggestion: str | None = None
