"""Business-rule validation of extracted headers and filters."""

from __future__ import annotations

import re

from contract_nlp.extract.vocabulary import DOMAIN_HINT_WORDS, GENERAL_QUERY_WORDS
from contract_nlp.schema import (
    BLOCKER,
    INVALID_HEADER,
    MISSING_HEADER,
    EntityFilter,
    ValidationError,
)
from contract_nlp.types import HeaderAnalysis

_SHORT_ALNUM = re.compile(r"\b[a-z]{1,4}\d{1,6}\b", re.ASCII)
_LONG_DIGITS = re.compile(r"\d{4,}", re.ASCII)

MISSING_HEADER_MESSAGE = (
    "Provide at least one identifier (contract/part/customer) or filter (date/status)"
)


class Validator:
    """Turns extraction results into validation errors.

    Validation is deliberately permissive: a query without any identifier or
    filter is still accepted when it reads like a general question ("show all
    contracts") or carries weak domain evidence such as the word "account" or a
    long digit run. Only queries with none of that are rejected.
    """

    def validate(
        self,
        analysis: HeaderAnalysis,
        entities: list[EntityFilter],
        text: str,
    ) -> list[ValidationError]:
        errors = [
            ValidationError(code=INVALID_HEADER, message=issue, severity=BLOCKER)
            for issue in analysis.issues
        ]

        lower = text.lower()
        if analysis.header.has_any() or entities or self.is_general_query(lower, entities):
            return errors
        if self.has_domain_evidence(lower):
            return errors

        errors.append(
            ValidationError(code=MISSING_HEADER, message=MISSING_HEADER_MESSAGE, severity=BLOCKER)
        )
        return errors

    @staticmethod
    def is_general_query(lower: str, entities: list[EntityFilter]) -> bool:
        return bool(entities) or any(word in lower for word in GENERAL_QUERY_WORDS)

    @staticmethod
    def has_domain_evidence(lower: str) -> bool:
        if any(word in lower for word in DOMAIN_HINT_WORDS):
            return True
        return bool(_SHORT_ALNUM.search(lower) or _LONG_DIGITS.search(lower))
