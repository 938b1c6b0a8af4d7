"""Coarse intent routing: contract lookups, parts lookups and help requests."""

from __future__ import annotations

import logging
import re

from contract_nlp.extract.vocabulary import (
    CREATE_KEYWORDS,
    CREATE_PHRASES,
    PARTS_KEYWORDS,
    TEMPORAL_PREPOSITIONS,
)
from contract_nlp.types import CorrectionResult, IntentDecision

logger = logging.getLogger(__name__)

CONTRACT = "CONTRACT"
PARTS = "PARTS"
HELP = "HELP"
PARTS_CREATE_ERROR = "PARTS_CREATE_ERROR"
ERROR = "ERROR"

PARTS_CREATE_MESSAGE = "Parts cannot be created through this system"
PARTS_CREATE_EXPLANATION = "Parts are loaded from Excel files and cannot be created manually"
PARTS_CREATE_SUGGESTION = "Use 'show parts for contract [ID]' to view existing parts"
PARTS_CREATE_VIOLATION = "Parts creation is not allowed"

PAST_TENSE_SCORE = 9.0

_WORDS = re.compile(r"[a-z0-9]+")
_SIX_DIGITS = re.compile(r"\d{6}", re.ASCII)
_SHORT_ID = re.compile(r"\d{4,8}", re.ASCII)
_PREFIXED_CONTRACT = re.compile(r"contract(\d{4,})", re.ASCII)


def _keyword_pattern(keyword: str) -> re.Pattern[str]:
    # Simple inflections so "created" counts as "create" and "lines" as "line".
    return re.compile(rf"\b{re.escape(keyword)}(?:s|es|d|ed)?\b")


_PARTS_PATTERNS = {keyword: _keyword_pattern(keyword) for keyword in sorted(PARTS_KEYWORDS)}
_CREATE_PATTERNS = {keyword: _keyword_pattern(keyword) for keyword in sorted(CREATE_KEYWORDS)}


class IntentClassifier:
    """Routes a query to CONTRACT, PARTS, HELP, PARTS_CREATE_ERROR or ERROR.

    Keyword sets are checked in a fixed order:

    1. parts + creation keywords (not past tense) -> PARTS_CREATE_ERROR,
    2. parts keywords -> PARTS,
    3. creation keywords (not past tense) -> HELP,
    4. anything else -> CONTRACT.

    A query that says "created" together with a temporal preposition
    ("contracts created by vinod", "created in 2024") is past tense. Its
    creation keyword asks about existing records, so it never reaches the
    HELP or PARTS_CREATE_ERROR branches.
    """

    def classify(self, correction: CorrectionResult) -> IntentDecision:
        original = correction.original_text
        text = correction.effective_text
        lower = text.lower()
        if not lower.strip():
            return IntentDecision(
                route=ERROR,
                reason="Input is empty",
                intent_type="INVALID_INPUT",
                original_input=original,
                corrected_input=correction.corrected_text,
            )

        words = _WORDS.findall(lower)
        parts_found = [kw for kw, pattern in _PARTS_PATTERNS.items() if pattern.search(lower)]
        create_found = [kw for kw, pattern in _CREATE_PATTERNS.items() if pattern.search(lower)]
        create_found.extend(phrase for phrase in CREATE_PHRASES if phrase in lower)
        past_tense = self.is_past_tense(words)
        contract_id = self.find_contract_id(words)

        decision = IntentDecision(
            route=CONTRACT,
            reason="",
            intent_type="",
            original_input=original,
            corrected_input=correction.corrected_text,
            contract_id=contract_id,
            parts_keywords=parts_found,
            create_keywords=create_found,
            past_tense=past_tense,
        )

        if parts_found and create_found and not past_tense:
            decision.route = PARTS_CREATE_ERROR
            decision.reason = "Parts creation not supported - parts are loaded from Excel files"
            decision.intent_type = "BUSINESS_RULE_VIOLATION"
            decision.business_rule_violation = PARTS_CREATE_VIOLATION
            decision.message = PARTS_CREATE_MESSAGE
            decision.explanation = PARTS_CREATE_EXPLANATION
            decision.suggestion = PARTS_CREATE_SUGGESTION
        elif parts_found:
            decision.route = PARTS
            decision.reason = f"Input contains parts-related keywords: {parts_found}"
            decision.intent_type = "PARTS_QUERY"
        elif create_found and not past_tense:
            decision.route = HELP
            decision.reason = f"Input contains creation/help keywords: {create_found}"
            decision.intent_type = "HELP_REQUEST"
        else:
            decision.reason = "Default routing to contract model"
            if contract_id is not None:
                decision.reason += f" (Contract ID: {contract_id})"
                decision.intent_type = "CONTRACT_ID_QUERY"
            else:
                decision.intent_type = "GENERAL_CONTRACT_QUERY"
            if past_tense:
                logger.debug("past-tense override applied to %r", text)
                decision.reason += " [past-tense query detected]"
                decision.context_score = PAST_TENSE_SCORE

        return decision

    @staticmethod
    def is_past_tense(words: list[str]) -> bool:
        return "created" in words and any(word in TEMPORAL_PREPOSITIONS for word in words)

    @staticmethod
    def find_contract_id(words: list[str]) -> str | None:
        for pattern in (_SIX_DIGITS, _SHORT_ID):
            for word in words:
                if pattern.fullmatch(word):
                    return word
        for word in words:
            prefixed = _PREFIXED_CONTRACT.fullmatch(word)
            if prefixed is not None:
                return prefixed.group(1)
        return None
