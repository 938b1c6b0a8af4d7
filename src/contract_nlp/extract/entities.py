"""Identifier and filter extraction from tokenized queries."""

from __future__ import annotations

import re

from contract_nlp.config import IdentifierRules
from contract_nlp.extract.vocabulary import (
    COMMAND_WORDS,
    CUSTOMER_CONTEXT_WORDS,
    CUSTOMER_NAME_PHRASES,
)
from contract_nlp.schema import EntityFilter
from contract_nlp.types import ExtractedHeader, HeaderAnalysis

_YEAR_TOKEN = re.compile(r"(?:19|20)\d{2}", re.ASCII)
_YEAR_IN_TEXT = re.compile(r"\b(?:19|20)\d{2}\b")
_DIGITS = re.compile(r"\d+", re.ASCII)
_DIGITS_THEN_LETTERS = re.compile(r"\d+[a-z]+", re.ASCII)
_PREFIXED = re.compile(r"(contract|part|customer)([a-z0-9_]*\d[a-z0-9_]*)", re.ASCII)
_PART_CANDIDATE = re.compile(r"[A-Za-z0-9_\-]+")
_CREATOR = re.compile(r"\b(?:created\s+by|by)\s+([a-zA-Z]+)")
_QUOTED_NAME = re.compile(r"""(?:^|\s)['"]([^'"]+)['"](?=\s|$|[.,;:!?])""")
_NAMED_CUSTOMER = re.compile(r"(?:account\s+name|customer\s+name)\s+([a-zA-Z]+)")
_RANGE_KEYWORD = re.compile(r"\b(?:after|before|between)\b")
_DATE_LIKE = re.compile(
    r"\d{1,2}-[a-z0-9]{3}-\d{4}|\b[a-z]{3}\s+\d{4}\b|\b(?:19|20)\d{2}\b"
)

STATUS_TRIGGERS: tuple[str, ...] = ("status", "expired", "active", "inactive")
STATUS_VALUES: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("EXPIRED", re.compile(r"\bexpired\b")),
    ("ACTIVE", re.compile(r"\bactive\b")),
    ("INACTIVE", re.compile(r"\binactive\b")),
    ("PENDING", re.compile(r"\bpending\b")),
)
FAILURE_KEYWORDS: tuple[str, ...] = ("failed", "failure", "issues", "defect")


class EntityExtractor:
    """Finds header identifiers and filter entities in a query.

    The header pass walks the tokens once, using context flags computed from
    the whole query to settle ambiguous bare numbers. The filter pass is an
    independent keyword scan over the lower-cased text.
    """

    def __init__(
        self,
        rules: IdentifierRules | None = None,
        *,
        source: str = "user_input",
    ) -> None:
        self.rules = rules or IdentifierRules()
        self.source = source
        self._contract_pattern = re.compile(rf"\d{{{self.rules.contract_min_digits},}}", re.ASCII)
        self._part_pattern = re.compile(rf"[A-Za-z0-9]{{{self.rules.part_min_length},}}", re.ASCII)
        self._customer_pattern = re.compile(
            rf"\d{{{self.rules.customer_min_digits},{self.rules.customer_max_digits}}}",
            re.ASCII,
        )

    def extract_header(self, text: str, tokens: list[str]) -> HeaderAnalysis:
        """Populate header fields from tokens and collect format issues."""

        lower = text.lower().strip()
        lowered_tokens = [token.lower() for token in tokens]
        header = ExtractedHeader()
        issues: list[str] = []

        has_customer_context = any(
            token in CUSTOMER_CONTEXT_WORDS for token in lowered_tokens
        ) or any(phrase in lower for phrase in CUSTOMER_NAME_PHRASES)
        has_creator_context = "created by" in lower or " by " in f" {lower} "
        has_contract_context = "contract" in lower

        header.customer_name = self._extract_customer_name(text)
        if has_creator_context:
            header.created_by = self._extract_creator(lower)
        names = {
            word
            for name in (header.customer_name, header.created_by)
            if name
            for word in name.split()
        }

        for token in tokens:
            token_lower = token.lower()
            if not token_lower or token_lower in COMMAND_WORDS or token_lower in names:
                continue
            if _YEAR_TOKEN.fullmatch(token_lower):
                continue

            prefixed = _PREFIXED.fullmatch(token_lower)
            if prefixed is not None:
                self._apply_prefixed(prefixed.group(1), prefixed.group(2), header, issues)
            elif _DIGITS.fullmatch(token_lower):
                self._apply_number(
                    token_lower,
                    header,
                    issues,
                    has_customer_context=has_customer_context,
                    has_contract_context=has_contract_context,
                )
            elif self._is_part_candidate(token):
                if has_contract_context and _DIGITS_THEN_LETTERS.fullmatch(token_lower):
                    continue
                header.part_number = token.upper()

        return HeaderAnalysis(header=header, issues=issues)

    def extract_filters(self, text: str) -> list[EntityFilter]:
        """Detect date and status filters with keyword triggers."""

        lower = text.lower()
        entities: list[EntityFilter] = []

        year = _YEAR_IN_TEXT.search(lower)
        if year is not None and ("created in" in lower or "in " in lower):
            entities.append(self._filter("CREATED_DATE", "=", year.group(0)))

        if _RANGE_KEYWORD.search(lower):
            date = _DATE_LIKE.search(lower)
            if date is not None:
                entities.append(self._filter("CREATED_DATE", "between", date.group(0)))

        if any(trigger in lower for trigger in STATUS_TRIGGERS):
            for value, pattern in STATUS_VALUES:
                if pattern.search(lower):
                    entities.append(self._filter("STATUS", "=", value))
                    break

        if any(keyword in lower for keyword in FAILURE_KEYWORDS):
            entities.append(self._filter("STATUS", "=", "FAILED"))

        return entities

    def _apply_prefixed(
        self, prefix: str, remainder: str, header: ExtractedHeader, issues: list[str]
    ) -> None:
        rules = self.rules
        if prefix == "contract":
            if self._contract_pattern.fullmatch(remainder):
                header.contract_number = remainder
            else:
                issues.append(
                    f"Contract number '{remainder}' must be {rules.contract_min_digits}+ digits"
                )
        elif prefix == "part":
            if self._part_pattern.fullmatch(remainder):
                header.part_number = remainder.upper()
            else:
                issues.append(
                    f"Part number '{remainder}' must be {rules.part_min_length}+ "
                    "alphanumeric characters"
                )
        elif self._customer_pattern.fullmatch(remainder):
            header.customer_number = remainder
        else:
            issues.append(
                f"Customer number '{remainder}' must be "
                f"{rules.customer_min_digits}-{rules.customer_max_digits} digits"
            )

    def _apply_number(
        self,
        token: str,
        header: ExtractedHeader,
        issues: list[str],
        *,
        has_customer_context: bool,
        has_contract_context: bool,
    ) -> None:
        # Bare numbers are ambiguous; resolve by context, first match wins.
        length = len(token)
        min_contract = self.rules.contract_min_digits
        if has_customer_context and self._customer_pattern.fullmatch(token):
            header.customer_number = token
        elif has_contract_context and length >= min_contract:
            if header.contract_number is None:
                header.contract_number = token
        elif has_contract_context and length >= 3:
            issues.append(
                f"Contract number '{token}' must be {min_contract}+ digits "
                f"(found: {length} digits)"
            )
        elif length >= min_contract and header.contract_number is None:
            header.contract_number = token
        elif (
            self.rules.customer_min_digits <= length <= self.rules.customer_max_digits
            and header.customer_number is None
            and not has_contract_context
        ):
            header.customer_number = token

    def _is_part_candidate(self, token: str) -> bool:
        if len(token) < self.rules.part_min_length or not _PART_CANDIDATE.fullmatch(token):
            return False
        has_letter = any(char.isalpha() for char in token)
        has_digit = any(char.isdigit() for char in token)
        if has_letter and has_digit:
            return True
        if has_letter and token == token.upper():
            return True
        return "_" in token or "-" in token

    @staticmethod
    def _extract_creator(lower: str) -> str | None:
        for match in _CREATOR.finditer(lower):
            name = match.group(1)
            if name not in COMMAND_WORDS:
                return name
        return None

    @staticmethod
    def _extract_customer_name(text: str) -> str | None:
        quoted = _QUOTED_NAME.search(text)
        if quoted is not None:
            name = quoted.group(1).strip().lower()
            if name:
                return name
        named = _NAMED_CUSTOMER.search(text.lower())
        if named is not None and named.group(1) not in COMMAND_WORDS:
            return named.group(1)
        return None

    def _filter(self, attribute: str, operation: str, value: str) -> EntityFilter:
        return EntityFilter(
            attribute=attribute,
            operation=operation,
            value=value,
            source=self.source,
        )
