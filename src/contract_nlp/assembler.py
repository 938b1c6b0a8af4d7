"""Packages pipeline outputs into the wire-level QueryResult."""

from __future__ import annotations

from contract_nlp.routing.router import CONTRACTS, ERROR_ACTION, PARTS
from contract_nlp.schema import (
    BLOCKER,
    EntityFilter,
    Header,
    InputTracking,
    QueryMetadata,
    QueryResult,
    ValidationError,
)
from contract_nlp.types import CorrectionResult, ExtractedHeader

DEFAULT_DISPLAY_FIELDS: dict[str, tuple[str, ...]] = {
    CONTRACTS: ("CONTRACT_NUMBER", "CUSTOMER_NAME"),
    PARTS: ("PART_NUMBER", "DESCRIPTION"),
}

# (keywords, field) pairs checked in order against the lower-cased query.
REQUESTED_DISPLAY_FIELDS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("effective date",), "EFFECTIVE_DATE"),
    (("status",), "STATUS"),
    (("expiration", "expiry"), "EXPIRATION_DATE"),
    (("price", "cost"), "TOTAL_VALUE"),
    (("customer name",), "CUSTOMER_NAME"),
    (("created by", "creator"), "CREATED_BY"),
    (("created date", "creation date"), "CREATED_DATE"),
    (("description",), "DESCRIPTION"),
    (("payment terms",), "PAYMENT_TERMS"),
    (("currency",), "CURRENCY"),
)


class ResponseAssembler:
    """Builds QueryResult objects; holds no business rules of its own."""

    def assemble(
        self,
        correction: CorrectionResult,
        header: ExtractedHeader,
        metadata: QueryMetadata,
        entities: list[EntityFilter],
        errors: list[ValidationError],
    ) -> QueryResult:
        return QueryResult(
            header=self._header(correction, header),
            query_metadata=metadata,
            entities=list(entities),
            display_entities=self.display_fields(
                metadata.query_type, entities, correction.effective_text
            ),
            errors=list(errors),
        )

    def error_result(
        self,
        original_input: str,
        code: str,
        message: str,
        *,
        processing_time_ms: float = 0.0,
        correction: CorrectionResult | None = None,
    ) -> QueryResult:
        """Fixed-shape result carrying a single BLOCKER error.

        A finished spell correction is kept in the input tracking.
        """

        if correction is None:
            correction = CorrectionResult(
                original_text=original_input, corrected_text=None, confidence=0.0
            )
        return QueryResult(
            header=self._header(correction, ExtractedHeader()),
            query_metadata=QueryMetadata(
                query_type=CONTRACTS,
                action_type=ERROR_ACTION,
                processing_time_ms=processing_time_ms,
            ),
            errors=[ValidationError(code=code, message=message, severity=BLOCKER)],
        )

    @staticmethod
    def display_fields(query_type: str, entities: list[EntityFilter], text: str) -> list[str]:
        fields: list[str] = list(DEFAULT_DISPLAY_FIELDS.get(query_type, ()))

        def _add(name: str) -> None:
            if name not in fields:
                fields.append(name)

        for entity in entities:
            _add(entity.attribute)

        lower = text.lower()
        for keywords, name in REQUESTED_DISPLAY_FIELDS:
            if any(keyword in lower for keyword in keywords):
                _add(name)
        return fields

    @staticmethod
    def _header(correction: CorrectionResult, header: ExtractedHeader) -> Header:
        return Header(
            contract_number=header.contract_number,
            part_number=header.part_number,
            customer_number=header.customer_number,
            customer_name=header.customer_name,
            created_by=header.created_by,
            input_tracking=InputTracking(
                original_input=correction.original_text,
                corrected_input=correction.corrected_text,
                correction_confidence=correction.confidence,
            ),
        )
