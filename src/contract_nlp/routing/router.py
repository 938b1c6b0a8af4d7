"""Maps extracted headers and filters to a query type and action type."""

from __future__ import annotations

from contract_nlp.schema import EntityFilter, QueryMetadata, ValidationError
from contract_nlp.types import ExtractedHeader

CONTRACTS = "CONTRACTS"
PARTS = "PARTS"

ERROR_ACTION = "error"
GENERAL_ACTION = "general_query"

_HEADER_ACTIONS: tuple[tuple[str, str], ...] = (
    ("contract_number", "contracts_by_contractNumber"),
    ("part_number", "parts_by_partNumber"),
    ("customer_number", "contracts_by_customerNumber"),
    ("customer_name", "contracts_by_customerName"),
    ("created_by", "contracts_by_createdBy"),
)

_ENTITY_ACTIONS: dict[str, str] = {
    "CREATED_DATE": "contracts_by_date",
    "STATUS": "contracts_by_status",
}


class Router:
    """Deterministic decision table evaluated in fixed priority order."""

    def route(
        self,
        header: ExtractedHeader,
        entities: list[EntityFilter],
        errors: list[ValidationError],
    ) -> QueryMetadata:
        if any(error.is_blocker for error in errors):
            return QueryMetadata(query_type=CONTRACTS, action_type=ERROR_ACTION)

        query_type = (
            PARTS
            if header.part_number is not None and header.contract_number is None
            else CONTRACTS
        )
        return QueryMetadata(query_type=query_type, action_type=self.action_type(header, entities))

    @staticmethod
    def action_type(header: ExtractedHeader, entities: list[EntityFilter]) -> str:
        for field_name, action in _HEADER_ACTIONS:
            if getattr(header, field_name) is not None:
                return action
        if entities:
            return _ENTITY_ACTIONS.get(entities[0].attribute, "contracts_by_filter")
        return GENERAL_ACTION
