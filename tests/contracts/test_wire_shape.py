import json
import re

import pytest

from contract_nlp import QueryPipeline, QueryResult

SAMPLE_QUERIES = [
    "show contract 123456",
    "show contract 123",
    "show contrct 123456 failed parts",
    "contracts created by vinod after 1-Jan-2020",
    "expired contracts",
    "shw al expird contrcts",
    "parts AE125 created by vinod",
    "contractAE125status",
    "customerabc12345xyz",
    "contracts for 'Siemens Energy' with effective date",
    "list display find get show",
    "hello there",
    "",
    "   ",
    "!!! ??? ...",
]


def test_json_shape_has_every_key_with_explicit_nulls() -> None:
    payload = json.loads(QueryPipeline().process("expired contracts").to_json())

    assert set(payload) == {"header", "queryMetadata", "entities", "displayEntities", "errors"}
    assert set(payload["header"]) == {
        "contractNumber",
        "partNumber",
        "customerNumber",
        "customerName",
        "createdBy",
        "inputTracking",
    }
    assert payload["header"]["contractNumber"] is None
    assert set(payload["header"]["inputTracking"]) == {
        "originalInput",
        "correctedInput",
        "correctionConfidence",
    }
    assert payload["header"]["inputTracking"]["correctedInput"] is None
    assert set(payload["queryMetadata"]) == {"queryType", "actionType", "processingTimeMs"}
    assert payload["entities"] == [
        {"attribute": "STATUS", "operation": "=", "value": "EXPIRED", "source": "user_input"}
    ]


@pytest.mark.parametrize("text", SAMPLE_QUERIES)
def test_json_round_trip_is_field_for_field(text: str) -> None:
    result = QueryPipeline().process(text)

    restored = QueryResult.from_json(result.to_json())

    assert restored == result
    assert restored.to_dict() == result.to_dict()


@pytest.mark.parametrize("text", SAMPLE_QUERIES)
def test_result_invariants(text: str) -> None:
    result = QueryPipeline().process(text)
    header = result.header
    tracking = header.input_tracking

    assert 0.0 <= tracking.correction_confidence <= 1.0
    assert (tracking.corrected_input is None) == (tracking.correction_confidence == 0.0)
    assert tracking.original_input == text
    if header.part_number is not None:
        assert header.part_number == header.part_number.upper()
        assert len(header.part_number) >= 3
    if header.contract_number is not None:
        assert re.fullmatch(r"\d{6,}", header.contract_number)
    if result.has_blockers:
        assert result.query_metadata.action_type == "error"
    assert len(result.display_entities) == len(set(result.display_entities))


@pytest.mark.parametrize("text", SAMPLE_QUERIES)
def test_correction_is_idempotent(text: str) -> None:
    pipeline = QueryPipeline()
    first = pipeline.process(text)
    effective = first.header.input_tracking.corrected_input or text

    second = pipeline.process(effective)

    assert second.header.input_tracking.corrected_input is None
    assert second.header.input_tracking.correction_confidence == 0.0


def test_command_words_alone_populate_nothing() -> None:
    result = QueryPipeline().process("list display find get show")

    header = result.header
    assert header.contract_number is None
    assert header.part_number is None
    assert header.customer_number is None
    assert header.customer_name is None
    assert header.created_by is None
