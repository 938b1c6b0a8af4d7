import pytest

from contract_nlp.routing.intent import (
    PARTS_CREATE_EXPLANATION,
    PARTS_CREATE_MESSAGE,
    PARTS_CREATE_SUGGESTION,
    IntentClassifier,
)
from contract_nlp.text.spelling import SpellCorrector


def _classify(text: str):
    return IntentClassifier().classify(SpellCorrector().correct(text))


@pytest.mark.parametrize(
    ("text", "route", "intent_type"),
    [
        ("show contract 123456", "CONTRACT", "CONTRACT_ID_QUERY"),
        ("show all expired contracts", "CONTRACT", "GENERAL_CONTRACT_QUERY"),
        ("show parts for contract 123456", "PARTS", "PARTS_QUERY"),
        ("how to create a contract", "HELP", "HELP_REQUEST"),
        ("create new parts", "PARTS_CREATE_ERROR", "BUSINESS_RULE_VIOLATION"),
        ("", "ERROR", "INVALID_INPUT"),
    ],
)
def test_routes(text: str, route: str, intent_type: str) -> None:
    decision = _classify(text)

    assert decision.route == route
    assert decision.intent_type == intent_type


@pytest.mark.parametrize(
    "text",
    [
        "contracts created by vinod",
        "contracts created in 2024",
        "contracts created after 1-jan-2020",
        "contracts created between jan 2020 and dec 2021",
    ],
)
def test_past_tense_created_is_an_informational_contract_query(text: str) -> None:
    decision = _classify(text)

    assert decision.route == "CONTRACT"
    assert decision.past_tense is True
    assert "create" in decision.create_keywords
    assert decision.context_score > 0.0


def test_created_without_temporal_preposition_is_still_help() -> None:
    decision = _classify("created contract steps")

    assert decision.route == "HELP"
    assert decision.past_tense is False


def test_parts_creation_has_canned_response() -> None:
    decision = _classify("how do I add a part")

    assert decision.route == "PARTS_CREATE_ERROR"
    assert decision.message == PARTS_CREATE_MESSAGE
    assert decision.explanation == PARTS_CREATE_EXPLANATION
    assert decision.suggestion == PARTS_CREATE_SUGGESTION
    assert decision.business_rule_violation == "Parts creation is not allowed"


def test_misspellings_are_corrected_before_routing() -> None:
    decision = _classify("shw prts for contrct 123456")

    assert decision.route == "PARTS"
    assert decision.corrected_input == "show parts for contract 123456"
    assert decision.contract_id == "123456"


def test_contract_id_lookup_order() -> None:
    classifier = IntentClassifier()

    assert classifier.find_contract_id(["4567", "123456"]) == "123456"
    assert classifier.find_contract_id(["contracts", "4567"]) == "4567"
    assert classifier.find_contract_id(["contract98765"]) == "98765"
    assert classifier.find_contract_id(["show"]) is None
