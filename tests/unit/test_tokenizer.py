import pytest

from contract_nlp.text.tokenizer import Tokenizer, split_vocabulary


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("contract123sumry", ["contract", "123", "sumry"]),
        ("456789status", ["456789", "status"]),
        ("contractsiemensaccount", ["contract", "siemens", "account"]),
        ("customerabc12345xyz", ["customer", "abc", "12345", "xyz"]),
        ("contractAE125status", ["contract", "AE125", "status"]),
        ("AE125warranty", ["AE125", "warranty"]),
        ("contract123456", ["contract123456"]),
        ("customer12345", ["customer12345"]),
        ("partabc123", ["partabc123"]),
        ("parts123", ["parts", "123"]),
        ("partnumber123", ["part", "number", "123"]),
    ],
)
def test_glued_words_are_decomposed(text: str, expected: list[str]) -> None:
    assert Tokenizer().tokenize(text) == expected


def test_primary_split_on_delimiters() -> None:
    tokens = Tokenizer().tokenize("show contract#123456; status=active (expired)?")

    assert tokens == ["show", "contract", "123456", "status", "active", "expired"]


def test_tokens_are_lowercased_except_part_numbers() -> None:
    tokens = Tokenizer().tokenize("Show Parts FOR AE125 and ae126")

    assert tokens == ["show", "parts", "for", "AE125", "and", "ae126"]


def test_quotes_are_stripped() -> None:
    assert Tokenizer().tokenize("customer name 'siemens'") == ["customer", "name", "siemens"]


def test_unsplittable_token_is_kept_whole() -> None:
    assert Tokenizer().tokenize("vinod") == ["vinod"]


@pytest.mark.parametrize("text", ["", None, "  ,;  "])
def test_empty_input_gives_no_tokens(text: str | None) -> None:
    assert Tokenizer().tokenize(text) == []


def test_split_vocabulary_prefers_longest_word() -> None:
    assert split_vocabulary("partsstatus") == ["parts", "status"]
    assert split_vocabulary("underxyz") == ["under", "xyz"]
