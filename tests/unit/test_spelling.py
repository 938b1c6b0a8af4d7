import pytest

from contract_nlp.text.spelling import SPELL_CORRECTIONS, SpellCorrector


def test_replaces_known_misspelling_and_scores_fraction() -> None:
    result = SpellCorrector().correct("show contrct 123456")

    assert result.corrected_text == "show contract 123456"
    assert result.confidence == pytest.approx(1 / 3)


def test_unknown_words_keep_original_casing_and_punctuation() -> None:
    result = SpellCorrector().correct("Show CONTRCT, for ACME!")

    assert result.corrected_text == "Show contract for ACME!"
    assert result.confidence == pytest.approx(1 / 4)


def test_no_change_returns_null_corrected_text() -> None:
    result = SpellCorrector().correct("show contract 123456")

    assert result.corrected_text is None
    assert result.confidence == 0.0
    assert result.effective_text == "show contract 123456"


@pytest.mark.parametrize("text", ["", "   ", None])
def test_empty_input_has_zero_confidence(text: str | None) -> None:
    result = SpellCorrector().correct(text)

    assert result.corrected_text is None
    assert result.confidence == 0.0


def test_correction_is_a_fixed_point_after_one_pass() -> None:
    corrector = SpellCorrector()
    first = corrector.correct("shw al expird contrcts crated by vinod aftr 2020")
    second = corrector.correct(first.effective_text)

    assert first.confidence > 0.0
    assert second.corrected_text is None
    assert second.confidence == 0.0


def test_canonical_values_are_never_keys() -> None:
    assert not set(SPELL_CORRECTIONS.values()) & set(SPELL_CORRECTIONS)


def test_dictionary_is_read_only() -> None:
    with pytest.raises(TypeError):
        SPELL_CORRECTIONS["new"] = "value"  # type: ignore[index]
