"""Tokenization with heuristic splitting of glued words.

Users often type identifiers without spaces ("contract123sumry",
"456789status", "AE125warranty"). After the primary split on delimiters each
token is checked against an ordered table of split strategies. The first
strategy that applies decides the pieces, and every piece is decomposed
again. A token that no strategy claims is kept whole.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from contract_nlp.extract.vocabulary import KNOWN_WORDS, SPLIT_VOCABULARY

_DELIMITERS = re.compile(r"[\s;,&@#$|+\-*/()\[\]{}?!:.=]+")
_QUOTES = "'\"`"
_PART_LIKE = re.compile(r"[A-Z0-9_]*[A-Z][A-Z0-9_]*")

# A split function returns the pieces, or None when the strategy does not apply
# to this match after all.
SplitFn = Callable[[re.Match[str]], "list[str] | None"]


@dataclass(frozen=True, slots=True)
class SplitStrategy:
    """A named (pattern, decomposition) pair tried against whole tokens."""

    name: str
    pattern: re.Pattern[str]
    split: SplitFn


def split_vocabulary(text: str, vocabulary: Sequence[str] = SPLIT_VOCABULARY) -> list[str]:
    """Greedily peel known words off the front of a glued letter run."""

    ordered = sorted(vocabulary, key=len, reverse=True)
    pieces: list[str] = []
    rest = text
    while rest:
        for word in ordered:
            if rest.startswith(word):
                pieces.append(word)
                rest = rest[len(word) :]
                break
        else:
            pieces.append(rest)
            break
    return pieces


def _explicit_identifier(match: re.Match[str]) -> list[str] | None:
    # "contract123456", "part123", "customer12345" stay whole so the extractor
    # can validate the remainder against the prefix's rule.
    return [match.group(0).lower()]


def _part_prefix(match: re.Match[str]) -> list[str] | None:
    # "partabc123" is an explicit part number and stays whole. "parts123" and
    # "partnumber123" open with a vocabulary word and are split after the prefix.
    rest = match.group(2).lower()
    if rest[0] == "s" and rest[1:2].isdigit():
        return ["parts", rest[1:]]
    if split_vocabulary(rest)[0] in SPLIT_VOCABULARY:
        return ["part", rest]
    return [match.group(0).lower()]


def _contract_words(match: re.Match[str]) -> list[str] | None:
    return ["contract", *split_vocabulary(match.group(2).lower())]


def _digits_letters(match: re.Match[str]) -> list[str] | None:
    return [match.group(1), match.group(2).lower()]


def _customer_number(match: re.Match[str]) -> list[str] | None:
    return [
        "customer",
        match.group(2).lower(),
        match.group(3),
        match.group(4).lower(),
    ]


def _contract_part(match: re.Match[str]) -> list[str] | None:
    return ["contract", match.group(2).upper(), match.group(3).lower()]


def _letters_digits_letters(match: re.Match[str]) -> list[str] | None:
    letters = match.group(1)
    # Short or upper-case letter runs are usually part-number prefixes (AE125).
    if letters.lower() not in KNOWN_WORDS and not (len(letters) >= 4 and letters.islower()):
        return None
    return [letters.lower(), match.group(2), match.group(3).lower()]


def _part_suffix(match: re.Match[str]) -> list[str] | None:
    return [match.group(1), match.group(2).lower()]


DEFAULT_STRATEGIES: tuple[SplitStrategy, ...] = (
    SplitStrategy(
        "explicit_identifier",
        re.compile(r"(contract|part|customer)(\d+)", re.IGNORECASE),
        _explicit_identifier,
    ),
    SplitStrategy(
        "part_prefix",
        re.compile(r"(part)([a-z]+\d[a-z0-9]*)", re.IGNORECASE),
        _part_prefix,
    ),
    SplitStrategy(
        "contract_words",
        re.compile(r"(contract)([a-z]+)", re.IGNORECASE),
        _contract_words,
    ),
    SplitStrategy(
        "digits_letters",
        re.compile(r"(\d+)([a-z]+)", re.IGNORECASE),
        _digits_letters,
    ),
    SplitStrategy(
        "customer_number",
        re.compile(r"(customer)([a-z]*)(\d+)([a-z]*)", re.IGNORECASE),
        _customer_number,
    ),
    SplitStrategy(
        "contract_part",
        re.compile(r"(contract)([a-z]{1,4}\d+)([a-z]*)", re.IGNORECASE),
        _contract_part,
    ),
    SplitStrategy(
        "letters_digits_letters",
        re.compile(r"([a-z]+)(\d+)([a-z]*)", re.IGNORECASE),
        _letters_digits_letters,
    ),
    SplitStrategy(
        "part_suffix",
        re.compile(r"([A-Z]+\d+)([a-zA-Z]+)"),
        _part_suffix,
    ),
)


class Tokenizer:
    """Splits a query into normalized tokens.

    Tokens are lower-cased, except part-number-like tokens (upper-case letters
    with optional digits, e.g. ``AE125``), which keep their case.
    """

    def __init__(
        self,
        strategies: Sequence[SplitStrategy] = DEFAULT_STRATEGIES,
        known_words: frozenset[str] = KNOWN_WORDS,
    ) -> None:
        self._strategies = tuple(strategies)
        self._known_words = known_words

    def tokenize(self, text: str | None) -> list[str]:
        tokens: list[str] = []
        for raw in _DELIMITERS.split(text or ""):
            piece = raw.strip(_QUOTES)
            if piece:
                tokens.extend(self.decompose(piece))
        return tokens

    def decompose(self, token: str) -> list[str]:
        """Split one delimiter-free token using the first applicable strategy."""

        if token.lower() in self._known_words:
            return [token.lower()]

        for strategy in self._strategies:
            match = strategy.pattern.fullmatch(token)
            if match is None:
                continue
            pieces = strategy.split(match)
            if pieces is None:
                continue
            pieces = [piece for piece in pieces if piece]
            if len(pieces) <= 1:
                return [_normalize(piece) for piece in pieces] or [_normalize(token)]

            output: list[str] = []
            for piece in pieces:
                output.extend(self.decompose(piece))
            return output

        return [_normalize(token)]


def _normalize(token: str) -> str:
    if _PART_LIKE.fullmatch(token):
        return token
    return token.lower()
