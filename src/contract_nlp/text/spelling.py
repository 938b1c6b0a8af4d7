"""Dictionary-based spell correction for short chat queries."""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType

from contract_nlp.types import CorrectionResult

_NON_ALNUM = re.compile(r"[^a-z0-9]")

# Canonical values must never appear as keys, otherwise a second pass would
# keep rewriting already corrected text.
SPELL_CORRECTIONS: Mapping[str, str] = MappingProxyType(
    {
        # contracts
        "contrct": "contract",
        "contrat": "contract",
        "contarct": "contract",
        "cntract": "contract",
        "conract": "contract",
        "kontrct": "contract",
        "kontract": "contract",
        "kontrakt": "contract",
        "contrcts": "contracts",
        "contarcts": "contracts",
        "cntracts": "contracts",
        "contracs": "contracts",
        "kontracts": "contracts",
        "agrement": "agreement",
        # customers and accounts
        "custmer": "customer",
        "custmr": "customer",
        "cstomer": "customer",
        "custmor": "customer",
        "cutomer": "customer",
        "custmers": "customers",
        "accnt": "account",
        "acnt": "account",
        "acunt": "account",
        "accunt": "account",
        "acount": "account",
        "numbr": "number",
        "numer": "number",
        "compny": "company",
        "corprate": "corporate",
        "boieng": "boeing",
        "honeywel": "honeywell",
        # parts
        "prt": "part",
        "prts": "parts",
        "parst": "parts",
        "partz": "parts",
        "prduct": "product",
        "prodcut": "product",
        "componet": "component",
        "componets": "components",
        "manufacterer": "manufacturer",
        "manufactuer": "manufacturer",
        "manufactureer": "manufacturer",
        "warrenty": "warranty",
        "warrnty": "warranty",
        "stok": "stock",
        "sotck": "stock",
        "avalable": "available",
        "availble": "available",
        "pricng": "pricing",
        "priceing": "pricing",
        # statuses and outcomes
        "statuss": "status",
        "statuz": "status",
        "activ": "active",
        "actv": "active",
        "actve": "active",
        "expird": "expired",
        "exipred": "expired",
        "inactve": "inactive",
        "pendng": "pending",
        "faild": "failed",
        "faield": "failed",
        "failded": "failed",
        "failre": "failure",
        "isses": "issues",
        "issuse": "issues",
        "deffect": "defect",
        "loadded": "loaded",
        "lodded": "loaded",
        "misssing": "missing",
        "mising": "missing",
        "rejeted": "rejected",
        "passd": "passed",
        # details and summaries
        "detials": "details",
        "detals": "details",
        "detils": "details",
        "detalis": "details",
        "infro": "info",
        "summry": "summary",
        "sumry": "summary",
        "efective": "effective",
        "expiraton": "expiration",
        "descripton": "description",
        # time
        "creatd": "created",
        "crated": "created",
        "aftr": "after",
        "befre": "before",
        "befor": "before",
        "btw": "between",
        "btwn": "between",
        "betwen": "between",
        "beetween": "between",
        "durng": "during",
        # chat words
        "shw": "show",
        "shwo": "show",
        "lst": "list",
        "dsplay": "display",
        "retrive": "retrieve",
        "giv": "give",
        "chek": "check",
        "wat": "what",
        "waht": "what",
        "teh": "the",
        "wth": "with",
        "fr": "for",
        "al": "all",
        "abot": "about",
        "plz": "please",
        "inclde": "include",
        "prjct": "project",
    }
)


class SpellCorrector:
    """Replaces known misspellings word by word.

    Words are matched case-insensitively after stripping punctuation. Matched
    words are replaced by their canonical lowercase form. Every other word is
    kept exactly as typed, casing and punctuation included.
    """

    def __init__(self, corrections: Mapping[str, str] | None = None) -> None:
        self._corrections = corrections if corrections is not None else SPELL_CORRECTIONS

    def correct(self, text: str | None) -> CorrectionResult:
        original = text or ""
        words = original.split()
        if not words:
            return CorrectionResult(original_text=original, corrected_text=None, confidence=0.0)

        output: list[str] = []
        replaced = 0
        for word in words:
            key = _NON_ALNUM.sub("", word.lower())
            canonical = self._corrections.get(key)
            if canonical is not None and canonical != word:
                output.append(canonical)
                replaced += 1
            else:
                output.append(word)

        if replaced == 0:
            return CorrectionResult(original_text=original, corrected_text=None, confidence=0.0)

        return CorrectionResult(
            original_text=original,
            corrected_text=" ".join(output),
            confidence=replaced / len(words),
        )
