"""Read-only word sets shared by the tokenizer, extractor and routers."""

from __future__ import annotations

# Words that must never be taken as identifier values.
COMMAND_WORDS: frozenset[str] = frozenset(
    {
        "show", "get", "list", "find", "display", "fetch", "retrieve", "give", "provide",
        "what", "how", "why", "when", "where", "which", "who", "is", "are", "can", "will",
        "the", "of", "for", "in", "on", "at", "by", "with", "from", "to", "and", "or",
        "contract", "contracts", "part", "parts", "customer", "customers", "account",
        "accounts", "info", "details", "status", "data", "all", "any", "some", "many",
        "much", "more", "most", "less", "created", "expired", "active", "inactive",
        "failed", "passed", "loaded", "missing", "number", "name", "under", "summary",
        "after", "before", "between", "during", "please", "me", "my", "a", "an",
    }
)

CUSTOMER_CONTEXT_WORDS: frozenset[str] = frozenset(
    {"customer", "customers", "client", "clients", "account", "accounts"}
)

CUSTOMER_NAME_PHRASES: tuple[str, ...] = ("account name", "customer name")

# Words recognised inside glued tokens such as "contractsiemensaccount".
SPLIT_VOCABULARY: tuple[str, ...] = (
    "siemens",
    "under",
    "account",
    "number",
    "parts",
    "part",
    "status",
    "customer",
    "summary",
    "details",
    "info",
    "for",
)

# Whole tokens the tokenizer leaves unsplit even when a pattern would match.
KNOWN_WORDS: frozenset[str] = COMMAND_WORDS | CUSTOMER_CONTEXT_WORDS | frozenset(SPLIT_VOCABULARY)

GENERAL_QUERY_WORDS: tuple[str, ...] = (
    "all", "list", "show", "status", "details", "expired", "active", "created",
    "contracts", "parts",
)

DOMAIN_HINT_WORDS: tuple[str, ...] = ("contract", "part", "customer", "account", "number")

PARTS_KEYWORDS: frozenset[str] = frozenset(
    {
        "part", "parts", "line", "lines", "component", "components", "product",
        "products", "inventory", "stock", "manufacturer",
    }
)

CREATE_KEYWORDS: frozenset[str] = frozenset(
    {
        "create", "creating", "make", "new", "add", "generate", "help", "steps",
        "guide", "tutorial", "instructions",
    }
)

CREATE_PHRASES: tuple[str, ...] = ("how to",)

TEMPORAL_PREPOSITIONS: frozenset[str] = frozenset(
    {"by", "in", "after", "before", "between", "during"}
)
