"""Query normalizer for the lunr query dialect.

Rules
- Empty input, single-word input and input that already uses index syntax
  are passed through untouched.
- Reserved characters are the ones lunr gives meaning to:
  ``^`` (boost), ``~`` (edit distance), ``+`` (required), ``-`` (prohibited),
  ``*`` (wildcard) and ``:`` (field scope).
- Any other multi-word phrase becomes a required-term query, so
  ``setup guide`` is compiled to ``+setup +guide``.
"""

from __future__ import annotations

import re
from typing import Final

REQUIRED_MARKER: Final[str] = "+"
WILDCARD_MARKER: Final[str] = "*"
RESERVED_CHARS: Final[frozenset[str]] = frozenset("^~+-*:")

_RE_RESERVED = re.compile(r"[\^~+\-*:]")


def query_terms(raw: str) -> list[str]:
    """Split raw input on whitespace, dropping empty tokens."""
    return raw.split()


def normalize_query(raw: str) -> str:
    """Compile raw user input into an index query string.

    Args:
        raw: Query text as typed by the user.

    Returns:
        ``raw`` unchanged for pass-through input, otherwise every term
        prefixed with the required-term marker and joined by single spaces.
    """
    if not raw:
        return raw
    terms = query_terms(raw)
    if len(terms) < 2:
        return raw
    if _RE_RESERVED.search(raw) is not None:
        return raw
    return " ".join(f"{REQUIRED_MARKER}{term}" for term in terms)


def wildcard_query(raw: str) -> str:
    """Append the wildcard marker to the raw (not normalized) query."""
    return f"{raw}{WILDCARD_MARKER}"
