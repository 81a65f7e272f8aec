"""Error types raised across the SiteSearch pipeline.

Only `QuerySyntaxError` is recovered inside the search pipeline. The others
either describe a collaborator contract violation (`MissingReferenceError`,
logged and skipped) or a configuration/data fault that must reach the caller.
"""

from __future__ import annotations


class SiteSearchError(Exception):
    """Base class for SiteSearch errors."""


class QuerySyntaxError(SiteSearchError):
    """The index rejected a query string as malformed."""

    def __init__(self, query: str, reason: str = "") -> None:
        self.query = query
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"Malformed query {query!r}{detail}")


class MissingReferenceError(SiteSearchError, KeyError):
    """A search hit references a document absent from the document store."""

    def __init__(self, reference: str) -> None:
        self.reference = reference
        super().__init__(reference)

    def __str__(self) -> str:
        return f"Document store has no entry for reference {self.reference!r}"


class InvalidSelectionKey(SiteSearchError, KeyError):
    """A category selection uses a key the taxonomy does not define."""

    def __init__(self, key: str, known: tuple[str, ...] = ()) -> None:
        self.key = key
        self.known = known
        super().__init__(key)

    def __str__(self) -> str:
        return f"Unknown category key {self.key!r}; expected one of {list(self.known)}"


class DocumentStoreError(SiteSearchError):
    """The document store is corrupted or has an unexpected shape."""


class IndexLoadError(SiteSearchError):
    """A search bundle could not be read, fetched or decoded."""
