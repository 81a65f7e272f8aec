"""Search service layer: strict query first, wildcard retry second."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol, Sequence

from SiteSearch.core.errors import DocumentStoreError, MissingReferenceError, QuerySyntaxError
from SiteSearch.core.models import ResultEntry, SearchHit
from SiteSearch.core.query import normalize_query, wildcard_query
from SiteSearch.utils.log import log

DocumentStore = Mapping[str, Mapping[str, Any]]


class SearchIndex(Protocol):
    """Protocol for a read-only, pre-built search index."""

    def query(self, query_string: str) -> Sequence[SearchHit]:
        """Return ranked hits for a query in the index dialect.

        Raises:
            QuerySyntaxError: If the query string is malformed.
        """
        raise NotImplementedError


def search(raw_query: str, index: SearchIndex, store: DocumentStore) -> list[ResultEntry]:
    """Search with the normalized query, then retry with a trailing wildcard.

    Args:
        raw_query: Query text as typed by the user.
        index: Index to query.
        store: Document store used to dereference hits.

    Returns:
        Results of the strict query, or of the wildcard retry when the strict
        query produced nothing. Empty when both are empty.

    Raises:
        DocumentStoreError: If a store entry is not a metadata mapping.
    """
    if not raw_query.strip():
        return []

    strict = normalize_query(raw_query)
    results = _run_stage(strict, index, store)
    if results:
        log.debug("Strict query matched: query=%r count=%d", strict, len(results))
        return results

    # Retry uses the raw input, not the normalized query.
    fallback = wildcard_query(raw_query)
    log.debug("Strict query empty, retrying: query=%r fallback=%r", strict, fallback)
    results = _run_stage(fallback, index, store)
    log.debug("Fallback query finished: query=%r count=%d", fallback, len(results))
    return results


def _run_stage(query_string: str, index: SearchIndex, store: DocumentStore) -> list[ResultEntry]:
    """Query the index once and dereference the hits, in index order."""
    try:
        hits = index.query(query_string)
    except QuerySyntaxError as error:
        log.debug("Query rejected by index: %s", error)
        return []
    return dereference_hits(hits, store)


def dereference_hits(hits: Sequence[SearchHit], store: DocumentStore) -> list[ResultEntry]:
    """Merge hits with store metadata, skipping references the store lacks."""
    entries: list[ResultEntry] = []
    for hit in hits:
        metadata = store.get(hit.reference)
        if metadata is None:
            log.warning("%s; hit skipped", MissingReferenceError(hit.reference))
            continue
        if not isinstance(metadata, Mapping):
            raise DocumentStoreError(f"Document store entry {hit.reference!r} must be a mapping")
        entries.append(ResultEntry(reference=hit.reference, score=hit.score, metadata=metadata))
    return entries


@dataclass(slots=True)
class SiteSearchService:
    """Application service binding an index and its document store."""

    index: SearchIndex
    store: DocumentStore

    def search(self, raw_query: str) -> list[ResultEntry]:
        """Search the bound index.

        Args:
            raw_query: Query text as typed by the user.

        Returns:
            Ordered result entries; empty when nothing matches.
        """
        return search(raw_query, self.index, self.store)
