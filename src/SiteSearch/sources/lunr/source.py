"""lunr index adapter.

Composes bundle reading and parsing into a `SearchIndex` implementation
backed by a pre-built lunr index.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from lunr.exceptions import BaseLunrException, QueryParseError
from lunr.index import Index

from SiteSearch.core.errors import IndexLoadError, QuerySyntaxError
from SiteSearch.core.models import SearchHit
from SiteSearch.sources.lunr.client import BundleClient
from SiteSearch.sources.lunr.parser import parse_bundle
from SiteSearch.utils.log import log


@dataclass(slots=True)
class LunrSearchIndex:
    """`SearchIndex` implementation backed by a lunr `Index`."""

    index: Index
    name: str = "lunr"

    @classmethod
    def from_serialized(cls, data: Mapping[str, Any]) -> LunrSearchIndex:
        """Load a serialized lunr index (as written by lunr.js or lunr.py).

        Raises:
            IndexLoadError: If the serialized data is not a usable index.
        """
        try:
            index = Index.load(dict(data))
        except (BaseLunrException, KeyError, TypeError, ValueError) as error:
            raise IndexLoadError(f"Serialized lunr index is invalid: {error}") from error
        return cls(index=index)

    def query(self, query_string: str) -> list[SearchHit]:
        """Run a query in lunr syntax.

        Args:
            query_string: Query in lunr syntax.

        Returns:
            Hits in lunr relevance order.

        Raises:
            QuerySyntaxError: If lunr cannot parse ``query_string``.
        """
        try:
            results = self.index.search(query_string)
        except QueryParseError as error:
            raise QuerySyntaxError(query_string, str(error)) from error
        return [SearchHit(reference=str(result["ref"]), score=result.get("score")) for result in results]


@dataclass(frozen=True, slots=True)
class SearchBundle:
    """Index and document store loaded together at session start."""

    index: LunrSearchIndex
    store: Mapping[str, Mapping[str, Any]]


def load_bundle(source: str, *, language: str = "en", timeout: float | None = None) -> SearchBundle:
    """Load a search bundle from a file path or URL.

    Args:
        source: Local path or ``http(s)://`` URL of the bundle JSON.
        language: Language key for multi-language bundles.
        timeout: HTTP timeout in seconds for remote sources.

    Returns:
        Loaded `SearchBundle`.

    Raises:
        IndexLoadError: If the bundle cannot be read or the index is invalid.
        DocumentStoreError: If the document store is corrupted.
    """
    with BundleClient() as client:
        payload = client.fetch(source, timeout=timeout)
    index_data, store = parse_bundle(payload, language=language)
    bundle = SearchBundle(index=LunrSearchIndex.from_serialized(index_data), store=store)
    log.info("Search bundle loaded: source=%s documents=%d", source, len(store))
    return bundle
