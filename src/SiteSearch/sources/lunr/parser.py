"""Search bundle parser.

Accepted layouts:

- ``{"index": <serialized lunr index>, "store": {ref: metadata}}``
- ``{"<lang>": {"index": ..., "store": ...}, ...}`` (one bundle per language)
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from SiteSearch.core.errors import DocumentStoreError, IndexLoadError


def select_language(payload: Any, language: str) -> Mapping[str, Any]:
    """Return the single-language bundle section from a decoded payload.

    Raises:
        IndexLoadError: If the payload has neither layout.
    """
    if not isinstance(payload, Mapping):
        raise IndexLoadError("Search bundle root must be an object")
    if "index" in payload:
        return payload
    section = payload.get(language)
    if not isinstance(section, Mapping) or "index" not in section:
        raise IndexLoadError(
            f"Search bundle has no index for language {language!r}; "
            f"available keys: {sorted(str(key) for key in payload)}"
        )
    return section


def parse_store(raw_store: Any) -> Mapping[str, Mapping[str, Any]]:
    """Validate the document store and freeze it.

    Raises:
        DocumentStoreError: If the store is not a mapping of reference to
            metadata mapping.
    """
    if not isinstance(raw_store, Mapping):
        raise DocumentStoreError("Document store must be an object")
    store: dict[str, Mapping[str, Any]] = {}
    for reference, metadata in raw_store.items():
        if not isinstance(metadata, Mapping):
            raise DocumentStoreError(f"Document store entry {reference!r} must be an object")
        store[str(reference)] = MappingProxyType(dict(metadata))
    return MappingProxyType(store)


def parse_bundle(payload: Any, *, language: str = "en") -> tuple[Mapping[str, Any], Mapping[str, Mapping[str, Any]]]:
    """Split a decoded bundle into serialized index data and document store.

    Args:
        payload: Decoded bundle JSON.
        language: Language key used for multi-language bundles.

    Returns:
        Tuple of (serialized_index, store).
    """
    section = select_language(payload, language)
    index_data = section["index"]
    if not isinstance(index_data, Mapping):
        raise IndexLoadError("Search bundle index must be an object")
    return index_data, parse_store(section.get("store", {}))
