"""Search service layer for SiteSearch.

Provides the strict-then-wildcard search service, the per-session state
holder and factory functions for component creation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from SiteSearch.core.categories import CategoryFilter
from SiteSearch.services.search import DocumentStore, SearchIndex, SiteSearchService, search
from SiteSearch.services.session import SearchSession

if TYPE_CHECKING:
    from SiteSearch.config import AppConfig


def create_search_service(config: AppConfig) -> SiteSearchService:
    """Load the configured search bundle and bind it to a service.

    Args:
        config: Application configuration containing index settings.

    Returns:
        Configured SiteSearchService instance.
    """
    from SiteSearch.sources.lunr.source import load_bundle

    bundle = load_bundle(
        config.index.source,
        language=config.index.language,
        timeout=config.index.timeout,
    )
    return SiteSearchService(index=bundle.index, store=bundle.store)


def create_session(config: AppConfig, service: SiteSearchService) -> SearchSession:
    """Create a fresh session with every category inactive."""
    return SearchSession(service=service, category_filter=CategoryFilter(config.taxonomy))


__all__ = [
    "DocumentStore",
    "SearchIndex",
    "SearchSession",
    "SiteSearchService",
    "create_search_service",
    "create_session",
    "search",
]
