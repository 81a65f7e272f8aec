from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from types import MappingProxyType
from typing import Any, Mapping, Optional


@dataclass(frozen=True, slots=True)
class SearchHit:
    """One ranked hit returned by an index.

    Attributes:
        reference: Document reference (slug/path) used as the store key.
        score: Relevance score if the index reports one. Rank is implied by
            the position of the hit in the returned sequence.
    """

    reference: str
    score: Optional[float] = None


@dataclass(frozen=True, slots=True)
class ResultEntry:
    """A search hit merged with the stored metadata for its reference.

    Attributes:
        reference: Document reference of the hit.
        score: Relevance score copied from the hit.
        metadata: Store metadata for the reference (title, excerpt, ...).
    """

    reference: str
    score: Optional[float] = None
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Entries are shared between the full and the filtered result lists.
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def title(self) -> str:
        return str(self.metadata.get("title") or self.reference)

    @property
    def excerpt(self) -> str:
        return str(self.metadata.get("excerpt") or "")

    def get(self, key: str, default: Any = None) -> Any:
        """Return one metadata value with a default."""
        return self.metadata.get(key, default)

    def as_dict(self) -> dict[str, Any]:
        """Return the entry as a flat mapping keyed by ``slug`` plus metadata."""
        return {"slug": self.reference, **self.metadata}
