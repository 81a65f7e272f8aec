"""Tests for the strict-then-wildcard search service."""

from __future__ import annotations

import sys
import unittest
from pathlib import Path
from typing import Mapping, Sequence

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SiteSearch.core.errors import DocumentStoreError, QuerySyntaxError
from SiteSearch.core.models import SearchHit
from SiteSearch.services.search import SiteSearchService, search


class _StubIndex:
    """Index returning canned hits per exact query string."""

    def __init__(
        self,
        responses: Mapping[str, Sequence[str]] | None = None,
        *,
        malformed: Sequence[str] = (),
        broken: bool = False,
    ) -> None:
        self._responses = dict(responses or {})
        self._malformed = set(malformed)
        self._broken = broken
        self.calls: list[str] = []

    def query(self, query_string: str) -> list[SearchHit]:
        self.calls.append(query_string)
        if self._broken:
            raise RuntimeError("index corrupted")
        if query_string in self._malformed:
            raise QuerySyntaxError(query_string, "unexpected token")
        refs = self._responses.get(query_string, [])
        return [SearchHit(reference=ref, score=float(len(refs) - idx)) for idx, ref in enumerate(refs)]


_STORE = {
    "main-docs/intro": {"title": "Introduction", "excerpt": "Setup guide"},
    "tutorials/setup": {"title": "Setup tutorial"},
    "reference/cli": {"title": "CLI reference"},
}


class TestSearch(unittest.TestCase):
    def test_exact_phrase_uses_required_terms(self) -> None:
        index = _StubIndex({"+setup +guide": ["main-docs/intro"]})

        results = search("setup guide", index, _STORE)

        self.assertEqual([entry.reference for entry in results], ["main-docs/intro"])
        self.assertEqual(results[0].title, "Introduction")
        self.assertEqual(results[0].excerpt, "Setup guide")
        self.assertEqual(index.calls, ["+setup +guide"])

    def test_fallback_triggered_uses_raw_query_with_wildcard(self) -> None:
        index = _StubIndex({"setup guide*": ["tutorials/setup"]})

        results = search("setup guide", index, _STORE)

        self.assertEqual([entry.reference for entry in results], ["tutorials/setup"])
        self.assertEqual(index.calls, ["+setup +guide", "setup guide*"])
        self.assertNotIn("+setup +guide*", index.calls)

    def test_single_word_fallback(self) -> None:
        index = _StubIndex({"tuto*": ["tutorials/setup"]})

        results = search("tuto", index, _STORE)

        self.assertEqual([entry.reference for entry in results], ["tutorials/setup"])
        self.assertEqual(index.calls, ["tuto", "tuto*"])

    def test_both_stages_empty(self) -> None:
        index = _StubIndex()
        self.assertEqual(search("nothing here", index, _STORE), [])
        self.assertEqual(len(index.calls), 2)

    def test_index_order_is_preserved(self) -> None:
        refs = ["reference/cli", "main-docs/intro", "tutorials/setup"]
        index = _StubIndex({"+a +b": refs})

        results = search("a b", index, _STORE)

        self.assertEqual([entry.reference for entry in results], refs)
        self.assertEqual([entry.score for entry in results], [3.0, 2.0, 1.0])

    def test_syntax_error_on_strict_stage_falls_back(self) -> None:
        index = _StubIndex({"title:setup*": ["main-docs/intro"]}, malformed=["title:setup"])

        results = search("title:setup", index, _STORE)

        self.assertEqual([entry.reference for entry in results], ["main-docs/intro"])

    def test_syntax_error_on_both_stages_is_empty(self) -> None:
        index = _StubIndex(malformed=["bad:", "bad:*"])
        self.assertEqual(search("bad:", index, _STORE), [])

    def test_missing_reference_is_skipped(self) -> None:
        index = _StubIndex({"+a +b": ["gone/page", "main-docs/intro"]})

        with self.assertLogs("SiteSearch", level="WARNING") as logs:
            results = search("a b", index, _STORE)

        self.assertEqual([entry.reference for entry in results], ["main-docs/intro"])
        self.assertIn("gone/page", "\n".join(logs.output))

    def test_only_missing_references_trigger_fallback(self) -> None:
        index = _StubIndex({"+a +b": ["gone/page"], "a b*": ["reference/cli"]})

        with self.assertLogs("SiteSearch", level="WARNING"):
            results = search("a b", index, _STORE)

        self.assertEqual([entry.reference for entry in results], ["reference/cli"])

    def test_corrupted_store_entry_propagates(self) -> None:
        index = _StubIndex({"+a +b": ["main-docs/intro"]})
        with self.assertRaises(DocumentStoreError):
            search("a b", index, {"main-docs/intro": "not a mapping"})

    def test_unrelated_index_fault_propagates(self) -> None:
        with self.assertRaises(RuntimeError):
            search("a b", _StubIndex(broken=True), _STORE)

    def test_empty_query_short_circuits(self) -> None:
        index = _StubIndex({"*": list(_STORE)})
        for raw in ("", "   "):
            with self.subTest(raw=raw):
                self.assertEqual(search(raw, index, _STORE), [])
        self.assertEqual(index.calls, [])

    def test_metadata_is_merged_read_only(self) -> None:
        index = _StubIndex({"+a +b": ["main-docs/intro"]})
        entry = search("a b", index, _STORE)[0]

        self.assertEqual(entry.as_dict(), {"slug": "main-docs/intro", "title": "Introduction", "excerpt": "Setup guide"})
        with self.assertRaises(TypeError):
            entry.metadata["title"] = "changed"  # type: ignore[index]


class TestSiteSearchService(unittest.TestCase):
    def test_repeated_calls_are_identical(self) -> None:
        index = _StubIndex({"+setup +guide": ["main-docs/intro", "tutorials/setup"]})
        service = SiteSearchService(index=index, store=_STORE)

        first = service.search("setup guide")
        second = service.search("setup guide")

        self.assertEqual(first, second)
        self.assertEqual(len(first), 2)


if __name__ == "__main__":
    unittest.main()
