"""Tests for search bundle reading and parsing."""

from __future__ import annotations

import json
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

import requests
from lunr import lunr

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SiteSearch.core.errors import DocumentStoreError, IndexLoadError
from SiteSearch.sources.lunr.parser import parse_bundle
from SiteSearch.sources.lunr.source import load_bundle

_DOCUMENTS = [
    {"slug": "main-docs/intro", "title": "Setup guide"},
    {"slug": "tutorials/setup", "title": "First chain tutorial"},
]


def _bundle_payload() -> dict:
    index = lunr(ref="slug", fields=("title",), documents=_DOCUMENTS)
    return {
        "index": index.serialize(),
        "store": {doc["slug"]: {"title": doc["title"]} for doc in _DOCUMENTS},
    }


def _response(status_code: int, payload: object = None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"HTTP {status_code}", response=response)
    return response


class TestLoadBundleFromFile(unittest.TestCase):
    def _write(self, tmp: str, payload: object) -> str:
        path = Path(tmp) / "search_index.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        return str(path)

    def test_flat_bundle(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            bundle = load_bundle(self._write(tmp, _bundle_payload()))

        self.assertEqual(set(bundle.store), {"main-docs/intro", "tutorials/setup"})
        self.assertEqual([hit.reference for hit in bundle.index.query("tutorial")], ["tutorials/setup"])

    def test_language_keyed_bundle(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write(tmp, {"en": _bundle_payload()})
            bundle = load_bundle(path, language="en")
            with self.assertRaisesRegex(IndexLoadError, "language 'de'"):
                load_bundle(path, language="de")

        self.assertEqual(len(bundle.store), 2)

    def test_store_is_read_only(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            bundle = load_bundle(self._write(tmp, _bundle_payload()))
        with self.assertRaises(TypeError):
            bundle.store["new"] = {}  # type: ignore[index]

    def test_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(IndexLoadError):
                load_bundle(str(Path(tmp) / "missing.json"))

    def test_invalid_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "broken.json"
            path.write_text("{not json", encoding="utf-8")
            with self.assertRaisesRegex(IndexLoadError, "not valid JSON"):
                load_bundle(str(path))


class TestParseBundle(unittest.TestCase):
    def test_corrupted_store_entry(self) -> None:
        payload = _bundle_payload()
        payload["store"]["main-docs/intro"] = ["not", "an", "object"]
        with self.assertRaises(DocumentStoreError):
            parse_bundle(payload)

    def test_store_must_be_object(self) -> None:
        payload = _bundle_payload()
        payload["store"] = []
        with self.assertRaises(DocumentStoreError):
            parse_bundle(payload)

    def test_root_must_be_object(self) -> None:
        with self.assertRaises(IndexLoadError):
            parse_bundle([])

    def test_missing_store_is_empty(self) -> None:
        payload = _bundle_payload()
        del payload["store"]
        _, store = parse_bundle(payload)
        self.assertEqual(dict(store), {})


class TestLoadBundleFromUrl(unittest.TestCase):
    def test_remote_bundle(self) -> None:
        payload = _bundle_payload()
        with patch("SiteSearch.sources.lunr.client.requests.Session.get", return_value=_response(200, payload)) as get:
            bundle = load_bundle("https://docs.example.org/search_index.json", timeout=5)

        self.assertEqual(len(bundle.store), 2)
        self.assertEqual(get.call_args.kwargs["timeout"], 5)

    def test_remote_retries_transient_status(self) -> None:
        payload = _bundle_payload()
        responses = [_response(503), _response(200, payload)]
        with patch("SiteSearch.sources.lunr.client.requests.Session.get", side_effect=responses) as get, patch(
            "SiteSearch.sources.lunr.client.time.sleep"
        ):
            bundle = load_bundle("https://docs.example.org/search_index.json")

        self.assertEqual(get.call_count, 2)
        self.assertEqual(len(bundle.store), 2)

    def test_remote_failure_is_index_load_error(self) -> None:
        with patch("SiteSearch.sources.lunr.client.requests.Session.get", return_value=_response(404)), patch(
            "SiteSearch.sources.lunr.client.time.sleep"
        ):
            with self.assertRaises(IndexLoadError):
                load_bundle("https://docs.example.org/missing.json")


if __name__ == "__main__":
    unittest.main()
