"""Unit tests for the dataset sources."""

import asyncio
import json

import httpx
import pytest

from pathfinder.data.store import DataStore
from pathfinder.storage.file_source import FileDatasetSource
from pathfinder.storage.http_source import HttpDatasetSource
from pathfinder.storage.source import DatasetLoadError


def _fetch(source, path):
    async def run():
        try:
            return await source.fetch_json(path)
        finally:
            await source.aclose()

    return asyncio.run(run())


class TestFileDatasetSource:
    def test_reads_json(self, tmp_path):
        (tmp_path / "data").mkdir()
        (tmp_path / "data" / "career.json").write_text(json.dumps({"streams": []}), encoding="utf-8")

        assert _fetch(FileDatasetSource(tmp_path), "data/career.json") == {"streams": []}

    def test_missing_file(self, tmp_path):
        with pytest.raises(DatasetLoadError) as exc:
            _fetch(FileDatasetSource(tmp_path), "data/career.json")
        assert exc.value.path == "data/career.json"

    def test_invalid_json(self, tmp_path):
        (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")

        with pytest.raises(DatasetLoadError) as exc:
            _fetch(FileDatasetSource(tmp_path), "broken.json")
        assert "invalid JSON" in exc.value.reason

    def test_store_loads_from_directory(self, tmp_path, docs):
        for path, doc in docs.items():
            target = tmp_path / path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(json.dumps(doc), encoding="utf-8")

        store = DataStore(FileDatasetSource(tmp_path))
        asyncio.run(store.load_all())

        assert store.load_report.degraded == []
        assert store.get_stream("science").name == "Science Stream"


class TestHttpDatasetSource:
    @staticmethod
    def _transport(routes):
        def handler(request: httpx.Request) -> httpx.Response:
            route = routes.get(request.url.path)
            if route is None:
                return httpx.Response(404)
            return route

        return httpx.MockTransport(handler)

    def test_fetches_relative_to_base_url(self):
        routes = {"/site/data/exams.json": httpx.Response(200, json={"examCategories": []})}
        source = HttpDatasetSource("https://example.org/site", transport=self._transport(routes))

        assert _fetch(source, "./data/exams.json") == {"examCategories": []}

    def test_non_2xx_is_a_load_error(self):
        source = HttpDatasetSource("https://example.org/", transport=self._transport({}))

        with pytest.raises(DatasetLoadError) as exc:
            _fetch(source, "data/exams.json")
        assert exc.value.reason == "HTTP 404"

    def test_invalid_json_is_a_load_error(self):
        routes = {"/data/exams.json": httpx.Response(200, text="<html>")}
        source = HttpDatasetSource("https://example.org/", transport=self._transport(routes))

        with pytest.raises(DatasetLoadError) as exc:
            _fetch(source, "data/exams.json")
        assert "invalid JSON" in exc.value.reason

    def test_network_error_is_a_load_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        source = HttpDatasetSource("https://example.org/", transport=httpx.MockTransport(handler))

        with pytest.raises(DatasetLoadError) as exc:
            _fetch(source, "data/exams.json")
        assert exc.value.reason.startswith("ConnectError")

    def test_store_degrades_per_failed_request(self, docs):
        routes = {
            "/data/career.json": httpx.Response(200, json=docs["data/career.json"]),
            "/data/exams.json": httpx.Response(500),
        }
        source = HttpDatasetSource("https://example.org", transport=self._transport(routes))

        async def run():
            async with DataStore(source) as store:
                return store

        store = asyncio.run(run())

        assert store.load_report.degraded == ["streams", "exams"]
        assert len(store.get_all_streams()) == 2
