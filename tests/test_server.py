"""Tests for the TOC API."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterator
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from server.main import app
from server.routers import toc
from tocnav.loader import parse_toc_data
from tocnav.tree import build_tree


@pytest.fixture
def client(help_raw: dict[str, Any]) -> Iterator[TestClient]:
    data = parse_toc_data(help_raw)
    source = toc.TOCSource(data=data, tree=build_tree(data))
    app.dependency_overrides[toc.get_toc_source] = lambda: source
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_raw_dataset_uses_wire_names(client: TestClient) -> None:
    response = client.get("/api/toc")

    assert response.status_code == 200
    body = response.json()
    assert body["topLevelIds"] == ["start", "cafe", "keys"]
    assert body["entities"]["pages"]["install"]["parentId"] == "start"


def test_full_tree_without_query(client: TestClient) -> None:
    response = client.get("/api/toc/tree")

    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 0
    assert body["total"] == 7
    assert [node["id"] for node in body["tree"]] == ["start", "cafe", "keys"]
    assert [child["id"] for child in body["tree"][0]["children"]] == ["install", "configure"]
    assert body["tree"][0]["children"][0]["parentId"] == "start"
    assert body["tree"][0]["anchors"] == []


def test_filtered_tree(client: TestClient) -> None:
    response = client.get("/api/toc/tree", params={"q": "  café  "})

    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 2
    assert body["total"] == 2
    assert body["query"] == "café"
    assert [node["id"] for node in body["tree"]] == ["cafe"]
    assert [child["id"] for child in body["tree"][0]["children"]] == ["menu"]


def test_filtered_tree_without_matches(client: TestClient) -> None:
    body = client.get("/api/toc/tree", params={"q": "zzz"}).json()

    assert body == {"tree": [], "count": 0, "total": 0, "query": "zzz"}


class TestGetTocSource:
    """Tests for loading the configured dataset."""

    @pytest.fixture(autouse=True)
    def clear_cache(self) -> Iterator[None]:
        toc._load_source.cache_clear()
        yield
        toc._load_source.cache_clear()

    def test_missing_file_is_503(self, tmp_path: Path) -> None:
        with patch("server.routers.toc.TOCNAV_DATA_PATH", tmp_path / "missing.json"):
            response = TestClient(app).get("/api/toc")

        assert response.status_code == 503
        assert "TOC file not found" in response.json()["detail"]

    def test_cyclic_data_is_500(self, tmp_path: Path) -> None:
        path = tmp_path / "toc.json"
        path.write_text(
            json.dumps(
                {
                    "entities": {
                        "pages": {"a": {"id": "a", "title": "A", "url": "a.html", "level": 0, "pages": ["a"]}}
                    },
                    "topLevelIds": ["a"],
                }
            ),
            encoding="utf-8",
        )

        with patch("server.routers.toc.TOCNAV_DATA_PATH", path):
            response = TestClient(app).get("/api/toc/tree")

        assert response.status_code == 500
        assert "Cycle detected" in response.json()["detail"]

    def test_loads_once(self, tmp_path: Path, help_raw: dict[str, Any]) -> None:
        path = tmp_path / "toc.json"
        path.write_text(json.dumps(help_raw), encoding="utf-8")

        with patch("server.routers.toc.TOCNAV_DATA_PATH", path):
            first = toc.get_toc_source()
            second = toc.get_toc_source()

        assert first is second
        assert [node.id for node in first.tree] == ["start", "cafe", "keys"]


def test_total_counts_ancestors_kept_for_matches(client: TestClient) -> None:
    body = client.get("/api/toc/tree", params={"q": "install"}).json()

    assert body["count"] == 2
    assert body["total"] == 3
