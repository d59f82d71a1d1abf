"""Test setup for tocnav."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from tocnav.schemas import TOCData, TOCNode  # noqa: E402
from tocnav.tree import build_tree  # noqa: E402


def _page(page_id: str, title: str, level: int, **extra: Any) -> dict[str, Any]:
    page = {"id": page_id, "title": title, "url": f"{page_id}.html", "level": level}
    page.update(extra)
    return page


@pytest.fixture
def parent_child_raw() -> dict[str, Any]:
    """A parent page with two leaf children."""
    return {
        "entities": {
            "pages": {
                "parent": _page("parent", "Parent Page", 0, pages=["child1", "child2"]),
                "child1": _page("child1", "Child 1", 1, parentId="parent"),
                "child2": _page("child2", "Child 2", 1, parentId="parent"),
            },
            "anchors": {},
        },
        "topLevelIds": ["parent"],
    }


@pytest.fixture
def help_raw() -> dict[str, Any]:
    """A three-root help TOC with nesting, accents and anchors."""
    return {
        "entities": {
            "pages": {
                "start": _page("start", "Getting Started", 0, pages=["install", "configure"]),
                "install": _page("install", "Installing the IDE", 1, parentId="start", pages=["install_mac"]),
                "install_mac": _page("install_mac", "Install on macOS", 2, parentId="install"),
                "configure": _page("configure", "Configuring the IDE", 1, parentId="start"),
                "cafe": _page("cafe", "Café Features", 0, pages=["menu"]),
                "menu": _page("menu", "Menu du café", 1, parentId="cafe"),
                "keys": _page("keys", "Keyboard shortcuts", 0),
            },
            "anchors": {
                "a1": {
                    "id": "a1",
                    "title": "Requirements",
                    "url": "install.html",
                    "anchor": "#requirements",
                    "level": 2,
                },
            },
        },
        "topLevelIds": ["start", "cafe", "keys"],
    }


@pytest.fixture
def parent_child_data(parent_child_raw: dict[str, Any]) -> TOCData:
    return TOCData.model_validate(parent_child_raw)


@pytest.fixture
def help_data(help_raw: dict[str, Any]) -> TOCData:
    return TOCData.model_validate(help_raw)


@pytest.fixture
def help_tree(help_data: TOCData) -> list[TOCNode]:
    return build_tree(help_data)
