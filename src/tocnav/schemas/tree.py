"""Materialized tree models."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import Field

from tocnav.schemas.toc import Anchor, Page


class TOCNode(Page):
    """A page with its resolved child nodes and anchors."""

    children: list["TOCNode"] = Field(default_factory=list)
    anchors: list[Anchor] = Field(default_factory=list)


@dataclass(frozen=True)
class FilterResult:
    """Outcome of a tree search.

    Attributes:
        tree: Surviving nodes. When no search is active this is the input
            list itself, which callers must treat as read-only.
        count: Number of nodes whose own title matched.
    """

    tree: list[TOCNode]
    count: int
