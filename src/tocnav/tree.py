"""Tree materialization from the flat page graph, and tree queries."""

from __future__ import annotations

from typing import Iterable, Iterator

from tocnav.exceptions import CycleDetectedError
from tocnav.schemas import TOCData, TOCNode


def build_tree(data: TOCData, *, guard_cycles: bool = False) -> list[TOCNode]:
    """Resolve the page graph into an ordered forest of nodes.

    Roots follow ``data.top_level_ids`` and children follow each page's
    ``pages`` list. Anchors are never attached here; every node gets an empty
    ``anchors`` list.

    Args:
        data: The source dataset. It is not modified.
        guard_cycles: If True, track the ids on the current path and raise
            CycleDetectedError when a page is its own descendant. If False,
            a cycle recurses until RecursionError.

    Returns:
        Freshly built top-level nodes.

    Raises:
        KeyError: If a referenced page id is missing from the page map.
        CycleDetectedError: If guard_cycles is set and the graph has a cycle.
    """
    pages = data.entities.pages

    def build_node(page_id: str, path: tuple[str, ...]) -> TOCNode:
        if guard_cycles and page_id in path:
            raise CycleDetectedError([*path, page_id])
        page = pages[page_id]
        child_path = (*path, page_id) if guard_cycles else path
        return TOCNode(
            **page.model_dump(),
            children=[build_node(child_id, child_path) for child_id in page.pages or []],
            anchors=[],
        )

    return [build_node(page_id, ()) for page_id in data.top_level_ids]


def contains_id(node: TOCNode, target_id: str | None) -> bool:
    """Return True if the node or any of its descendants has ``target_id``."""
    if target_id is None:
        return False
    return node.id == target_id or any(contains_id(child, target_id) for child in node.children)


def find_path(nodes: Iterable[TOCNode], target_id: str) -> list[TOCNode]:
    """Return the root-to-node path to the first node with ``target_id``."""
    for node in nodes:
        if node.id == target_id:
            return [node]
        sub_path = find_path(node.children, target_id)
        if sub_path:
            return [node, *sub_path]
    return []


def iter_nodes(nodes: Iterable[TOCNode]) -> Iterator[TOCNode]:
    """Yield nodes depth-first, parents before children."""
    for node in nodes:
        yield node
        yield from iter_nodes(node.children)


def count_nodes(nodes: Iterable[TOCNode]) -> int:
    """Count total nodes in the tree."""
    return sum(1 for _ in iter_nodes(nodes))
