"""Format TOC trees and search results as plain text."""

from __future__ import annotations

from tocnav.navigation import NavigationState, anchor_href
from tocnav.schemas import FilterResult, TOCNode


def render_tree(nodes: list[TOCNode], *, state: NavigationState | None = None) -> str:
    """Render a tree as an indented list.

    Without a state every node is shown. With a state, children are shown only
    under expanded nodes, the active node is marked with ``*`` and its anchors
    are listed beneath it.
    """
    return "\n".join(_render_lines(nodes, state=state, indent=0))


def _render_lines(
    nodes: list[TOCNode], *, state: NavigationState | None, indent: int
) -> list[str]:
    lines: list[str] = []
    for node in nodes:
        prefix = "  " * indent
        marker = "* " if state is not None and state.is_active(node) else "- "
        lines.append(f"{prefix}{marker}{node.title}")
        if state is None or state.is_expanded(node):
            lines.extend(_render_lines(node.children, state=state, indent=indent + 1))
        if state is not None:
            for anchor in state.visible_anchors(node):
                lines.append(f"{prefix}  # {anchor.title} ({anchor_href(anchor)})")
    return lines


def format_search_summary(query: str, result: FilterResult) -> str:
    """Describe the outcome of a search for display."""
    if not result.tree:
        return f"No results found for “{query}”"
    plural = "" if result.count == 1 else "s"
    return f"Found {result.count} result{plural} for “{query}”"
