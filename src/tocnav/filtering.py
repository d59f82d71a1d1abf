"""Search filtering over a built TOC tree."""

from __future__ import annotations

from tocnav.normalize import normalize
from tocnav.schemas import FilterResult, TOCNode


def filter_tree(nodes: list[TOCNode], query: str) -> FilterResult:
    """Prune the tree to nodes whose title matches and the paths leading to them.

    A node survives if its normalized title contains the normalized query or if
    any of its children survive. Surviving nodes are copies; input nodes are
    never modified. ``count`` is the number of nodes whose own title matched,
    wherever they sit in the tree.

    A blank query means no search is active: the input list is returned as-is
    with a count of 0.
    """
    if not query.strip():
        return FilterResult(tree=nodes, count=0)

    needle = normalize(query)
    total = 0

    def _filter(siblings: list[TOCNode]) -> list[TOCNode]:
        nonlocal total
        result: list[TOCNode] = []
        for node in siblings:
            children = _filter(node.children)
            self_match = needle in normalize(node.title)
            if self_match:
                total += 1
            if self_match or children:
                result.append(
                    node.model_copy(update={"children": children, "anchors": list(node.anchors)})
                )
        return result

    tree = _filter(nodes)
    return FilterResult(tree=tree, count=total)
