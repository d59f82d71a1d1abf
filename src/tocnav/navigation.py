"""Expansion and activation state for a presentation layer."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from tocnav.schemas import Anchor, TOCNode
from tocnav.tree import contains_id


@dataclass(frozen=True)
class NavigationState:
    """Which node is active and which nodes the user expanded.

    Transitions return new states. Expansion of ancestors of the active node is
    never stored; ``is_expanded`` recomputes it from ``active_id`` on each call.

    Attributes:
        active_id: Id of the selected node, if any.
        toggled: Ids the user has expanded by hand.
    """

    active_id: str | None = None
    toggled: frozenset[str] = field(default_factory=frozenset)

    def activate(self, node_id: str) -> NavigationState:
        return replace(self, active_id=node_id)

    def toggle(self, node_id: str) -> NavigationState:
        return replace(self, toggled=self.toggled ^ {node_id})

    def expand(self, node: TOCNode) -> NavigationState:
        if not node.children:
            return self
        return replace(self, toggled=self.toggled | {node.id})

    def collapse(self, node: TOCNode) -> NavigationState:
        if not node.children:
            return self
        return replace(self, toggled=self.toggled - {node.id})

    def select(self, node: TOCNode) -> NavigationState:
        """Header click: toggle a node with children, then make it active."""
        state = self.toggle(node.id) if node.children else self
        return state.activate(node.id)

    def is_active(self, node: TOCNode) -> bool:
        return self.active_id == node.id

    def is_expanded(self, node: TOCNode) -> bool:
        # Ancestors of the active node are always open.
        return contains_id(node, self.active_id) or node.id in self.toggled

    def visible_anchors(self, node: TOCNode) -> list[Anchor]:
        return list(node.anchors) if self.is_active(node) else []


def anchor_href(anchor: Anchor) -> str:
    """Build the link target for an anchor, adding ``#`` when missing."""
    if anchor.anchor.startswith("#"):
        return f"{anchor.url}{anchor.anchor}"
    return f"{anchor.url}#{anchor.anchor}"
