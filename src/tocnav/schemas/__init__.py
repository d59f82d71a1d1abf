"""Shared schemas for tocnav."""

from tocnav.schemas.toc import Anchor, Page, TOCData, TOCEntities
from tocnav.schemas.tree import FilterResult, TOCNode

__all__ = ["Anchor", "FilterResult", "Page", "TOCData", "TOCEntities", "TOCNode"]
