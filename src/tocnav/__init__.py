"""tocnav: build and search hierarchical help tables of contents."""

from tocnav.exceptions import (
    CycleDetectedError,
    FetchError,
    InvalidTOCDataError,
    TocNavError,
    TOCNotAvailableError,
)
from tocnav.filtering import filter_tree
from tocnav.loader import load_toc_file, parse_toc_data
from tocnav.navigation import NavigationState, anchor_href
from tocnav.normalize import normalize
from tocnav.schemas import Anchor, FilterResult, Page, TOCData, TOCEntities, TOCNode
from tocnav.tree import build_tree, contains_id

__all__ = [
    "Anchor",
    "CycleDetectedError",
    "FetchError",
    "FilterResult",
    "InvalidTOCDataError",
    "NavigationState",
    "Page",
    "TOCData",
    "TOCEntities",
    "TOCNode",
    "TOCNotAvailableError",
    "TocNavError",
    "anchor_href",
    "build_tree",
    "contains_id",
    "filter_tree",
    "load_toc_file",
    "normalize",
    "parse_toc_data",
]
