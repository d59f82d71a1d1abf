"""TOC endpoints for the API."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from server.models import TreeResponse
from tocnav.config import TOCNAV_DATA_PATH
from tocnav.exceptions import TocNavError
from tocnav.filtering import filter_tree
from tocnav.loader import dump_toc_data, load_toc_file
from tocnav.schemas import TOCData, TOCNode
from tocnav.tree import build_tree, count_nodes

logger = logging.getLogger(__name__)

router = APIRouter()


@dataclass(frozen=True)
class TOCSource:
    """A loaded dataset with its built tree."""

    data: TOCData
    tree: list[TOCNode]


@lru_cache(maxsize=1)
def _load_source(path: Path) -> TOCSource:
    data = load_toc_file(path)
    tree = build_tree(data, guard_cycles=True)
    logger.info("Loaded TOC from %s with %d top-level pages", path, len(tree))
    return TOCSource(data=data, tree=tree)


def get_toc_source() -> TOCSource:
    """Load the configured dataset once per process."""
    try:
        return _load_source(TOCNAV_DATA_PATH)
    except FileNotFoundError as exc:
        logger.warning("TOC data unavailable: %s", exc)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    except (TocNavError, KeyError) as exc:
        logger.error("TOC data is invalid: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Invalid TOC data: {exc}",
        ) from exc


@router.get("/api/toc")
async def api_toc(source: TOCSource = Depends(get_toc_source)) -> JSONResponse:
    """Return the raw flat dataset in its wire shape."""
    return JSONResponse(dump_toc_data(source.data))


@router.get("/api/toc/tree", response_model=TreeResponse, response_model_exclude_none=True)
async def api_toc_tree(q: str = "", source: TOCSource = Depends(get_toc_source)) -> TreeResponse:
    """Return the built tree, filtered by ``q`` when it is not blank.

    **Query Parameters**
    - **q** (`str`, optional): Search text, matched case- and accent-insensitively

    **Returns**
    - **TreeResponse**: Surviving nodes and the number of matching titles
    """
    query = q.strip()
    result = filter_tree(source.tree, query)
    return TreeResponse(tree=result.tree, count=result.count, total=count_nodes(result.tree), query=query)
