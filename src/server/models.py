"""Pydantic models for the TOC API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from tocnav.schemas import TOCNode


class TreeResponse(BaseModel):
    """Response model for the /api/toc/tree endpoint.

    Attributes
    ----------
    tree : list[TOCNode]
        Full tree, or the filtered tree when a query was given.
    count : int
        Number of nodes whose own title matched the query (0 without a query).
    total : int
        Number of nodes in the returned tree, ancestors included.
    query : str
        The applied query, trimmed.

    """

    tree: list[TOCNode]
    count: int = Field(..., ge=0)
    total: int = Field(..., ge=0)
    query: str = ""


class HealthResponse(BaseModel):
    """Response model for the health endpoint."""

    status: str = "ok"
