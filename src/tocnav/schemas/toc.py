"""Source dataset models: the flat, id-indexed page graph."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Page(BaseModel):
    """A navigable document entry in the flat page graph."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    url: str
    level: int = Field(..., ge=0)
    parent_id: str | None = Field(default=None, alias="parentId")
    pages: list[str] | None = None
    tab_index: int | None = Field(default=None, alias="tabIndex")
    do_not_show_warning_link: bool | None = Field(default=None, alias="doNotShowWarningLink")


class Anchor(BaseModel):
    """An in-page sub-heading under a specific page."""

    id: str
    title: str
    url: str
    anchor: str
    level: int


class TOCEntities(BaseModel):
    """Id-indexed records of the dataset."""

    pages: dict[str, Page]
    anchors: dict[str, Anchor] = Field(default_factory=dict)


class TOCData(BaseModel):
    """Wire-level TOC dataset.

    Attributes:
        entities: Pages and anchors keyed by id.
        top_level_ids: Ids of the root pages, in display order.
    """

    model_config = ConfigDict(populate_by_name=True)

    entities: TOCEntities
    top_level_ids: list[str] = Field(..., alias="topLevelIds")
