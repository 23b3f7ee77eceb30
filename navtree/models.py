"""Pydantic models for menus and navigation rendering."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MenuItemRecord(BaseModel):
    """Stored page entry of a menu container."""

    nav_id: int = Field(..., alias="navId", gt=0, description="Unique page id.")
    parent_nav_id: int = Field(
        0,
        alias="parentNavId",
        ge=0,
        description="Id of the parent page; 0 marks a top level page.",
    )
    container: str = Field(
        "default", description="Menu container the page belongs to."
    )
    title: str = Field(..., description="Display title.")
    alias: str = Field(..., description="URL slug of the page.")
    link: Optional[str] = Field(
        None,
        description="Explicit link; derived from the alias path when absent.",
    )
    sort_index: int = Field(
        0, alias="sortIndex", description="Position among siblings, ascending."
    )
    is_home: bool = Field(False, alias="isHome", description="Marks the home page.")
    is_hidden: bool = Field(
        False,
        alias="isHidden",
        description="Hidden pages are skipped unless a query asks for them.",
    )
    properties: Dict[str, Any] = Field(
        default_factory=dict,
        description="Free-form scalar values addressable from placeholders.",
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class MenuSpec(BaseModel):
    """Root of a menu file."""

    items: List[MenuItemRecord] = Field(
        default_factory=list, description="All pages of all containers."
    )


class RenderConfig(BaseModel):
    """Options of a navigation tree render."""

    max_depth: Optional[int] = Field(
        None,
        alias="maxDepth",
        description="Lists at this depth or deeper are not rendered.",
    )
    link_active_class: Optional[str] = Field(
        None, alias="linkActiveClass", description="Class added to active links."
    )
    item_active_class: Optional[str] = Field(
        None, alias="itemActiveClass", description="Class added to active items."
    )
    list_depth_class_prefix: str = Field(
        "",
        alias="listDepthClassPrefix",
        description="Prefix put in front of the depth number on the list class.",
    )
    wrapper_options: Optional[Dict[str, Any]] = Field(
        None,
        alias="wrapperOptions",
        description="Attributes of a wrapper around the list; tag defaults to nav.",
    )
    list_options: Dict[str, Any] = Field(
        default_factory=dict,
        alias="listOptions",
        description="Attributes of every list; tag defaults to ul.",
    )
    item_options: Dict[str, Any] = Field(
        default_factory=dict,
        alias="itemOptions",
        description="Attributes of every item; tag defaults to li.",
    )
    link_options: Dict[str, Any] = Field(
        default_factory=dict,
        alias="linkOptions",
        description="Attributes of every link; tag defaults to a. href is always set.",
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    @field_validator("list_options", "item_options", "link_options", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value


__all__ = [
    "MenuItemRecord",
    "MenuSpec",
    "RenderConfig",
]
