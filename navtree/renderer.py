"""Render a navigation tree as nested lists of links.

Build the navigation from the top level pages of the default container::

    NavTree(RenderConfig(), menu=store).run()

or only the pages below a given page::

    NavTree(RenderConfig(max_depth=2), menu=store).run(store.current)

Lists built from the top level start at depth 1, lists built from a start
page's children start at depth 0. The depth is appended to every list class
behind ``list_depth_class_prefix``. Item and link attribute values may carry
``{{name}}`` placeholders, e.g. ``"item depth-{{depth}} alias-{{alias}}"``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional

from markupsafe import Markup

from .html_tags import begin_tag, end_tag, merge_class, tag
from .menu import DEFAULT_CONTAINER
from .models import RenderConfig
from .placeholders import compile_options
from .types_nav import Node, NodeSource

logger = logging.getLogger(__name__)


class NavTree:
    """Navigation tree renderer configured by a ``RenderConfig``."""

    def __init__(
        self,
        config: RenderConfig | None = None,
        *,
        menu: NodeSource | None = None,
        container: str = DEFAULT_CONTAINER,
    ) -> None:
        self.config = config or RenderConfig()
        self.menu = menu
        self.container = container

        self.list_options: Dict[str, Any] = dict(self.config.list_options)
        self.item_options: Dict[str, Any] = dict(self.config.item_options)
        self.link_options: Dict[str, Any] = dict(self.config.link_options)
        self.list_tag = self.list_options.pop("tag", "ul")
        self.item_tag = self.item_options.pop("tag", "li")
        self.link_tag = self.link_options.pop("tag", "a")

    def run(self, start_item: Optional[Node] = None) -> str:
        """Return the HTML of the whole navigation."""

        html = ""
        if start_item is None:
            if self.menu is None:
                raise ValueError("menu is required to render from the top level")
            html = self.build_list(self.menu.find_top_level(self.container, 0))
        elif start_item.has_children:
            html = self.build_list(start_item.children, 0)

        if self.config.wrapper_options is not None:
            wrapper_options = dict(self.config.wrapper_options)
            wrapper_tag = wrapper_options.pop("tag", "nav")
            html = tag(wrapper_tag, Markup(html), wrapper_options)

        return html

    def build_list(self, nodes: Iterable[Node], depth: int = 1) -> str:
        """Render one list level and, recursively, every level below it."""

        max_depth = self.config.max_depth
        if max_depth is not None and depth >= max_depth:
            logger.debug("Depth %s reached max_depth %s", depth, max_depth)
            return ""

        list_options = dict(self.list_options)
        merge_class(list_options, f"{self.config.list_depth_class_prefix}{depth}")

        parts = [begin_tag(self.list_tag, list_options)]

        for node in nodes:
            item_options = dict(self.item_options)
            link_options = {**self.link_options, "href": node.link}

            if node.is_active:
                if self.config.item_active_class is not None:
                    merge_class(item_options, self.config.item_active_class)
                if self.config.link_active_class is not None:
                    merge_class(link_options, self.config.link_active_class)

            parts.append(begin_tag(self.item_tag, compile_options(node, item_options)))
            parts.append(tag(self.link_tag, node.title, compile_options(node, link_options)))

            if node.has_children:
                parts.append(self.build_list(node.children, depth + 1))

            parts.append(end_tag(self.item_tag))

        parts.append(end_tag(self.list_tag))
        return "".join(parts)


def render_nav_tree(
    config: RenderConfig | None = None,
    *,
    menu: NodeSource | None = None,
    start_item: Optional[Node] = None,
) -> str:
    """Shortcut for ``NavTree(config, menu=menu).run(start_item)``."""

    return NavTree(config, menu=menu).run(start_item)


__all__ = ["NavTree", "render_nav_tree"]
