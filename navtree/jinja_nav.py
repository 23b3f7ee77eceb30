"""Jinja integration exposing the navigation tree to templates."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from .menu import DEFAULT_CONTAINER, MenuStore
from .models import RenderConfig
from .renderer import NavTree
from .types_nav import Node


def _resolve_start(menu: MenuStore, start: Node | str | None, container: str) -> Node | None:
    if start is None or not isinstance(start, str):
        return start
    node = menu.find_by_alias(start, container)
    if node is None:
        raise KeyError(f"Unknown start page alias: {start}")
    return node


def register_nav_tree(env: Environment, menu: MenuStore, *, name: str = "nav_tree") -> Environment:
    """Install a ``nav_tree(start=None, **options)`` template global.

    ``options`` are ``RenderConfig`` fields in snake or camel case; ``start``
    is a node or a page alias.
    """

    def nav_tree(start: Node | str | None = None, container: str = DEFAULT_CONTAINER, **options: Any) -> Markup:
        config = RenderConfig.model_validate(options)
        start_item = _resolve_start(menu, start, container)
        return Markup(NavTree(config, menu=menu, container=container).run(start_item))

    env.globals[name] = nav_tree
    return env


def nav_environment(template_dirs: Iterable[Path], menu: MenuStore) -> Environment:
    """Create a Jinja environment with ``nav_tree`` available in templates."""

    env = Environment(
        loader=FileSystemLoader([Path(path) for path in template_dirs]),
        autoescape=select_autoescape(["html", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    return register_nav_tree(env, menu)


__all__ = ["nav_environment", "register_nav_tree"]
