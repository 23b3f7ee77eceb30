"""Plain in-memory navigation nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

_LOOKUP_FIELDS = ("title", "link", "is_active", "has_children")
_CAMEL_FIELDS = {"isActive": "is_active", "hasChildren": "has_children"}


@dataclass
class StaticNode:
    """Node built directly in code, e.g. for hand-written menus or tests."""

    title: str
    link: str
    is_active: bool = False
    children: List["StaticNode"] = field(default_factory=list)
    properties: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    def get_property(self, name: str) -> Tuple[Any, bool]:
        if name in self.properties:
            return self.properties[name], True
        field_name = _CAMEL_FIELDS.get(name, name)
        if field_name in _LOOKUP_FIELDS:
            return getattr(self, field_name), True
        return None, False


__all__ = ["StaticNode"]
