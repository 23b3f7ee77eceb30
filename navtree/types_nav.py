"""Navigation node type definitions."""

from __future__ import annotations

from typing import Any, Iterable, Protocol, Tuple, runtime_checkable


@runtime_checkable
class Node(Protocol):
    """A page entry the renderer can draw.

    ``children`` may be lazy; it is only iterated when ``has_children`` is
    true.
    """

    @property
    def title(self) -> str: ...

    @property
    def link(self) -> str: ...

    @property
    def is_active(self) -> bool: ...

    @property
    def has_children(self) -> bool: ...

    @property
    def children(self) -> Iterable["Node"]: ...

    def get_property(self, name: str) -> Tuple[Any, bool]: ...


@runtime_checkable
class NodeSource(Protocol):
    """Anything able to hand out the top level nodes of a container."""

    def find_top_level(self, container: str, parent_nav_id: int) -> Iterable[Node]: ...


__all__ = ["Node", "NodeSource"]
