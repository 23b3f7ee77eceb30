"""Menu storage and query helpers."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

import yaml
from pydantic import ValidationError

from .models import MenuItemRecord, MenuSpec

logger = logging.getLogger(__name__)

DEFAULT_CONTAINER = "default"

# camelCase names as written in menu and config files, mapped to attribute names.
PROPERTY_ALIASES: Dict[str, str] = {
    "isActive": "is_active",
    "hasChildren": "has_children",
    **{
        info.alias: name
        for name, info in MenuItemRecord.model_fields.items()
        if info.alias and info.alias != name
    },
}


class QueryIterator:
    """Lazy, re-iterable result of a menu query.

    The store is only consulted when the iterator is walked, so a result can
    be handed around (e.g. as ``children``) without touching the records.
    """

    def __init__(self, store: "MenuStore", conditions: Dict[str, Any], with_hidden: bool) -> None:
        self.store = store
        self.conditions = dict(conditions)
        self.with_hidden = with_hidden

    def _records(self) -> List[MenuItemRecord]:
        matched: List[MenuItemRecord] = []
        for record in self.store.records:
            if record.is_hidden and not self.with_hidden:
                logger.debug("Skipping hidden page %s", record.nav_id)
                continue
            if all(getattr(record, key) == value for key, value in self.conditions.items()):
                matched.append(record)
        return sorted(matched, key=lambda record: (record.sort_index, record.nav_id))

    def __iter__(self) -> Iterator["MenuNode"]:
        for record in self._records():
            yield MenuNode(record, self.store)

    def count(self) -> int:
        return len(self._records())


class MenuQuery:
    """Builder returned by ``MenuStore.find``."""

    def __init__(self, store: "MenuStore") -> None:
        self._store = store
        self._conditions: Dict[str, Any] = {}
        self._with_hidden = False

    def where(self, **conditions: Any) -> "MenuQuery":
        unknown = set(conditions) - set(MenuItemRecord.model_fields)
        if unknown:
            raise ValueError(f"Unknown menu fields: {', '.join(sorted(unknown))}")
        self._conditions.update(conditions)
        return self

    def with_hidden(self) -> "MenuQuery":
        self._with_hidden = True
        return self

    def all(self) -> QueryIterator:
        return QueryIterator(self._store, self._conditions, self._with_hidden)

    def one(self) -> Optional["MenuNode"]:
        return next(iter(self.all()), None)

    def count(self) -> int:
        return self.all().count()


class MenuNode:
    """A stored page bound to its store, usable as a navigation node."""

    def __init__(self, record: MenuItemRecord, store: "MenuStore") -> None:
        self.record = record
        self.store = store

    def __repr__(self) -> str:
        return f"MenuNode(nav_id={self.record.nav_id}, alias={self.record.alias!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MenuNode):
            return NotImplemented
        return self.record == other.record and self.store is other.store

    def __hash__(self) -> int:
        return hash((self.record.nav_id, id(self.store)))

    @property
    def nav_id(self) -> int:
        return self.record.nav_id

    @property
    def alias(self) -> str:
        return self.record.alias

    @property
    def title(self) -> str:
        return self.record.title

    @property
    def link(self) -> str:
        if self.record.link is not None:
            return self.record.link
        if self.record.is_home:
            return "/"
        aliases = [record.alias for record in self.store.parent_chain(self.nav_id)]
        return "/" + "/".join(reversed(aliases))

    @property
    def depth(self) -> int:
        return len(self.store.parent_chain(self.nav_id))

    @property
    def parent(self) -> Optional["MenuNode"]:
        if not self.record.parent_nav_id:
            return None
        return self.store.get(self.record.parent_nav_id)

    @property
    def is_active(self) -> bool:
        return self.nav_id in self.store.active_path()

    @property
    def children(self) -> QueryIterator:
        return (
            self.store.find()
            .where(container=self.record.container, parent_nav_id=self.nav_id)
            .all()
        )

    @property
    def has_children(self) -> bool:
        return self.children.count() > 0

    def get_property(self, name: str) -> Tuple[Any, bool]:
        name = PROPERTY_ALIASES.get(name, name)
        if name in ("depth", "link", "is_active", "has_children"):
            return getattr(self, name), True
        if name in MenuItemRecord.model_fields and name != "properties":
            return getattr(self.record, name), True
        if name in self.record.properties:
            return self.record.properties[name], True
        return None, False


@dataclass
class MenuStore:
    """All menu records, plus the page currently being viewed."""

    records: List[MenuItemRecord]
    current_nav_id: Optional[int] = None
    _by_id: Dict[int, MenuItemRecord] = field(default_factory=dict, init=False, repr=False)
    _active_path: Optional[frozenset[int]] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        for record in self.records:
            if record.nav_id in self._by_id:
                raise ValueError(f"Duplicate nav_id {record.nav_id} in menu")
            self._by_id[record.nav_id] = record
        if self.current_nav_id is not None and self.current_nav_id not in self._by_id:
            raise KeyError(f"Unknown current page: {self.current_nav_id}")

    @classmethod
    def load(cls, path: Path) -> "MenuStore":
        """Load a menu from a YAML or JSON file."""

        if not path.exists():
            raise FileNotFoundError(f"Menu file not found: {path}")

        text = path.read_text(encoding="utf-8")
        try:
            if path.suffix.lower() in (".yaml", ".yml"):
                payload = yaml.safe_load(text)
            else:
                payload = json.loads(text)
            if isinstance(payload, list):
                payload = {"items": payload}
            spec = MenuSpec.model_validate(payload or {})
            return cls(list(spec.items))
        except (yaml.YAMLError, json.JSONDecodeError, ValidationError, ValueError) as exc:
            raise SystemExit(f"Invalid menu file {path}: {exc}") from exc

    def _resolve_key(self, key: int | str, container: str = DEFAULT_CONTAINER) -> MenuItemRecord:
        if isinstance(key, int) and key in self._by_id:
            return self._by_id[key]
        if isinstance(key, str):
            for record in self.records:
                if record.alias == key and record.container == container:
                    return record
        raise KeyError(f"Unknown page: {key}")

    def with_current(self, key: int | str | None, container: str = DEFAULT_CONTAINER) -> "MenuStore":
        """Return a copy of the store whose active path ends at ``key``."""

        if key is None:
            return replace(self, current_nav_id=None)
        return replace(self, current_nav_id=self._resolve_key(key, container).nav_id)

    def find(self) -> MenuQuery:
        return MenuQuery(self)

    def find_top_level(self, container: str, parent_nav_id: int) -> QueryIterator:
        return self.find().where(container=container, parent_nav_id=parent_nav_id).all()

    def get(self, nav_id: int) -> Optional[MenuNode]:
        record = self._by_id.get(nav_id)
        return MenuNode(record, self) if record else None

    def find_by_alias(self, alias: str, container: str = DEFAULT_CONTAINER) -> Optional[MenuNode]:
        return self.find().where(alias=alias, container=container).with_hidden().one()

    @property
    def home(self) -> Optional[MenuNode]:
        return self.find().where(is_home=True).with_hidden().one()

    @property
    def current(self) -> Optional[MenuNode]:
        if self.current_nav_id is None:
            return None
        return self.get(self.current_nav_id)

    def parent_chain(self, nav_id: int) -> List[MenuItemRecord]:
        """Records from ``nav_id`` up to its top level ancestor."""

        chain: List[MenuItemRecord] = []
        seen: set[int] = set()
        record = self._by_id.get(nav_id)
        while record is not None and record.nav_id not in seen:
            seen.add(record.nav_id)
            chain.append(record)
            record = self._by_id.get(record.parent_nav_id)
        if record is not None:
            logger.warning("Parent cycle detected at page %s", record.nav_id)
        return chain

    def active_path(self) -> frozenset[int]:
        if self._active_path is None:
            if self.current_nav_id is None:
                self._active_path = frozenset()
            else:
                self._active_path = frozenset(
                    record.nav_id for record in self.parent_chain(self.current_nav_id)
                )
        return self._active_path


def validate_menu(store: MenuStore) -> List[str]:
    """Return human readable problems found in the menu structure."""

    problems: List[str] = []
    by_id = {record.nav_id: record for record in store.records}

    for record in store.records:
        if record.parent_nav_id and record.parent_nav_id not in by_id:
            problems.append(
                f"Page {record.nav_id} ({record.alias}) points to missing parent "
                f"{record.parent_nav_id}"
            )
            continue
        parent = by_id.get(record.parent_nav_id)
        if parent is not None and parent.container != record.container:
            problems.append(
                f"Page {record.nav_id} ({record.alias}) is in container "
                f"'{record.container}' but its parent is in '{parent.container}'"
            )

    reported: set[int] = set()
    for record in store.records:
        seen: List[int] = []
        current: Optional[MenuItemRecord] = record
        while current is not None and current.parent_nav_id:
            if current.nav_id in seen:
                cycle = seen[seen.index(current.nav_id):]
                if not reported.intersection(cycle):
                    problems.append(
                        "Parent cycle: " + " -> ".join(str(nav_id) for nav_id in cycle)
                    )
                    reported.update(cycle)
                break
            seen.append(current.nav_id)
            current = by_id.get(current.parent_nav_id)

    siblings: Dict[Tuple[str, int, str], List[int]] = {}
    for record in store.records:
        key = (record.container, record.parent_nav_id, record.alias)
        siblings.setdefault(key, []).append(record.nav_id)
    for (container, parent_nav_id, alias), nav_ids in siblings.items():
        if len(nav_ids) > 1:
            problems.append(
                f"Duplicate alias '{alias}' under parent {parent_nav_id} in container "
                f"'{container}': {', '.join(str(nav_id) for nav_id in nav_ids)}"
            )

    return problems


__all__ = [
    "DEFAULT_CONTAINER",
    "MenuNode",
    "MenuQuery",
    "MenuStore",
    "QueryIterator",
    "validate_menu",
]
