"""Small HTML tag builder used to serialize navigation markup."""

from __future__ import annotations

import html
import json
from typing import Any, Dict, List, Mapping

from markupsafe import Markup

# Attributes rendered first, in this order, so output stays stable regardless
# of how option maps were assembled.
ATTRIBUTE_ORDER = (
    "type",
    "id",
    "class",
    "name",
    "value",
    "href",
    "src",
    "srcset",
    "form",
    "action",
    "method",
    "selected",
    "checked",
    "readonly",
    "disabled",
    "multiple",
    "size",
    "maxlength",
    "width",
    "height",
    "rows",
    "cols",
    "alt",
    "title",
    "rel",
    "media",
)

EXPANDED_ATTRIBUTES = ("data", "aria")


def _ordered(attrs: Mapping[str, Any]) -> List[tuple[str, Any]]:
    ordered = [(name, attrs[name]) for name in ATTRIBUTE_ORDER if name in attrs]
    ordered.extend(
        (name, value) for name, value in attrs.items() if name not in ATTRIBUTE_ORDER
    )
    return ordered


def _attr(name: str, value: Any) -> str | None:
    if value is None or value is False:
        return None
    if value is True:
        return name
    if isinstance(value, (list, tuple)):
        if name == "class":
            value = " ".join(str(part) for part in value if part not in (None, ""))
        else:
            value = json.dumps(list(value), ensure_ascii=False)
    return f'{name}="{html.escape(str(value), quote=True)}"'


def render_attrs(attrs: Mapping[str, Any] | None) -> str:
    """Render attributes as a string with a leading space, or ``""``."""

    if not attrs:
        return ""
    parts: List[str] = []
    for name, value in _ordered(attrs):
        if name in EXPANDED_ATTRIBUTES and isinstance(value, Mapping):
            for sub_name, sub_value in value.items():
                if isinstance(sub_value, (Mapping, list, tuple)):
                    sub_value = json.dumps(sub_value, ensure_ascii=False)
                rendered = _attr(f"{name}-{sub_name}", sub_value)
                if rendered:
                    parts.append(rendered)
            continue
        rendered = _attr(name, value)
        if rendered:
            parts.append(rendered)
    if not parts:
        return ""
    return " " + " ".join(parts)


def begin_tag(name: str, attrs: Mapping[str, Any] | None = None) -> str:
    return f"<{name}{render_attrs(attrs)}>"


def end_tag(name: str) -> str:
    return f"</{name}>"


def tag(name: str, content: Any = "", attrs: Mapping[str, Any] | None = None) -> str:
    """Render a complete element.

    String content is escaped unless it is already ``Markup``; nested markup
    built by this module should be wrapped in ``Markup`` before being passed.
    """

    if isinstance(content, Markup):
        body = str(content)
    elif content is None:
        body = ""
    else:
        body = html.escape(str(content), quote=False)
    return f"{begin_tag(name, attrs)}{body}{end_tag(name)}"


def merge_class(attrs: Dict[str, Any], extra: str) -> None:
    """Append ``extra`` to ``attrs["class"]`` separated by a single space.

    A missing class starts out empty, so the result keeps the leading space.
    """

    current = attrs.get("class")
    if isinstance(current, (list, tuple)):
        attrs["class"] = [*current, extra]
        return
    attrs["class"] = f"{current or ''} {extra}"


__all__ = [
    "ATTRIBUTE_ORDER",
    "begin_tag",
    "end_tag",
    "merge_class",
    "render_attrs",
    "tag",
]
