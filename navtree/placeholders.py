"""``{{name}}`` placeholder substitution in attribute values."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Mapping

from .types_nav import Node

logger = logging.getLogger(__name__)

PLACEHOLDER_RE = re.compile(r"{{([^}]*)}}")

# Value used for placeholders the node cannot resolve.
MISSING_VALUE = "0"


def _stringify(value: Any) -> str:
    if value is True:
        return "1"
    if value is False or value is None:
        return ""
    return str(value)


def _compile_value(node: Node | None, value: str) -> str:
    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if node is not None:
            resolved, found = node.get_property(name)
            if found:
                return _stringify(resolved)
        logger.debug("Unresolved placeholder {{%s}}", name)
        return MISSING_VALUE

    return PLACEHOLDER_RE.sub(_replace, value)


def compile_options(node: Node | None, options: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``options`` with placeholders resolved against ``node``.

    Only values are scanned, keys are left alone. Nested maps (e.g. ``data``)
    are compiled the same way. Substituted text is not scanned again.
    """

    compiled: Dict[str, Any] = {}
    for key, value in options.items():
        if isinstance(value, str):
            compiled[key] = _compile_value(node, value)
        elif isinstance(value, Mapping):
            compiled[key] = compile_options(node, value)
        elif isinstance(value, (list, tuple)):
            compiled[key] = [
                _compile_value(node, part) if isinstance(part, str) else part
                for part in value
            ]
        else:
            compiled[key] = value
    return compiled


__all__ = ["MISSING_VALUE", "PLACEHOLDER_RE", "compile_options"]
