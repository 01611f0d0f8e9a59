"""Rendering of parameter values into inline command literals."""

from __future__ import annotations

import re
from typing import Any

_ESCAPE_PATTERN = re.compile(r"[\\\"']")


def param_to_string(value: Any) -> Any:
    """Format ``value`` as a quoted literal for use inside a command argument.

    ``None`` becomes ``"null"``, strings are escaped and single quoted, lists and
    tuples are rendered as ``[item, item]`` with each item formatted
    recursively. Any other value is returned unchanged.
    """
    if value is None:
        return "null"
    if isinstance(value, str):
        escaped = _ESCAPE_PATTERN.sub(r"\\\g<0>", value)
        rendered = ""
        if not escaped.startswith('"'):
            rendered += "'"
        rendered += escaped
        if not escaped.endswith('"') or escaped.endswith('\\"'):
            rendered += "'"
        return rendered
    if isinstance(value, (list, tuple)):
        items = [_render_item(param_to_string(item)) for item in value]
        return "[" + ", ".join(items) + "]"
    return value


def _render_item(item: Any) -> str:
    if isinstance(item, bool):
        return "true" if item else "false"
    if isinstance(item, float) and item.is_integer():
        return str(int(item))
    return str(item)


__all__ = ["param_to_string"]
