"""Template placeholder substitution for node config strings.

Two placeholder forms are supported:

- ``{{input}}`` is replaced by the whole request input.
- ``{{input.a.b}}`` walks the input field by field. List elements can be
  addressed by index (``{{input.items.0}}``). If any step is missing the
  placeholder is left untouched.

Values are rendered the way a browser would: structured values as compact
JSON, scalars as their plain string form.
"""

from __future__ import annotations

import json
import re
from typing import Any

_WHOLE_INPUT = "{{input}}"
_FIELD_PATH_RE = re.compile(r"\{\{input\.([^}]+)\}\}")

_MISSING = object()


def _normalize(value: Any) -> Any:
    # Integral floats serialize as integers, like JavaScript numbers.
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {k: _normalize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalize(v) for v in value]
    return value


def stringify(value: Any) -> str:
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(_normalize(value), separators=(",", ":"), ensure_ascii=False)
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _lookup(value: Any, path: str) -> Any:
    for field in path.split("."):
        if isinstance(value, dict) and field in value:
            value = value[field]
        elif isinstance(value, (list, tuple)) and field.isdigit() and int(field) < len(value):
            value = value[int(field)]
        else:
            return _MISSING
    return value


def substitute(text: Any, input: Any) -> Any:
    """Resolve ``{{input}}`` placeholders in ``text`` against ``input``.

    Non-string ``text`` is returned as is.
    """
    if not isinstance(text, str):
        return text

    result = text.replace(_WHOLE_INPUT, stringify(input))

    def resolve(match: re.Match[str]) -> str:
        value = _lookup(input, match.group(1))
        if value is _MISSING:
            return match.group(0)
        return stringify(value)

    return _FIELD_PATH_RE.sub(resolve, result)
