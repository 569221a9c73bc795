"""Path expressions into structured values.

Grammar::

    path     := segment ( "." name | "[" index "]" )*
    segment  := name | "[" index "]"
    name     := [^.\\[\\]]+
    index    := [0-9]+

Lookups never raise for absent data. A missing key, an out-of-range index or
a step through a scalar all yield ``MISSING``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any


class _Missing:
    """Sentinel for values that are not present."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

_TOKEN = re.compile(r"\[(\d+)\]|\.?([^.\[\]]+)")


def parse_path(path: str) -> list[str | int]:
    """Split a path expression into keys and indices.

    >>> parse_path("steps[0].saveAs")
    ['steps', 0, 'saveAs']

    Raises:
        ValueError: If the expression does not match the grammar.
    """
    parts: list[str | int] = []
    pos = 0
    while pos < len(path):
        match = _TOKEN.match(path, pos)
        if match is None or (pos == 0 and path.startswith(".")):
            msg = f"Invalid path expression {path!r} at position {pos}"
            raise ValueError(msg)
        index, name = match.groups()
        parts.append(int(index) if index is not None else name)
        pos = match.end()
    return parts


def get_field(value: Any, key: str | int) -> Any:
    """One lookup step: mapping key, sequence index or object attribute."""
    if value is None or value is MISSING:
        return MISSING
    if isinstance(value, Mapping):
        if isinstance(key, int):
            key = str(key)
        return value.get(key, MISSING)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if key == "length":
            return len(value)
        if isinstance(key, str):
            if not key.isdigit():
                return MISSING
            key = int(key)
        if 0 <= key < len(value):
            return value[key]
        return MISSING
    if isinstance(key, str) and not key.startswith("_"):
        return getattr(value, key, MISSING)
    return MISSING


def get_nested_value(value: Any, path: str | None) -> Any:
    """Resolve ``path`` against ``value``; an empty path returns ``value``."""
    if not path:
        return value
    current = value
    for key in parse_path(path):
        current = get_field(current, key)
        if current is MISSING:
            return MISSING
    return current
