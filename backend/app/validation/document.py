"""
Document model and dotted-path resolution.

A document is the parsed JSON body of a request: nested mappings of
string keys to strings, other scalars, or further mappings.  Resolving a
path either yields the value found there or the ``ABSENT`` sentinel, and
never an exception.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final


class _Absent:
    """Marker for a path that does not lead to a value."""

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT: Final = _Absent()


def split_path(path: str) -> tuple[str, ...]:
    """Split a dotted field path into its segments."""
    return tuple(path.split("."))


def resolve_path(document: Any, path: str) -> Any:
    """
    Walk ``path`` through ``document`` one segment at a time.

    Returns the value at the end of the path, or ``ABSENT`` when a segment
    is missing, an intermediate value is not a mapping, or the value found
    is JSON ``null``.
    """
    current = document
    for segment in split_path(path):
        if not isinstance(current, Mapping) or segment not in current:
            return ABSENT
        current = current[segment]
    if current is None:
        return ABSENT
    return current


def is_absent(value: Any) -> bool:
    return value is ABSENT
