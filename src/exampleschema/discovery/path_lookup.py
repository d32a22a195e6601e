"""Nested key lookup that never splits on separators inside a key."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_MISSING = object()


def get_escaped(root: Any, path: Any, default: Any = None) -> Any:
    """Read a nested value, one path segment per level.

    Works like ``root[path[0]][path[1]]...`` but tolerates missing levels and
    keys that themselves contain ``.`` or ``/`` (``"Pagination.Envelope"`` is
    a single key, not two).

    Args:
        root: Object to read from, usually a components mapping.
        path: List or tuple of segments. It is read with a cursor and never
            modified, so callers may reuse it.
        default: Returned when the root is empty or a level along the path
            is missing.

    Returns:
        The value at ``path``, even when it is an empty schema such as ``{}``;
        ``root`` itself for an empty path; ``default`` on a miss; ``None``
        when ``path`` is not a list or tuple at all.
    """
    if not isinstance(path, (list, tuple)):
        return None

    if not root:
        return default

    current = root
    for segment in path:
        current = _child(current, segment)
        if current is _MISSING or current is None:
            return default

    return current


def _child(node: Any, segment: Any) -> Any:
    if isinstance(node, Mapping):
        return node.get(segment, _MISSING)
    if isinstance(node, (list, tuple)):
        try:
            index = int(segment)
        except (TypeError, ValueError):
            return _MISSING
        if 0 <= index < len(node):
            return node[index]
    return _MISSING


__all__ = ["get_escaped"]
