"""Placeholder tokens for primitive (type, format) combinations.

The tokens are what the fake-data generator later sees as a schema's
``default``, e.g. ``{"type": "integer", "default": "<long>"}``.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

PlaceholderEntry = Mapping[str, str] | str

# marks an absent "format" key, as opposed to "format": null
NO_FORMAT: Any = object()

DEFAULT_PLACEHOLDERS: Mapping[str, PlaceholderEntry] = MappingProxyType(
    {
        "integer": MappingProxyType({
            "int32": "<integer>",
            "int64": "<long>",
        }),
        "number": MappingProxyType({
            "float": "<float>",
            "double": "<double>",
        }),
        "string": MappingProxyType({
            "byte": "<byte>",
            "binary": "<binary>",
            "date": "<date>",
            "date-time": "<dateTime>",
            "password": "<password>",
        }),
        # booleans have no format dimension
        "boolean": "<boolean>",
    }
)


class PlaceholderTable:
    """Read-only lookup from (type, format) to a placeholder token.

    Example:
        >>> table = PlaceholderTable()
        >>> table.placeholder_for("string", "date-time")
        '<dateTime>'
        >>> table.placeholder_for("string", "email")
        '<email>'
        >>> table.placeholder_for("uuid", "v4")
        '<uuid-v4>'

    Args:
        extra: Optional entries layered over the defaults. A mapping value
            extends the formats of that type; a string value makes the type
            flat.
    """

    def __init__(self, extra: Mapping[str, PlaceholderEntry] | None = None) -> None:
        entries: dict[str, PlaceholderEntry] = dict(DEFAULT_PLACEHOLDERS)
        for schema_type, entry in (extra or {}).items():
            base = entries.get(schema_type)
            if isinstance(entry, Mapping) and isinstance(base, Mapping):
                entry = MappingProxyType({**base, **entry})
            elif isinstance(entry, Mapping):
                entry = MappingProxyType(dict(entry))
            entries[schema_type] = entry
        self._entries: Mapping[str, PlaceholderEntry] = MappingProxyType(entries)

    @property
    def entries(self) -> Mapping[str, PlaceholderEntry]:
        return self._entries

    def has_type(self, schema_type: Any) -> bool:
        """True if the type is a key of the table."""
        return isinstance(schema_type, str) and schema_type in self._entries

    def lookup(self, schema_type: Any, fmt: Any) -> str | None:
        """Return the concrete token for a format, or None if unmapped."""
        if not self.has_type(schema_type):
            return None
        entry = self._entries[schema_type]
        if isinstance(entry, Mapping):
            return entry.get(fmt)
        return None

    def placeholder_for(self, schema_type: Any, fmt: Any = NO_FORMAT) -> str | None:
        """Synthesize the default token for a typed primitive leaf.

        - no format: ``<type>``
        - known type, mapped format: the table token
        - known type, unmapped format: ``<format>``
        - unknown type: ``<type>`` or ``<type-format>``

        A format that is present but empty (``""`` or None) is not the same
        as no format: for a known type it yields None, meaning no default.
        """
        type_text = _token_text(schema_type)
        if fmt is NO_FORMAT:
            return f"<{type_text}>"
        if self.has_type(schema_type):
            token = self.lookup(schema_type, fmt)
            if token:
                return token
            return f"<{_token_text(fmt)}>" if fmt else None
        return f"<{type_text}{'-' + _token_text(fmt) if fmt else ''}>"


def _token_text(value: Any) -> str:
    # JSON spelling, so a null type reads <null> rather than <None>
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


DEFAULT_TABLE = PlaceholderTable()


def placeholder_for(schema_type: Any, fmt: Any = NO_FORMAT) -> str | None:
    """Placeholder token from the default table."""
    return DEFAULT_TABLE.placeholder_for(schema_type, fmt)


__all__ = [
    "DEFAULT_PLACEHOLDERS",
    "DEFAULT_TABLE",
    "NO_FORMAT",
    "PlaceholderEntry",
    "PlaceholderTable",
    "placeholder_for",
]
