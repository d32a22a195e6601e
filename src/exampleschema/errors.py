"""Custom exceptions for schema resolution.

Only a malformed ``$ref`` is fatal inside the resolver. Every other anomaly
(unresolved reference, excess nesting, untyped schema) is reported in-band
as a sentinel node so that example generation can carry on.
"""

from __future__ import annotations


class ExampleSchemaError(Exception):
    """Base class for all exampleschema errors."""


class InvalidReferenceError(ExampleSchemaError):
    """Raised when a ``$ref`` is too short to address a components entry.

    A usable local reference has at least four segments, e.g.
    ``#/components/schemas/Pet``.

    Attributes:
        ref: The offending reference string, exactly as found in the schema.

    Example:
        >>> from exampleschema import BodyType, resolve_refs
        >>> try:
        ...     resolve_refs({"$ref": "#/components"}, BodyType.REQUEST, {})
        ... except InvalidReferenceError as e:
        ...     print(e.ref)
        #/components
    """

    def __init__(self, ref: str) -> None:
        self.ref = ref
        super().__init__(f"Invalid schema reference: {ref}")


class SpecLoadError(ExampleSchemaError):
    """Raised when an OpenAPI document cannot be read or parsed."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Could not load spec from {source}. {reason}")


class ConfigError(ExampleSchemaError):
    """Raised when resolver settings cannot be loaded or are invalid."""
