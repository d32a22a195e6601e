"""RefResolver - Turns OpenAPI schemas into example-ready schema trees."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from exampleschema.config.settings import ResolverSettings
from exampleschema.discovery.all_of import SchemaNode, merge_all_of
from exampleschema.discovery.path_lookup import get_escaped
from exampleschema.discovery.placeholders import DEFAULT_TABLE, NO_FORMAT, PlaceholderTable
from exampleschema.errors import InvalidReferenceError

logger = logging.getLogger(__name__)

TOO_DEEP_MESSAGE = "<Error: Too many levels of nesting to fake this schema>"
NO_TYPE_MESSAGE = "schema type not provided"
OBJECT_PLACEHOLDER = "<object>"
MIN_REF_SEGMENTS = 4


class BodyType(Enum):
    """Whether a schema describes a request or a response payload."""

    REQUEST = "REQUEST"
    RESPONSE = "RESPONSE"

    @classmethod
    def coerce(cls, value: BodyType | str) -> BodyType:
        if isinstance(value, cls):
            return value
        return cls(str(value).upper())


def json_type_of(value: Any) -> str:
    """JSON type name of an enum value, as the fake-data generator expects it."""
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return "object"


class RefResolver:
    """Resolves $ref pointers and composition keywords within a schema.

    Every ``$ref`` is followed into the components registry, ``anyOf`` and
    ``oneOf`` keep only their first branch, ``allOf`` is merged into a single
    object, and primitive leaves get a placeholder ``default`` such as
    ``<integer>`` or ``<dateTime>``.

    There is no cycle detection. Each call counts one level of depth, and a
    branch deeper than ``settings.max_depth`` is replaced by a sentinel node,
    which is what stops self-referencing schemas.

    Neither the input schema nor the components are modified; every branch
    returns a new dict.

    Example::

        resolver = RefResolver({"schemas": {"Pet": {...}}})
        schema = resolver.resolve(
            {"$ref": "#/components/schemas/Pet"}, BodyType.RESPONSE
        )

    Args:
        components: The ``components`` section of the OpenAPI document.
        settings: Depth and array bounds. Defaults to ResolverSettings().
        placeholders: Placeholder table for primitive leaves.
    """

    def __init__(
        self,
        components: Mapping[str, Any] | None,
        settings: ResolverSettings | None = None,
        placeholders: PlaceholderTable | None = None,
    ) -> None:
        self._components = components or {}
        self._settings = settings or ResolverSettings()
        self._placeholders = placeholders or DEFAULT_TABLE

    @property
    def components(self) -> Mapping[str, Any]:
        return self._components

    @property
    def settings(self) -> ResolverSettings:
        return self._settings

    def resolve(
        self,
        schema: Mapping[str, Any],
        body_type: BodyType | str,
        depth: int = 0,
    ) -> SchemaNode:
        """Resolve one schema node.

        Args:
            schema: A schema fragment, possibly with $ref or composition.
            body_type: REQUEST drops readOnly properties, RESPONSE drops
                writeOnly properties.
            depth: Levels already descended. Callers start at 0.

        Returns:
            The resolved schema.

        Raises:
            InvalidReferenceError: If a $ref has fewer than 4 segments.
        """
        body_type = BodyType.coerce(body_type)
        depth += 1

        if depth > self._settings.max_depth:
            logger.debug("Nesting deeper than %d levels, cutting branch", self._settings.max_depth)
            return {"value": TOO_DEEP_MESSAGE}

        if not isinstance(schema, Mapping):
            # boolean schemas and other non-mapping values carry no shape
            return {"type": "string", "default": NO_TYPE_MESSAGE}

        if schema.get("anyOf"):
            return self.resolve(schema["anyOf"][0], body_type, depth)
        if schema.get("oneOf"):
            return self.resolve(schema["oneOf"][0], body_type, depth)
        if schema.get("allOf") is not None:
            return self.resolve_all_of(schema["allOf"], body_type, depth)
        if schema.get("$ref"):
            return self._resolve_ref(schema["$ref"], body_type, depth)

        if schema.get("type") == "object" or "properties" in schema:
            return self._resolve_object(schema, body_type, depth)
        if schema.get("type") == "array" and schema.get("items") is not None:
            return self._resolve_array(schema, body_type, depth)

        return self._resolve_leaf(schema)

    def resolve_all_of(
        self,
        variants: Any,
        body_type: BodyType | str,
        depth: int = 0,
    ) -> SchemaNode | None:
        """Merge allOf variants into one object schema.

        Returns None if ``variants`` is not a list.
        """
        body_type = BodyType.coerce(body_type)
        return merge_all_of(variants, lambda variant: self.resolve(variant, body_type, depth))

    def _resolve_ref(self, ref: Any, body_type: BodyType, depth: int) -> SchemaNode:
        # "#/components/schemas/Pet" -> ["#", "components", "schemas", "Pet"]
        segments = str(ref).split("/")
        if len(segments) < MIN_REF_SEGMENTS:
            raise InvalidReferenceError(ref)

        # Anything after the components part is followed too, so
        # #/components/schemas/Envelope/properties/page works.
        target = get_escaped(self._components, segments[2:])
        if target is not None:
            return self.resolve(target, body_type, depth)

        logger.debug("Reference %s not found in components", ref)
        return {"value": f"reference {ref} not found in the api spec"}

    def _resolve_object(
        self, schema: Mapping[str, Any], body_type: BodyType, depth: int
    ) -> SchemaNode:
        if "properties" not in schema:
            # shapeless object, nothing to recurse into
            return {**schema, "type": "string", "default": OBJECT_PLACEHOLDER}

        resolved: SchemaNode = {k: v for k, v in schema.items() if k != "properties"}
        resolved["type"] = "object"
        resolved["properties"] = {}

        properties = schema["properties"]
        if not isinstance(properties, Mapping):
            properties = {}

        for name, prop in properties.items():
            if isinstance(prop, Mapping):
                if prop.get("readOnly") and body_type is BodyType.REQUEST:
                    continue
                if prop.get("writeOnly") and body_type is BodyType.RESPONSE:
                    continue
            resolved["properties"][name] = self.resolve(prop, body_type, depth)

        return resolved

    def _resolve_array(
        self, schema: Mapping[str, Any], body_type: BodyType, depth: int
    ) -> SchemaNode:
        # fixed bounds keep self-referencing item schemas finite
        resolved: SchemaNode = {k: v for k, v in schema.items() if k != "items"}
        resolved["minItems"] = self._settings.array_size
        resolved["maxItems"] = self._settings.array_size
        resolved["items"] = self.resolve(schema["items"], body_type, depth)
        return resolved

    def _resolve_leaf(self, schema: Mapping[str, Any]) -> SchemaNode:
        resolved: SchemaNode = dict(schema)
        if "default" in resolved:
            return resolved

        if "type" in resolved:
            default = self._placeholders.placeholder_for(
                resolved["type"], resolved.get("format", NO_FORMAT)
            )
            if default is not None:
                resolved["default"] = default
        elif resolved.get("enum"):
            first = resolved["enum"][0]
            return {"type": json_type_of(first), "value": first}
        else:
            return {"type": "string", "default": NO_TYPE_MESSAGE}

        if not resolved.get("type"):
            resolved["type"] = "string"
        resolved.pop("format", None)
        return resolved


def resolve_refs(
    schema: Mapping[str, Any],
    body_type: BodyType | str,
    components: Mapping[str, Any] | None,
    depth: int = 0,
    settings: ResolverSettings | None = None,
) -> SchemaNode:
    """Resolve a schema against a components registry.

    Shortcut for ``RefResolver(components, settings).resolve(schema, body_type, depth)``.
    """
    return RefResolver(components, settings).resolve(schema, body_type, depth)


def resolve_all_of(
    variants: Any,
    body_type: BodyType | str,
    components: Mapping[str, Any] | None,
    depth: int = 0,
    settings: ResolverSettings | None = None,
) -> SchemaNode | None:
    """Merge allOf variants against a components registry."""
    return RefResolver(components, settings).resolve_all_of(variants, body_type, depth)


__all__ = [
    "BodyType",
    "NO_TYPE_MESSAGE",
    "RefResolver",
    "TOO_DEEP_MESSAGE",
    "json_type_of",
    "resolve_all_of",
    "resolve_refs",
]
