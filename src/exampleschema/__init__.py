"""exampleschema - Example-ready OpenAPI schemas.

Dereferences OpenAPI/JSON-Schema fragments into trees a fake-data
generator can consume directly: every $ref followed, allOf/anyOf/oneOf
collapsed, and every primitive leaf given a placeholder default.

Quick Start:
    from exampleschema import BodyType, load_spec, get_components, resolve_refs

    spec = load_spec("openapi.yaml")
    schema = resolve_refs(
        {"$ref": "#/components/schemas/Pet"},
        BodyType.REQUEST,
        get_components(spec),
    )
"""

from __future__ import annotations

from exampleschema.config import ResolverSettings, load_settings
from exampleschema.discovery import (
    BodyType,
    PlaceholderTable,
    RefResolver,
    SchemaNode,
    get_escaped,
    merge_all_of,
    placeholder_for,
    resolve_all_of,
    resolve_refs,
)
from exampleschema.errors import (
    ConfigError,
    ExampleSchemaError,
    InvalidReferenceError,
    SpecLoadError,
)
from exampleschema.spec_loader import get_components, load_spec

__version__ = "0.1.0"

__all__ = [
    # Resolution
    "RefResolver",
    "BodyType",
    "SchemaNode",
    "resolve_refs",
    "resolve_all_of",
    "merge_all_of",
    "get_escaped",
    # Placeholders
    "PlaceholderTable",
    "placeholder_for",
    # Loading and settings
    "load_spec",
    "get_components",
    "ResolverSettings",
    "load_settings",
    # Errors
    "ExampleSchemaError",
    "InvalidReferenceError",
    "SpecLoadError",
    "ConfigError",
]
