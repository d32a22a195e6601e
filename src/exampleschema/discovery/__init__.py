"""Discovery - schema dereferencing and example preparation.

The Discovery context is responsible for:
- Following $ref pointers into the components registry
- Collapsing allOf/anyOf/oneOf into one concrete shape
- Filtering readOnly/writeOnly properties by body direction
- Annotating primitive leaves with placeholder defaults

Core abstractions:
- RefResolver: The recursive schema normalizer
- BodyType: REQUEST or RESPONSE
- PlaceholderTable: (type, format) -> placeholder token
- get_escaped: Nested key lookup tolerant of "." and "/" in keys
"""

from exampleschema.discovery.all_of import SchemaNode, merge_all_of
from exampleschema.discovery.path_lookup import get_escaped
from exampleschema.discovery.placeholders import (
    DEFAULT_PLACEHOLDERS,
    PlaceholderTable,
    placeholder_for,
)
from exampleschema.discovery.ref_resolver import (
    NO_TYPE_MESSAGE,
    TOO_DEEP_MESSAGE,
    BodyType,
    RefResolver,
    json_type_of,
    resolve_all_of,
    resolve_refs,
)

__all__ = [
    # Core types
    "RefResolver",
    "BodyType",
    "SchemaNode",
    "PlaceholderTable",
    # Functions
    "resolve_refs",
    "resolve_all_of",
    "merge_all_of",
    "get_escaped",
    "placeholder_for",
    "json_type_of",
    # Constants
    "DEFAULT_PLACEHOLDERS",
    "NO_TYPE_MESSAGE",
    "TOO_DEEP_MESSAGE",
]
