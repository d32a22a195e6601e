"""allOf merging - collapse several object schemas into one."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

SchemaNode = dict[str, Any]


def merge_all_of(
    variants: Any,
    resolve: Callable[[SchemaNode], SchemaNode],
) -> SchemaNode | None:
    """Create one object schema that carries the properties of all variants.

    Only ``type: object`` variants take part once there is more than one of
    them; anything else (e.g. a bare ``{"type": "string", "maxLength": 5}``
    constraint) is dropped. When two variants define the same property the
    earlier one wins.

    Args:
        variants: The ``allOf`` list.
        resolve: Resolves a single variant. The caller binds direction,
            components and the current depth.

    Returns:
        The merged schema, the resolved variant itself when there is only
        one, or None if ``variants`` is not a list.
    """
    if not isinstance(variants, (list, tuple)):
        return None

    if len(variants) == 1:
        # a single entry is not forced to be an object
        return resolve(variants[0])

    objects = [
        resolved for resolved in (resolve(variant) for variant in variants)
        if resolved.get("type") == "object"
    ]

    merged: SchemaNode = {"type": "object", "properties": {}}
    for resolved in objects:
        for name, prop in (resolved.get("properties") or {}).items():
            if name not in merged["properties"]:
                merged["properties"][name] = prop

        if not merged.get("description") and resolved.get("description"):
            merged["description"] = resolved["description"]

    return merged


__all__ = ["SchemaNode", "merge_all_of"]
