"""Pytest fixtures for exampleschema tests."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from exampleschema import RefResolver

PET_COMPONENTS: dict[str, Any] = {
    "schemas": {
        "Pet": {
            "type": "object",
            "description": "A pet",
            "properties": {
                "id": {"type": "integer", "format": "int64", "readOnly": True},
                "name": {"type": "string"},
                "password": {"type": "string", "format": "password", "writeOnly": True},
                "tag": {"$ref": "#/components/schemas/Tag"},
            },
        },
        "Tag": {
            "type": "object",
            "properties": {
                "label": {"type": "string"},
            },
        },
        "Node": {
            "type": "object",
            "properties": {
                "value": {"type": "integer"},
                "next": {"$ref": "#/components/schemas/Node"},
            },
        },
        "Loop": {"$ref": "#/components/schemas/Loop"},
        "Pagination.Envelope": {
            "type": "object",
            "properties": {
                "page": {"type": "integer", "format": "int32"},
            },
        },
        "Color": {"enum": ["red", "green"]},
    }
}


@pytest.fixture
def components() -> dict[str, Any]:
    """A fresh copy of the sample components registry."""
    return copy.deepcopy(PET_COMPONENTS)


@pytest.fixture
def resolver(components: dict[str, Any]) -> RefResolver:
    """A RefResolver over the sample components."""
    return RefResolver(components)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep EXAMPLESCHEMA_* variables from leaking into tests."""
    for name in ("EXAMPLESCHEMA_MAX_DEPTH", "EXAMPLESCHEMA_ARRAY_SIZE", "EXAMPLESCHEMA_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
