"""Resolver configuration."""

from exampleschema.config.settings import (
    DEFAULT_ARRAY_SIZE,
    DEFAULT_MAX_DEPTH,
    ResolverSettings,
    load_settings,
)

__all__ = [
    "DEFAULT_ARRAY_SIZE",
    "DEFAULT_MAX_DEPTH",
    "ResolverSettings",
    "load_settings",
]
