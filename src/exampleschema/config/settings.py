"""Resolver settings and loading."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from exampleschema.errors import ConfigError

ENV_PREFIX = "EXAMPLESCHEMA_"
DEFAULT_MAX_DEPTH = 20
DEFAULT_ARRAY_SIZE = 2
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ResolverSettings(BaseSettings):
    """Configuration for schema resolution."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_depth: int = Field(
        default=DEFAULT_MAX_DEPTH,
        ge=1,
        description="Nesting levels resolved before a branch is cut off",
    )
    array_size: int = Field(
        default=DEFAULT_ARRAY_SIZE,
        ge=1,
        description="minItems/maxItems forced onto every array that has items",
    )
    log_level: str = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Any) -> str:
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v!r}. Valid: {', '.join(LOG_LEVELS)}")
        return level


def load_settings(config_path: str | Path | None = None, **overrides: Any) -> ResolverSettings:
    """Load settings from file and environment.

    Priority: explicit overrides > env vars > config file > defaults

    Raises:
        ConfigError: If the file is not a YAML mapping or a value is invalid.
    """
    config_data: dict[str, Any] = {}

    if config_path is not None:
        config_path = Path(config_path)
        if config_path.exists():
            with open(config_path, encoding="utf-8") as f:
                try:
                    loaded = yaml.safe_load(f)
                except yaml.YAMLError as exc:
                    raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc
            if loaded is not None and not isinstance(loaded, dict):
                raise ConfigError(f"Config file {config_path} must contain a mapping")
            config_data = loaded or {}

    config_data.update(_get_env_overrides())
    config_data.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return ResolverSettings(**config_data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid resolver settings: {exc}") from exc


def _get_env_overrides() -> dict[str, Any]:
    """Environment values, which must outrank the config file."""
    overrides: dict[str, Any] = {}
    for name in ResolverSettings.model_fields:
        value = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
        if value is not None:
            overrides[name] = value
    return overrides


__all__ = [
    "DEFAULT_ARRAY_SIZE",
    "DEFAULT_MAX_DEPTH",
    "ResolverSettings",
    "load_settings",
]
