"""Load OpenAPI documents and pull out their components registry."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import httpx
import yaml

from exampleschema.errors import SpecLoadError

logger = logging.getLogger(__name__)

FETCH_TIMEOUT = 15


def load_spec(source: str | Path) -> dict[str, Any]:
    """Load an OpenAPI spec from a YAML/JSON file or a live HTTP/HTTPS URL.

    URL example (FastAPI, Django Ninja, etc. serve /openapi.json by default):
        load_spec("http://localhost:8000/openapi.json")

    File example:
        load_spec("api-spec.yaml")

    Raises:
        SpecLoadError: If the file is missing, the URL is unreachable, or the
            content is not a JSON/YAML mapping.
    """
    source_str = str(source)

    if source_str.startswith("http://") or source_str.startswith("https://"):
        spec = _fetch(source_str)
    else:
        spec = _read_file(Path(source))

    if not isinstance(spec, dict):
        raise SpecLoadError(source_str, "The document is not a mapping.")
    return spec


def get_components(spec: dict[str, Any]) -> dict[str, Any]:
    """Return the components registry of a spec, empty if it has none."""
    components = spec.get("components")
    return components if isinstance(components, dict) else {}


def _fetch(url: str) -> Any:
    logger.debug("Fetching spec from %s", url)
    try:
        resp = httpx.get(url, timeout=FETCH_TIMEOUT, follow_redirects=True)
        resp.raise_for_status()
    except httpx.HTTPError as exc:
        raise SpecLoadError(url, f"{exc}\nIs the server running? Try: curl {url}") from exc
    try:
        return resp.json()
    except ValueError as exc:
        raise SpecLoadError(
            url, "Server returned non-JSON content. OpenAPI endpoints must return application/json."
        ) from exc


def _read_file(path: Path) -> Any:
    if not path.exists():
        raise SpecLoadError(str(path), "Spec file not found.")

    text = path.read_text(encoding="utf-8")

    if path.suffix in (".yaml", ".yml"):
        return _parse_yaml(path, text)
    if path.suffix == ".json":
        return _parse_json(path, text)

    # Unknown suffix: JSON first, then YAML
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return _parse_yaml(path, text)


def _parse_json(path: Path, text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SpecLoadError(str(path), f"Failed to parse JSON spec: {exc}") from exc


def _parse_yaml(path: Path, text: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SpecLoadError(str(path), f"Failed to parse YAML spec: {exc}") from exc


__all__ = ["get_components", "load_spec"]
