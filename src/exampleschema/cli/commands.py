"""exampleschema CLI commands."""

from __future__ import annotations

import json
import logging
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from exampleschema.config.settings import load_settings
from exampleschema.discovery.ref_resolver import BodyType, RefResolver
from exampleschema.errors import ExampleSchemaError
from exampleschema.spec_loader import get_components, load_spec

console = Console(stderr=True)


def _configure_logging(verbose: bool, level: str) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _fail(exc: ExampleSchemaError) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False, soft_wrap=True)
    raise SystemExit(1)


@click.group()
@click.version_option(package_name="exampleschema")
def cli() -> None:
    """Prepare OpenAPI schemas for fake-data generation."""


@cli.command()
@click.argument("spec")
@click.option("--schema", "-s", "schema_name", help="Component schema name to resolve")
@click.option("--ref", "-r", help="Explicit $ref, e.g. '#/components/schemas/Pet'")
@click.option(
    "--direction",
    "-d",
    type=click.Choice(["request", "response"], case_sensitive=False),
    default="request",
    show_default=True,
    help="Body direction; request drops readOnly, response drops writeOnly",
)
@click.option("--max-depth", type=int, default=None, help="Nesting levels before cut-off")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML settings file",
)
@click.option("--indent", type=int, default=2, show_default=True, help="JSON indentation")
@click.option("--verbose", "-v", is_flag=True, help="Log resolution details")
def resolve(
    spec: str,
    schema_name: str | None,
    ref: str | None,
    direction: str,
    max_depth: int | None,
    config_path: str | None,
    indent: int,
    verbose: bool,
) -> None:
    """Resolve a component schema of SPEC and print it as JSON.

    SPEC is a path to a YAML/JSON OpenAPI document or an http(s) URL.

    Examples:
        exampleschema resolve openapi.yaml --schema Pet
        exampleschema resolve openapi.yaml -r '#/components/schemas/Pet' -d response
    """
    if bool(schema_name) == bool(ref):
        raise click.UsageError("Pass exactly one of --schema or --ref.")

    try:
        settings = load_settings(config_path, max_depth=max_depth)
        _configure_logging(verbose, settings.log_level)

        document = load_spec(spec)
        resolver = RefResolver(get_components(document), settings)
        target = {"$ref": ref or f"#/components/schemas/{schema_name}"}
        resolved = resolver.resolve(target, BodyType.coerce(direction))
    except ExampleSchemaError as exc:
        _fail(exc)

    click.echo(json.dumps(resolved, indent=indent))


@cli.command()
@click.argument("spec")
def schemas(spec: str) -> None:
    """List the component schemas defined in SPEC."""
    try:
        document = load_spec(spec)
    except ExampleSchemaError as exc:
        _fail(exc)

    registry = get_components(document).get("schemas") or {}
    if not registry:
        console.print("[yellow]No component schemas found[/yellow]")
        return

    table = Table(title="Component schemas", show_header=True, header_style="bold")
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Description")
    for name, schema in registry.items():
        schema = schema if isinstance(schema, dict) else {}
        kind = schema.get("type") or _composition_kind(schema)
        table.add_row(name, kind, schema.get("description", ""))

    Console().print(table)


def _composition_kind(schema: dict) -> str:
    for keyword in ("allOf", "anyOf", "oneOf", "$ref"):
        if keyword in schema:
            return keyword
    return "-"


__all__ = ["cli", "resolve", "schemas"]
