"""exampleschema CLI - Command line interface for exampleschema."""

from __future__ import annotations

from exampleschema.cli.commands import cli


def main() -> None:
    """Main entry point for the exampleschema CLI."""
    cli()


__all__ = ["cli", "main"]
