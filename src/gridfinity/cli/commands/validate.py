"""Validate command for checking plan files.

This module provides the `validate` command that checks a JSON plan file for
syntax and schema errors, then for values the calculator would reject.
"""

from pathlib import Path
from typing import Annotated

import typer

from gridfinity.application.config import ConfigError, config_to_input, load_config
from gridfinity.application.printers import UnknownPrinterError


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON plan file to validate"),
    ],
) -> None:
    """Validate a drawer plan file.

    Checks the file for:
    - JSON syntax errors
    - Schema validation errors (missing fields, unknown presets, etc.)
    - Input errors the calculator would report

    Exit codes:
        0 - Plan is valid
        1 - Plan has errors

    Example:
        gridfinity validate kitchen-drawer.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
        calculation_input = config_to_input(config)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)
    except UnknownPrinterError as e:
        typer.echo("Errors:", err=True)
        typer.echo(f"  printer.preset: {e}", err=True)
        raise typer.Exit(code=1)

    errors = calculation_input.validate()
    if errors:
        typer.echo("Errors:", err=True)
        for error in errors:
            typer.echo(f"  {error}", err=True)
        typer.echo()
        typer.echo(f"Validation failed: {len(errors)} error(s)", err=True)
        raise typer.Exit(code=1)

    typer.echo("Validation passed. Plan is valid.")


def display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path") or "(root)"
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None and not isinstance(value, dict):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)
