"""Validate command for checking calculation files.

Load failures (missing file, bad JSON, schema problems) and hardware
placement errors are reported the same way, so a file is checked in one
pass and the exit code tells a script which kind of result it got.
"""

from pathlib import Path
from typing import Annotated

import typer

from cabinetcalc.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)


def _load_error_result(error: ConfigError) -> ValidationResult:
    result = ValidationResult()
    if error.error_type == "file_not_found":
        result.add_error(str(error.path), "File not found")
    elif error.error_type == "json_parse":
        for detail in error.details:
            result.add_error(
                f"line {detail['line']}, column {detail['column']}",
                f"Invalid JSON syntax: {detail['message']}",
            )
    elif error.error_type == "validation":
        for detail in error.details:
            result.add_error(detail["path"], detail["message"], detail["value"])
    else:
        result.add_error(str(error.path), error.message)
    return result


def _echo_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
            if error.value is not None:
                typer.echo(f"    Value: {error.value!r}", err=True)
        typer.echo(err=True)

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if not result.is_valid:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.has_warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a calculation configuration file.

    Reports:
    - JSON syntax and schema errors
    - Hardware drilled outside its door or drawer box
    - Dimension advisories (non-positive door sizes, oversized shaker frames,
      unknown drawer systems)

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors
        2 - Configuration is valid but has warnings

    Example:
        cabinetcalc validate base-cabinet.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        result = validate_config(load_config(config_file))
    except ConfigError as e:
        result = _load_error_result(e)

    _echo_result(result)
    raise typer.Exit(code=result.exit_code)
