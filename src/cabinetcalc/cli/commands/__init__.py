"""CLI command implementations for the cabinetcalc application.

This package contains subcommands for the cabinetcalc CLI, including:
- validate: Validate a calculation file
"""

from cabinetcalc.cli.commands.validate import validate_command

__all__ = ["validate_command"]
