"""CLI command implementations for the gridfinity application.

This package contains subcommands for the gridfinity CLI, including:
- validate: Validate a plan file
"""

from gridfinity.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
