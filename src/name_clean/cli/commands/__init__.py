
"""
CLI command modules for name_clean.

Each command module defines a single Typer-compatible command function.
"""

from name_clean.cli.commands.match import match_command
from name_clean.cli.commands.parse import parse_command

__all__ = [
    "match_command",
    "parse_command",
]
