
"""
CLI package for name_clean.

Provides the Typer application entrypoint for inspecting parses and matches.
"""

from name_clean.cli.app import app, main

__all__ = [
    "app",
    "main",
]
