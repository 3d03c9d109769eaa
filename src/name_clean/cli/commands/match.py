
from __future__ import annotations

import typer

from name_clean.names.matching import matches


def match_command(
    first: str = typer.Argument(..., help="First name string"),
    second: str = typer.Argument(..., help="Second name string"),
):
    """
    Report whether two names match; exit status 1 when they do not.
    """
    found = matches(first, second)
    typer.echo("true" if found else "false")
    if not found:
        raise typer.Exit(code=1)
