
from __future__ import annotations

import typer

from name_clean.cli.commands.match import match_command
from name_clean.cli.commands.parse import parse_command

app = typer.Typer(
    name="name-clean",
    help="Inspect name parsing and fuzzy name matching",
    add_completion=False,
)

app.command("parse")(parse_command)
app.command("match")(match_command)


def main():
    app()


if __name__ == "__main__":
    main()
