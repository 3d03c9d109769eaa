
from __future__ import annotations

import json
from typing import List

import typer
from rich.console import Console
from rich.table import Table

from name_clean.names.parser import name_parse

console = Console()


def parse_command(
    names: List[str] = typer.Argument(..., help="Raw names to parse"),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print JSON instead of a table",
    ),
):
    """
    Split each name into prefix, base and suffix.
    """
    parsed = [name_parse(n) for n in names]

    if as_json:
        typer.echo(json.dumps([p.to_dict() for p in parsed], indent=2, ensure_ascii=False))
        return

    table = Table(title="Parsed Names")
    table.add_column("Original", style="bold")
    table.add_column("Prefix")
    table.add_column("Base")
    table.add_column("Suffix")

    for p in parsed:
        table.add_row(p.original or "", p.prefix, p.base, p.suffix)

    console.print(table)
