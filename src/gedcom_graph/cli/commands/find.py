from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from gedcom_graph.cli.utils import describe, load_gedcom
from gedcom_graph.query import find_individual_by_attribute

console = Console()


def find_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    tag: str = typer.Argument(..., help="Attribute tag, e.g. NAME or SEX"),
    value: str = typer.Argument(..., help="Exact value to match"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Print the first individual whose TAG attribute equals VALUE.
    """
    _, graph = load_gedcom(gedcom, verbose=verbose)

    ind = find_individual_by_attribute(graph, tag, value)
    if ind is None:
        console.print(f"No individual with {tag} = {value!r}")
        raise typer.Exit(code=1)

    console.print(describe(ind))
    if ind.birthday:
        console.print(f"Born: {ind.birthday}")
    console.print(f"Father: {describe(ind.father)}")
    console.print(f"Mother: {describe(ind.mother)}")
