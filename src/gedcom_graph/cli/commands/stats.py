from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from gedcom_graph.cli.utils import load_gedcom

console = Console()


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary counts for a GEDCOM file.
    """
    tree, graph = load_gedcom(gedcom, verbose=verbose)

    table = Table(title="GEDCOM Statistics")
    table.add_column("Item", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Records", str(len(tree.records)))
    table.add_row("Dropped lines", str(len(tree.dropped)))
    table.add_row("Individuals", str(len(graph.individuals)))
    table.add_row("Families", str(len(graph.families)))
    table.add_row("Unresolved pointers", str(len(graph.unresolved)))

    console.print(table)
