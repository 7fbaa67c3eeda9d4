from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from gedcom_graph.cli.utils import describe, load_gedcom

console = Console()


def families_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Walk every family: parents, their children, and each child's parents.
    """
    _, graph = load_gedcom(gedcom, verbose=verbose)

    for i, family in enumerate(graph.iter_families()):
        console.rule(f"Family {i} {family.key}")

        if family.father is not None:
            console.print(f"Father: {describe(family.father)}")
            for j, child in enumerate(family.father.children):
                console.print(f"  Child {j} of father: {describe(child)}")

        if family.mother is not None:
            console.print(f"Mother: {describe(family.mother)}")
            for j, child in enumerate(family.mother.children):
                console.print(f"  Child {j} of mother: {describe(child)}")

        for j, child in enumerate(family.children):
            console.print(f"Child {j}: {describe(child)}")
            if child.father is not None:
                console.print(f"  Father: {describe(child.father)}")
            if child.mother is not None:
                console.print(f"  Mother: {describe(child.mother)}")
