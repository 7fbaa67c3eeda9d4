from __future__ import annotations

import typer

from gedcom_graph.cli.commands.families import families_command
from gedcom_graph.cli.commands.find import find_command
from gedcom_graph.cli.commands.stats import stats_command

app = typer.Typer(
    name="gedcom-graph",
    help="GEDCOM tree and family graph inspector",
    add_completion=False,
)

app.command("stats")(stats_command)
app.command("families")(families_command)
app.command("find")(find_command)


def main():
    app()


if __name__ == "__main__":
    main()
