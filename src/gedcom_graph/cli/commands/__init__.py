"""
CLI command modules for gedcom_graph.

Each command module defines a single Typer-compatible command function.
"""

from gedcom_graph.cli.commands.families import families_command
from gedcom_graph.cli.commands.find import find_command
from gedcom_graph.cli.commands.stats import stats_command

__all__ = [
    "families_command",
    "find_command",
    "stats_command",
]
