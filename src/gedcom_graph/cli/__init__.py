"""
CLI package for gedcom_graph.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from gedcom_graph.cli.app import app, main

__all__ = [
    "app",
    "main",
]
