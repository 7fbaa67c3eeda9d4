from __future__ import annotations

import time
from pathlib import Path
from typing import Optional, Tuple

from rich.console import Console

from gedcom_graph.loader import GEDCOMTree
from gedcom_graph.parser_core import GEDCOMParser
from gedcom_graph.registry import GenealogyGraph, Individual

console = Console()


def load_gedcom(path: Path, *, verbose: bool = False) -> Tuple[GEDCOMTree, GenealogyGraph]:
    """
    Tokenize, build the tree and build the graph for one file.
    """
    t0 = time.perf_counter()

    parser = GEDCOMParser()
    tree = parser.load_file(path)
    graph = parser.build_graph()

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded GEDCOM in {elapsed:.2f}s")

    return tree, graph


def describe(ind: Optional[Individual]) -> str:
    """'Name (@I1@)' for display, '-' when there is nobody."""
    if ind is None:
        return "-"
    return f"{ind.name or '?'} ({ind.key})"
