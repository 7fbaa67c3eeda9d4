"""
parser_core.py
Central parsing engine with full logging integration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Union

from gedcom_graph.config import find_config, get_config
from gedcom_graph.loader import (
    GEDCOMTree,
    Token,
    build_tree,
    read_lines,
    resolve_input_path,
    tokenize_lines,
)
from gedcom_graph.logging import get_logger
from gedcom_graph.registry import GenealogyGraph, GraphMarkers, build_graph


class GEDCOMParser:
    """
    High-level parser:
      - reads the document into lines
      - tokenizes
      - builds the record tree
      - builds the genealogy graph
    """

    def __init__(self, config=None):
        self.cfg = config if config is not None else get_config()
        self.log = get_logger(__name__)
        self.markers = GraphMarkers.from_config(self.cfg)

        self.tokens: List[Token] = []
        self.tree: Optional[GEDCOMTree] = None
        self.graph: Optional[GenealogyGraph] = None

    # ---------------------------------------------------------
    # Tokenize + Build Tree
    # ---------------------------------------------------------
    def parse_lines(self, lines: Iterable[str]) -> GEDCOMTree:
        """Tokenize `lines` and assemble the record tree.

        State from an earlier document is cleared first, so a failed parse
        leaves no tree behind.
        """
        self.tokens = []
        self.tree = None
        self.graph = None

        try:
            tokens = list(tokenize_lines(lines))
        except Exception:
            self.log.exception("Tokenization failed.")
            raise

        if self.cfg.debug:
            self.log.debug(f"Token count = {len(tokens)}")

        try:
            tree = build_tree(tokens, strict=self.cfg.strict_depth)
        except Exception:
            self.log.exception("Tree build failed.")
            raise

        self.tokens = tokens
        self.tree = tree
        return self.tree

    # ---------------------------------------------------------
    # Load file
    # ---------------------------------------------------------
    def load_file(self, path: Union[str, Path]) -> GEDCOMTree:
        """Read a GEDCOM file and assemble its record tree."""
        input_path = resolve_input_path(path)
        self.log.info(f"Tokenizing GEDCOM input: {input_path}")
        return self.parse_lines(read_lines(input_path))

    # ---------------------------------------------------------
    # Build Graph
    # ---------------------------------------------------------
    def build_graph(self) -> GenealogyGraph:
        if self.tree is None:
            raise RuntimeError("parse_lines() or load_file() must run before build_graph()")
        self.graph = build_graph(self.tree, self.markers)
        return self.graph

    def run(self, input_path: Union[str, Path]) -> GenealogyGraph:
        """
        Full parse sequence.
        Returns: the genealogy graph
        """
        self.load_file(input_path)

        self.log.info("Running parser engine...")

        try:
            graph = self.build_graph()
            self.log.info("Parser run completed. Graph ready.")
            return graph

        except Exception:
            self.log.exception("Parser run failed.")
            raise


# ---------------------------------------------------------
# Functional entry points
# ---------------------------------------------------------
def parse(lines: Iterable[str], strict: Optional[bool] = None) -> GEDCOMTree:
    """Tokenize and assemble `lines` into a GEDCOMTree (raises MalformedLine)."""
    if strict is None:
        cfg = find_config()
        strict = cfg.strict_depth if cfg is not None else False
    return build_tree(tokenize_lines(lines), strict=strict)


def parse_file(path: Union[str, Path], strict: Optional[bool] = None) -> GEDCOMTree:
    """parse() over the lines of a file; file-system errors propagate unchanged."""
    return parse(read_lines(path), strict=strict)
