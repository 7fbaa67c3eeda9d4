# src/gedcom_graph/loader/__init__.py

"""
Public interface for the loader stack.

    from gedcom_graph.loader import (
        Token,
        MalformedLine,
        RecordNode,
        GEDCOMTree,
        read_lines,
        tokenize_line,
        tokenize_lines,
        tokenize_file,
        segment_tokens,
        build_tree,
        resolve_input_path,
    )
"""

from __future__ import annotations

from gedcom_graph.core.exceptions import MalformedLine

from .file_locator import resolve_input_path
from .segmenter import RecordNode, segment_tokens
from .tokenizer import Token, read_lines, tokenize_file, tokenize_line, tokenize_lines
from .tree_builder import GEDCOMTree, build_tree

__all__ = [
    "Token",
    "MalformedLine",
    "RecordNode",
    "GEDCOMTree",
    "read_lines",
    "tokenize_line",
    "tokenize_lines",
    "tokenize_file",
    "segment_tokens",
    "build_tree",
    "resolve_input_path",
]
