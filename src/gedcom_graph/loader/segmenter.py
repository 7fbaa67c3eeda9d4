# src/gedcom_graph/loader/segmenter.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

from gedcom_graph.core.exceptions import MalformedLine
from gedcom_graph.logging import get_logger

from .tokenizer import Token

log = get_logger(__name__)


@dataclass(eq=False)
class RecordNode:
    """
    A parsed GEDCOM line linked into the document hierarchy.

        0 @I1@ INDI
        1 BIRT
        2 DATE 31 MAR 1917
          ^^^^ ^^^^^^^^^^^ data
          tag
        ^ depth

    Attributes:
        depth: Hierarchical level (0 for records, >0 for substructures).
        tag: Second token of the line; the identifier on "0 @I1@ INDI".
        data: Rest of the line (may be empty).
        lineno: Line number in the source document (for debugging).
        parent: Node one level up, None for depth-0 and dropped nodes.
        children: Nested nodes in document order.
    """

    depth: int
    tag: str
    data: str = ""
    lineno: int = 0
    parent: Optional["RecordNode"] = field(default=None, repr=False)
    children: List["RecordNode"] = field(default_factory=list, repr=False)

    # ---------- Helper / Mixin Methods ----------

    def add_child(self, child: "RecordNode") -> None:
        child.parent = self
        self.children.append(child)

    def find_children(self, tag: str) -> List["RecordNode"]:
        """Return all direct children of this node with a given tag."""
        return [c for c in self.children if c.tag == tag]

    def get_child(self, tag: str) -> Optional["RecordNode"]:
        """Return the first direct child with this tag, or None."""
        for c in self.children:
            if c.tag == tag:
                return c
        return None

    def get_attribute(self, tag: str) -> Optional[str]:
        """Data of the first direct child with this tag, or None."""
        child = self.get_child(tag)
        return child.data if child is not None else None

    def get_chained_data(self, *tags: str) -> Optional[str]:
        """
        Follow one child tag per hop and return the data of the last hop.

        node.get_chained_data("BIRT", "DATE") reads the DATE under the first
        BIRT. Any missing hop returns None; an empty path returns this
        node's own data.
        """
        node: Optional[RecordNode] = self
        for tag in tags:
            node = node.get_child(tag)
            if node is None:
                return None
        return node.data

    def iter_subtree(self) -> Iterator["RecordNode"]:
        """Yield this node and all descendants in depth-first order."""
        yield self
        for child in self.children:
            yield from child.iter_subtree()

    def __repr__(self) -> str:
        data = f" {self.data!r}" if self.data else ""
        return f"<RecordNode {self.depth} {self.tag}{data}>"


# ---------- SEGMENTER IMPLEMENTATION ----------

def segment_tokens(
    tokens: Iterable[Token],
    strict: bool = False,
) -> Tuple[List[RecordNode], List[RecordNode]]:
    """
    Convert a flat token stream into linked RecordNodes.

    Rules:
        - Depth 0 tokens are roots.
        - A depth N node is a child of the most recent node at depth N-1.
        - stack[d] holds the most recent node at depth d; anything deeper is
          discarded whenever a shallower node appears.

    Depth-skip tolerance: a node with nothing recorded at depth N-1 (e.g.
    depth 2 straight after depth 0, or depth 1 before any record) is
    dropped together with its descendants and returned in the second list.
    With strict=True it raises MalformedLine instead.

    Returns:
        (records, dropped): depth-0 nodes and dropped nodes, both in
        document order.
    """
    records: List[RecordNode] = []
    dropped: List[RecordNode] = []
    stack: List[RecordNode] = []

    for tok in tokens:
        node = RecordNode(
            depth=tok.depth,
            tag=tok.tag,
            data=tok.data,
            lineno=tok.lineno,
        )

        if tok.depth == 0:
            records.append(node)
            stack = [node]
            continue

        if tok.depth > len(stack):
            if strict:
                raise MalformedLine(
                    f"Line {tok.lineno}: depth jumped to {tok.depth} without a parent at depth {tok.depth - 1}",
                    lineno=tok.lineno,
                    line=tok.raw,
                )
            log.warning(
                "Line %d: dropping %r, no parent at depth %d",
                tok.lineno,
                tok.raw,
                tok.depth - 1,
            )
            # Never pushed, so its descendants are dropped by the same check.
            dropped.append(node)
            continue

        del stack[tok.depth:]
        stack[tok.depth - 1].add_child(node)
        stack.append(node)

    return records, dropped
