# src/gedcom_graph/loader/tree_builder.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional

from gedcom_graph.logging import get_logger

from .segmenter import RecordNode, segment_tokens
from .tokenizer import Token

log = get_logger(__name__)


@dataclass
class GEDCOMTree:
    """
    Owner of every RecordNode parsed from one document.

    Attributes:
        records:
            Depth-0 RecordNodes (HEAD, INDI, FAM, TRLR, ...) in document
            order; all other kept nodes hang below them.
        dropped:
            Nodes discarded by depth-skip tolerance, in document order.
    """

    records: List[RecordNode]
    dropped: List[RecordNode] = field(default_factory=list)

    _identifier_index: Dict[str, RecordNode] = field(
        default_factory=dict, init=False, repr=False
    )
    _indexes_built: bool = field(default=False, init=False, repr=False)

    # ------------------------------------------------------------------ #
    # Core helpers
    # ------------------------------------------------------------------ #

    def __len__(self) -> int:  # pragma: no cover - trivial wrapper
        return len(self.records)

    def __iter__(self) -> Iterator[RecordNode]:  # pragma: no cover - simple
        return iter(self.records)

    def iter_nodes(self) -> Iterator[RecordNode]:
        """Every kept node, depth-first, roots included."""
        for root in self.records:
            yield from root.iter_subtree()

    # ------------------------------------------------------------------ #
    # Index construction
    # ------------------------------------------------------------------ #

    def _build_indexes(self) -> None:
        index: Dict[str, RecordNode] = {}
        for record in self.records:
            # First record wins on duplicate identifiers.
            index.setdefault(record.tag, record)
        self._identifier_index = index
        self._indexes_built = True

    # ------------------------------------------------------------------ #
    # Public query API
    # ------------------------------------------------------------------ #

    def find_by_identifier(self, identifier: str) -> Optional[RecordNode]:
        """
        Return the depth-0 record whose tag is `identifier` (e.g. '@I1@').

        Returns:
            RecordNode or None.
        """
        if not identifier:
            return None
        if not self._indexes_built:
            self._build_indexes()
        return self._identifier_index.get(identifier)

    def find_records_by_data(self, data: str) -> List[RecordNode]:
        """Depth-0 records whose data equals `data`, e.g. every 'INDI' record."""
        return [rec for rec in self.records if rec.data == data]

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<GEDCOMTree records={len(self.records)} dropped={len(self.dropped)}>"


def build_tree(tokens: Iterable[Token], strict: bool = False) -> GEDCOMTree:
    """
    Build a GEDCOMTree from a token stream.

        tokens -> GEDCOMTree(records=[RecordNode, ...])

    The token stream is consumed once; a MalformedLine raised while it is
    being produced propagates and no tree is returned.
    """
    records, dropped = segment_tokens(tokens, strict=strict)
    log.debug(
        "Built tree: %d records, %d dropped node(s)", len(records), len(dropped)
    )
    return GEDCOMTree(records=records, dropped=dropped)
