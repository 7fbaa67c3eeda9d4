from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from gedcom_graph.loader.segmenter import RecordNode


# -----------------------------
# Entities
# -----------------------------

@dataclass(slots=True, eq=False)
class Individual:
    """
    A person backed by one depth-0 INDI record.

    `node` belongs to the GEDCOMTree; father/mother/children point at other
    Individuals of the same graph and are filled by the linking pass.
    """
    node: RecordNode

    # Cross-entity resolved fields (linking pass)
    father: Optional["Individual"] = field(default=None, repr=False)
    mother: Optional["Individual"] = field(default=None, repr=False)
    children: List["Individual"] = field(default_factory=list, repr=False)

    @property
    def key(self) -> str:
        return self.node.tag

    @property
    def name(self) -> str:
        """NAME of the individual, or "" when none is recorded."""
        return self.node.get_attribute("NAME") or ""

    @property
    def birthday(self) -> str:
        """
        BIRT/DATE of the individual, or "" when none is recorded.

        Kept as the raw string: GEDCOM dates come in too many shapes
        (ranges, "ABT 1850", partial dates) to coerce here.
        """
        return self.node.get_chained_data("BIRT", "DATE") or ""

    def get_attribute(self, tag: str) -> Optional[str]:
        return self.node.get_attribute(tag)

    def get_chained_data(self, *tags: str) -> Optional[str]:
        return self.node.get_chained_data(*tags)


@dataclass(slots=True, eq=False)
class Family:
    """A household backed by one depth-0 FAM record."""
    node: RecordNode

    father: Optional[Individual] = field(default=None, repr=False)
    mother: Optional[Individual] = field(default=None, repr=False)
    children: List[Individual] = field(default_factory=list, repr=False)

    @property
    def key(self) -> str:
        return self.node.tag


@dataclass(slots=True, frozen=True)
class UnresolvedReference:
    """
    A pointer field naming a record that is not in the graph.

    e.g. "1 CHIL @I404@" under @F1@ gives
    UnresolvedReference(source="@F1@", tag="CHIL", target="@I404@", lineno=...)
    """
    source: str
    tag: str
    target: str
    lineno: int = 0


# -----------------------------
# Registry
# -----------------------------

@dataclass(slots=True)
class GenealogyGraph:
    """
    In-memory store of Individuals and Families keyed by identifier.

    Dict insertion order is document order of the backing records.
    """
    individuals: Dict[str, Individual] = field(default_factory=dict)
    families: Dict[str, Family] = field(default_factory=dict)
    unresolved: List[UnresolvedReference] = field(default_factory=list)

    def register_individual(self, ind: Individual) -> None:
        self.individuals[ind.key] = ind

    def register_family(self, fam: Family) -> None:
        self.families[fam.key] = fam

    def get_individual(self, key: str) -> Optional[Individual]:
        return self.individuals.get(key)

    def get_family(self, key: str) -> Optional[Family]:
        return self.families.get(key)

    def iter_individuals(self) -> Iterator[Individual]:
        return iter(self.individuals.values())

    def iter_families(self) -> Iterator[Family]:
        return iter(self.families.values())
