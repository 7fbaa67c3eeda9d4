from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from gedcom_graph.config import find_config
from gedcom_graph.loader.segmenter import RecordNode
from gedcom_graph.loader.tree_builder import GEDCOMTree
from gedcom_graph.logging import get_logger
from gedcom_graph.registry.entities import (
    Family,
    GenealogyGraph,
    Individual,
    UnresolvedReference,
)

log = get_logger(__name__)


@dataclass(frozen=True)
class GraphMarkers:
    """Record markers and pointer tags the graph builder looks for."""
    person_marker: str = "INDI"
    family_marker: str = "FAM"
    husband_tag: str = "HUSB"
    wife_tag: str = "WIFE"
    child_tag: str = "CHIL"
    child_family_tag: str = "FAMC"

    @classmethod
    def from_config(cls, cfg=None) -> "GraphMarkers":
        cfg = cfg if cfg is not None else find_config()
        if cfg is None:
            return cls()
        graph_cfg = getattr(cfg, "graph", {}) or {}
        defaults = cls()
        return cls(**{
            name: str(graph_cfg.get(name, getattr(defaults, name)))
            for name in cls.__dataclass_fields__
        })


# ----------------------------------------------------------------------
# Pass 1: classification
# ----------------------------------------------------------------------

def classify_records(
    tree: GEDCOMTree,
    graph: GenealogyGraph,
    markers: GraphMarkers,
) -> Dict[str, RecordNode]:
    """
    Wrap INDI records as Individuals and index FAM records by identifier.

    Returns the family index (identifier -> node); Family objects are
    created by resolve_families().
    """
    family_nodes: Dict[str, RecordNode] = {}

    for record in tree.records:
        if record.data == markers.person_marker:
            if record.tag in graph.individuals:
                log.warning(
                    "Line %d: duplicate individual %s ignored", record.lineno, record.tag
                )
                continue
            graph.register_individual(Individual(node=record))
        elif record.data == markers.family_marker:
            if record.tag in family_nodes:
                log.warning(
                    "Line %d: duplicate family %s ignored", record.lineno, record.tag
                )
                continue
            family_nodes[record.tag] = record

    log.debug(
        "Classified %d individual(s), %d family record(s)",
        len(graph.individuals),
        len(family_nodes),
    )
    return family_nodes


# ----------------------------------------------------------------------
# Pass 2: family resolution
# ----------------------------------------------------------------------

def _resolve_member(
    graph: GenealogyGraph,
    family_key: str,
    pointer: RecordNode,
) -> Optional[Individual]:
    member = graph.get_individual(pointer.data)
    if member is None:
        log.warning(
            "Line %d: %s %s %s points at unknown individual",
            pointer.lineno,
            family_key,
            pointer.tag,
            pointer.data,
        )
        graph.unresolved.append(
            UnresolvedReference(
                source=family_key,
                tag=pointer.tag,
                target=pointer.data,
                lineno=pointer.lineno,
            )
        )
    return member


def resolve_families(
    graph: GenealogyGraph,
    family_nodes: Dict[str, RecordNode],
    markers: GraphMarkers,
) -> None:
    """
    Build one Family per FAM record from its immediate children.

    HUSB/WIFE set father/mother, CHIL appends in source order. The first
    HUSB (or WIFE) line decides the slot even when it dangles; later ones
    are ignored. Every pointer is resolved, so each one naming an unknown
    individual is recorded in graph.unresolved.
    """
    for key, node in family_nodes.items():
        family = Family(node=node)
        seen_husband = seen_wife = False

        for child in node.children:
            if child.tag == markers.husband_tag:
                member = _resolve_member(graph, key, child)
                if seen_husband:
                    log.debug("Line %d: extra %s in %s ignored", child.lineno, child.tag, key)
                else:
                    family.father = member
                    seen_husband = True
            elif child.tag == markers.wife_tag:
                member = _resolve_member(graph, key, child)
                if seen_wife:
                    log.debug("Line %d: extra %s in %s ignored", child.lineno, child.tag, key)
                else:
                    family.mother = member
                    seen_wife = True
            elif child.tag == markers.child_tag:
                member = _resolve_member(graph, key, child)
                if member is not None:
                    family.children.append(member)

        graph.register_family(family)


# ----------------------------------------------------------------------
# Pass 3: individual linking
# ----------------------------------------------------------------------

def link_individuals(graph: GenealogyGraph, markers: Optional[GraphMarkers] = None) -> None:
    """
    Resolve each individual's FAMC pointer into father/mother links and
    append the individual to each resolved parent's children.

    Idempotent:
      - clears father/mother/children on every individual before relinking
    """
    markers = markers or GraphMarkers.from_config()

    for ind in graph.individuals.values():
        ind.father = None
        ind.mother = None
        ind.children.clear()
    # Family-side entries are owned by resolve_families and stay put.
    graph.unresolved[:] = [
        ref for ref in graph.unresolved if ref.tag != markers.child_family_tag
    ]

    for ind in graph.individuals.values():
        family_key = ind.get_chained_data(markers.child_family_tag)
        if family_key is None:
            continue

        family = graph.get_family(family_key)
        if family is None:
            pointer = ind.node.get_child(markers.child_family_tag)
            log.warning(
                "Line %d: %s %s %s points at unknown family",
                pointer.lineno,
                ind.key,
                markers.child_family_tag,
                family_key,
            )
            graph.unresolved.append(
                UnresolvedReference(
                    source=ind.key,
                    tag=markers.child_family_tag,
                    target=family_key,
                    lineno=pointer.lineno,
                )
            )
            continue

        if family.father is not None:
            ind.father = family.father
            family.father.children.append(ind)

        if family.mother is not None:
            ind.mother = family.mother
            family.mother.children.append(ind)


# ----------------------------------------------------------------------
# Entry point
# ----------------------------------------------------------------------

def build_graph(tree: GEDCOMTree, markers: Optional[GraphMarkers] = None) -> GenealogyGraph:
    """
    Derive a fresh GenealogyGraph from a parsed tree.

    Never fails: dangling pointers degrade to missing links and are listed
    in graph.unresolved.
    """
    markers = markers or GraphMarkers.from_config()
    graph = GenealogyGraph()

    family_nodes = classify_records(tree, graph, markers)
    resolve_families(graph, family_nodes, markers)
    link_individuals(graph, markers)

    log.info(
        "Graph built: INDI=%d FAM=%d unresolved=%d",
        len(graph.individuals),
        len(graph.families),
        len(graph.unresolved),
    )
    return graph
