"""Linear-scan lookups over a built GenealogyGraph."""

from __future__ import annotations

from typing import List, Optional

from gedcom_graph.registry.entities import GenealogyGraph, Individual


def find_individual(graph: GenealogyGraph, key: str) -> Optional[Individual]:
    """Individual with identifier `key` (e.g. '@I1@'), or None."""
    return graph.get_individual(key)


def find_individual_by_attribute(
    graph: GenealogyGraph, tag: str, value: str
) -> Optional[Individual]:
    """
    First individual, in document order, whose `tag` attribute is exactly
    `value`; None when nobody matches.
    """
    for ind in graph.iter_individuals():
        if ind.get_attribute(tag) == value:
            return ind
    return None


def find_individuals_by_attribute(
    graph: GenealogyGraph, tag: str, value: str
) -> List[Individual]:
    return [ind for ind in graph.iter_individuals() if ind.get_attribute(tag) == value]
