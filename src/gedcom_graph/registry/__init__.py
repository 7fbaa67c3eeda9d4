from __future__ import annotations

from .build_graph import (
    GraphMarkers,
    build_graph,
    classify_records,
    link_individuals,
    resolve_families,
)
from .entities import Family, GenealogyGraph, Individual, UnresolvedReference
from .utils import get_attribute, get_chained_data, get_child

__all__ = [
    "Family",
    "GenealogyGraph",
    "GraphMarkers",
    "Individual",
    "UnresolvedReference",
    "build_graph",
    "classify_records",
    "get_attribute",
    "get_chained_data",
    "get_child",
    "link_individuals",
    "resolve_families",
]
