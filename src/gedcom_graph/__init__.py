"""
gedcom_graph: rebuild GEDCOM records into a node tree and a family graph.

    from gedcom_graph import parse_file, build_graph, find_individual_by_attribute

    tree = parse_file("family.ged")
    graph = build_graph(tree)
    ann = find_individual_by_attribute(graph, "NAME", "Ann")
"""

from gedcom_graph.core.exceptions import GedcomGraphError, MalformedLine
from gedcom_graph.loader import GEDCOMTree, RecordNode, Token
from gedcom_graph.parser_core import GEDCOMParser, parse, parse_file
from gedcom_graph.query import (
    find_individual,
    find_individual_by_attribute,
    find_individuals_by_attribute,
)
from gedcom_graph.registry import (
    Family,
    GenealogyGraph,
    GraphMarkers,
    Individual,
    UnresolvedReference,
    build_graph,
    get_attribute,
    get_chained_data,
    get_child,
)

__all__ = [
    "Family",
    "GEDCOMParser",
    "GEDCOMTree",
    "GedcomGraphError",
    "GenealogyGraph",
    "GraphMarkers",
    "Individual",
    "MalformedLine",
    "RecordNode",
    "Token",
    "UnresolvedReference",
    "build_graph",
    "find_individual",
    "find_individual_by_attribute",
    "find_individuals_by_attribute",
    "get_attribute",
    "get_chained_data",
    "get_child",
    "parse",
    "parse_file",
]
