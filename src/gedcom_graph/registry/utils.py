"""
Attribute resolver: read-only lookups on any RecordNode.

A miss is always None, never an exception; optional GEDCOM fields are
expected to be absent.
"""

from __future__ import annotations

from typing import Optional

from gedcom_graph.loader.segmenter import RecordNode


def get_child(node: RecordNode, tag: str) -> Optional[RecordNode]:
    """First immediate child of `node` tagged `tag`, in document order."""
    return node.get_child(tag)


def get_attribute(node: RecordNode, tag: str) -> Optional[str]:
    """Data of get_child(node, tag), or None."""
    return node.get_attribute(tag)


def get_chained_data(node: RecordNode, *tags: str) -> Optional[str]:
    """
    Walk get_child once per tag and return the data of the final node.

        get_chained_data(indi, "BIRT", "DATE")  -> "1 JAN 1900" or None
        get_chained_data(indi)                  -> indi.data
    """
    return node.get_chained_data(*tags)
