"""Multiplicity maps: neighbour id -> number of parallel edges.

A neighbour whose count drops to zero is deleted, so the key set of a
map is always exactly the set of distinct neighbours.
"""
from __future__ import annotations

from compound_graph.domain.types import NodeId


def increment(counts: dict[NodeId, int], node: NodeId) -> None:
    counts[node] = counts.get(node, 0) + 1


def decrement_or_remove(counts: dict[NodeId, int], node: NodeId) -> None:
    count = counts.get(node)
    if count is None:
        return
    if count <= 1:
        del counts[node]
    else:
        counts[node] = count - 1
