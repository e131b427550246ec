"""Edge-key canonicalisation.

Every edge lookup goes through edge_key(): undirected graphs swap the
endpoints so the lexicographically smaller id comes first, and an
unnamed edge gets DEFAULT_EDGE_NAME in its name slot.  The resulting
tuple is the dict key for labels, descriptors and adjacency slots.
"""
from __future__ import annotations

from compound_graph.domain.edge import Edge
from compound_graph.domain.types import (
    DEFAULT_EDGE_NAME,
    EDGE_KEY_DELIM,
    EdgeKey,
    EdgeName,
    NodeId,
)


def is_empty(value: str | None) -> bool:
    return value is None or len(value) == 0


def normalise_name(name: EdgeName | None) -> EdgeName | None:
    """Treat "" the same as no name at all."""
    return None if is_empty(name) else name


def canonical_endpoints(
    directed: bool, source: NodeId, target: NodeId
) -> tuple[NodeId, NodeId]:
    if not directed and source > target:
        return target, source
    return source, target


def edge_key(
    directed: bool, source: NodeId, target: NodeId, name: EdgeName | None = None
) -> EdgeKey:
    source, target = canonical_endpoints(directed, source, target)
    name = normalise_name(name)
    return source, target, DEFAULT_EDGE_NAME if name is None else name


def make_edge(
    directed: bool, source: NodeId, target: NodeId, name: EdgeName | None = None
) -> Edge:
    source, target = canonical_endpoints(directed, source, target)
    return Edge(source, target, normalise_name(name))


def edge_key_str(key: EdgeKey) -> str:
    """Debug rendering: source DELIM target DELIM name."""
    return EDGE_KEY_DELIM.join(key)
