"""The graph container and its edge-key helpers."""

from compound_graph.graph.adjacency import Graph
from compound_graph.graph.keys import edge_key, edge_key_str

__all__ = [
    "Graph",
    "edge_key",
    "edge_key_str",
]
