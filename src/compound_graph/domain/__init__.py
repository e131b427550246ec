"""Value types, configuration and errors shared by the graph and algorithms."""

from compound_graph.domain.edge import Edge
from compound_graph.domain.errors import (
    CycleError,
    GraphError,
    IllegalOperationError,
    InvalidArgumentError,
)
from compound_graph.domain.options import GraphOptions
from compound_graph.domain.types import (
    DEFAULT_EDGE_NAME,
    EDGE_KEY_DELIM,
    GRAPH_ROOT,
    EdgeKey,
    EdgeName,
    NodeId,
)

__all__ = [
    "DEFAULT_EDGE_NAME",
    "EDGE_KEY_DELIM",
    "GRAPH_ROOT",
    "CycleError",
    "Edge",
    "EdgeKey",
    "EdgeName",
    "GraphError",
    "GraphOptions",
    "IllegalOperationError",
    "InvalidArgumentError",
    "NodeId",
]
