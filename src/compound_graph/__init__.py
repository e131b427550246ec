"""compound-graph: directed multigraphs with nested nodes."""

from compound_graph.algorithms import (
    components,
    find_cycles,
    is_acyclic,
    tarjan,
    topsort,
)
from compound_graph.domain import (
    DEFAULT_EDGE_NAME,
    GRAPH_ROOT,
    CycleError,
    Edge,
    GraphError,
    GraphOptions,
    IllegalOperationError,
    InvalidArgumentError,
)
from compound_graph.graph import Graph

__all__ = [
    "DEFAULT_EDGE_NAME",
    "GRAPH_ROOT",
    "CycleError",
    "Edge",
    "Graph",
    "GraphError",
    "GraphOptions",
    "IllegalOperationError",
    "InvalidArgumentError",
    "components",
    "find_cycles",
    "is_acyclic",
    "tarjan",
    "topsort",
]
