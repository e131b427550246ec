"""Graph algorithms: SCC, weakly connected components, topological sort."""

from compound_graph.algorithms.components import components
from compound_graph.algorithms.cycles import find_cycles, is_acyclic
from compound_graph.algorithms.tarjan import tarjan
from compound_graph.algorithms.topological import topsort

__all__ = [
    "components",
    "find_cycles",
    "is_acyclic",
    "tarjan",
    "topsort",
]
