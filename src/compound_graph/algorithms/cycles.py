"""Cycle queries built on topsort and tarjan."""
from __future__ import annotations

from compound_graph.algorithms.tarjan import tarjan
from compound_graph.algorithms.topological import topsort
from compound_graph.domain.errors import CycleError
from compound_graph.domain.types import NodeId
from compound_graph.graph.adjacency import Graph


def is_acyclic(graph: Graph) -> bool:
    """True if *graph* has no cycle.

    Stops at the first cycle topsort runs into; use find_cycles() to
    list them.
    """
    try:
        topsort(graph)
    except CycleError:
        return False
    return True


def find_cycles(graph: Graph) -> list[list[NodeId]]:
    """Every strongly connected component that contains a cycle.

    That is each component of two or more nodes, plus each single node
    with an edge to itself.
    """
    return [
        comp for comp in tarjan(graph)
        if len(comp) > 1 or comp[0] in graph.successors(comp[0])
    ]
