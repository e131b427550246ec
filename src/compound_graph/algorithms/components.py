"""Weakly connected components.

Two nodes share a component when one can reach the other by following
edges in either direction.  The search starts from every node not yet
assigned, in graph.nodes() order, and grows the component through
successors first, then predecessors.  A single visited set spans the
whole call, so each node lands in exactly one component.
"""
from __future__ import annotations

import logging
from typing import Iterator

from compound_graph.domain.options import GraphOptions
from compound_graph.domain.types import NodeId
from compound_graph.graph.adjacency import Graph

log = logging.getLogger(__name__)


def _neighbours(graph: Graph, node: NodeId) -> Iterator[NodeId]:
    yield from graph.successors(node)
    yield from graph.predecessors(node)


def components(graph: Graph) -> list[Graph]:
    """Split *graph* into its weakly connected components.

    Each component is a new non-compound Graph with the same directed
    and multigraph flags, holding the member nodes with their values
    and every edge between them with its name and label.
    """
    options = GraphOptions(graph.directed, graph.multigraph, compound=False)
    visited: set[NodeId] = set()
    result: list[Graph] = []

    for start in graph.nodes():
        if start in visited:
            continue

        component: Graph = Graph.from_options(options)
        visited.add(start)
        component.set_node(start, graph.get_node(start))
        work: list[Iterator[NodeId]] = [_neighbours(graph, start)]
        while work:
            for neighbour in work[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    component.set_node(neighbour, graph.get_node(neighbour))
                    work.append(_neighbours(graph, neighbour))
                    break
            else:
                work.pop()

        # a component is closed under adjacency, so every out-edge of a
        # member ends inside it
        for node in component.nodes():
            for edge in graph.out_edges(node):
                component.set_edge_from(edge, graph.get_edge(edge))

        result.append(component)

    log.debug("components found %d component(s)", len(result))
    return result
