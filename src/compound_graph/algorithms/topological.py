"""Topological sort via depth-first post-order.

The search runs backwards: it starts at every sink (node without
out-edges) and walks predecessors.  A node is appended to the result
once all of its predecessors have been appended, so for every edge
u -> v, u comes before v.

Two sets drive it:
  visited   -- nodes already reached (finished or on the path)
  on_stack  -- nodes on the current search path

Reaching a node that is on the path again means a cycle.  A cycle with
no sink downstream of it is never entered at all; that case shows up
afterwards as nodes that were never visited.
"""
from __future__ import annotations

import logging
from typing import Iterator

from compound_graph.domain.errors import CycleError
from compound_graph.domain.types import NodeId
from compound_graph.graph.adjacency import Graph

log = logging.getLogger(__name__)


def topsort(graph: Graph) -> list[NodeId]:
    """Return the nodes of *graph* in dependency order.

    Raises CycleError if the graph contains a cycle.
    """
    visited: set[NodeId] = set()
    on_stack: set[NodeId] = set()
    result: list[NodeId] = []

    for sink in graph.sinks():
        if sink in visited:
            continue

        visited.add(sink)
        on_stack.add(sink)
        work: list[tuple[NodeId, Iterator[NodeId]]] = [
            (sink, iter(graph.predecessors(sink)))
        ]
        while work:
            node, preds = work[-1]
            for pred in preds:
                if pred in on_stack:
                    log.debug("topsort hit a back edge %s -> %s", pred, node)
                    raise CycleError([pred])
                if pred not in visited:
                    visited.add(pred)
                    on_stack.add(pred)
                    work.append((pred, iter(graph.predecessors(pred))))
                    break
            else:
                work.pop()
                on_stack.discard(node)
                result.append(node)

    if len(visited) != graph.node_count:
        unreached = [n for n in graph.nodes() if n not in visited]
        log.debug("topsort could not reach %d node(s) from any sink", len(unreached))
        raise CycleError(unreached)

    return result
