"""Strongly connected components via Tarjan's algorithm.

One depth-first pass over every node.  Each visited node gets:
  index     -- the order in which DFS first reached it
  low_link  -- the smallest index reachable from its DFS subtree
               through at most one back edge to a node still on the stack
  on_stack  -- whether it is on the stack of the current search path

When a node finishes with low_link == index it is the root of a
component: everything above it on the stack belongs to that component
and is popped off.  Components therefore come out in reverse finish
order -- a component is emitted only after every component it can
reach.

The traversal keeps its own work stack of (node, successor iterator)
pairs instead of recursing, so deep graphs do not hit Python's
recursion limit.  The visiting order, and therefore the output, is the
same as the textbook recursive version.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from compound_graph.domain.types import NodeId
from compound_graph.graph.adjacency import Graph

log = logging.getLogger(__name__)


@dataclass(slots=True)
class _Entry:
    index: int
    low_link: int
    on_stack: bool = True


def tarjan(graph: Graph) -> list[list[NodeId]]:
    """Return the strongly connected components of *graph*.

    Every node appears in exactly one component.  A node that is not
    part of any cycle forms a singleton component; so does a node whose
    only cycle is a self-loop.
    """
    counter = 0
    entries: dict[NodeId, _Entry] = {}
    stack: list[NodeId] = []
    result: list[list[NodeId]] = []

    def _visit(node: NodeId) -> Iterator[NodeId]:
        nonlocal counter
        entries[node] = _Entry(index=counter, low_link=counter)
        counter += 1
        stack.append(node)
        return iter(graph.successors(node))

    for start in graph.nodes():
        if start in entries:
            continue

        work: list[tuple[NodeId, Iterator[NodeId]]] = [(start, _visit(start))]
        while work:
            node, successors = work[-1]
            entry = entries[node]
            for succ in successors:
                succ_entry = entries.get(succ)
                if succ_entry is None:
                    work.append((succ, _visit(succ)))
                    break
                if succ_entry.on_stack:
                    entry.low_link = min(entry.low_link, succ_entry.index)
            else:
                # all successors done: node finishes
                work.pop()
                if entry.low_link == entry.index:
                    component: list[NodeId] = []
                    while True:
                        member = stack.pop()
                        entries[member].on_stack = False
                        component.append(member)
                        if member == node:
                            break
                    result.append(component)
                if work:
                    parent = entries[work[-1][0]]
                    parent.low_link = min(parent.low_link, entry.low_link)

    log.debug("tarjan found %d component(s) in %d node(s)", len(result), len(entries))
    return result
