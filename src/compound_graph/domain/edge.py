"""Edge descriptor -- the (source, target, name) triple of one edge.

Descriptors handed out by a Graph are already canonicalised: in an
undirected graph source <= target.  They are frozen, so callers can
keep them around or use them as dict keys without aliasing the
graph's internal state.
"""
from __future__ import annotations

from dataclasses import dataclass

from compound_graph.domain.types import EdgeName, NodeId


@dataclass(frozen=True, slots=True)
class Edge:
    source: NodeId
    target: NodeId
    name: EdgeName | None = None

    def __str__(self) -> str:
        if self.name is None:
            return f"{self.source} -> {self.target}"
        return f"{self.source} -> {self.target} [{self.name}]"
