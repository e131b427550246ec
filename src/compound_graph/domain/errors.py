"""Exceptions raised by the graph container and algorithms.

The set is closed: anything else a caller sees is a bug.  Queries on
unknown nodes never raise -- they return empty results or None.
"""
from __future__ import annotations


class GraphError(Exception):
    """Base class for every error raised by compound_graph."""


class InvalidArgumentError(GraphError, ValueError):
    """A required argument was None or empty."""


class IllegalOperationError(GraphError):
    """The mutation is structurally forbidden for this graph."""


class CycleError(GraphError):
    """Raised when topological sort encounters a cycle."""

    def __init__(self, nodes: list) -> None:
        self.nodes = nodes
        super().__init__(
            f"Cycle detected: {len(nodes)} node(s) cannot be ordered"
        )
