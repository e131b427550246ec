"""Directed multigraph with optional compound (nested) nodes.

Nodes are identified by non-empty strings and carry an arbitrary value.
Edges are identified by an edge key -- (source, target, name) after
canonicalisation -- and carry an arbitrary label.

Two parallel adjacency structures are kept per node:

  _in / _out       node -> {edge key -> Edge}
                   O(1) edge lookup, O(degree) iteration over edges.
  _preds / _succs  node -> {neighbour -> number of parallel edges}
                   O(1) neighbour-set queries that stay correct when a
                   multigraph has several edges between the same pair.

When the graph is compound, _parent maps every node to its parent (or
GRAPH_ROOT) and _children maps every node, plus GRAPH_ROOT, to its
children.  Both tables are None otherwise.

All query methods return fresh lists, so callers may mutate the graph
while iterating a result.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Iterable, TypeAlias, TypeVar, cast

from compound_graph.domain.edge import Edge
from compound_graph.domain.errors import (
    IllegalOperationError,
    InvalidArgumentError,
)
from compound_graph.domain.options import GraphOptions
from compound_graph.domain.types import (
    DEFAULT_EDGE_NAME,
    GRAPH_ROOT,
    EdgeKey,
    EdgeName,
    NodeId,
)
from compound_graph.graph.counters import decrement_or_remove, increment
from compound_graph.graph.keys import edge_key, is_empty, make_edge, normalise_name

N = TypeVar("N")
E = TypeVar("E")

ParentTable: TypeAlias = "dict[NodeId, NodeId]"
ChildTable: TypeAlias = "dict[NodeId, dict[NodeId, None]]"

log = logging.getLogger(__name__)

# distinguishes set_node(id) from set_node(id, None)
_KEEP: Any = object()


class Graph(Generic[N, E]):
    """Directed (or undirected) multigraph with an optional parent tree.

    Usage:
        g: Graph[str, int] = Graph(multigraph=True)
        g.set_edge("a", "b", 1)
        g.set_edge("a", "b", 2, name="alt")
        g.successors("a")        # ["b"]
        g.out_edges("a", "b")    # two Edge descriptors
    """

    __slots__ = (
        "_directed",
        "_multigraph",
        "_compound",
        "_nodes",
        "_in",
        "_out",
        "_preds",
        "_succs",
        "_edge_objs",
        "_edge_labels",
        "_parent",
        "_children",
        "_node_count",
        "_edge_count",
    )

    def __init__(
        self,
        directed: bool = True,
        multigraph: bool = False,
        compound: bool = False,
    ) -> None:
        self._directed = directed
        self._multigraph = multigraph
        self._compound = compound

        self._nodes: dict[NodeId, N | None] = {}
        self._in: dict[NodeId, dict[EdgeKey, Edge]] = {}
        self._out: dict[NodeId, dict[EdgeKey, Edge]] = {}
        self._preds: dict[NodeId, dict[NodeId, int]] = {}
        self._succs: dict[NodeId, dict[NodeId, int]] = {}
        self._edge_objs: dict[EdgeKey, Edge] = {}
        self._edge_labels: dict[EdgeKey, E | None] = {}

        # children are dicts used as insertion-ordered sets
        self._parent: ParentTable | None = None
        self._children: ChildTable | None = None
        if compound:
            self._init_tree()

        self._node_count = 0
        self._edge_count = 0

    @classmethod
    def from_options(cls, options: GraphOptions) -> Graph[N, E]:
        return cls(options.directed, options.multigraph, options.compound)

    # ---- configuration ---------------------------------------------------

    @property
    def options(self) -> GraphOptions:
        return GraphOptions(self._directed, self._multigraph, self._compound)

    @property
    def directed(self) -> bool:
        return self._directed

    @directed.setter
    def directed(self, value: bool) -> None:
        self._check_reconfigure("directed", self._directed, value)
        self._directed = value

    @property
    def multigraph(self) -> bool:
        return self._multigraph

    @multigraph.setter
    def multigraph(self, value: bool) -> None:
        self._check_reconfigure("multigraph", self._multigraph, value)
        self._multigraph = value

    @property
    def compound(self) -> bool:
        return self._compound

    @compound.setter
    def compound(self, value: bool) -> None:
        self._check_reconfigure("compound", self._compound, value)
        if value and not self._compound:
            self._init_tree()
        elif not value:
            self._parent = None
            self._children = None
        self._compound = value

    def _check_reconfigure(self, flag: str, current: bool, value: bool) -> None:
        """Flags may only change while the graph is empty.

        Existing edge keys and the parent tree were built under the old
        flags; changing them afterwards would leave the indices stale.
        """
        if current != value and self._node_count > 0:
            log.debug(
                "Rejected %s=%s on a graph with %d node(s)",
                flag, value, self._node_count,
            )
            raise IllegalOperationError(
                f"Cannot change {flag} on a non-empty graph"
            )

    def _init_tree(self) -> None:
        self._parent = {}
        self._children = {GRAPH_ROOT: {}}

    # ---- nodes -----------------------------------------------------------

    @property
    def node_count(self) -> int:
        return self._node_count

    def nodes(self) -> list[NodeId]:
        """All node ids in insertion order."""
        return list(self._nodes)

    def has_node(self, node: NodeId) -> bool:
        return node in self._nodes

    def get_node(self, node: NodeId) -> N | None:
        """Value stored for *node*, or None if the node is unknown."""
        return self._nodes.get(node)

    def sources(self) -> list[NodeId]:
        """Nodes with no in-edges."""
        return [n for n in self._nodes if not self._in[n]]

    def sinks(self) -> list[NodeId]:
        """Nodes with no out-edges."""
        return [n for n in self._nodes if not self._out[n]]

    def set_node(self, node: NodeId, value: N | None = _KEEP) -> Graph[N, E]:
        """Create *node*, or update its value.

        set_node(id) leaves the value of an existing node alone;
        set_node(id, value) replaces it, even when value is None.
        """
        self._check_id(node)
        if value is _KEEP:
            self._insert_node(node, None, replace=False)
        else:
            self._insert_node(node, value, replace=True)
        return self

    def set_nodes(
        self, nodes: Iterable[NodeId] | None, value: N | None = _KEEP
    ) -> Graph[N, E]:
        """set_node() for every id in *nodes*.  A None collection is a no-op."""
        if nodes is None:
            return self
        ids = list(nodes)
        for node in ids:
            self._check_id(node)
        for node in ids:
            self.set_node(node, value)
        return self

    def remove_node(self, node: NodeId) -> Graph[N, E]:
        """Remove *node* with its edges and tree links.  No-op if absent.

        Children of a removed compound node are moved up to the root.
        """
        if node not in self._nodes:
            return self

        del self._nodes[node]

        if self._compound:
            parents, children = self._tree()
            self._detach(node)
            del parents[node]
            for child in list(children[node]):
                self.set_parent(child, None)
            del children[node]

        for key in list(self._in[node]):
            self._remove_key(key)
        for key in list(self._out[node]):
            self._remove_key(key)

        del self._in[node]
        del self._out[node]
        del self._preds[node]
        del self._succs[node]
        self._node_count -= 1
        return self

    def _insert_node(self, node: NodeId, value: N | None, replace: bool) -> None:
        if node in self._nodes:
            if replace:
                self._nodes[node] = value
            return

        self._nodes[node] = value

        if self._compound:
            parents, children = self._tree()
            parents[node] = GRAPH_ROOT
            children[GRAPH_ROOT][node] = None
            children[node] = {}

        self._in[node] = {}
        self._out[node] = {}
        self._preds[node] = {}
        self._succs[node] = {}
        self._node_count += 1

    @staticmethod
    def _check_id(node: NodeId | None) -> None:
        if is_empty(node):
            raise InvalidArgumentError("Node id must be a non-empty string")
        if node == GRAPH_ROOT:
            raise InvalidArgumentError("Node id collides with the graph root sentinel")

    # ---- edges -----------------------------------------------------------

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def edges(self) -> list[Edge]:
        """Descriptors of every edge in the graph."""
        return list(self._edge_objs.values())

    def set_edge(
        self,
        source: NodeId | Edge,
        target: Any = None,
        value: E | None = None,
        name: EdgeName | None = None,
    ) -> Graph[N, E]:
        """Create the edge source -> target (named *name*) or relabel it.

        Also callable as set_edge(edge, value) with an Edge descriptor.
        Missing endpoints are created without touching existing node
        values.  A named edge needs a multigraph.
        """
        if isinstance(source, Edge):
            if value is None:
                value = target
            source, target, name = source.source, source.target, source.name

        self._check_id(source)
        self._check_id(target)
        name = normalise_name(name)
        if name == DEFAULT_EDGE_NAME:
            raise InvalidArgumentError(
                "Edge name collides with the default edge name sentinel"
            )
        key = edge_key(self._directed, source, target, name)

        if key in self._edge_labels:
            self._edge_labels[key] = value
            return self

        if name is not None and not self._multigraph:
            raise IllegalOperationError(
                "Cannot set a named edge when multigraph is False"
            )

        self._insert_node(source, None, replace=False)
        self._insert_node(target, None, replace=False)

        edge = make_edge(self._directed, source, target, name)
        self._edge_labels[key] = value
        self._edge_objs[key] = edge

        self._in[edge.target][key] = edge
        increment(self._preds[edge.target], edge.source)
        self._out[edge.source][key] = edge
        increment(self._succs[edge.source], edge.target)

        self._edge_count += 1
        return self

    def set_edge_from(self, edge: Edge, value: E | None = None) -> Graph[N, E]:
        """set_edge() taking an Edge descriptor, with *value* as a keyword."""
        return self.set_edge(edge, value=value)

    def has_edge(
        self,
        source: NodeId | Edge,
        target: NodeId | None = None,
        name: EdgeName | None = None,
    ) -> bool:
        key = self._lookup_key(source, target, name)
        return key is not None and key in self._edge_labels

    def get_edge(
        self,
        source: NodeId | Edge,
        target: NodeId | None = None,
        name: EdgeName | None = None,
    ) -> E | None:
        """Label of the edge, or None if there is no such edge."""
        key = self._lookup_key(source, target, name)
        if key is None:
            return None
        return self._edge_labels.get(key)

    def remove_edge(
        self,
        source: NodeId | Edge,
        target: NodeId | None = None,
        name: EdgeName | None = None,
    ) -> Graph[N, E]:
        """Remove the edge if it exists, otherwise do nothing."""
        key = self._lookup_key(source, target, name)
        if key is not None:
            self._remove_key(key)
        return self

    def set_path(
        self, path: Iterable[NodeId] | None, value: E | None = None
    ) -> Graph[N, E]:
        """Add an edge between each consecutive pair of ids in *path*."""
        if path is None:
            raise InvalidArgumentError("Cannot set a None path")
        ids = list(path)
        for node in ids:
            self._check_id(node)
        for source, target in zip(ids, ids[1:]):
            self.set_edge(source, target, value)
        return self

    def _lookup_key(
        self,
        source: NodeId | Edge,
        target: NodeId | None,
        name: EdgeName | None,
    ) -> EdgeKey | None:
        if isinstance(source, Edge):
            source, target, name = source.source, source.target, source.name
        if is_empty(source) or is_empty(target) or name == DEFAULT_EDGE_NAME:
            return None
        return edge_key(self._directed, source, target, name)  # type: ignore[arg-type]

    def _remove_key(self, key: EdgeKey) -> None:
        edge = self._edge_objs.pop(key, None)
        if edge is None:
            return
        del self._edge_labels[key]

        del self._in[edge.target][key]
        del self._out[edge.source][key]
        decrement_or_remove(self._succs[edge.source], edge.target)
        decrement_or_remove(self._preds[edge.target], edge.source)

        self._edge_count -= 1

    # ---- adjacency queries -----------------------------------------------

    def in_edges(self, node: NodeId, source: NodeId | None = None) -> list[Edge]:
        """Edges pointing at *node*, optionally only those from *source*."""
        edges = self._in.get(node)
        if edges is None:
            return []
        if source is None:
            return list(edges.values())
        return [e for e in edges.values() if e.source == source]

    def out_edges(self, node: NodeId, target: NodeId | None = None) -> list[Edge]:
        """Edges leaving *node*, optionally only those to *target*."""
        edges = self._out.get(node)
        if edges is None:
            return []
        if target is None:
            return list(edges.values())
        return [e for e in edges.values() if e.target == target]

    def node_edges(self, node: NodeId, other: NodeId | None = None) -> list[Edge]:
        """Edges touching *node* in either direction.

        A self-loop is reported once.
        """
        both = self.in_edges(node, other) + self.out_edges(node, other)
        return list(dict.fromkeys(both))

    def predecessors(self, node: NodeId) -> list[NodeId]:
        return list(self._preds.get(node, ()))

    def successors(self, node: NodeId) -> list[NodeId]:
        return list(self._succs.get(node, ()))

    def neighbors(self, node: NodeId) -> list[NodeId]:
        """Union of predecessors and successors, without duplicates."""
        return list(dict.fromkeys([*self.predecessors(node), *self.successors(node)]))

    def is_leaf(self, node: NodeId) -> bool:
        if self._directed:
            return not self._succs.get(node)
        return not self.neighbors(node)

    def in_degree(self, node: NodeId) -> int:
        return len(self._in.get(node, ()))

    def out_degree(self, node: NodeId) -> int:
        return len(self._out.get(node, ()))

    # ---- compound tree ---------------------------------------------------

    def set_parent(self, node: NodeId, parent: NodeId | None = None) -> Graph[N, E]:
        """Make *parent* the parent of *node*; None moves it to the root.

        Both nodes are created if missing.  Raises IllegalOperationError
        if the graph is not compound or if *node* is an ancestor of
        *parent*.
        """
        if not self._compound:
            raise IllegalOperationError("Cannot set parent in a non-compound graph")
        parents, children = self._tree()

        self._check_id(node)

        if parent is None:
            parent = GRAPH_ROOT
        else:
            self._check_id(parent)
            ancestor: NodeId | None = parent
            while ancestor is not None:
                if ancestor == node:
                    raise IllegalOperationError(
                        f"Setting {parent!r} as parent of {node!r} "
                        f"would create a cycle"
                    )
                ancestor = self.get_parent(ancestor)
            self._insert_node(parent, None, replace=False)

        self._insert_node(node, None, replace=False)
        self._detach(node)
        parents[node] = parent
        children.setdefault(parent, {})[node] = None
        return self

    def get_parent(self, node: NodeId) -> NodeId | None:
        """Parent of *node*, or None for top-level, unknown or non-compound."""
        if not self._compound:
            return None
        parents = cast(ParentTable, self._parent)
        parent = parents.get(node)
        if parent == GRAPH_ROOT:
            return None
        return parent

    def get_children(self, node: NodeId | None = None) -> list[NodeId] | None:
        """Children of *node*, or of the root when *node* is None.

        Returns None if *node* is not in the graph.  In a non-compound
        graph every node is a child of the root and has no children.
        """
        if node is None:
            node = GRAPH_ROOT

        if self._compound:
            kids = cast(ChildTable, self._children).get(node)
            return list(kids) if kids is not None else None
        if node == GRAPH_ROOT:
            return list(self._nodes)
        return [] if node in self._nodes else None

    def _detach(self, node: NodeId) -> None:
        parents, children = self._tree()
        children[parents[node]].pop(node, None)

    def _tree(self) -> tuple[ParentTable, ChildTable]:
        """Parent and children tables; only valid while compound."""
        return cast(ParentTable, self._parent), cast(ChildTable, self._children)

    # ---- derived graphs --------------------------------------------------

    def filter_nodes(self, predicate: Callable[[NodeId], bool]) -> Graph[N, E]:
        """New graph holding the nodes for which *predicate* is true.

        Node values and edge labels are copied; edges survive when both
        endpoints do.  In a compound graph a node whose parent was
        filtered out is promoted to its nearest surviving ancestor.
        """
        if predicate is None:
            raise InvalidArgumentError("Cannot filter nodes with a None predicate")

        copy: Graph[N, E] = Graph.from_options(self.options)

        for node, value in self._nodes.items():
            if predicate(node):
                copy.set_node(node, value)

        for key, edge in self._edge_objs.items():
            if copy.has_node(edge.source) and copy.has_node(edge.target):
                copy.set_edge_from(edge, self._edge_labels[key])

        if self._compound:
            promoted: dict[NodeId, NodeId | None] = {}
            for node in copy.nodes():
                copy.set_parent(node, self._surviving_ancestor(node, copy, promoted))

        log.debug(
            "filter_nodes kept %d of %d node(s)", copy.node_count, self._node_count
        )
        return copy

    def _surviving_ancestor(
        self,
        node: NodeId,
        copy: Graph[N, E],
        promoted: dict[NodeId, NodeId | None],
    ) -> NodeId | None:
        """Nearest ancestor of *node* that is also in *copy*.

        *promoted* caches the answer for every dropped ancestor walked
        through, so each chain of dropped nodes is walked once.
        """
        dropped: list[NodeId] = []
        ancestor = self.get_parent(node)
        while ancestor is not None and not copy.has_node(ancestor):
            if ancestor in promoted:
                ancestor = promoted[ancestor]
                break
            dropped.append(ancestor)
            ancestor = self.get_parent(ancestor)
        for skipped in dropped:
            promoted[skipped] = ancestor
        return ancestor

    # ---- algorithms ------------------------------------------------------

    def components(self) -> list[Graph[N, E]]:
        from compound_graph.algorithms.components import components
        return components(self)

    def tarjan(self) -> list[list[NodeId]]:
        from compound_graph.algorithms.tarjan import tarjan
        return tarjan(self)

    def topsort(self) -> list[NodeId]:
        from compound_graph.algorithms.topological import topsort
        return topsort(self)

    def is_acyclic(self) -> bool:
        from compound_graph.algorithms.cycles import is_acyclic
        return is_acyclic(self)

    def find_cycles(self) -> list[list[NodeId]]:
        from compound_graph.algorithms.cycles import find_cycles
        return find_cycles(self)

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def __len__(self) -> int:
        return self._node_count

    def __repr__(self) -> str:
        return (
            f"Graph(nodes={self._node_count}, edges={self._edge_count}, "
            f"directed={self._directed}, multigraph={self._multigraph}, "
            f"compound={self._compound})"
        )
