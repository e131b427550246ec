"""Shared fixtures for graph container tests."""
from __future__ import annotations

import pytest

from compound_graph.domain.types import GRAPH_ROOT
from compound_graph.graph.adjacency import Graph

SEED = 42


@pytest.fixture
def empty_graph() -> Graph[str, str]:
    return Graph()


@pytest.fixture
def linear_graph() -> Graph[str, str]:
    """a -> b -> c -> d"""
    g: Graph[str, str] = Graph()
    g.set_path(["a", "b", "c", "d"])
    return g


@pytest.fixture
def multigraph() -> Graph[str, str]:
    g: Graph[str, str] = Graph(multigraph=True)
    g.set_edge("a", "b")
    g.set_edge("a", "b", name="foo")
    g.set_edge("a", "b", name="bar")
    return g


@pytest.fixture
def undirected_graph() -> Graph[str, str]:
    return Graph(directed=False)


@pytest.fixture
def compound_graph() -> Graph[str, str]:
    return Graph(compound=True)


def assert_invariants(g: Graph) -> None:
    """Check the private bookkeeping tables against each other."""
    assert g.node_count == len(g.nodes())
    assert g.edge_count == len(g.edges())
    assert set(g._in) == set(g._nodes)
    assert set(g._out) == set(g._nodes)
    assert set(g._preds) == set(g._nodes)
    assert set(g._succs) == set(g._nodes)

    expected_succ: dict[str, dict[str, int]] = {n: {} for n in g.nodes()}
    expected_pred: dict[str, dict[str, int]] = {n: {} for n in g.nodes()}
    for key, edge in g._edge_objs.items():
        assert g.has_node(edge.source) and g.has_node(edge.target)
        assert g._out[edge.source][key] == edge
        assert g._in[edge.target][key] == edge
        if not g.directed:
            assert edge.source <= edge.target
        if not g.multigraph:
            assert edge.name is None
        row = expected_succ[edge.source]
        row[edge.target] = row.get(edge.target, 0) + 1
        row = expected_pred[edge.target]
        row[edge.source] = row.get(edge.source, 0) + 1

    slots = sum(len(v) for v in g._in.values()) + sum(len(v) for v in g._out.values())
    assert slots == 2 * g.edge_count
    assert g._succs == expected_succ
    assert g._preds == expected_pred

    if g.compound:
        assert set(g._parent) == set(g._nodes)
        assert set(g._children) == set(g._nodes) | {GRAPH_ROOT}
        for node, parent in g._parent.items():
            assert node in g._children[parent]
        for parent, kids in g._children.items():
            for kid in kids:
                assert g._parent[kid] == parent
        for node in g.nodes():
            seen = {node}
            ancestor = g.get_parent(node)
            while ancestor is not None:
                assert ancestor not in seen, f"parent cycle through {node}"
                seen.add(ancestor)
                ancestor = g.get_parent(ancestor)
    else:
        assert g._parent is None
        assert g._children is None
