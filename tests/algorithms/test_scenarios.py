"""End-to-end scenarios across the container and the algorithms."""
from __future__ import annotations

import pytest

from compound_graph import (
    CycleError,
    Edge,
    Graph,
    IllegalOperationError,
    components,
    find_cycles,
    is_acyclic,
    topsort,
)


class TestScenarios:
    def test_empty_graph(self) -> None:
        g: Graph[str, str] = Graph()
        assert g.node_count == 0
        assert g.edge_count == 0
        assert g.nodes() == []
        assert components(g) == []
        assert topsort(g) == []

    def test_line_path(self) -> None:
        g: Graph[str, str] = Graph()
        g.set_path(["a", "b", "c"])
        assert sorted(g.nodes()) == ["a", "b", "c"]
        assert set(g.edges()) == {Edge("a", "b"), Edge("b", "c")}
        assert topsort(g) == ["a", "b", "c"]
        assert is_acyclic(g)
        assert find_cycles(g) == []
        assert g.sources() == ["a"]
        assert g.sinks() == ["c"]

    def test_triangle_cycle(self) -> None:
        g: Graph[str, str] = Graph()
        g.set_path(["a", "b", "c", "a"])
        assert not is_acyclic(g)
        found = find_cycles(g)
        assert len(found) == 1
        assert sorted(found[0]) == ["a", "b", "c"]
        with pytest.raises(CycleError):
            topsort(g)

    def test_multigraph(self) -> None:
        g: Graph[str, str] = Graph(directed=True, multigraph=True)
        g.set_edge("a", "b")
        g.set_edge("a", "b", None, "foo")
        g.set_edge("a", "b", None, "bar")
        assert g.edge_count == 3
        assert len(g.out_edges("a", "b")) == 3
        assert g.has_edge("a", "b")
        assert g.has_edge("a", "b", "foo")

        simple: Graph[str, str] = Graph()
        with pytest.raises(IllegalOperationError):
            simple.set_edge("a", "b", None, "foo")

    def test_compound_tree(self) -> None:
        g: Graph[str, str] = Graph(directed=True, compound=True)
        g.set_parent("a", "p")
        g.set_parent("p", "r")
        assert g.get_parent("a") == "p"
        assert g.get_parent("p") == "r"
        filtered = g.filter_nodes(lambda n: n != "p")
        assert filtered.get_parent("a") == "r"

    def test_weak_components(self) -> None:
        g: Graph[str, str] = Graph()
        g.set_path(["a", "b", "c", "a"])
        g.set_edge("d", "c")
        g.set_edge("e", "f")
        comps = components(g)
        assert len(comps) == 2
        assert sorted(comps[0].nodes()) == ["a", "b", "c", "d"]
        assert sorted(comps[1].nodes()) == ["e", "f"]
