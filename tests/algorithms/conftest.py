"""Shared fixtures for graph algorithm tests."""
from __future__ import annotations

import random

import pytest

from compound_graph.graph.adjacency import Graph

SEED = 42


@pytest.fixture
def empty_graph() -> Graph[str, str]:
    return Graph()


@pytest.fixture
def line_graph() -> Graph[str, str]:
    """a -> b -> c"""
    g: Graph[str, str] = Graph()
    g.set_path(["a", "b", "c"])
    return g


@pytest.fixture
def triangle() -> Graph[str, str]:
    """a -> b -> c -> a"""
    g: Graph[str, str] = Graph()
    g.set_path(["a", "b", "c", "a"])
    return g


@pytest.fixture
def diamond_graph() -> Graph[str, str]:
    """
    a -> b -> d
    a -> c -> d
    """
    g: Graph[str, str] = Graph()
    for src, dst in [("a", "b"), ("a", "c"), ("b", "d"), ("c", "d")]:
        g.set_edge(src, dst)
    return g


def random_dag(rng: random.Random, n: int, p: float = 0.3) -> Graph[str, str]:
    """Edges only go from lower to higher index, so no cycle is possible."""
    g: Graph[str, str] = Graph()
    for i in range(n):
        g.set_node(f"v{i:03d}")
    for i in range(n):
        for j in range(i + 1, n):
            if rng.random() < p:
                g.set_edge(f"v{i:03d}", f"v{j:03d}")
    return g


def random_digraph(rng: random.Random, n: int, p: float = 0.15) -> Graph[str, str]:
    g: Graph[str, str] = Graph()
    for i in range(n):
        g.set_node(f"v{i:03d}")
    for i in range(n):
        for j in range(n):
            if rng.random() < p:
                g.set_edge(f"v{i:03d}", f"v{j:03d}")
    return g


def reachable(g: Graph, start: str) -> set[str]:
    seen = {start}
    todo = [start]
    while todo:
        node = todo.pop()
        for succ in g.successors(node):
            if succ not in seen:
                seen.add(succ)
                todo.append(succ)
    return seen
