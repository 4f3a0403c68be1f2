"""Shared sample graphs.

Vertex IDs are assigned from 1, so edges below use literal IDs.
"""

from __future__ import annotations

import pytest

from syncgraph import Edge, SimpleGraph, WeightedEdge, new_directed, new_undirected


def _with_vertices(graph: SimpleGraph, count: int) -> SimpleGraph:
    for i in range(1, count + 1):
        graph.add_vertex(f"Vertex {i}")
    return graph


TEN_VERTEX_EDGES = [
    (1, 2),
    (2, 3),
    (3, 4),
    (1, 5),
    (5, 6),
    (6, 7),
    (7, 8),
    (7, 9),
    (9, 10),
    (8, 5),
    (7, 3),
]


@pytest.fixture
def five_vertex_directed():
    # 1->2, 1->3, 2->3, 2->4, 3->5, 4->3, 5->2
    g = _with_vertices(new_directed(5, 10), 5)
    for src, dst in [(1, 2), (2, 3), (2, 4), (3, 5), (4, 3), (5, 2), (1, 3)]:
        g.add_edge(Edge(src, dst))
    return g


@pytest.fixture
def ten_vertex_directed():
    # 3 only leads to 4, which is a dead end, so 3 cannot reach 7.
    g = _with_vertices(new_directed(10, 20), 10)
    for src, dst in TEN_VERTEX_EDGES:
        g.add_edge(Edge(src, dst))
    return g


@pytest.fixture
def ten_vertex_undirected():
    g = _with_vertices(new_undirected(10, 20), 10)
    for src, dst in TEN_VERTEX_EDGES:
        g.add_edge(Edge(src, dst))
    return g


@pytest.fixture
def five_vertex_weighted():
    g = _with_vertices(new_directed(5, 10), 5)
    for src, dst, weight in [
        (1, 2, 1.4),
        (2, 3, 2.7),
        (2, 4, 3.1),
        (3, 5, 6.5),
        (4, 3, 0.2),
        (5, 2, 12.0),
        (1, 3, 2.0),
    ]:
        g.add_edge(WeightedEdge(src, dst, weight))
    return g
