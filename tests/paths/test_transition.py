import pytest

from syncgraph import Edge, WeightedEdge, build_transition_map


def test_directed_groups_by_source():
    tm = build_transition_map([Edge(1, 2), Edge(2, 3), Edge(1, 3)], directed=True)
    assert dict(tm) == {1: (Edge(1, 2), Edge(1, 3)), 2: (Edge(2, 3),)}
    assert 3 not in tm


def test_undirected_adds_reverses_after_forward_edges():
    tm = build_transition_map([Edge(1, 2), Edge(3, 1)], directed=False)
    assert tm[1] == (Edge(1, 2), Edge(1, 3))
    assert tm[2] == (Edge(2, 1),)
    assert tm[3] == (Edge(3, 1),)


def test_undirected_self_loop_not_duplicated():
    tm = build_transition_map([Edge(1, 1), Edge(1, 2)], directed=False)
    assert tm[1] == (Edge(1, 1), Edge(1, 2))
    assert tm[2] == (Edge(2, 1),)


def test_undirected_companions_carry_subtype_attributes():
    tm = build_transition_map([WeightedEdge(1, 2, 0.5)], directed=False)
    assert tm[2] == (WeightedEdge(2, 1, 0.5),)
    assert str(tm[2][0]) == "(2,1|0.5)"


def test_undirected_every_edge_has_reverse_companion():
    edges = [Edge(1, 2), Edge(2, 3), Edge(3, 3), Edge(4, 1)]
    tm = build_transition_map(edges, directed=False)
    listed = [edge for out in tm.values() for edge in out]
    for edge in edges:
        assert edge in listed
        if not edge.is_self_loop:
            assert edge.reverse() in listed
    assert listed.count(Edge(3, 3)) == 1


def test_transition_map_is_read_only():
    tm = build_transition_map([Edge(1, 2)], directed=True)
    with pytest.raises(TypeError):
        tm[5] = ()  # type: ignore[index]
    assert isinstance(tm[1], tuple)


def test_graph_snapshot_is_fresh_each_time():
    from syncgraph import new_undirected

    g = new_undirected()
    for _ in range(3):
        g.add_vertex(None)
    g.add_edge(Edge(1, 2))
    first = g.transition_map()
    g.add_edge(Edge(2, 3))
    second = g.transition_map()

    assert first is not second
    assert first[2] == (Edge(2, 1),)
    assert second[2] == (Edge(2, 3), Edge(2, 1))
