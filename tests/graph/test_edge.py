import pytest

from syncgraph import Edge, WeightedEdge


def test_edge_create():
    edge = Edge(1, 2)
    assert edge.source == 1
    assert edge.target == 2


def test_edge_is_immutable():
    edge = Edge(1, 2)
    with pytest.raises(AttributeError):
        edge.source = 5  # type: ignore[misc]


def test_edge_copy_is_new_equal_instance():
    edge = Edge(1, 2)
    edge_copy = edge.copy()
    assert edge_copy == edge
    assert edge_copy is not edge
    assert (edge_copy.source, edge_copy.target) == (1, 2)


def test_edge_reverse_swaps_endpoints():
    reversed_edge = Edge(1, 2).reverse()
    assert reversed_edge.source == 2
    assert reversed_edge.target == 1
    assert type(reversed_edge) is Edge


def test_edge_to_string():
    assert str(Edge(1, 2)) == "(1,2)"


def test_self_loop_allowed():
    edge = Edge(3, 3)
    assert edge.is_self_loop
    assert edge.reverse() == edge
    assert not Edge(3, 4).is_self_loop


def test_edges_compare_by_value():
    assert Edge(1, 2) == Edge(1, 2)
    assert Edge(1, 2) != Edge(2, 1)
    assert len({Edge(1, 2), Edge(1, 2), Edge(2, 1)}) == 2


def test_weighted_edge_create():
    edge = WeightedEdge(1, 2, 1.5)
    assert edge.source == 1
    assert edge.target == 2
    assert edge.weight == 1.5


def test_weighted_edge_copy_preserves_weight():
    edge_copy = WeightedEdge(1, 2, 1.5).copy()
    assert isinstance(edge_copy, WeightedEdge)
    assert (edge_copy.source, edge_copy.target, edge_copy.weight) == (1, 2, 1.5)


def test_weighted_edge_reverse_preserves_weight():
    edge_reverse = WeightedEdge(1, 2, 1.5).reverse()
    assert isinstance(edge_reverse, WeightedEdge)
    assert (edge_reverse.source, edge_reverse.target, edge_reverse.weight) == (2, 1, 1.5)


def test_weighted_edge_to_string():
    assert str(WeightedEdge(1, 2, 1.5)) == "(1,2|1.5)"
    assert str(WeightedEdge(5, 2, 12)) == "(5,2|12.0)"


def test_weighted_edge_weight_stored_as_float():
    edge = WeightedEdge(1, 2, 2)
    assert isinstance(edge.weight, float)
    assert edge == WeightedEdge(1, 2, 2.0)


def test_weighted_and_plain_edges_are_distinct_values():
    assert WeightedEdge(1, 2, 1.0) != Edge(1, 2)
    assert WeightedEdge(1, 2, 1.0) != WeightedEdge(1, 2, 2.0)
