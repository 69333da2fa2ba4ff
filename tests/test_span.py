"""
Unit tests for vertex and edge spans.
"""

from networkx_graph import NetworkXGraph
from populate import populate
from span import edge_span, vertex_span


MATRIX = [
    [0, 1, 2, 0],
    [1, 0, 3, 0],
    [2, 3, 0, 0],
    [0, 0, 0, 0],
]


def test_vertex_span_dense():
    g = NetworkXGraph()
    populate(g, MATRIX)

    lightest, heaviest = vertex_span(g)

    assert lightest == [3]
    assert heaviest == [2]


def test_edge_span_dense_keeps_ties_in_order():
    g = NetworkXGraph()
    populate(g, MATRIX)

    lightest, heaviest = edge_span(g)

    assert lightest == [(0, 1), (1, 0)]
    assert heaviest == [(1, 2), (2, 1)]


def test_edge_span_orders_pairs_lexically():
    g = NetworkXGraph()
    populate(g, {"b": {"a": 1}, "a": {"c": 1, "b": 1}, "10": {"2": 1}})

    lightest, heaviest = edge_span(g)

    assert lightest == [("10", "2"), ("a", "b"), ("a", "c"), ("b", "a")]
    assert heaviest == lightest


def test_single_cost_value_gives_identical_sets():
    g = NetworkXGraph()
    populate(g, [[0, 1], [1, 0]])

    lightest, heaviest = vertex_span(g)
    assert lightest == heaviest == [0, 1]

    lightest, heaviest = edge_span(g)
    assert lightest == heaviest == [(0, 1), (1, 0)]


def test_empty_graph_spans_are_empty():
    g = NetworkXGraph()

    assert vertex_span(g) == ([], [])
    assert edge_span(g) == ([], [])


def test_span_uses_named_attribute():
    g = NetworkXGraph()
    populate(g, [[0, 1], [5, 0]])
    populate(g, [[0, 0.9], [0.1, 0]], "p")

    assert vertex_span(g) == ([0], [1])
    assert vertex_span(g, "p") == ([1], [0])
    assert edge_span(g, "p") == ([(1, 0)], [(0, 1)])


def test_span_uses_exact_equality():
    g = NetworkXGraph()
    populate(g, {"A": {"B": 0.1 + 0.2}, "C": {"D": 0.3}})

    lightest, heaviest = edge_span(g)

    assert lightest == [("C", "D")]
    assert heaviest == [("A", "B")]


def test_edge_span_orders_by_composite_key():
    g = NetworkXGraph()
    populate(g, {1: {3: 1}, 10: {2: 1}})

    lightest, heaviest = edge_span(g)

    # "10_2" sorts before "1_3"
    assert lightest == [(10, 2), (1, 3)]
    assert heaviest == lightest


def test_edge_span_keeps_underscored_names_whole():
    g = NetworkXGraph()
    populate(g, {"a_b": {"c": 1}, "a": {"b_c": 2}})

    assert edge_span(g) == ([("a_b", "c")], [("a", "b_c")])


def test_edge_span_dense_with_many_rows():
    size = 12
    rows = [[0] * size for _ in range(size)]
    rows[1][2] = 1
    rows[10][0] = 1
    rows[11][11] = 5
    g = NetworkXGraph()
    populate(g, rows)

    lightest, heaviest = edge_span(g)

    assert lightest == [(10, 0), (1, 2)]
    assert heaviest == [(11, 11)]
