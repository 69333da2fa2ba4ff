"""
Unit tests for path cost.
"""

import pytest

from networkx_graph import NetworkXGraph
from paths import path_cost
from populate import populate


def _graph() -> NetworkXGraph:
    g = NetworkXGraph()
    populate(g, {"A": {"B": 2}, "C": {"A": 4}})
    populate(g, {"A": {"B": 0.5}, "B": {"C": 0.25}}, "p")
    return g


def test_sums_edges_along_path():
    g = _graph()

    assert path_cost(g, ["C", "A", "B"]) == 6
    assert path_cost(g, ["A", "B", "C"], "p") == 0.75


def test_missing_edge_adds_zero():
    g = _graph()

    # no B -> C under "weight" (edge exists but carries only "p")
    assert path_cost(g, ["A", "B", "C"]) == 2
    # no B -> A edge at all
    assert path_cost(g, ["A", "B", "A", "B"]) == 4


@pytest.mark.parametrize("path", [[], ["A"], ("B",)])
def test_short_paths_cost_zero(path):
    assert path_cost(_graph(), path) == 0


def test_unknown_vertices_are_not_errors():
    assert path_cost(_graph(), ["X", "A", "B", "Y"]) == 2


def test_accepts_any_iterable():
    assert path_cost(_graph(), iter(["C", "A", "B"])) == 6
