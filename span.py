"""
Lightest/heaviest element queries.

Both spans use exact equality when grouping, so float costs that differ
only by rounding land in different groups.
"""

from typing import Any, Hashable, List, Mapping, Optional, Tuple

from config import WeightingConfig
from costs import edge_costs, vertex_costs
from graph import AttributedGraph

Pair = Tuple[Hashable, Hashable]


def vertex_span(
    graph: AttributedGraph,
    attr: Optional[str] = None,
    config: Optional[WeightingConfig] = None,
) -> Tuple[List[Hashable], List[Hashable]]:
    """
    Return (lightest, heaviest) vertices under attr.

    Ties are kept: every vertex at the minimum (resp. maximum) cost is
    returned, in the store's vertex order. An empty graph gives ([], []).
    """
    return _span(vertex_costs(graph, attr, config), order=None)


def edge_span(
    graph: AttributedGraph,
    attr: Optional[str] = None,
    config: Optional[WeightingConfig] = None,
) -> Tuple[List[Pair], List[Pair]]:
    """
    Return (lightest, heaviest) edges under attr as (source, target) pairs.

    Pairs are ordered by their composite "source_target" key, but are
    returned as the original names, never split back out of the key.
    """
    return _span(edge_costs(graph, attr, config), order=_composite_key)


def _composite_key(pair: Pair) -> str:
    return f"{pair[0]}_{pair[1]}"


def _span(mass: Mapping[Any, Any], order) -> Tuple[List[Any], List[Any]]:
    smallest = None
    biggest = None
    for current in mass.values():
        if smallest is None or smallest > current:
            smallest = current
        if biggest is None or biggest < current:
            biggest = current

    keys = sorted(mass, key=order) if order is not None else list(mass)

    lightest: List[Any] = []
    heaviest: List[Any] = []
    for k in keys:
        if mass[k] == smallest:
            lightest.append(k)
        if mass[k] == biggest:
            heaviest.append(k)

    return lightest, heaviest
