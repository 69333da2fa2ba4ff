"""
Summed cost along an explicit vertex sequence.
"""

from typing import Any, Hashable, Optional, Sequence

from config import WeightingConfig
from costs import get_cost
from graph import AttributedGraph


def path_cost(
    graph: AttributedGraph,
    path: Sequence[Hashable],
    attr: Optional[str] = None,
    config: Optional[WeightingConfig] = None,
) -> Any:
    """
    Sum the edge costs between consecutive vertices of path.

    A hop with no connecting edge adds 0; vertex names are not validated.
    Paths shorter than two vertices cost 0.
    """
    hops = list(path)
    total = 0

    for u, v in zip(hops, hops[1:]):
        edge = graph.find_edge(u, v)
        if edge is None:
            continue
        total += get_cost(graph, edge, attr, config)

    return total
