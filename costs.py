"""
Cost lookup for vertices and edges.

A cost is the value stored under the reserved key for an attribute
(``x-weight`` by default). Anything missing reads as 0.
"""

from typing import Any, Dict, Hashable, Optional, Tuple

from config import WeightingConfig
from errors import InvalidArgument
from graph import AttributedGraph, EdgeRef


def get_cost(
    graph: AttributedGraph,
    element: Any,
    attr: Optional[str] = None,
    config: Optional[WeightingConfig] = None,
) -> Any:
    """
    Return the cost of a vertex (by name) or an edge under attr.

    An edge is an EdgeRef, or a (source, target) pair as returned by
    edge_span and edge_costs. A pair is read as an edge only when it is not
    itself a vertex name and the graph has that edge.

    Raises:
        InvalidArgument: element is None.
    """
    if element is None:
        raise InvalidArgument("No vertex or edge given to get_cost()")

    key = (config or WeightingConfig()).cost_key(attr)

    edge = _as_edge(graph, element)
    if edge is not None:
        value = graph.edge_attributes(edge).get(key)
    else:
        value = graph.get_vertex_attribute(element, key)

    return 0 if value is None else value


def _as_edge(graph: AttributedGraph, element: Any) -> Optional[EdgeRef]:
    if isinstance(element, EdgeRef):
        return element
    if isinstance(element, tuple) and len(element) == 2 and element not in graph.vertices():
        return graph.find_edge(*element)
    return None


def vertex_costs(
    graph: AttributedGraph,
    attr: Optional[str] = None,
    config: Optional[WeightingConfig] = None,
) -> Dict[Hashable, Any]:
    """Cost of every vertex, keyed by vertex name."""
    return {v: get_cost(graph, v, attr, config) for v in graph.vertices()}


def edge_costs(
    graph: AttributedGraph,
    attr: Optional[str] = None,
    config: Optional[WeightingConfig] = None,
) -> Dict[Tuple[Hashable, Hashable], Any]:
    """Cost of every edge, keyed by its (source, target) pair."""
    return {(e.source, e.target): get_cost(graph, e, attr, config) for e in graph.edges()}
