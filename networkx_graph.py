"""
Concrete attributed graph for the weighting layer.

Implements the AttributedGraph interface on top of a networkx.DiGraph.
"""

from typing import Any, Dict, Hashable, Iterable, Mapping, Optional

import networkx as nx

from graph import AttributedGraph, EdgeRef


class NetworkXGraph(AttributedGraph):
    """
    Directed attributed graph backed by ``networkx.DiGraph``.

    One edge per ordered pair; re-adding a pair merges attributes into the
    existing edge, which is how several cost attributes share one topology.
    """

    def __init__(self) -> None:
        self._g = nx.DiGraph()

    @classmethod
    def from_networkx(cls, g: nx.DiGraph) -> "NetworkXGraph":
        """Wrap an existing directed graph without copying it."""
        if not g.is_directed() or g.is_multigraph():
            raise ValueError("NetworkXGraph requires a simple directed graph (nx.DiGraph).")
        wrapped = cls()
        wrapped._g = g
        return wrapped

    @property
    def nx(self) -> nx.DiGraph:
        """The underlying networkx graph, for the library's own API."""
        return self._g

    # --- Mutation API --------------------------------------------------------

    def add_vertex(self, name: Hashable) -> Hashable:
        self._g.add_node(name)
        return name

    def add_edge(
        self, source: Hashable, target: Hashable, attributes: Mapping[str, Any]
    ) -> EdgeRef:
        self._g.add_edge(source, target, **dict(attributes))
        return EdgeRef(source, target)

    def set_vertex_attribute(self, name: Hashable, key: str, value: Any) -> None:
        self._g.add_node(name)
        self._g.nodes[name][key] = value

    # --- AttributedGraph queries ---------------------------------------------

    def vertices(self) -> Iterable[Hashable]:
        return list(self._g.nodes)

    def edges(self) -> Iterable[EdgeRef]:
        return [EdgeRef(u, v) for u, v in self._g.edges]

    def get_vertex_attribute(self, name: Hashable, key: str) -> Optional[Any]:
        if name not in self._g:
            return None
        return self._g.nodes[name].get(key)

    def vertex_attributes(self, name: Hashable) -> Dict[str, Any]:
        if name not in self._g:
            return {}
        return dict(self._g.nodes[name])

    def edge_attributes(self, edge: EdgeRef) -> Dict[str, Any]:
        data = self._g.get_edge_data(edge.source, edge.target)
        return dict(data) if data is not None else {}

    def find_edge(self, source: Hashable, target: Hashable) -> Optional[EdgeRef]:
        if self._g.has_edge(source, target):
            return EdgeRef(source, target)
        return None

    def __len__(self) -> int:
        return self._g.number_of_nodes()

    def __contains__(self, name: Hashable) -> bool:
        return name in self._g
