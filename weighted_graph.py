"""
Weighted view over an attributed graph.

WeightedGraph holds a graph store and exposes only the weighting
operations: populate, cost lookup, spans and path cost. Anything else
(adding single vertices, rendering, graph algorithms) goes through the
store itself, available as ``WeightedGraph.graph``.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, List, Optional, Sequence, Tuple

from config import WeightingConfig
from costs import edge_costs, get_cost, vertex_costs
from graph import AttributedGraph
from networkx_graph import NetworkXGraph
from paths import path_cost
from populate import populate
from span import Pair, edge_span, vertex_span


class WeightedGraph:
    """
    Cost-attribute layer over an AttributedGraph.

    Several attributes can be populated onto the same graph; each is kept
    under its own reserved key and queried independently.

    Typical use:
        wg = WeightedGraph()
        wg.populate([[0, 1, 2], [1, 0, 3], [2, 3, 0]])
        lightest, heaviest = wg.vertex_span()
    """

    def __init__(
        self,
        graph: Optional[AttributedGraph] = None,
        config: Optional[WeightingConfig] = None,
    ) -> None:
        self._graph = graph if graph is not None else NetworkXGraph()
        self._config = config or WeightingConfig()
        self._config.validate()

    @property
    def graph(self) -> AttributedGraph:
        return self._graph

    @property
    def config(self) -> WeightingConfig:
        return self._config

    # --- Population ----------------------------------------------------------

    def populate(
        self,
        data: Any,
        attr: Optional[str] = None,
        label_format: Optional[str] = None,
    ) -> None:
        populate(self._graph, data, attr, label_format, self._config)

    # --- Queries -------------------------------------------------------------

    def get_cost(self, element: Any, attr: Optional[str] = None) -> Any:
        return get_cost(self._graph, element, attr, self._config)

    def vertex_costs(self, attr: Optional[str] = None) -> Dict[Hashable, Any]:
        return vertex_costs(self._graph, attr, self._config)

    def edge_costs(self, attr: Optional[str] = None) -> Dict[Pair, Any]:
        return edge_costs(self._graph, attr, self._config)

    def vertex_span(
        self, attr: Optional[str] = None
    ) -> Tuple[List[Hashable], List[Hashable]]:
        return vertex_span(self._graph, attr, self._config)

    def edge_span(self, attr: Optional[str] = None) -> Tuple[List[Pair], List[Pair]]:
        return edge_span(self._graph, attr, self._config)

    def path_cost(self, path: Sequence[Hashable], attr: Optional[str] = None) -> Any:
        return path_cost(self._graph, path, attr, self._config)
