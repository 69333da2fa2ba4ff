"""
Bulk ingestion of weighted vertices and edges.

Accepts either dense rows (row i holds vertex i's outgoing weight to each
column j) or a sparse mapping (vertex -> {neighbour: weight}). Every edge
gets its weight under the reserved cost key, and every populated vertex
gets the sum of its outgoing weights under the same key.

Quirk kept on purpose: dense zeros mean "no edge" and are skipped, while a
sparse weight of exactly 0 still creates an edge.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Dict, Hashable, List, Optional, Tuple
import logging
import numbers

import numpy as np

from config import WeightingConfig
from errors import UnsupportedInputKind
from graph import AttributedGraph

logger = logging.getLogger(__name__)

ATTRIBUTES_KEY = "attributes"

# (neighbour, weight, label)
_EdgePlan = Tuple[Hashable, Any, Any]
# (vertex, display attributes, edges to add)
_VertexPlan = Tuple[Hashable, Dict[str, Any], List[_EdgePlan]]


def populate(
    graph: AttributedGraph,
    data: Any,
    attr: Optional[str] = None,
    label_format: Optional[str] = None,
    config: Optional[WeightingConfig] = None,
) -> None:
    """
    Add weighted vertices and edges from dense or sparse data.

    Args:
        graph: store to mutate.
        data: rows of numeric weights (list of lists or a 2-D numpy array),
            or a mapping vertex -> {neighbour: weight, "attributes": {...}}.
        attr: cost attribute name; falls back to config.default_attribute.
        label_format: printf-style format for edge labels, e.g. "%0.2f".
        config: weighting settings; defaults to WeightingConfig().

    Raises:
        UnsupportedInputKind: data (or any row / neighbour spec inside it)
            has an unrecognised shape, a weight is not a number, or
            label_format cannot render a weight. Nothing is written in
            that case.
    """
    config = config or WeightingConfig()
    attr = config.resolve(attr)
    key = config.cost_key(attr)
    fmt = label_format if label_format is not None else config.label_format

    # Shape, weights and labels are checked for the whole input before the
    # graph is touched.
    if isinstance(data, Mapping):
        form = "sparse"
        plan = _plan_from_mapping(data, fmt)
    elif _is_row_sequence(data):
        form = "dense"
        plan = _plan_from_rows(data, fmt)
    else:
        logger.warning("Rejecting populate data of type %s", type(data).__name__)
        raise UnsupportedInputKind(f"Unknown data type: {type(data).__name__}")

    edge_count = 0
    for vertex, attributes, neighbors in plan:
        for name, value in attributes.items():
            graph.set_vertex_attribute(vertex, name, value)
        edge_count += _add_weighted_edges(graph, vertex, neighbors, key)

    logger.debug(
        "Populated %d vertices and %d edges from %s data under %r",
        len(plan),
        edge_count,
        form,
        attr,
    )


def _add_weighted_edges(
    graph: AttributedGraph,
    vertex: Hashable,
    neighbors: List[_EdgePlan],
    key: str,
) -> int:
    vertex_weight = 0

    for neighbor, w, label in neighbors:
        graph.add_edge(vertex, neighbor, {"label": label, key: w})
        vertex_weight += w

    # Set even when no edges were added: such vertices accrue 0.
    graph.set_vertex_attribute(vertex, key, vertex_weight)
    return len(neighbors)


def _is_row_sequence(data: Any) -> bool:
    if isinstance(data, np.ndarray):
        return data.ndim == 2
    return isinstance(data, Sequence) and not isinstance(data, (str, bytes))


def _plan_edge(vertex: Hashable, neighbor: Hashable, w: Any, fmt: Optional[str]) -> _EdgePlan:
    if not isinstance(w, numbers.Number):
        logger.warning("Rejecting weight %r for %r -> %r", w, vertex, neighbor)
        raise UnsupportedInputKind(
            f"Weight for {vertex!r} -> {neighbor!r} must be a number, got {type(w).__name__}"
        )
    if not fmt:
        return neighbor, w, w

    try:
        label = fmt % w
    except (TypeError, ValueError) as exc:
        logger.warning("Rejecting label format %r for weight %r", fmt, w)
        raise UnsupportedInputKind(f"Label format {fmt!r} cannot render {w!r}: {exc}") from exc
    return neighbor, w, label


def _plan_from_rows(rows: Any, fmt: Optional[str]) -> List[_VertexPlan]:
    if isinstance(rows, np.ndarray):
        rows = rows.tolist()

    plan: List[_VertexPlan] = []
    for vertex, row in enumerate(rows):
        if isinstance(row, np.ndarray) and row.ndim == 1:
            row = row.tolist()
        elif not isinstance(row, Sequence) or isinstance(row, (str, bytes)):
            logger.warning("Rejecting dense row %d of type %s", vertex, type(row).__name__)
            raise UnsupportedInputKind(
                f"Row {vertex} must be a sequence of weights, got {type(row).__name__}"
            )
        # Zero or empty entries mean "no edge".
        edges = [_plan_edge(vertex, n, w, fmt) for n, w in enumerate(row) if w]
        plan.append((vertex, {}, edges))
    return plan


def _plan_from_mapping(data: Mapping, fmt: Optional[str]) -> List[_VertexPlan]:
    plan: List[_VertexPlan] = []
    for vertex, spec in data.items():
        if not isinstance(spec, Mapping):
            logger.warning("Rejecting neighbour spec for %r of type %s", vertex, type(spec).__name__)
            raise UnsupportedInputKind(
                f"Neighbours of {vertex!r} must be a mapping, got {type(spec).__name__}"
            )

        attributes = spec.get(ATTRIBUTES_KEY) or {}
        if not isinstance(attributes, Mapping):
            logger.warning(
                "Rejecting '%s' of %r of type %s", ATTRIBUTES_KEY, vertex, type(attributes).__name__
            )
            raise UnsupportedInputKind(
                f"'{ATTRIBUTES_KEY}' of {vertex!r} must be a mapping, got {type(attributes).__name__}"
            )

        # Unlike dense rows, a sparse weight of 0 still gets an edge.
        edges = [
            _plan_edge(vertex, n, w, fmt) for n, w in spec.items() if n != ATTRIBUTES_KEY
        ]
        plan.append((vertex, dict(attributes), edges))
    return plan
