"""
Attributed graph abstraction consumed by the weighting layer.

Vertices are identified by name (any hashable).
Edges are directed: source -> target, at most one per ordered pair,
each carrying an open mapping of attribute name -> value.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Hashable, Iterable, Iterator, Mapping, Optional


@dataclass(frozen=True)
class EdgeRef:
    """
    Handle to a directed edge, identified by its endpoint pair.
    """

    source: Hashable
    target: Hashable

    def __iter__(self) -> Iterator[Hashable]:
        # Lets callers write ``u, v = edge``.
        yield self.source
        yield self.target


class AttributedGraph(ABC):
    """Directed graph whose vertices and edges carry attribute bundles."""

    @abstractmethod
    def add_vertex(self, name: Hashable) -> Hashable:
        """Ensure a vertex exists; idempotent by name."""
        raise NotImplementedError

    @abstractmethod
    def add_edge(
        self, source: Hashable, target: Hashable, attributes: Mapping[str, Any]
    ) -> EdgeRef:
        """
        Add a directed edge carrying the given attribute bundle.

        Missing endpoints are created. An existing edge for the same pair
        has the bundle merged into its attributes.
        """
        raise NotImplementedError

    @abstractmethod
    def vertices(self) -> Iterable[Hashable]:
        """Return all vertex names."""
        raise NotImplementedError

    @abstractmethod
    def edges(self) -> Iterable[EdgeRef]:
        """Return all edges."""
        raise NotImplementedError

    @abstractmethod
    def set_vertex_attribute(self, name: Hashable, key: str, value: Any) -> None:
        """Set one attribute on a vertex, creating the vertex if needed."""
        raise NotImplementedError

    @abstractmethod
    def get_vertex_attribute(self, name: Hashable, key: str) -> Optional[Any]:
        """Return a vertex attribute, or None if the vertex or key is absent."""
        raise NotImplementedError

    @abstractmethod
    def vertex_attributes(self, name: Hashable) -> Dict[str, Any]:
        """Return a copy of the vertex's attribute bundle (empty if absent)."""
        raise NotImplementedError

    @abstractmethod
    def edge_attributes(self, edge: EdgeRef) -> Dict[str, Any]:
        """Return a copy of the edge's attribute bundle (empty if absent)."""
        raise NotImplementedError

    @abstractmethod
    def find_edge(self, source: Hashable, target: Hashable) -> Optional[EdgeRef]:
        """Return the edge source -> target, or None if there is none."""
        raise NotImplementedError
