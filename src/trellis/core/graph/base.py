"""
Read-only graph state with adjacency list representation.

This module provides the BaseGraph class holding the structures shared by
every graph variant: the adjacency structure, a reverse adjacency used to
find incoming edges, the edge index keyed by vertex pair, the inverse edge
index and the set of all edges. BaseGraph only answers queries; mutation
lives in BaseMutableGraph.

Ordered sets are represented as dictionaries with None values so that
iteration follows insertion order.
"""

from typing import Dict, FrozenSet, Generic, Iterator, Optional, Tuple

from ..exceptions import VertexNotFoundError
from ..models import VertexPair
from ..types import E, V


class BaseGraph(Generic[V, E]):
    """
    Graph state and read-only queries.

    Attributes:
        _adjacency (Dict[V, Dict[V, None]]): Ordered successors per vertex
        _reverse_adjacency (Dict[V, Dict[V, None]]): Ordered predecessors per vertex
        _indexed_edges (Dict[VertexPair[V], E]): Edge registered for each pair
        _indexed_vertices (Dict[E, VertexPair[V]]): First pair each edge was
            registered with
        _edge_pairs (Dict[E, Dict[VertexPair[V], None]]): Every pair each edge
            is registered under
        _all_edges (Dict[E, None]): Every edge in the graph, in insertion order
    """

    def __init__(self) -> None:
        self._adjacency: Dict[V, Dict[V, None]] = {}
        self._reverse_adjacency: Dict[V, Dict[V, None]] = {}
        self._indexed_edges: Dict[VertexPair[V], E] = {}
        self._indexed_vertices: Dict[E, VertexPair[V]] = {}
        self._edge_pairs: Dict[E, Dict[VertexPair[V], None]] = {}
        self._all_edges: Dict[E, None] = {}

    def get_edge(self, head: V, tail: V) -> Optional[E]:
        """Get the edge registered from head to tail, if any."""
        return self._indexed_edges.get(VertexPair(head, tail))

    def get_adjacent_vertices(self, vertex: V) -> Tuple[V, ...]:
        """
        Get the direct successors of a vertex in insertion order.

        Args:
            vertex (V): Registered vertex

        Returns:
            Tuple[V, ...]: Successors of the vertex

        Raises:
            VertexNotFoundError: If the vertex is not registered
        """
        try:
            return tuple(self._adjacency[vertex])
        except KeyError:
            raise VertexNotFoundError(f"Vertex '{vertex}' not present in the graph") from None

    def get_degree(self, vertex: V) -> int:
        """Get the number of direct successors of a vertex."""
        return len(self.get_adjacent_vertices(vertex))

    def get_vertices(self) -> FrozenSet[V]:
        """Get all vertices in the graph."""
        return frozenset(self._adjacency)

    def get_edges(self) -> FrozenSet[E]:
        """Get all edges in the graph."""
        return frozenset(self._all_edges)

    def get_order(self) -> int:
        """Get the number of vertices."""
        return len(self._adjacency)

    def get_size(self) -> int:
        """Get the number of edges."""
        return len(self._all_edges)

    def has_vertex(self, vertex: V) -> bool:
        """Check if a vertex is registered."""
        return vertex in self._adjacency

    def contains_edge(self, edge: E) -> bool:
        """Check if an edge is registered."""
        return edge in self._all_edges

    def get_vertices_of(self, edge: E) -> Optional[VertexPair[V]]:
        """Get the (head, tail) pair an edge was first registered with."""
        return self._indexed_vertices.get(edge)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __iter__(self) -> Iterator[V]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(order={self.get_order()}, size={self.get_size()})"
