"""
Mutable graphs enforcing referential integrity.

BaseMutableGraph validates every mutation before touching any structure, so a
failed call leaves the graph exactly as it was. After a successful mutation
the attached listeners are notified; a failing listener does not undo the
mutation.

Integrity rules kept after every successful mutation:
    * every vertex referenced by an index is a registered vertex
    * a (head, tail) pair has at most one edge
    * the edge index and the inverse edge index agree
    * every indexed edge is in the set of all edges
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from ..config import GraphConfig
from ..exceptions import (
    DuplicateEdgeError,
    DuplicateVertexError,
    EdgeNotFoundError,
    InvalidArgumentError,
    VertexNotFoundError,
)
from ..models import VertexPair
from ..types import E, V
from .base import BaseGraph
from .events import GraphEvent, GraphEventManager, GraphMutationListener

logger = logging.getLogger(__name__)


class BaseMutableGraph(BaseGraph[V, E]):
    """
    Graph supporting vertex and edge insertion and removal.

    Edges are registered under a single (head, tail) pair. Subclasses change
    how an edge is registered by overriding _internal_add_edge.

    Attributes:
        config (GraphConfig): Behaviour switches
        event_manager (GraphEventManager): Listeners notified after mutations
    """

    directed = True

    def __init__(
        self,
        config: Optional[GraphConfig] = None,
        listeners: Iterable[GraphMutationListener] = (),
    ):
        """
        Initialize an empty graph.

        Args:
            config (Optional[GraphConfig]): Behaviour switches, defaults apply
                when omitted
            listeners (Iterable[GraphMutationListener]): Listeners to attach
        """
        super().__init__()
        self.config = config or GraphConfig()
        self.event_manager = GraphEventManager(error_policy=self.config.listener_errors)
        for listener in listeners:
            self.event_manager.add_listener(listener)

    def add_listener(self, listener: GraphMutationListener) -> None:
        """Attach a mutation listener."""
        self.event_manager.add_listener(listener)

    def remove_listener(self, listener: GraphMutationListener) -> None:
        """Detach a mutation listener."""
        self.event_manager.remove_listener(listener)

    def add_vertex(self, vertex: V) -> None:
        """
        Register a vertex with no edges.

        Args:
            vertex (V): The vertex to add

        Raises:
            InvalidArgumentError: If vertex is None
            DuplicateVertexError: If vertex is already registered
        """
        if vertex is None:
            raise InvalidArgumentError("Impossible to add a None vertex to the graph")
        if vertex in self._adjacency:
            raise DuplicateVertexError(f"Vertex '{vertex}' already present in the graph")

        self._adjacency[vertex] = {}
        self._reverse_adjacency[vertex] = {}
        logger.debug(f"Added vertex {vertex!r}")

        self.event_manager.notify(GraphEvent.VERTEX_ADDED, self, vertex)

    def remove_vertex(self, vertex: V) -> None:
        """
        Remove a vertex together with every edge touching it.

        Both outgoing and incoming registrations are removed from all
        indexes. An edge value also registered between other vertices stays
        in the graph under those pairs. When the configuration asks for it,
        an edge-removed notification is sent for each edge that left the
        graph entirely, before the vertex-removed notification.

        Args:
            vertex (V): The vertex to remove

        Raises:
            InvalidArgumentError: If vertex is None
            VertexNotFoundError: If vertex is not registered
        """
        if vertex is None:
            raise InvalidArgumentError("Impossible to remove a None vertex from the graph")
        if vertex not in self._adjacency:
            raise VertexNotFoundError(f"Vertex '{vertex}' not present in the graph")

        incident: Dict[VertexPair[V], None] = {}
        for tail in self._adjacency[vertex]:
            incident[VertexPair(vertex, tail)] = None
        for head in self._reverse_adjacency[vertex]:
            incident[VertexPair(head, vertex)] = None

        first_pairs: Dict[E, VertexPair[V]] = {}
        detached: List[Tuple[E, VertexPair[V]]] = []
        for pair in incident:
            edge = self._indexed_edges[pair]
            first_pairs.setdefault(edge, self._indexed_vertices[edge])
            if self._unregister(pair):
                detached.append((edge, first_pairs[edge]))
        del self._adjacency[vertex]
        del self._reverse_adjacency[vertex]
        logger.debug(f"Removed vertex {vertex!r} and {len(detached)} incident edge(s)")

        if self.config.notify_cascaded_removals:
            for edge, pair in detached:
                self.event_manager.notify(GraphEvent.EDGE_REMOVED, self, pair.head, edge, pair.tail)
        self.event_manager.notify(GraphEvent.VERTEX_REMOVED, self, vertex)

    def add_edge(self, head: V, edge: E, tail: V) -> None:
        """
        Connect two registered vertices with an edge.

        Args:
            head (V): Vertex the edge leaves from
            edge (E): The edge to add
            tail (V): Vertex the edge points to

        Raises:
            InvalidArgumentError: If any argument is None, or the edge is a
                self-loop and self-loops are disabled
            VertexNotFoundError: If head or tail is not registered
            DuplicateEdgeError: If head and tail are already connected
        """
        if head is None:
            raise InvalidArgumentError("None head vertex not admitted")
        if edge is None:
            raise InvalidArgumentError("Impossible to add a None edge to the graph")
        if tail is None:
            raise InvalidArgumentError("None tail vertex not admitted")

        if head not in self._adjacency:
            raise VertexNotFoundError(f"Head vertex '{head}' not present in the graph")
        if tail not in self._adjacency:
            raise VertexNotFoundError(f"Tail vertex '{tail}' not present in the graph")

        if not self.config.allow_self_loops and head == tail:
            raise InvalidArgumentError(f"Self-loop on vertex '{head}' not admitted")

        existing = self.get_edge(head, tail)
        if existing is not None:
            raise DuplicateEdgeError(
                f"Edge '{edge}' rejected: '{head}' and '{tail}' already connected by '{existing}'"
            )

        self._all_edges[edge] = None
        self._internal_add_edge(head, edge, tail)
        logger.debug(f"Added edge {edge!r} from {head!r} to {tail!r}")

        self.event_manager.notify(GraphEvent.EDGE_ADDED, self, head, edge, tail)

    def remove_edge(self, edge: E) -> None:
        """
        Remove an edge from every index.

        All registrations of the edge are dropped: the edge index entries,
        the inverse index entry, the adjacency links and the membership in
        the set of all edges.

        Args:
            edge (E): The edge to remove

        Raises:
            InvalidArgumentError: If edge is None
            EdgeNotFoundError: If edge is not registered
        """
        if edge is None:
            raise InvalidArgumentError("Impossible to remove a None edge from the graph")
        if edge not in self._indexed_vertices:
            raise EdgeNotFoundError(f"Edge '{edge}' not present in the graph")

        pair = self._detach_edge(edge)
        logger.debug(f"Removed edge {edge!r} from {pair.head!r} to {pair.tail!r}")

        self.event_manager.notify(GraphEvent.EDGE_REMOVED, self, pair.head, edge, pair.tail)

    def _internal_add_edge(self, head: V, edge: E, tail: V) -> None:
        """Register the edge under (head, tail)."""
        self._register(head, edge, tail)

    def _register(self, head: V, edge: E, tail: V) -> None:
        pair = VertexPair(head, tail)
        self._adjacency[head][tail] = None
        self._reverse_adjacency[tail][head] = None
        self._indexed_edges[pair] = edge
        # first association wins
        self._indexed_vertices.setdefault(edge, pair)
        self._edge_pairs.setdefault(edge, {})[pair] = None

    def _detach_edge(self, edge: E) -> VertexPair[V]:
        """Drop every registration of an edge and return its first pair."""
        pair = self._indexed_vertices.pop(edge)
        for registered in self._edge_pairs.pop(edge):
            del self._indexed_edges[registered]
            del self._adjacency[registered.head][registered.tail]
            del self._reverse_adjacency[registered.tail][registered.head]
        del self._all_edges[edge]
        return pair

    def _unregister(self, pair: VertexPair[V]) -> bool:
        """
        Drop a single registration.

        Returns:
            bool: True if it was the edge's last registration and the edge
                left the graph
        """
        edge = self._indexed_edges.pop(pair)
        del self._adjacency[pair.head][pair.tail]
        del self._reverse_adjacency[pair.tail][pair.head]

        remaining = self._edge_pairs[edge]
        del remaining[pair]
        if not remaining:
            del self._edge_pairs[edge]
            del self._indexed_vertices[edge]
            del self._all_edges[edge]
            return True

        if self._indexed_vertices[edge] == pair:
            self._indexed_vertices[edge] = next(iter(remaining))
        return False

    @classmethod
    def from_edges(
        cls,
        vertices: Iterable[V],
        edges: Iterable[Tuple[V, E, V]],
        config: Optional[GraphConfig] = None,
        listeners: Iterable[GraphMutationListener] = (),
    ) -> "BaseMutableGraph[V, E]":
        """
        Create a graph from vertices and (head, edge, tail) triples.

        Listeners are attached first, so they observe the whole construction.
        """
        graph = cls(config=config, listeners=listeners)
        for vertex in vertices:
            graph.add_vertex(vertex)
        for head, edge, tail in edges:
            graph.add_edge(head, edge, tail)
        return graph


class DirectedMutableGraph(BaseMutableGraph[V, E]):
    """Directed graph: an edge from head to tail is only reachable from head."""

    directed = True


class UndirectedMutableGraph(BaseMutableGraph[V, E]):
    """
    Undirected graph: each edge is reachable from both endpoints.

    An edge is indexed under (head, tail) and (tail, head). The inverse index
    keeps (head, tail) as the authoritative pair.
    """

    directed = False

    def _internal_add_edge(self, head: V, edge: E, tail: V) -> None:
        """Register the edge under both orientations."""
        self._register(head, edge, tail)
        if head != tail:
            self._register(tail, edge, head)
