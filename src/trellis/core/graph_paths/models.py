"""
Data models for routes found by path-finding algorithms.

This module provides:
- InMemoryPath: accumulator an algorithm fills while walking a predecessor
  chain from the target back to the source
- WeightedPath: immutable snapshot of a finished route

Example:
    >>> path = InMemoryPath("A", "D", 7.0)
    >>> path.prepend_vertex("D")
    >>> path.prepend_edge("BD")
    >>> path.prepend_vertex("B")
    >>> path.vertices
    ('B', 'D')
"""

from collections import deque
from dataclasses import dataclass
from typing import Deque, Generic, Optional, Tuple

from ..types import E, V


@dataclass(frozen=True)
class WeightedPath(Generic[V, E]):
    """
    Immutable route between a source and a target.

    Attributes:
        source: Vertex the route starts from
        target: Vertex the route ends at
        vertices: Visited vertices in order
        edges: Traversed edges in order
        weight: Total weight, None when unknown
    """

    source: V
    target: V
    vertices: Tuple[V, ...]
    edges: Tuple[E, ...]
    weight: Optional[float]

    def size(self) -> int:
        """Return the number of vertices in the route."""
        return len(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)


class InMemoryPath(Generic[V, E]):
    """
    Route builder with O(1) insertion at both ends.

    The builder does not check that vertices and edges line up, nor that the
    sequences start at the source and end at the target; the algorithm
    filling it is responsible for that. The total weight is supplied by the
    caller and never recomputed.
    """

    def __init__(self, source: V, target: V, weight: Optional[float] = None):
        self._source = source
        self._target = target
        self._weight = weight
        self._vertices: Deque[V] = deque()
        self._edges: Deque[E] = deque()

    @property
    def source(self) -> V:
        return self._source

    @property
    def target(self) -> V:
        return self._target

    @property
    def weight(self) -> Optional[float]:
        """Total weight supplied at construction, None if not known."""
        return self._weight

    def prepend_vertex(self, vertex: V) -> None:
        self._vertices.appendleft(vertex)

    def append_vertex(self, vertex: V) -> None:
        self._vertices.append(vertex)

    def prepend_edge(self, edge: E) -> None:
        self._edges.appendleft(edge)

    def append_edge(self, edge: E) -> None:
        self._edges.append(edge)

    @property
    def vertices(self) -> Tuple[V, ...]:
        """Snapshot of the vertices; later insertions do not show through it."""
        return tuple(self._vertices)

    @property
    def edges(self) -> Tuple[E, ...]:
        """Snapshot of the edges; later insertions do not show through it."""
        return tuple(self._edges)

    def size(self) -> int:
        """Return the number of vertices collected so far."""
        return len(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def freeze(self) -> WeightedPath[V, E]:
        """Return an immutable copy of the route."""
        return WeightedPath(
            source=self._source,
            target=self._target,
            vertices=self.vertices,
            edges=self.edges,
            weight=self._weight,
        )

    def __repr__(self) -> str:
        return (
            f"InMemoryPath(source={self._source!r}, target={self._target!r}, "
            f"size={len(self._vertices)}, weight={self._weight!r})"
        )
