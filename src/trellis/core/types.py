"""
Core type definitions and protocols.

Vertices and edges are opaque to the graph store: any hashable value can be
used as either. The protocols in this module describe the optional weight
capability and the read-only surfaces exposed to algorithms.
"""

from numbers import Real
from typing import (
    Any,
    FrozenSet,
    Hashable,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    TypeVar,
    runtime_checkable,
)

V = TypeVar("V", bound=Hashable)
E = TypeVar("E", bound=Hashable)


@runtime_checkable
class WeightedEdge(Protocol):
    """Protocol for edges carrying a numeric weight."""

    @property
    def weight(self) -> float:
        """Weight of the edge."""
        ...


def get_weight(edge: Any) -> float:
    """
    Read the weight of an edge exposing the weighted capability.

    Args:
        edge: Edge expected to expose a numeric ``weight`` attribute

    Returns:
        float: The edge weight

    Raises:
        TypeError: If the edge has no numeric weight
    """
    weight = getattr(edge, "weight", None)
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise TypeError(f"Edge {edge!r} does not expose a numeric weight")
    return float(weight)


def is_weighted(edge: Any) -> bool:
    """Check whether an edge exposes a numeric weight."""
    weight = getattr(edge, "weight", None)
    return isinstance(weight, Real) and not isinstance(weight, bool)


class GraphProtocol(Protocol):
    """Protocol defining the read-only graph operations used by algorithms."""

    def get_edge(self, head: Any, tail: Any) -> Optional[Any]:
        """Get edge between two vertices if it exists."""
        ...

    def get_adjacent_vertices(self, vertex: Any) -> Tuple[Any, ...]:
        """Get the direct successors of a vertex."""
        ...

    def get_vertices(self) -> FrozenSet[Any]:
        """Get all vertices."""
        ...

    def get_edges(self) -> FrozenSet[Any]:
        """Get all edges."""
        ...

    def has_vertex(self, vertex: Any) -> bool:
        """Check if a vertex is registered."""
        ...

    def contains_edge(self, edge: Any) -> bool:
        """Check if an edge is registered."""
        ...

    def get_vertices_of(self, edge: Any) -> Optional[Any]:
        """Get the (head, tail) pair an edge was registered with."""
        ...


class WeightedPathProtocol(Protocol):
    """Protocol for a finished route between a source and a target."""

    @property
    def source(self) -> Any: ...

    @property
    def target(self) -> Any: ...

    @property
    def vertices(self) -> Sequence[Any]: ...

    @property
    def edges(self) -> Sequence[Any]: ...

    @property
    def weight(self) -> Optional[float]: ...

    def size(self) -> int: ...
