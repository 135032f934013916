"""
Ready-made mutation listeners.

EdgeWeightIndex keeps the weighted edges of a graph ordered by weight, which
is what spanning-tree and shortest-path algorithms need from a weighted graph
variant. MutationCounter tallies notifications per event.
"""

import logging
from bisect import bisect_left, insort
from collections import Counter
from itertools import count
from typing import Any, Dict, List, Optional, Tuple

from ..types import get_weight, is_weighted
from .events import BaseMutationListener, GraphEvent

logger = logging.getLogger(__name__)


class EdgeWeightIndex(BaseMutationListener):
    """
    Weighted edges of a graph sorted by ascending weight.

    Edges without a numeric weight are ignored. Edges of equal weight keep
    their insertion order. The graph reports an edge as removed only once
    its last registration is gone, so each edge holds a single entry.

    Attributes:
        _entries (List[Tuple[float, int, Any]]): Sorted (weight, sequence, edge)
        _by_edge (Dict[Any, Tuple[float, int, Any]]): Entry of each indexed edge
    """

    def __init__(self) -> None:
        self._entries: List[Tuple[float, int, Any]] = []
        self._by_edge: Dict[Any, Tuple[float, int, Any]] = {}
        self._sequence = count()

    def on_edge_added(self, graph: Any, head: Any, edge: Any, tail: Any) -> None:
        if not is_weighted(edge):
            logger.debug(f"Edge {edge!r} has no weight, not indexed")
            return
        # an edge value registered under several pairs is indexed once
        if edge in self._by_edge:
            return
        entry = (get_weight(edge), next(self._sequence), edge)
        insort(self._entries, entry)
        self._by_edge[edge] = entry

    def on_edge_removed(self, graph: Any, head: Any, edge: Any, tail: Any) -> None:
        entry = self._by_edge.pop(edge, None)
        if entry is None:
            return
        del self._entries[bisect_left(self._entries, entry)]

    def edges_by_weight(self) -> List[Any]:
        """Get the indexed edges from lightest to heaviest."""
        return [edge for _, _, edge in self._entries]

    def lightest(self) -> Optional[Any]:
        """Get the lightest indexed edge, or None when empty."""
        return self._entries[0][2] if self._entries else None

    def heaviest(self) -> Optional[Any]:
        """Get the heaviest indexed edge, or None when empty."""
        return self._entries[-1][2] if self._entries else None

    def total_weight(self) -> float:
        """Sum of the weights of all indexed edges."""
        return sum(weight for weight, _, _ in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, edge: object) -> bool:
        return edge in self._by_edge


class MutationCounter(BaseMutationListener):
    """Counts notifications received for each GraphEvent."""

    def __init__(self) -> None:
        self.counts: Counter = Counter()

    def on_vertex_added(self, graph: Any, vertex: Any) -> None:
        self.counts[GraphEvent.VERTEX_ADDED] += 1

    def on_vertex_removed(self, graph: Any, vertex: Any) -> None:
        self.counts[GraphEvent.VERTEX_REMOVED] += 1

    def on_edge_added(self, graph: Any, head: Any, edge: Any, tail: Any) -> None:
        self.counts[GraphEvent.EDGE_ADDED] += 1

    def on_edge_removed(self, graph: Any, head: Any, edge: Any, tail: Any) -> None:
        self.counts[GraphEvent.EDGE_REMOVED] += 1

    def reset(self) -> None:
        """Forget all counts."""
        self.counts.clear()
