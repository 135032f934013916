"""
Utility functions for building routes.
"""

import logging
from dataclasses import replace
from typing import Any, Iterable, Mapping, Optional

from ..exceptions import EdgeNotFoundError, InvalidArgumentError, VertexNotFoundError
from ..types import GraphProtocol, get_weight, is_weighted
from .models import InMemoryPath, WeightedPath

logger = logging.getLogger(__name__)


def calculate_path_weight(edges: Iterable[Any]) -> float:
    """
    Sum the weights of a sequence of weighted edges.

    Raises:
        TypeError: If an edge has no numeric weight
    """
    return sum((get_weight(edge) for edge in edges), 0.0)


def build_path(
    graph: GraphProtocol,
    source: Any,
    target: Any,
    predecessors: Mapping[Any, Any],
    weight: Optional[float] = None,
) -> WeightedPath:
    """
    Rebuild a route from a predecessor mapping.

    Starting at the target, each vertex's predecessor is looked up and the
    connecting edge fetched from the graph, prepending both to the route
    until the source is reached.

    Args:
        graph: Graph the route runs through
        source: First vertex of the route
        target: Last vertex of the route
        predecessors: Mapping of vertex to the vertex it was reached from
        weight: Total weight; when None it is summed from the edges if they
            are all weighted, and left as None otherwise

    Returns:
        WeightedPath: The finished route

    Raises:
        VertexNotFoundError: If source or target is unknown, or the chain
            stops before reaching the source
        EdgeNotFoundError: If two consecutive vertices are not connected
        InvalidArgumentError: If the chain loops without reaching the source

    Example:
        >>> build_path(graph, "A", "C", {"B": "A", "C": "B"}).vertices
        ('A', 'B', 'C')
    """
    if not graph.has_vertex(source):
        raise VertexNotFoundError(f"Source vertex '{source}' not present in the graph")
    if not graph.has_vertex(target):
        raise VertexNotFoundError(f"Target vertex '{target}' not present in the graph")

    path: InMemoryPath = InMemoryPath(source, target, weight)
    path.prepend_vertex(target)
    visited = {target}
    current = target

    while current != source:
        if current not in predecessors:
            raise VertexNotFoundError(
                f"No predecessor recorded for '{current}' on the way back to '{source}'"
            )
        previous = predecessors[current]
        if previous in visited:
            raise InvalidArgumentError(f"Predecessor chain loops at vertex '{previous}'")

        edge = graph.get_edge(previous, current)
        if edge is None:
            raise EdgeNotFoundError(f"No edge exists from '{previous}' to '{current}'")

        path.prepend_edge(edge)
        path.prepend_vertex(previous)
        visited.add(previous)
        current = previous

    result = path.freeze()
    if weight is None and all(is_weighted(edge) for edge in result.edges):
        result = replace(result, weight=calculate_path_weight(result.edges))
    logger.debug(f"Built path from {source!r} to {target!r} with {result.size()} vertices")
    return result
