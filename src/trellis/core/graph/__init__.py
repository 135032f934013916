"""
Graph module for the Trellis library.

This module provides the graph store:
- Read-only graph state and queries (BaseGraph)
- Directed and undirected mutable graphs enforcing referential integrity
- Mutation listeners attached to a graph instead of subclassing it
"""

from .base import BaseGraph
from .events import BaseMutationListener, GraphEvent, GraphEventManager, GraphMutationListener
from .mutable import BaseMutableGraph, DirectedMutableGraph, UndirectedMutableGraph
from .observers import EdgeWeightIndex, MutationCounter

__all__ = [
    "BaseGraph",
    "BaseMutableGraph",
    "BaseMutationListener",
    "DirectedMutableGraph",
    "EdgeWeightIndex",
    "GraphEvent",
    "GraphEventManager",
    "GraphMutationListener",
    "MutationCounter",
    "UndirectedMutableGraph",
]
