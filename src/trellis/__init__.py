"""
Trellis - In-memory graph structures

This package provides a mutable graph store enforcing referential integrity
over its adjacency structure and edge indexes, and a route builder used by
path-finding algorithms. It includes:

- Directed and undirected mutable graphs
- Mutation listeners for maintaining auxiliary indexes
- Weighted route construction from predecessor chains
"""

__version__ = "0.1.0"
__author__ = "Trellis Team"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("Trellis requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.graph import DirectedMutableGraph, UndirectedMutableGraph
from .core.graph_paths import InMemoryPath
from .core.models import VertexPair

__all__ = [
    "DirectedMutableGraph",
    "UndirectedMutableGraph",
    "InMemoryPath",
    "VertexPair",
]
