"""Core graph functionality."""

from .config import GraphConfig
from .exceptions import (
    ConfigurationError,
    DuplicateEdgeError,
    DuplicateResourceError,
    DuplicateVertexError,
    EdgeNotFoundError,
    GraphOperationError,
    InvalidArgumentError,
    ListenerError,
    ResourceNotFoundError,
    VertexNotFoundError,
)
from .models import LabeledEdge, LabeledVertex, LabeledWeightedEdge, VertexPair
from .types import GraphProtocol, WeightedEdge, WeightedPathProtocol, get_weight
from .graph import (
    BaseGraph,
    BaseMutableGraph,
    BaseMutationListener,
    DirectedMutableGraph,
    EdgeWeightIndex,
    GraphEvent,
    GraphMutationListener,
    MutationCounter,
    UndirectedMutableGraph,
)
from .graph_paths import InMemoryPath, WeightedPath, build_path, calculate_path_weight

__all__ = [
    "BaseGraph",
    "BaseMutableGraph",
    "BaseMutationListener",
    "ConfigurationError",
    "DirectedMutableGraph",
    "DuplicateEdgeError",
    "DuplicateResourceError",
    "DuplicateVertexError",
    "EdgeNotFoundError",
    "EdgeWeightIndex",
    "GraphConfig",
    "GraphEvent",
    "GraphMutationListener",
    "GraphOperationError",
    "GraphProtocol",
    "InMemoryPath",
    "InvalidArgumentError",
    "LabeledEdge",
    "LabeledVertex",
    "LabeledWeightedEdge",
    "ListenerError",
    "MutationCounter",
    "ResourceNotFoundError",
    "UndirectedMutableGraph",
    "VertexNotFoundError",
    "VertexPair",
    "WeightedEdge",
    "WeightedPath",
    "WeightedPathProtocol",
    "build_path",
    "calculate_path_weight",
    "get_weight",
]
