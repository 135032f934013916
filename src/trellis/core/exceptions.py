"""
Custom exceptions for the Trellis graph library.

This module defines the hierarchy of exceptions raised by graph mutation and
path construction. Every structural check runs before the graph is touched,
so any exception from this module means the graph was left unchanged, with the
single exception of ListenerError, which is raised after the mutation is
already visible.
"""


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This is the base class for every error caused by an invalid mutation or
    lookup on a graph structure.

    Examples:
        * Invalid vertex operations
        * Edge creation failures
        * Graph integrity violations
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class InvalidArgumentError(GraphOperationError, ValueError):
    """
    Raised when a required vertex or edge argument is missing.

    Examples:
        * Adding a None vertex
        * Adding an edge with a None head, edge or tail
        * Adding a self-loop to a graph configured to reject them
    """


class ResourceNotFoundError(GraphOperationError):
    """
    Raised when a requested graph element is not found.

    Examples:
        * Vertex not found
        * Edge not found
    """


class VertexNotFoundError(ResourceNotFoundError):
    """
    Raised when an operation references a vertex not registered in the graph.

    Examples:
        * Removing a vertex that was never added
        * Adding an edge whose head or tail is unknown
        * Listing the adjacency of an unknown vertex
    """


class EdgeNotFoundError(ResourceNotFoundError):
    """
    Raised when an operation references an edge not registered in the graph.

    Examples:
        * Removing an edge that was never added
        * Rebuilding a path across a missing edge
    """


class DuplicateResourceError(GraphOperationError):
    """
    Raised when attempting to register a graph element twice.

    Examples:
        * Duplicate vertex registration
        * Second edge for an already connected (head, tail) pair
    """


class DuplicateVertexError(DuplicateResourceError):
    """Raised when adding a vertex that is already registered."""


class DuplicateEdgeError(DuplicateResourceError):
    """Raised when a (head, tail) pair already has a registered edge."""


class ListenerError(GraphOperationError):
    """
    Raised when a mutation listener fails.

    The mutation that triggered the notification has already been applied
    when this is raised; there is no rollback.
    """


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Unknown configuration keys
        * Invalid configuration values
    """
