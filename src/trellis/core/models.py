"""
Value types for the graph library.

This module defines the ordered vertex pair used as the key of the edge
index, plus a few labelled vertex and edge types for callers that have no
domain objects of their own.
"""

from dataclasses import dataclass
from numbers import Real
from typing import Generic, Iterator, TypeVar

V = TypeVar("V")


@dataclass(frozen=True)
class VertexPair(Generic[V]):
    """
    Ordered (head, tail) pair used as a composite key.

    Equality and hashing are component-wise, so two pairs built from equal
    vertices are interchangeable as dictionary keys.

    Attributes:
        head (V): Vertex the edge leaves from
        tail (V): Vertex the edge points to
    """

    head: V
    tail: V

    def swap(self) -> "VertexPair[V]":
        """Return the pair with head and tail exchanged."""
        return VertexPair(self.tail, self.head)

    def __iter__(self) -> Iterator[V]:
        yield self.head
        yield self.tail


def _validate_label(label: str) -> None:
    if not isinstance(label, str) or not label.strip():
        raise ValueError("label must be a non-empty string")


@dataclass(frozen=True)
class LabeledVertex:
    """Vertex identified by its label."""

    label: str

    def __post_init__(self):
        """Validate vertex label."""
        _validate_label(self.label)

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class LabeledEdge:
    """Edge identified by its label."""

    label: str

    def __post_init__(self):
        """Validate edge label."""
        _validate_label(self.label)

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class LabeledWeightedEdge:
    """
    Edge identified by its label and carrying a numeric weight.

    Attributes:
        label (str): Edge label
        weight (float): Edge weight, any real number
    """

    label: str
    weight: float

    def __post_init__(self):
        """Validate edge label and weight."""
        _validate_label(self.label)
        if isinstance(self.weight, bool) or not isinstance(self.weight, Real):
            raise TypeError("weight must be a numeric value")

    def __str__(self) -> str:
        return f"{self.label}({self.weight})"
