"""Shared test fixtures."""

from typing import Any, List, Tuple

import pytest

from trellis.core.graph import DirectedMutableGraph, UndirectedMutableGraph
from trellis.core.models import LabeledEdge, LabeledVertex


class RecordingListener:
    """Listener recording every hook call it receives."""

    def __init__(self) -> None:
        self.calls: List[Tuple[Any, ...]] = []

    def on_vertex_added(self, graph, vertex):
        self.calls.append(("vertex_added", vertex))

    def on_vertex_removed(self, graph, vertex):
        self.calls.append(("vertex_removed", vertex))

    def on_edge_added(self, graph, head, edge, tail):
        self.calls.append(("edge_added", head, edge, tail))

    def on_edge_removed(self, graph, head, edge, tail):
        self.calls.append(("edge_removed", head, edge, tail))


@pytest.fixture
def recorder() -> RecordingListener:
    """Fixture providing a recording listener."""
    return RecordingListener()


@pytest.fixture
def vertices():
    """Fixture providing labelled vertices A to D."""
    return {label: LabeledVertex(label) for label in "ABCD"}


@pytest.fixture
def abc_graph():
    """Fixture providing a directed graph A -> B -> C."""
    graph = DirectedMutableGraph()
    for vertex in "ABC":
        graph.add_vertex(vertex)
    graph.add_edge("A", "e1", "B")
    graph.add_edge("B", "e2", "C")
    return graph


@pytest.fixture
def undirected_abc_graph():
    """Fixture providing an undirected graph A - B - C."""
    graph = UndirectedMutableGraph()
    for vertex in "ABC":
        graph.add_vertex(vertex)
    graph.add_edge("A", LabeledEdge("ab"), "B")
    graph.add_edge("B", LabeledEdge("bc"), "C")
    return graph
