"""
Tests for route construction.
"""

import pytest

from trellis.core.exceptions import EdgeNotFoundError, InvalidArgumentError, VertexNotFoundError
from trellis.core.graph import DirectedMutableGraph
from trellis.core.graph_paths import InMemoryPath, WeightedPath, build_path, calculate_path_weight
from trellis.core.models import LabeledWeightedEdge


@pytest.fixture
def weighted_edges():
    """Fixture providing weighted edges of a small road network."""
    return {
        "AB": LabeledWeightedEdge("AB", 3.0),
        "BD": LabeledWeightedEdge("BD", 4.0),
        "AC": LabeledWeightedEdge("AC", 2.0),
        "CD": LabeledWeightedEdge("CD", 6.5),
    }


@pytest.fixture
def road_graph(weighted_edges):
    """Fixture providing a directed weighted graph."""
    return DirectedMutableGraph.from_edges(
        "ABCD",
        [
            ("A", weighted_edges["AB"], "B"),
            ("B", weighted_edges["BD"], "D"),
            ("A", weighted_edges["AC"], "C"),
            ("C", weighted_edges["CD"], "D"),
        ],
    )


def test_append_builds_route():
    """Test appending vertices and edges in travel order."""
    path = InMemoryPath("A", "D", 7.0)
    path.append_vertex("A")
    path.append_edge("AB")
    path.append_vertex("B")
    path.append_edge("BD")
    path.append_vertex("D")

    assert path.vertices == ("A", "B", "D")
    assert path.edges == ("AB", "BD")
    assert path.size() == 3
    assert len(path) == 3
    assert path.weight == 7.0
    assert path.source == "A"
    assert path.target == "D"


def test_prepend_builds_mirror_sequence():
    """Test prepending builds the route backwards."""
    path = InMemoryPath("A", "B", None)
    path.prepend_vertex("B")
    path.prepend_vertex("A")

    assert path.vertices == ("A", "B")


def test_prepend_and_append_edges():
    """Test edges can be added at both ends."""
    path = InMemoryPath("A", "D")
    path.append_edge("BC")
    path.prepend_edge("AB")
    path.append_edge("CD")

    assert path.edges == ("AB", "BC", "CD")
    assert path.size() == 0


def test_weight_may_be_unknown():
    """Test an unknown weight stays None."""
    path = InMemoryPath("A", "Z")

    assert path.weight is None
    assert path.vertices == ()
    assert path.edges == ()


def test_snapshots_do_not_follow_later_insertions():
    """Test exposed sequences are read-only snapshots."""
    path = InMemoryPath("A", "C", 2.0)
    path.append_vertex("A")
    snapshot = path.vertices
    path.append_vertex("C")

    assert snapshot == ("A",)
    assert path.vertices == ("A", "C")
    with pytest.raises(TypeError):
        snapshot[0] = "Z"


def test_no_consistency_checks():
    """Test the builder accepts sequences that do not line up."""
    path = InMemoryPath("A", "D", 1.0)
    path.append_vertex("X")
    path.append_edge("e1")
    path.append_edge("e2")
    path.append_edge("e3")

    assert path.vertices == ("X",)
    assert len(path.edges) == 3


def test_freeze():
    """Test freezing returns an immutable route."""
    path = InMemoryPath("A", "B", 3.0)
    path.append_vertex("A")
    path.append_edge("AB")
    path.append_vertex("B")
    frozen = path.freeze()
    path.append_vertex("C")

    assert frozen == WeightedPath("A", "B", ("A", "B"), ("AB",), 3.0)
    assert frozen.size() == 2
    assert len(frozen) == 2
    with pytest.raises(AttributeError):
        frozen.weight = 1.0


def test_repr():
    """Test builder representation."""
    path = InMemoryPath("A", "B", 1.0)
    path.append_vertex("A")

    assert repr(path) == "InMemoryPath(source='A', target='B', size=1, weight=1.0)"


def test_calculate_path_weight(weighted_edges):
    """Test summing weights of weighted edges."""
    assert calculate_path_weight([weighted_edges["AB"], weighted_edges["BD"]]) == 7.0
    assert calculate_path_weight([]) == 0.0


def test_calculate_path_weight_requires_weights():
    """Test unweighted edges are rejected."""
    with pytest.raises(TypeError):
        calculate_path_weight(["AB"])


def test_build_path_from_predecessors(road_graph, weighted_edges):
    """Test walking predecessors back from the target."""
    path = build_path(road_graph, "A", "D", {"B": "A", "D": "B", "C": "A"})

    assert path.vertices == ("A", "B", "D")
    assert path.edges == (weighted_edges["AB"], weighted_edges["BD"])
    assert path.weight == pytest.approx(7.0)
    assert path.source == "A"
    assert path.target == "D"


def test_build_path_keeps_supplied_weight(road_graph):
    """Test an explicit weight is not recomputed."""
    path = build_path(road_graph, "A", "D", {"C": "A", "D": "C"}, weight=42.0)

    assert path.vertices == ("A", "C", "D")
    assert path.weight == 42.0


def test_build_path_source_equals_target(road_graph):
    """Test a route from a vertex to itself."""
    path = build_path(road_graph, "A", "A", {})

    assert path.vertices == ("A",)
    assert path.edges == ()
    assert path.weight == 0.0


def test_build_path_unweighted_edges_leave_weight_unknown():
    """Test the weight stays None when edges carry no weight."""
    graph = DirectedMutableGraph.from_edges("AB", [("A", "ab", "B")])
    path = build_path(graph, "A", "B", {"B": "A"})

    assert path.edges == ("ab",)
    assert path.weight is None


def test_build_path_errors(road_graph):
    """Test broken predecessor chains."""
    with pytest.raises(VertexNotFoundError, match="Source vertex"):
        build_path(road_graph, "X", "D", {})
    with pytest.raises(VertexNotFoundError, match="Target vertex"):
        build_path(road_graph, "A", "X", {})
    with pytest.raises(VertexNotFoundError, match="No predecessor"):
        build_path(road_graph, "A", "D", {"D": "B"})
    with pytest.raises(EdgeNotFoundError):
        build_path(road_graph, "A", "D", {"D": "A"})
    with pytest.raises(InvalidArgumentError, match="loops"):
        build_path(road_graph, "A", "D", {"D": "D"})
