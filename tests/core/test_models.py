"""
Tests for value types and the weight capability.
"""

import pytest

from trellis.core.models import LabeledEdge, LabeledVertex, LabeledWeightedEdge, VertexPair
from trellis.core.types import WeightedEdge, get_weight, is_weighted


def test_vertex_pair_structural_equality():
    """Test pairs compare component-wise."""
    assert VertexPair("A", "B") == VertexPair("A", "B")
    assert VertexPair("A", "B") != VertexPair("B", "A")
    assert hash(VertexPair("A", "B")) == hash(VertexPair("A", "B"))
    assert {VertexPair("A", "B"): 1}[VertexPair("A", "B")] == 1


def test_vertex_pair_swap_and_unpack():
    """Test swapping and unpacking a pair."""
    head, tail = VertexPair("A", "B").swap()

    assert (head, tail) == ("B", "A")


def test_vertex_pair_is_frozen():
    """Test pairs cannot be modified."""
    pair = VertexPair("A", "B")
    with pytest.raises(AttributeError):
        pair.head = "C"


@pytest.mark.parametrize("label", ["", "   ", None])
def test_labeled_types_reject_empty_label(label):
    """Test label validation."""
    with pytest.raises(ValueError, match="label must be a non-empty string"):
        LabeledVertex(label)
    with pytest.raises(ValueError, match="label must be a non-empty string"):
        LabeledEdge(label)


def test_labeled_weighted_edge():
    """Test weighted edges expose their weight."""
    edge = LabeledWeightedEdge("ab", 2.5)

    assert get_weight(edge) == 2.5
    assert is_weighted(edge)
    assert isinstance(edge, WeightedEdge)
    assert str(edge) == "ab(2.5)"


@pytest.mark.parametrize("weight", ["2", None, True])
def test_labeled_weighted_edge_rejects_non_numeric_weight(weight):
    """Test weight validation."""
    with pytest.raises(TypeError, match="weight must be a numeric value"):
        LabeledWeightedEdge("ab", weight)


def test_get_weight_requires_capability():
    """Test reading the weight of an unweighted edge."""
    assert not is_weighted(LabeledEdge("ab"))
    with pytest.raises(TypeError, match="does not expose a numeric weight"):
        get_weight(LabeledEdge("ab"))


def test_labels_as_str():
    """Test labelled types render as their label."""
    assert str(LabeledVertex("A")) == "A"
    assert str(LabeledEdge("ab")) == "ab"
