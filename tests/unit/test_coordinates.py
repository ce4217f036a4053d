"""Unit tests for the layout layer (identifiers, adjacency, rescaling)."""

import numpy as np
import pytest

from trophic.core.levels import FailureKind, TrophicConfig
from trophic.layout.coordinates import (
    Edge,
    LayoutConfig,
    NodeIndex,
    as_edge,
    edge_list_to_adjacency,
    rescale,
    trophic_layout,
)


def nodes_at(*pairs):
    return [{"id": node_id, "x": x} for node_id, x in pairs]


class TestAsEdge:
    """Tests for edge record coercion."""

    def test_edge_passthrough(self):
        edge = Edge("a", "b")
        assert as_edge(edge) is edge

    def test_mapping(self):
        assert as_edge({"from": 1, "to": 2, "label": "x"}) == Edge(1, 2)

    def test_pair(self):
        assert as_edge(("a", "b")) == Edge("a", "b")

    def test_mapping_missing_key(self):
        with pytest.raises(KeyError):
            as_edge({"from": 1})

    def test_list_pair(self):
        assert as_edge(["a", "b"]) == Edge("a", "b")

    def test_string_rejected(self):
        with pytest.raises(TypeError):
            as_edge("ab")

    def test_wrong_length_rejected(self):
        with pytest.raises(ValueError):
            as_edge(("a", "b", "c"))


class TestNodeIndex:
    """Tests for first-seen index assignment."""

    def test_source_before_target(self):
        index = NodeIndex.from_edges([Edge("b", "a"), Edge("c", "b")])
        assert index.ids == ["b", "a", "c"]
        assert index.index("c") == 2
        assert index.node_id(1) == "a"

    def test_add_is_idempotent(self):
        index = NodeIndex()
        assert index.add("x") == 0
        assert index.add("y") == 1
        assert index.add("x") == 0
        assert len(index) == 2

    def test_distinguishes_types(self):
        index = NodeIndex([1, "1"])
        assert len(index) == 2
        assert index.index("1") == 1

    def test_contains_and_iter(self):
        index = NodeIndex(["a", "b"])
        assert "a" in index
        assert "z" not in index
        assert list(index) == ["a", "b"]

    def test_ids_is_copy(self):
        index = NodeIndex(["a"])
        index.ids.append("b")
        assert len(index) == 1


class TestEdgeListToAdjacency:
    """Tests for edge_list_to_adjacency()."""

    def test_path(self, path_adjacency):
        edges = [{"from": 0, "to": 1}, {"from": 1, "to": 2}, {"from": 2, "to": 3}]
        a, index = edge_list_to_adjacency(edges)
        assert index.ids == [0, 1, 2, 3]
        assert np.array_equal(a, path_adjacency)

    def test_duplicate_edges_idempotent(self):
        a, _ = edge_list_to_adjacency([("a", "b"), ("a", "b"), ("a", "b")])
        assert a[0, 1] == 1
        assert a.sum() == 1

    def test_indices_follow_first_seen(self):
        a, index = edge_list_to_adjacency([("z", "y"), ("x", "z")])
        assert index.ids == ["z", "y", "x"]
        assert a[0, 1] == 1  # z → y
        assert a[2, 0] == 1  # x → z

    def test_self_loop(self):
        a, index = edge_list_to_adjacency([("a", "a")])
        assert len(index) == 1
        assert a[0, 0] == 1

    def test_empty(self):
        a, index = edge_list_to_adjacency([])
        assert a.shape == (0, 0)
        assert len(index) == 0


class TestRescale:
    """Tests for rescale()."""

    def test_three_levels(self):
        out = rescale(np.array([0.0, 1.0, 2.0]), [40.0, 10.0, 25.0])
        assert list(out) == [10.0, 25.0, 40.0]

    def test_global_remap_not_extremal_matching(self):
        # The node holding minX is not pinned to minX
        out = rescale(np.array([2.0, 0.0, 1.0]), [0.0, 100.0, 50.0])
        assert list(out) == [100.0, 0.0, 50.0]

    def test_negative_range(self):
        out = rescale(np.array([0.0, 4.0]), [-200.0, 200.0])
        assert list(out) == [-200.0, 200.0]

    def test_zero_height_range(self):
        out = rescale(np.array([0.0, 0.0]), [3.0, 7.0])
        assert list(out) == [3.0, 3.0]

    def test_zero_coordinate_range(self):
        out = rescale(np.array([0.0, 1.0]), [5.0, 5.0])
        assert list(out) == [5.0, 5.0]


class TestLayoutConfig:
    """Tests for LayoutConfig."""

    def test_defaults(self):
        config = LayoutConfig()
        assert config.axis == "x"
        assert config.id_key == "id"
        assert config.trophic.decimals == 3

    def test_empty_axis_rejected(self):
        with pytest.raises(ValueError):
            LayoutConfig(axis="")


class TestTrophicLayout:
    """End-to-end tests for trophic_layout()."""

    def test_single_edge(self):
        nodes = nodes_at(("A", 0.0), ("B", 100.0))
        result = trophic_layout([{"from": "A", "to": "B"}], nodes)
        assert result.ok
        assert list(result.heights) == [0.0, 1.0]
        assert [n["x"] for n in result.nodes] == [0.0, 100.0]

    def test_rescale_into_node_range(self):
        nodes = nodes_at(("c", 40.0), ("a", 10.0), ("b", 20.0))
        result = trophic_layout([("a", "b"), ("b", "c")], nodes)
        assert result.ok
        assert result.node_ids == ["a", "b", "c"]
        assert [n["id"] for n in result.nodes] == ["a", "b", "c"]
        assert [n["x"] for n in result.nodes] == [10.0, 25.0, 40.0]

    def test_output_in_index_order(self):
        nodes = nodes_at((3, 0.0), (2, 1.0), (1, 2.0), (0, 3.0))
        edges = [(0, 1), (1, 2), (2, 3)]
        result = trophic_layout(edges, nodes)
        assert [n["id"] for n in result.nodes] == [0, 1, 2, 3]
        assert [n["x"] for n in result.nodes] == [0.0, 1.0, 2.0, 3.0]

    def test_range_includes_nodes_without_edges(self):
        # Unreferenced nodes still widen the coordinate range
        nodes = nodes_at(("a", 0.0), ("b", 5.0), ("spare", 10.0))
        result = trophic_layout([("a", "b")], nodes)
        assert [n["id"] for n in result.nodes] == ["a", "b"]
        assert [n["x"] for n in result.nodes] == [0.0, 10.0]

    def test_inputs_not_mutated(self):
        nodes = nodes_at(("a", 7.0), ("b", 9.0))
        trophic_layout([("a", "b")], nodes)
        assert nodes == nodes_at(("a", 7.0), ("b", 9.0))

    def test_other_fields_kept(self):
        nodes = [
            {"id": "a", "x": 0.0, "y": 3.0, "label": "A"},
            {"id": "b", "x": 1.0, "y": 4.0, "label": "B"},
        ]
        result = trophic_layout([("a", "b")], nodes)
        assert result.nodes[0]["y"] == 3.0
        assert result.nodes[1]["label"] == "B"

    def test_mapping_of_nodes(self):
        nodes = {"a": {"x": 0.0}, "b": {"x": 2.0}}
        result = trophic_layout([("a", "b")], nodes)
        assert [n["x"] for n in result.nodes] == [0.0, 2.0]

    def test_custom_axis_and_id_key(self):
        nodes = [{"key": "a", "y": 10.0}, {"key": "b", "y": 30.0}]
        config = LayoutConfig(axis="y", id_key="key")
        result = trophic_layout([("b", "a")], nodes, config)
        assert [n["key"] for n in result.nodes] == ["b", "a"]
        assert [n["y"] for n in result.nodes] == [10.0, 30.0]

    def test_deterministic(self):
        nodes = nodes_at(*[(i, float(10 * i)) for i in range(5)])
        edges = [(0, 1), (0, 2), (1, 2), (2, 3), (3, 4), (1, 4)]
        first = trophic_layout(edges, nodes)
        second = trophic_layout(edges, nodes)
        assert first.nodes == second.nodes

    def test_trophic_config_passed_through(self):
        nodes = nodes_at(("a", 0.0), ("b", 1.0), ("c", 2.0))
        config = LayoutConfig(trophic=TrophicConfig(decimals=1))
        result = trophic_layout([("a", "b"), ("a", "c"), ("b", "c")], nodes, config)
        assert list(result.heights) == [0.0, 0.7, 1.3]

    def test_singular_passed_through(self):
        nodes = nodes_at(("a", 0.0), ("b", 1.0), ("c", 2.0), ("d", 3.0))
        result = trophic_layout([("a", "b"), ("c", "d")], nodes)
        assert not result.ok
        assert result.failure is FailureKind.SINGULAR
        assert result.nodes is None
        assert result.heights is None
        assert result.node_ids == ["a", "b", "c", "d"]

    def test_strict_connectivity_reports_disconnected(self):
        nodes = nodes_at(("a", 0.0), ("b", 1.0), ("c", 2.0), ("d", 3.0))
        config = LayoutConfig(trophic=TrophicConfig(strict_connectivity=True))
        result = trophic_layout([("a", "b"), ("c", "d")], nodes, config)
        assert result.failure is FailureKind.DISCONNECTED
        assert "weakly connected" in result.message

    def test_unknown_node_rejected(self):
        with pytest.raises(ValueError, match="ghost"):
            trophic_layout([("a", "ghost")], nodes_at(("a", 0.0)))

    def test_no_edges_rejected(self):
        with pytest.raises(ValueError):
            trophic_layout([], nodes_at(("a", 0.0)))

    def test_duplicate_node_id_rejected(self):
        nodes = nodes_at(("a", 0.0), ("b", 5.0), ("a", 100.0))
        with pytest.raises(ValueError, match="Duplicate node id"):
            trophic_layout([("a", "b")], nodes)

    def test_repeated_edges_match_unit_edges(self):
        nodes = nodes_at(("a", 0.0), ("b", 1.0), ("c", 2.0))
        once = trophic_layout([("a", "b"), ("b", "c")], nodes)
        repeated = trophic_layout([("a", "b"), ("a", "b"), ("b", "c"), ("b", "c")], nodes)
        assert list(repeated.heights) == list(once.heights) == [0.0, 1.0, 2.0]
        assert repeated.nodes == once.nodes
