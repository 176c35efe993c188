"""Tests for GraphBuilder.

Covers the node kinds emitted per CST kind, hierarchical paths, BFS id
assignment, pointer child counts, array splicing, root-level arrays and
scalars, row deep copies, sizing through the measurer, and the tree shape
of the result.
"""

from __future__ import annotations

from typing import Any

import pytest

from json_diagram.document import DocumentParser, to_document
from json_diagram.graph import Collapsed, Edge, Graph, GraphBuilder, NodeKind
from json_diagram.measure import StaticMeasurer
from json_diagram.protocols import Size

# ---------------------------------------------------------------------------
# Fixtures / helpers
# ---------------------------------------------------------------------------


@pytest.fixture
def builder() -> GraphBuilder:
    return GraphBuilder(StaticMeasurer())


def _build(builder: GraphBuilder, value: Any) -> Graph:
    return builder.build(to_document(value))


def _summary(graph: Graph) -> list[tuple[str, str, str | None]]:
    return [(n.id, str(n.kind), n.path) for n in graph.nodes]


# ---------------------------------------------------------------------------
# Objects and pointers
# ---------------------------------------------------------------------------


class TestNestedObject:
    """{"a": {"b": 1}} -> root group, pointer a, nested group with row b."""

    @pytest.fixture
    def graph(self, builder: GraphBuilder) -> Graph:
        return _build(builder, {"a": {"b": 1}})

    def test_three_nodes(self, graph: Graph) -> None:
        assert _summary(graph) == [
            ("0", "group", "{Root}"),
            ("1", "pointer", "{Root}.a"),
            ("2", "group", "{Root}.a"),
        ]

    def test_edges(self, graph: Graph) -> None:
        assert graph.edges == [Edge("0", "1"), Edge("1", "2")]
        assert [e.id for e in graph.edges] == ["e0-1", "e1-2"]

    def test_root_row_holds_deep_copy(self, graph: Graph) -> None:
        assert graph.nodes[0].text == [("a", {"b": 1})]

    def test_nested_group_rows(self, graph: Graph) -> None:
        assert graph.nodes[2].text == [("b", 1)]

    def test_pointer_data(self, graph: Graph) -> None:
        pointer = graph.nodes[1]
        assert pointer.text == "a"
        assert pointer.data.is_parent is True
        assert pointer.data.type == "object"
        assert pointer.data.child_count == 1

    def test_group_data(self, graph: Graph) -> None:
        group = graph.nodes[0]
        assert group.data.type == "object"
        assert group.data.is_parent is False
        assert group.data.is_empty is False


class TestRows:
    def test_rows_keep_document_order(self, builder: GraphBuilder) -> None:
        graph = builder.build(DocumentParser().parse('{"z": 1, "y": [1], "x": "s"}'))
        assert [key for key, _ in graph.nodes[0].rows] == ["z", "y", "x"]

    def test_scalar_rows_keep_python_values(self, builder: GraphBuilder) -> None:
        graph = _build(builder, {"s": "x", "n": 1.5, "t": True, "z": None})
        assert graph.nodes[0].text == [("s", "x"), ("n", 1.5), ("t", True), ("z", None)]

    def test_structural_row_is_not_shared_with_input(
        self, builder: GraphBuilder
    ) -> None:
        value = {"a": {"b": [1, 2]}}
        graph = _build(builder, value)
        row_value = graph.nodes[0].rows[0][1]
        assert row_value == {"b": [1, 2]}
        assert row_value is not value["a"]

    def test_empty_object_is_empty_group(self, builder: GraphBuilder) -> None:
        graph = _build(builder, {})
        assert len(graph.nodes) == 1
        assert graph.nodes[0].kind is NodeKind.GROUP
        assert graph.nodes[0].data.is_empty is True
        assert graph.nodes[0].text == []


class TestPointerChildCount:
    def test_object_property_count(self, builder: GraphBuilder) -> None:
        graph = _build(builder, {"a": {"x": 1, "y": 2, "z": 3}})
        assert graph.nodes[1].data.child_count == 3

    def test_array_element_count(self, builder: GraphBuilder) -> None:
        graph = _build(builder, {"a": [1, 2, 3, 4]})
        assert graph.nodes[1].data.type == "array"
        assert graph.nodes[1].data.child_count == 4

    def test_empty_array_pointer_has_no_children(self, builder: GraphBuilder) -> None:
        graph = _build(builder, {"a": []})
        assert _summary(graph) == [("0", "group", "{Root}"), ("1", "pointer", "{Root}.a")]
        assert graph.nodes[1].data.child_count == 0


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------


class TestArrays:
    def test_object_elements_attach_to_pointer(self, builder: GraphBuilder) -> None:
        graph = _build(builder, {"items": [{"x": 1}, {"x": 2}], "n": 3})
        assert _summary(graph) == [
            ("0", "group", "{Root}"),
            ("1", "pointer", "{Root}.items"),
            ("2", "group", "{Root}.items.0"),
            ("3", "group", "{Root}.items.1"),
        ]
        assert graph.edges == [Edge("0", "1"), Edge("1", "2"), Edge("1", "3")]

    def test_scalar_elements_become_leaves(self, builder: GraphBuilder) -> None:
        graph = _build(builder, {"x": [1, "two"]})
        leaves = [n for n in graph.nodes if n.kind is NodeKind.LEAF]
        assert [(n.path, n.text) for n in leaves] == [
            ("{Root}.x.0", 1),
            ("{Root}.x.1", "two"),
        ]
        assert [n.data.type for n in leaves] == ["number", "string"]

    def test_nested_arrays_splice_indices(self, builder: GraphBuilder) -> None:
        graph = _build(builder, {"a": [[1, 2], {"b": 1}]})
        assert _summary(graph) == [
            ("0", "group", "{Root}"),
            ("1", "pointer", "{Root}.a"),
            ("2", "group", "{Root}.a.1"),
            ("3", "leaf", "{Root}.a.0.0"),
            ("4", "leaf", "{Root}.a.0.1"),
        ]
        assert all(edge.source == "1" for edge in graph.edges[1:])

    def test_root_array_gets_root_pointer(self, builder: GraphBuilder) -> None:
        graph = _build(builder, [1, {"a": 1}])
        assert _summary(graph) == [
            ("0", "pointer", "{Root}"),
            ("1", "leaf", "{Root}.0"),
            ("2", "group", "{Root}.1"),
        ]
        assert graph.nodes[0].text == "{Root}"
        assert graph.nodes[0].data.child_count == 2
        assert graph.edges == [Edge("0", "1"), Edge("0", "2")]

    def test_empty_root_array(self, builder: GraphBuilder) -> None:
        graph = _build(builder, [])
        assert _summary(graph) == [("0", "pointer", "{Root}")]
        assert graph.edges == []


# ---------------------------------------------------------------------------
# Scalars at the root
# ---------------------------------------------------------------------------


class TestRootScalar:
    @pytest.mark.parametrize("value", ["hello", 42, 1.5, True, None])
    def test_single_root_leaf(self, builder: GraphBuilder, value: Any) -> None:
        graph = _build(builder, value)
        assert len(graph.nodes) == 1
        node = graph.nodes[0]
        assert node.kind is NodeKind.ROOT_LEAF
        assert node.path == "{Root}"
        assert node.text == value
        assert graph.edges == []


# ---------------------------------------------------------------------------
# Ids and BFS order
# ---------------------------------------------------------------------------


class TestDiscoveryOrder:
    def test_ids_follow_breadth_first_order(self, builder: GraphBuilder) -> None:
        graph = _build(builder, {"a": {"c": {"d": 1}}, "b": {"e": 1}})
        assert _summary(graph) == [
            ("0", "group", "{Root}"),
            ("1", "pointer", "{Root}.a"),
            ("2", "pointer", "{Root}.b"),
            ("3", "group", "{Root}.a"),
            ("4", "pointer", "{Root}.a.c"),
            ("5", "group", "{Root}.b"),
            ("6", "group", "{Root}.a.c"),
        ]

    def test_ids_are_unique_and_sequential(self, builder: GraphBuilder) -> None:
        graph = _build(builder, {"a": [{"b": [1, 2]}, {"c": {"d": []}}]})
        assert [n.id for n in graph.nodes] == [str(i) for i in range(len(graph.nodes))]

    def test_builds_are_independent(self, builder: GraphBuilder) -> None:
        first = _build(builder, {"a": {"b": 1}})
        second = _build(builder, {"a": {"b": 1}})
        assert first == second
        assert first.nodes[0] is not second.nodes[0]


# ---------------------------------------------------------------------------
# Sizing
# ---------------------------------------------------------------------------


class TestSizing:
    """StaticMeasurer defaults: 8px per cell, 24px + 16px (with parent) padding."""

    def test_group_sized_with_summaries(self, builder: GraphBuilder) -> None:
        graph = _build(builder, {"a": {"b": 1}})
        # "a: {object: 1}" -> 14 cells, no parent
        assert graph.nodes[0].width == 14 * 8 + 24
        assert graph.nodes[0].height == 30

    def test_pointer_sized_from_key_with_connector(self, builder: GraphBuilder) -> None:
        graph = _build(builder, {"a": {"b": 1}})
        assert graph.nodes[1].width == 8 + 24 + 16

    def test_nested_group_has_connector(self, builder: GraphBuilder) -> None:
        graph = _build(builder, {"a": {"b": 1}})
        # "b: 1"
        assert graph.nodes[2].width == 4 * 8 + 24 + 16

    def test_multi_row_group_height(self, builder: GraphBuilder) -> None:
        graph = _build(builder, {"a": 1, "b": 2, "c": 3})
        assert graph.nodes[0].height == 3 * 18 + 12

    def test_custom_measurer_is_used(self) -> None:
        class Fixed:
            def measure(self, label: str, has_parent: bool) -> Size:
                return Size(500.0 if has_parent else 100.0, 10.0)

        graph = GraphBuilder(Fixed()).build(to_document({"a": {"b": 1}}))
        assert [n.width for n in graph.nodes] == [100.0, 500.0, 500.0]

    def test_collapsed_summary_type(self) -> None:
        assert str(Collapsed("object", 1)) == "{object: 1}"


# ---------------------------------------------------------------------------
# Tree shape
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "value",
    [
        {"a": {"b": 1}},
        {"a": [1, 2, {"c": [3, [4, 5]]}], "d": {}},
        [{"x": 1}, [2, 3], 4],
        {"deep": {"er": {"est": {"x": [1]}}}},
    ],
)
def test_result_is_a_tree(builder: GraphBuilder, value: Any) -> None:
    graph = _build(builder, value)
    ids = {n.id for n in graph.nodes}
    targets = [e.target for e in graph.edges]
    assert len(graph.edges) == len(graph.nodes) - 1
    assert len(targets) == len(set(targets))
    assert all(e.source in ids and e.target in ids for e in graph.edges)
    roots = ids - set(targets)
    assert len(roots) == 1
