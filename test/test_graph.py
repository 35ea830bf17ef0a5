"""
    Graph model: vertex creation, edge ordering, terminals, duplicates
"""

import pytest

from augflow.errors import FlowConfigError
from augflow.graph import FlowGraph, add_reverse_edges
from conftest import make_graph


def test_vertices_created_on_first_reference():
    graph = FlowGraph()
    graph.add_edge("a", "b", 1)
    assert sorted(graph.vertices) == ["a", "b"]
    assert len(graph) == 2
    graph.add_edge("b", "c", 2)
    assert sorted(graph.vertices) == ["a", "b", "c"]


def test_out_edges_sorted_by_target_then_id():
    graph = FlowGraph()
    graph.add_edge("s", "z", 1)
    graph.add_edge("s", "b", 1)
    graph.add_edge("s", "m", 1)
    targets = [graph.edges[e].target for e in graph.out_edges("s")]
    assert targets == ["b", "m", "z"]


def test_reverse_edge_sorts_after_input_edge_with_same_target():
    graph = make_graph("a", "b", [("a", "b", 1), ("b", "a", 1)])
    add_reverse_edges(graph)
    out = [graph.edges[e] for e in graph.out_edges("a")]
    assert [e.target for e in out] == ["b", "b"]
    assert [e.is_reverse for e in out] == [False, True]


def test_unknown_vertex():
    graph = FlowGraph()
    graph.add_edge("a", "b", 1)
    with pytest.raises(FlowConfigError, match="no such vertex"):
        graph.get_vertex("q")
    with pytest.raises(FlowConfigError, match="no such vertex"):
        graph.set_terminals("a", "q")
    with pytest.raises(FlowConfigError, match="no such vertex"):
        graph.set_terminals("q", "b")


def test_source_equals_target_rejected():
    graph = FlowGraph()
    graph.add_edge("a", "b", 1)
    with pytest.raises(FlowConfigError, match="must differ"):
        graph.set_terminals("a", "a")


@pytest.mark.parametrize("capacity", [-1, 1.5, "3", True])
def test_invalid_capacity(capacity):
    graph = FlowGraph()
    with pytest.raises(FlowConfigError, match="non-negative integer"):
        graph.add_edge("a", "b", capacity)


def test_duplicate_edge_rejected_by_default():
    graph = FlowGraph()
    graph.add_edge("a", "b", 1)
    with pytest.raises(FlowConfigError, match="Duplicate edge a -> b"):
        graph.add_edge("a", "b", 2)


def test_opposite_edges_are_not_duplicates():
    graph = FlowGraph()
    graph.add_edge("a", "b", 1)
    graph.add_edge("b", "a", 2)
    assert len(graph.edges) == 2


def test_duplicate_edge_merge():
    graph = FlowGraph(duplicate_edges="merge")
    first = graph.add_edge("a", "b", 1)
    second = graph.add_edge("a", "b", 2)
    assert first == second
    assert len(graph.edges) == 1
    assert graph.edges[first].capacity == 3
    assert graph.edges[first].original_capacity == 3


def test_duplicate_edge_parallel():
    graph = FlowGraph(duplicate_edges="parallel")
    first = graph.add_edge("a", "b", 1)
    second = graph.add_edge("a", "b", 2)
    assert first != second
    assert graph.out_edges("a") == [first, second]


def test_unknown_duplicate_policy():
    with pytest.raises(FlowConfigError, match="duplicate edge policy"):
        FlowGraph(duplicate_edges="ignore")


def test_no_edges_after_residual_construction(chain):
    add_reverse_edges(chain)
    with pytest.raises(FlowConfigError, match="after residual"):
        chain.add_edge("A", "B", 1)


def test_describe_lists_edges_by_source(chain):
    add_reverse_edges(chain)
    assert chain.describe(include_reverse=False).splitlines() == [
        "A T {capacity: 2, flow: 0, isReverseEdge: false}",
        "S A {capacity: 3, flow: 0, isReverseEdge: false}",
    ]
    assert "A S {capacity: 0, flow: 0, isReverseEdge: true}" in chain.describe()
