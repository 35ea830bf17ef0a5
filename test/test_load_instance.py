"""
    Instance parsing and solution formatting
"""

import os

import pytest

from augflow.errors import FlowConfigError, FlowInputError
from augflow.solvers import max_flow
from augflow.utils.load_instance import format_solution, load_instance, parse_instance

CHAIN = """2
S T
S A 3
A T 2
"""


def test_parse_instance():
    graph = parse_instance(CHAIN)
    assert (graph.source, graph.target) == ("S", "T")
    assert sorted(graph.vertices) == ["A", "S", "T"]
    assert [(e.source, e.target, e.capacity) for e in graph.edges] == [("S", "A", 3), ("A", "T", 2)]


def test_tokens_may_span_lines():
    graph = parse_instance("1 S\nT S T\n4")
    assert max_flow(graph)[0] == 4


def test_format_solution():
    assert format_solution(2, [("A", "T", 2), ("S", "A", 2)]) == "2\nA T 2\nS A 2\n"


def test_chain_end_to_end():
    total_flow, edge_flows = max_flow(parse_instance(CHAIN))
    assert format_solution(total_flow, edge_flows) == "2\nA T 2\nS A 2\n"


def test_unknown_terminal():
    with pytest.raises(FlowConfigError, match="no such vertex: 'Q'"):
        parse_instance("1\nS Q\nS A 3\n")


def test_source_equals_target():
    with pytest.raises(FlowConfigError, match="must differ"):
        parse_instance("1\nS S\nS A 3\n")


@pytest.mark.parametrize("text, message", [
    ("", "expected edge count"),
    ("x S T", "edge count must be an integer"),
    ("-1 S T", "edge count must be non-negative"),
    ("2\nS T\nS A 3\n", "expected source of edge 2"),
    ("1\nS T\nS A\n", "expected capacity of edge 1"),
    ("1\nS T\nS T abc\n", "line 3: capacity must be an integer"),
    ("1\nS T\nS T -4\n", "line 3: capacity must be non-negative"),
])
def test_malformed_input(text, message):
    with pytest.raises(FlowInputError, match=message):
        parse_instance(text)


def test_duplicate_edge_reports_line():
    with pytest.raises(FlowInputError, match="line 4: Duplicate edge S -> T") as info:
        parse_instance("2\nS T\nS T 1\nS T 2\n")
    assert info.value.line == 4


def test_duplicate_edge_merge_policy():
    graph = parse_instance("2\nS T\nS T 1\nS T 2\n", duplicate_edges="merge")
    assert max_flow(graph) == (3, [("S", "T", 3)])


def test_load_instance_files(data_dir):
    graph = load_instance(os.path.join(data_dir, "instances", "lab.txt"))
    assert max_flow(graph)[0] == 12

    graph = load_instance(os.path.join(data_dir, "instances", "cancellation.txt"))
    assert max_flow(graph)[0] == 2


def test_load_instance_missing_file(tmp_path):
    with pytest.raises(FlowInputError, match="Cannot read instance"):
        load_instance(str(tmp_path / "missing.txt"))


def test_load_instance_not_utf8(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"1\nS T\nS T \xff\n")
    with pytest.raises(FlowInputError, match="Cannot read instance"):
        load_instance(str(path))
