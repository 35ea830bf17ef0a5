import os

import pytest

from augflow.graph import FlowGraph

DATA_DIR = os.path.join(os.path.dirname(__file__), "..", "data")


def make_graph(source, target, edges, duplicate_edges="reject"):
    graph = FlowGraph(duplicate_edges=duplicate_edges)
    for u, v, capacity in edges:
        graph.add_edge(u, v, capacity)
    graph.set_terminals(source, target)
    return graph


@pytest.fixture
def data_dir():
    return DATA_DIR


@pytest.fixture
def chain():
    return make_graph("S", "T", [("S", "A", 3), ("A", "T", 2)])


@pytest.fixture
def parallel_paths():
    return make_graph("S", "T", [("S", "A", 3), ("A", "T", 3),
                                 ("S", "B", 2), ("B", "T", 2)])


@pytest.fixture
def cancellation():
    # DFS takes d c b a first, the second path must cancel c -> b
    return make_graph("d", "a", [("d", "c", 1), ("d", "b", 1), ("c", "b", 1),
                                 ("c", "a", 1), ("b", "a", 1)])


@pytest.fixture
def textbook():
    return make_graph("s", "t", [
        ("s", "a", 16), ("s", "c", 13), ("a", "b", 12), ("c", "a", 4),
        ("b", "c", 9), ("c", "d", 14), ("d", "b", 7), ("b", "t", 20),
        ("d", "t", 4),
    ])
