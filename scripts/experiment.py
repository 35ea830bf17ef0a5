"""
    Compare registered max flow solvers against NetworkX on random graphs
"""

import argparse
import csv
import string
import time

import networkx as nx
import numpy as np

from augflow.graph import FlowGraph
from augflow.solvers import SOLVER_REGISTRY
from augflow.utils.evaluation import check_flow
from augflow.utils.trace import RecordingReporter


def random_instance(rng, num_vertices, edge_prob, max_capacity):
    """
        Random digraph on single character labels, source first, target last
    """
    labels = list(string.ascii_letters[:num_vertices])
    edges = []
    for u in labels:
        for v in labels:
            if u != v and rng.random() < edge_prob:
                edges.append((u, v, int(rng.integers(1, max_capacity + 1))))
    return labels[0], labels[-1], edges


def build_graph(source, target, edges):
    graph = FlowGraph()
    for u, v, capacity in edges:
        graph.add_edge(u, v, capacity)
    graph.set_terminals(source, target)
    return graph


def experiment(args):
    """
        Metric:
        Max Flow: must match NetworkX for every solver
        Augmentations: number of augmenting paths
        Solve Time: wall time of solve()
    """
    rng = np.random.default_rng(args.seed)
    rows = []
    for trial in range(args.num_trials):
        source, target, edges = random_instance(rng, args.num_vertices, args.edge_prob, args.max_capacity)
        endpoints = {u for u, _, _ in edges} | {v for _, v, _ in edges}
        if source not in endpoints or target not in endpoints:
            continue
        reference = nx.DiGraph()
        reference.add_nodes_from([source, target])
        for u, v, capacity in edges:
            reference.add_edge(u, v, capacity=capacity)
        expected = nx.maximum_flow_value(reference, source, target)

        for name, solver_cls in sorted(SOLVER_REGISTRY.items()):
            graph = build_graph(source, target, edges)
            reporter = RecordingReporter()
            start_time = time.time()
            total_flow, _ = solver_cls(graph, reporter=reporter).solve()
            elapsed = time.time() - start_time
            check_flow(graph, total_flow)
            rows.append({
                "trial": trial,
                "solver": name,
                "max_flow": total_flow,
                "networkx": expected,
                "match": total_flow == expected,
                "augmentations": reporter.iterations,
                "time": elapsed,
            })
            print("trial: {} solver: {} flow: {} networkx: {} augmentations: {}".format(
                trial, name, total_flow, expected, reporter.iterations))

    with open(args.output, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=["trial", "solver", "max_flow", "networkx",
                                               "match", "augmentations", "time"])
        writer.writeheader()
        writer.writerows(rows)
    return rows


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--num_trials",
        type=int,
        default=20
    )
    parser.add_argument(
        "--num_vertices",
        type=int,
        default=12
    )
    parser.add_argument(
        "--edge_prob",
        type=float,
        default=0.3
    )
    parser.add_argument(
        "--max_capacity",
        type=int,
        default=20
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0
    )
    parser.add_argument(
        "--output",
        default="experiment.csv"
    )

    args = parser.parse_args()
    experiment(args)
