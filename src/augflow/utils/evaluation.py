"""
    Evaluate solution quality: capacity bounds, conservation, reverse edge
    pairing, and the minimum cut certifying optimality.
"""
from collections import deque

import numpy as np

from augflow.errors import FlowInvariantError


def incidence_matrix(graph):
    """
        Vertex x original-edge incidence matrix, +1 at the tail and -1 at
        the head. Rows follow sorted vertex labels, columns follow
        graph.iter_edges(include_reverse=False).
    """
    labels = sorted(graph.vertices)
    row = {label: i for i, label in enumerate(labels)}
    edges = list(graph.iter_edges(include_reverse=False))
    incidence = np.zeros((len(labels), len(edges)), dtype=np.int64)
    for j, edge in enumerate(edges):
        incidence[row[edge.source], j] += 1
        incidence[row[edge.target], j] -= 1
    return labels, incidence


def net_flow(graph):
    """
        Net outflow per vertex label
    """
    labels, incidence = incidence_matrix(graph)
    flows = np.array([edge.flow for edge in graph.iter_edges(include_reverse=False)], dtype=np.int64)
    if flows.size == 0:
        return {label: 0 for label in labels}
    net = incidence @ flows
    return {label: int(value) for label, value in zip(labels, net)}


def check_pairs(graph):
    for edge in graph.edges:
        if edge.reverse is None:
            raise FlowInvariantError("Edge {} -> {} (id {}) has no reverse edge".format(
                edge.source, edge.target, edge.id))
        partner = graph.edges[edge.reverse]
        if partner.reverse != edge.id:
            raise FlowInvariantError("Reverse link of edge id {} is not mutual".format(edge.id))
        forward = partner if edge.is_reverse else edge
        if edge.flow != -partner.flow:
            raise FlowInvariantError("Edge id {} flow {} does not mirror partner flow {}".format(
                edge.id, edge.flow, partner.flow))
        if edge.capacity + partner.capacity != forward.original_capacity:
            raise FlowInvariantError(
                "Edge id {} residual capacities {} + {} != original capacity {}".format(
                    edge.id, edge.capacity, partner.capacity, forward.original_capacity))


def check_flow(graph, total_flow):
    """
        Raise FlowInvariantError unless graph carries a valid flow of value
        total_flow from graph.source to graph.target.
    """
    check_pairs(graph)
    for edge in graph.iter_edges(include_reverse=False):
        if not 0 <= edge.flow <= edge.original_capacity:
            raise FlowInvariantError("Edge {} -> {} flow {} outside [0, {}]".format(
                edge.source, edge.target, edge.flow, edge.original_capacity))

    for label, value in net_flow(graph).items():
        if label == graph.source:
            expected = total_flow
        elif label == graph.target:
            expected = -total_flow
        else:
            expected = 0
        if value != expected:
            raise FlowInvariantError("Net outflow at {} is {}, expected {}".format(
                label, value, expected))
    return True


def min_cut(graph):
    """
        Source side of the minimum cut (vertices reachable from the source in
        the residual graph) and the original edges crossing it as
        (from, to, capacity). Only meaningful after solving.
    """
    reachable = {graph.source}
    open_list = deque([graph.source])
    while open_list:
        curr_node = open_list.popleft()
        for edge_id in graph.out_edges(curr_node):
            edge = graph.edges[edge_id]
            if edge.capacity > 0 and edge.target not in reachable:
                reachable.add(edge.target)
                open_list.append(edge.target)

    cut_edges = [(edge.source, edge.target, edge.original_capacity)
                 for edge in graph.iter_edges(include_reverse=False)
                 if edge.source in reachable and edge.target not in reachable]
    return reachable, cut_edges


def cut_capacity(cut_edges):
    return sum(capacity for _, _, capacity in cut_edges)
