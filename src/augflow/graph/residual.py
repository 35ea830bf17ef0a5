"""
    Residual graph construction
"""

from augflow.errors import FlowInvariantError


def add_reverse_edges(graph):
    """
        Pair every edge with a zero capacity reverse edge. Edges that already
        have a partner are skipped, so calling this twice is a no-op.
        Returns the number of reverse edges created.
    """
    created = 0
    for vertex in graph.sorted_vertices():
        # partners are inserted into other vertices' lists, copy before iterating
        for edge_id in list(vertex.edges):
            edge = graph.edges[edge_id]
            if edge.is_reverse and edge.reverse is None:
                raise FlowInvariantError(
                    "Reverse edge {} -> {} (id {}) has no partner".format(
                        edge.source, edge.target, edge.id))
            if edge.reverse is not None:
                continue
            graph.add_reverse_edge(edge.id)
            created += 1
    graph.residual = True
    return created
