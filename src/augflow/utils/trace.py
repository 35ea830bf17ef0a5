"""
    Reporters receive solver progress. They are a side channel only and
    never change the computed flow.
"""

import logging

logger = logging.getLogger("augflow")


def path_vertices(graph, path):
    """
        Vertex labels visited by a path of edge ids
    """
    if not path:
        return []
    labels = [graph.edges[edge_id].source for edge_id in path]
    labels.append(graph.edges[path[-1]].target)
    return labels


class FlowReporter:
    """
        No-op reporter. Subclass and override the hooks of interest.
    """
    def residual_built(self, graph, num_reverse_edges):
        pass

    def path_found(self, graph, path):
        pass

    def bottleneck_found(self, amount):
        pass

    def flow_updated(self, graph, total_flow):
        pass

    def finished(self, total_flow, iterations):
        pass


class LoggingReporter(FlowReporter):
    """
        Trace the solve through the "augflow" logger
    """
    def __init__(self, level=logging.DEBUG, show_reverse_edges=True, log=None) -> None:
        self.level = level
        self.show_reverse_edges = show_reverse_edges
        self.log = log if log is not None else logger

    def residual_built(self, graph, num_reverse_edges):
        self.log.log(self.level, "Adding reverse edges: %d created", num_reverse_edges)
        self.log.log(self.level, "Residual graph:\n%s", graph.describe(self.show_reverse_edges))
        self.log.log(self.level, "Searching a path.")

    def path_found(self, graph, path):
        self.log.log(self.level, "Path is found: %s", " ".join(map(str, path_vertices(graph, path))))

    def bottleneck_found(self, amount):
        self.log.log(self.level, "Min capacity = %d", amount)

    def flow_updated(self, graph, total_flow):
        self.log.log(self.level, "Modified graph:\n%s", graph.describe(self.show_reverse_edges))
        self.log.log(self.level, "Flow value = %d", total_flow)

    def finished(self, total_flow, iterations):
        self.log.log(self.level, "Path is not found - the algorithm is complete "
                     "(%d augmentations, flow %d).", iterations, total_flow)


class RecordingReporter(FlowReporter):
    """
        Keep per-iteration history: vertex paths, bottlenecks, running totals
    """
    def __init__(self) -> None:
        self.paths = []
        self.bottlenecks = []
        self.totals = []
        self.snapshots = []
        self.num_reverse_edges = None
        self.iterations = None

    def residual_built(self, graph, num_reverse_edges):
        self.num_reverse_edges = num_reverse_edges
        self.snapshots.append(self._snapshot(graph))

    def path_found(self, graph, path):
        self.paths.append(path_vertices(graph, path))

    def bottleneck_found(self, amount):
        self.bottlenecks.append(amount)

    def flow_updated(self, graph, total_flow):
        self.totals.append(total_flow)
        self.snapshots.append(self._snapshot(graph))

    def finished(self, total_flow, iterations):
        self.iterations = iterations

    @staticmethod
    def _snapshot(graph):
        return [(edge.id, edge.capacity, edge.flow) for edge in graph.edges]
