"""
    Base class for augmenting path max flow solvers
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from augflow.errors import FlowConfigError, FlowInvariantError
from augflow.graph import add_reverse_edges
from augflow.utils.trace import FlowReporter


class MaxFlowSolverBase(ABC):
    """
        Driver loop shared by all solvers: build the residual graph once,
        then search, compute bottleneck and update flow until no augmenting
        path is left. Subclasses only decide how a path is found.
    """
    def __init__(self, graph, reporter: Optional[FlowReporter] = None) -> None:
        if graph.source is None or graph.target is None:
            raise FlowConfigError("Source and target must be set before solving")
        self.graph = graph
        self.source = graph.source
        self.target = graph.target
        self.reporter = reporter if reporter is not None else FlowReporter()
        self.iterations = 0
        self.total_flow = 0
        self._result = None

    @abstractmethod
    def find_path(self) -> Optional[List[int]]:
        """
            Return an augmenting path as edge ids, or None if none exists
        """
        pass

    def bottleneck(self, path):
        """
            Min residual capacity along path
        """
        if not path:
            raise FlowInvariantError("Cannot compute bottleneck of an empty path")
        return min(self.graph.edges[edge_id].capacity for edge_id in path)

    def update_flow(self, path, amount):
        """
            Push amount along path, mirrored on every reverse edge
        """
        if amount < 0:
            raise FlowInvariantError("Flow change must be non-negative, got {}".format(amount))
        edges = self.graph.edges
        for edge_id in path:
            edge = edges[edge_id]
            if edge.capacity < amount:
                raise FlowInvariantError(
                    "Edge {} -> {} (id {}) has residual capacity {}, cannot push {}".format(
                        edge.source, edge.target, edge.id, edge.capacity, amount))

        for edge_id in path:
            edge = edges[edge_id]
            reverse = edges[edge.reverse]
            edge.flow += amount
            edge.capacity -= amount
            reverse.flow -= amount
            reverse.capacity += amount

    def solve(self) -> Tuple[int, List[Tuple[str, str, int]]]:
        """
            Run to completion. Returns total flow and the flow of every
            original (non-reverse) edge as (source, target, flow).
        """
        if self._result is not None:
            return self._result

        num_reverse = add_reverse_edges(self.graph)
        self.reporter.residual_built(self.graph, num_reverse)

        while True:
            path = self.find_path()
            if path is None:
                break
            self.reporter.path_found(self.graph, path)

            amount = self.bottleneck(path)
            self.reporter.bottleneck_found(amount)

            self.update_flow(path, amount)
            self.total_flow += amount
            self.iterations += 1
            self.reporter.flow_updated(self.graph, self.total_flow)

        self.reporter.finished(self.total_flow, self.iterations)
        self._result = (self.total_flow, self.graph.edge_flows())
        return self._result
