"""
    Ford-Fulkerson with depth-first augmenting path search
"""

from augflow.solvers import MaxFlowSolverBase, register_solver


@register_solver("DFS")
class DFSMaxFlowSolver(MaxFlowSolverBase):
    """
        Edges at each vertex are tried from the back of their (target, id)
        order, so the highest target label wins among equal choices.
    """
    def find_path(self):
        """
            DFS for a simple augmenting path, using an explicit stack.
            A vertex leaves the on-path set when the search backtracks over
            it, so it may be reached again through another prefix.
        """
        edges = self.graph.edges
        on_path = {self.source}
        path = []
        stack = [reversed(self.graph.out_edges(self.source))]

        while stack:
            edge_id = next(stack[-1], None)
            if edge_id is None:
                stack.pop()
                if path:
                    on_path.discard(edges[path.pop()].target)
                continue

            edge = edges[edge_id]
            if edge.capacity <= 0 or edge.target in on_path:
                continue
            path.append(edge_id)
            if edge.target == self.target:
                return path
            on_path.add(edge.target)
            stack.append(reversed(self.graph.out_edges(edge.target)))

        return None
