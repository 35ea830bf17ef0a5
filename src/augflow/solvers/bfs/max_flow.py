"""
    Shortest augmenting path (Edmonds-Karp) search
"""

from collections import deque

from augflow.solvers import MaxFlowSolverBase, register_solver


@register_solver("BFS")
class BFSMaxFlowSolver(MaxFlowSolverBase):
    def find_path(self):
        """
            BFS for finding augmenting path with the fewest edges
        """
        edges = self.graph.edges
        prev = {self.source: None}
        open_list = deque([self.source])

        while open_list:
            curr_node = open_list.popleft()

            for edge_id in self.graph.out_edges(curr_node):
                edge = edges[edge_id]
                if edge.target not in prev and edge.capacity > 0:
                    prev[edge.target] = edge_id

                    if edge.target == self.target:
                        path = []
                        while edge_id is not None:
                            path.append(edge_id)
                            edge_id = prev[edges[edge_id].source]
                        return path[::-1]
                    open_list.append(edge.target)

        return None
