"""
    Max flow solvers. Solvers register themselves by name with
    register_solver.
"""

from augflow.errors import FlowConfigError
from .solver_base import MaxFlowSolverBase

SOLVER_REGISTRY = {}

def register_solver(name):
    def decorator(cls):
        SOLVER_REGISTRY[name] = cls
        return cls
    return decorator

def get_solver(name):
    try:
        return SOLVER_REGISTRY[name]
    except KeyError:
        raise FlowConfigError("Unknown search method {!r}, available: {}".format(
            name, ", ".join(sorted(SOLVER_REGISTRY)))) from None

def max_flow(graph, search_method="DFS", reporter=None):
    """
        Solve graph with the named solver, returns (total_flow, edge_flows)
    """
    solver = get_solver(search_method)(graph, reporter=reporter)
    return solver.solve()

# Initialize Solver Registry

from .dfs import DFSMaxFlowSolver
from .bfs import BFSMaxFlowSolver
