"""
    Augmenting path max flow on residual graphs
"""

from augflow.errors import AugflowError, FlowConfigError, FlowInputError, FlowInvariantError
from augflow.graph import FlowGraph, add_reverse_edges
from augflow.solvers import SOLVER_REGISTRY, MaxFlowSolverBase, get_solver, max_flow

__version__ = "0.1.0"
