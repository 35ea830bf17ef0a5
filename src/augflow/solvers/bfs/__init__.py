from .max_flow import BFSMaxFlowSolver
