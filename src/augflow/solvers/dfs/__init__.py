from .max_flow import DFSMaxFlowSolver
