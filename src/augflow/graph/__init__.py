from .flow_graph import FlowGraph, Vertex, Edge, DUPLICATE_POLICIES
from .residual import add_reverse_edges
