"""
    Flow graph model. Edges live in an arena indexed by integer id, and each
    edge refers to its reverse partner by id.
"""

from typing import Dict, List, Optional

from augflow.errors import FlowConfigError

DUPLICATE_POLICIES = ("reject", "merge", "parallel")


class Edge:
    """
        Directed edge in the residual graph
    """
    def __init__(self, edge_id, source, target, capacity, is_reverse=False) -> None:
        self.id = edge_id
        self.source = source
        self.target = target
        self.capacity = capacity # residual capacity
        self.original_capacity = capacity
        self.flow = 0
        self.is_reverse = is_reverse
        self.reverse: Optional[int] = None

    def __repr__(self) -> str:
        return "Edge({}: {} -> {}, capacity={}, flow={})".format(
            self.id, self.source, self.target, self.capacity, self.flow)


class Vertex:
    def __init__(self, label) -> None:
        self.label = label
        self.edges: List[int] = [] # outgoing edge ids, sorted by (target, id)


class FlowGraph:
    """
        Directed capacitated graph with designated source and target.
    """
    def __init__(self, duplicate_edges="reject") -> None:
        if duplicate_edges not in DUPLICATE_POLICIES:
            raise FlowConfigError(
                "Unknown duplicate edge policy {!r}, expected one of {}".format(
                    duplicate_edges, ", ".join(DUPLICATE_POLICIES)))
        self.duplicate_edges = duplicate_edges
        self.vertices: Dict[str, Vertex] = {}
        self.edges: List[Edge] = []
        self.source = None
        self.target = None
        self.residual = False
        self._forward_index: Dict[tuple, int] = {}

    def _get_or_create_vertex(self, label):
        vertex = self.vertices.get(label)
        if vertex is None:
            vertex = Vertex(label)
            self.vertices[label] = vertex
        return vertex

    def _insert_edge(self, edge):
        vertex = self.vertices[edge.source]
        vertex.edges.append(edge.id)
        vertex.edges.sort(key=lambda e: (self.edges[e].target, e))

    def add_edge(self, source, target, capacity):
        """
            Add forward edge source -> target. Vertices are created on first
            reference. Returns the id of the edge carrying the capacity.
        """
        if self.residual:
            raise FlowConfigError("Cannot add edges after residual graph construction")
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0:
            raise FlowConfigError(
                "Capacity of edge {} -> {} must be a non-negative integer, got {!r}".format(
                    source, target, capacity))

        key = (source, target)
        if key in self._forward_index:
            if self.duplicate_edges == "reject":
                raise FlowConfigError("Duplicate edge {} -> {}".format(source, target))
            if self.duplicate_edges == "merge":
                edge = self.edges[self._forward_index[key]]
                edge.capacity += capacity
                edge.original_capacity += capacity
                return edge.id

        self._get_or_create_vertex(source)
        self._get_or_create_vertex(target)
        edge = Edge(len(self.edges), source, target, capacity)
        self.edges.append(edge)
        self._insert_edge(edge)
        self._forward_index.setdefault(key, edge.id)
        return edge.id

    def add_reverse_edge(self, edge_id):
        """
            Create the zero capacity partner of edge_id and link both.
        """
        edge = self.edges[edge_id]
        reverse = Edge(len(self.edges), edge.target, edge.source, 0, is_reverse=True)
        self.edges.append(reverse)
        reverse.reverse = edge.id
        edge.reverse = reverse.id
        self._insert_edge(reverse)
        return reverse.id

    def get_vertex(self, label):
        try:
            return self.vertices[label]
        except KeyError:
            raise FlowConfigError("no such vertex: {!r}".format(label)) from None

    def set_terminals(self, source, target):
        """
            Designate source and target. Both must appear in some edge.
        """
        self.get_vertex(source)
        self.get_vertex(target)
        if source == target:
            raise FlowConfigError("Source and target must differ, got {!r} for both".format(source))
        self.source = source
        self.target = target

    def out_edges(self, label):
        return self.get_vertex(label).edges

    def sorted_vertices(self):
        return [self.vertices[label] for label in sorted(self.vertices)]

    def iter_edges(self, include_reverse=True):
        """
            Edges grouped by source label, each group in deterministic order
        """
        for vertex in self.sorted_vertices():
            for edge_id in vertex.edges:
                edge = self.edges[edge_id]
                if edge.is_reverse and not include_reverse:
                    continue
                yield edge

    def edge_flows(self):
        return [(edge.source, edge.target, edge.flow)
                for edge in self.iter_edges(include_reverse=False)]

    def describe(self, include_reverse=True):
        """
            One line per edge with capacity, flow and reverse flag
        """
        lines = []
        for edge in self.iter_edges(include_reverse):
            lines.append("{} {} {{capacity: {}, flow: {}, isReverseEdge: {}}}".format(
                edge.source, edge.target, edge.capacity, edge.flow,
                "true" if edge.is_reverse else "false"))
        return "\n".join(lines)

    def __len__(self):
        return len(self.vertices)
