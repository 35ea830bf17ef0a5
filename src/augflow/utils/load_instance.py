"""
    Read flow instances from text and format solutions.

    Instance format, whitespace separated:
        <edge count> <source> <target>
        <from> <to> <capacity>   (one line per edge)
"""

from augflow.errors import FlowConfigError, FlowInputError
from augflow.graph import FlowGraph


def _tokenize(text):
    for line_no, line in enumerate(text.splitlines(), start=1):
        for token in line.split():
            yield line_no, token


def _parse_int(token, line_no, what):
    try:
        value = int(token)
    except ValueError:
        raise FlowInputError("{} must be an integer, got {!r}".format(what, token), line_no) from None
    if value < 0:
        raise FlowInputError("{} must be non-negative, got {}".format(what, value), line_no)
    return value


def parse_instance(text, duplicate_edges="reject"):
    """
        Build a FlowGraph with terminals set from instance text
    """
    tokens = _tokenize(text)

    def take(what):
        try:
            return next(tokens)
        except StopIteration:
            raise FlowInputError("unexpected end of input, expected {}".format(what)) from None

    line_no, token = take("edge count")
    num_edges = _parse_int(token, line_no, "edge count")
    _, source = take("source label")
    _, target = take("target label")

    graph = FlowGraph(duplicate_edges=duplicate_edges)
    for i in range(num_edges):
        line_no, u = take("source of edge {}".format(i + 1))
        _, v = take("target of edge {}".format(i + 1))
        line_no, token = take("capacity of edge {}".format(i + 1))
        capacity = _parse_int(token, line_no, "capacity")
        try:
            graph.add_edge(u, v, capacity)
        except FlowConfigError as e:
            raise FlowInputError(str(e), line_no) from e

    graph.set_terminals(source, target)
    return graph


def load_instance(fname, duplicate_edges="reject"):
    try:
        with open(fname, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FlowInputError("Cannot read instance {}: {}".format(fname, e)) from e
    return parse_instance(text, duplicate_edges=duplicate_edges)


def format_solution(total_flow, edge_flows):
    """
        Total flow, then "<from> <to> <flow>" per original edge
    """
    lines = [str(total_flow)]
    lines += ["{} {} {}".format(u, v, flow) for u, v, flow in edge_flows]
    return "\n".join(lines) + "\n"
