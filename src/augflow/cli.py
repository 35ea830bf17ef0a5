"""
    Command line entry point: read an instance, print max flow and per-edge
    flows. Any extra argument turns on the solver trace.
"""

import argparse
import logging
import sys

from augflow.errors import FlowConfigError, FlowInputError, FlowInvariantError
from augflow.solvers import get_solver
from augflow.utils.load_config import load_config
from augflow.utils.load_instance import format_solution, load_instance, parse_instance
from augflow.utils.trace import FlowReporter, LoggingReporter


def build_parser():
    parser = argparse.ArgumentParser(
        prog="augflow",
        description="Maximum flow by augmenting paths on a residual graph"
    )
    parser.add_argument(
        "--input", "-i",
        help="instance file, reads stdin when omitted"
    )
    parser.add_argument(
        "--config", "-c",
        help="yaml config file"
    )
    parser.add_argument(
        "--search-method",
        help="registered solver name, overrides the config"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="trace residual graph, augmenting paths and flow updates"
    )
    parser.add_argument(
        "--plot",
        help="save a drawing of the solved graph to this file"
    )
    parser.add_argument(
        "extra",
        nargs="*",
        help="any extra argument enables the trace"
    )
    return parser


def run(args, stdin=None, stdout=None):
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    solver_config, graph_config, trace_config = load_config(args.config)
    if args.search_method:
        solver_config["search_method"] = args.search_method
    if args.debug or args.extra:
        trace_config["enabled"] = True

    if trace_config["enabled"]:
        level = logging.getLevelName(trace_config["level"])
        logging.basicConfig(stream=sys.stderr, level=level, format="%(message)s")
        reporter = LoggingReporter(level=level,
                                   show_reverse_edges=trace_config["show_reverse_edges"])
    else:
        reporter = FlowReporter()

    duplicate_edges = graph_config["duplicate_edges"]
    if args.input:
        graph = load_instance(args.input, duplicate_edges=duplicate_edges)
    else:
        try:
            text = stdin.read()
        except UnicodeDecodeError as e:
            raise FlowInputError("Cannot read instance from stdin: {}".format(e)) from e
        graph = parse_instance(text, duplicate_edges=duplicate_edges)

    solver_cls = get_solver(solver_config["search_method"])
    solver = solver_cls(graph, reporter=reporter)
    total_flow, edge_flows = solver.solve()
    stdout.write(format_solution(total_flow, edge_flows))

    if args.plot:
        from augflow.utils.visualize import visualize_flow
        visualize_flow(graph, args.plot)
    return total_flow


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        run(args)
    except FlowConfigError as e:
        print("augflow: error: {}".format(e), file=sys.stderr)
        return 1
    except FlowInvariantError as e:
        print("augflow: internal error: {}".format(e), file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
