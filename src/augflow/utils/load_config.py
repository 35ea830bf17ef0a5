"""
    Load config yaml, and return solver_config, graph_config and trace_config
"""

import logging

import yaml

from augflow.errors import FlowConfigError
from augflow.graph import DUPLICATE_POLICIES

DEFAULT_SOLVER_CONFIG = {"search_method": "DFS"}
DEFAULT_GRAPH_CONFIG = {"duplicate_edges": "reject"}
DEFAULT_TRACE_CONFIG = {"enabled": False, "level": "DEBUG", "show_reverse_edges": True}


def _section(data, name, defaults):
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise FlowConfigError("Config section {!r} must be a mapping".format(name))
    unknown = set(section) - set(defaults)
    if unknown:
        raise FlowConfigError("Unknown keys in config section {!r}: {}".format(
            name, ", ".join(sorted(unknown))))
    config = dict(defaults)
    config.update(section)
    return config


def parse_config(data):
    """
        Fill defaults into a config dict and validate values
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FlowConfigError("Config must be a mapping")

    solver_config = _section(data, "solver", DEFAULT_SOLVER_CONFIG)
    graph_config = _section(data, "graph", DEFAULT_GRAPH_CONFIG)
    trace_config = _section(data, "trace", DEFAULT_TRACE_CONFIG)

    if graph_config["duplicate_edges"] not in DUPLICATE_POLICIES:
        raise FlowConfigError("graph.duplicate_edges must be one of {}, got {!r}".format(
            ", ".join(DUPLICATE_POLICIES), graph_config["duplicate_edges"]))

    level = str(trace_config["level"]).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise FlowConfigError("Unknown trace level {!r}".format(trace_config["level"]))
    trace_config["level"] = level
    for key in ("enabled", "show_reverse_edges"):
        if not isinstance(trace_config[key], bool):
            raise FlowConfigError("trace.{} must be true or false, got {!r}".format(
                key, trace_config[key]))

    return solver_config, graph_config, trace_config


def load_config(yaml_path=None):
    if yaml_path is None:
        return parse_config({})
    try:
        with open(yaml_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise FlowConfigError("Cannot read config {}: {}".format(yaml_path, e)) from e
    except yaml.YAMLError as e:
        raise FlowConfigError("Invalid yaml in config {}: {}".format(yaml_path, e)) from e
    return parse_config(data)
