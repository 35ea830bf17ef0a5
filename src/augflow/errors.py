"""
    Exceptions raised by augflow
"""


class AugflowError(Exception):
    pass


class FlowConfigError(AugflowError, ValueError):
    """
        Graph or configuration is inconsistent, e.g. unknown vertex,
        source equal to target, or a rejected duplicate edge.
    """
    pass


class FlowInputError(FlowConfigError):
    """
        Textual instance could not be parsed.
    """
    def __init__(self, message, line=None):
        if line is not None:
            message = "line {}: {}".format(line, message)
        super().__init__(message)
        self.line = line


class FlowInvariantError(AugflowError, RuntimeError):
    """
        Internal invariant broken. Indicates a logic defect, never clamped.
    """
    pass
