class MaxFlowError(Exception):
    """Base class for every error raised by the maxflow package."""


class InvalidNetworkError(MaxFlowError, ValueError):
    pass


class NodeIndexError(MaxFlowError, IndexError):
    def __init__(self, node: int, n: int, role: str = "node"):
        super().__init__(f"{role} {node} out of range [0, {n})")
        self.node = node
        self.n = n


class InvalidCapacityError(MaxFlowError, ValueError):
    pass


class DuplicateEdgeError(MaxFlowError, ValueError):
    def __init__(self, u: int, v: int):
        super().__init__(f"edge ({u}, {v}) registered twice")
        self.u = u
        self.v = v


class SourceSinkError(MaxFlowError, ValueError):
    pass


class FlowOverflowError(MaxFlowError, ArithmeticError):
    def __init__(self, value: int, limit: int):
        super().__init__(f"flow {value} exceeds limit {limit}")
        self.value = value
        self.limit = limit


class ParseError(MaxFlowError, ValueError):
    pass
