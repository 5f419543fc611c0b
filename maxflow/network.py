"""
    Residual networks for Edmonds-Karp.

    Both representations keep capacity and flow for every ordered pair that
    has ever been registered (forward edge or residual reverse). Flow is
    skew-symmetric: flow(u, v) == -flow(v, u).
"""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Tuple

from .errors import (DuplicateEdgeError, InvalidCapacityError,
                     InvalidNetworkError, NodeIndexError)

DUPLICATE_POLICIES = ("overwrite", "sum", "reject")


class ResidualNetwork(ABC):
    def __init__(self, n: int, duplicate_policy: str = "overwrite"):
        if n < 1:
            raise InvalidNetworkError(f"node count must be positive, got {n}")
        if duplicate_policy not in DUPLICATE_POLICIES:
            raise InvalidNetworkError(f"unknown duplicate policy {duplicate_policy!r}")
        self.n = n
        self.duplicate_policy = duplicate_policy

    def check_node(self, u: int, role: str = "node"):
        if not 0 <= u < self.n:
            raise NodeIndexError(u, self.n, role)

    def register_edge(self, u: int, v: int, capacity: int):
        self.check_node(u, "from")
        self.check_node(v, "to")
        if capacity < 0:
            raise InvalidCapacityError(f"edge ({u}, {v}) has negative capacity {capacity}")

        current = self.capacity(u, v)
        if current > 0:
            if self.duplicate_policy == "reject":
                raise DuplicateEdgeError(u, v)
            if self.duplicate_policy == "sum":
                capacity += current
        self._set_capacity(u, v, capacity)

    def residual_capacity(self, u: int, v: int) -> int:
        return self.capacity(u, v) - self.flow(u, v)

    def edges(self) -> Iterator[Tuple[int, int, int]]:
        """(u, v, capacity) for every edge with positive capacity, row-major."""
        for u in range(self.n):
            for v in sorted(self.neighbors(u)):
                c = self.capacity(u, v)
                if c > 0:
                    yield u, v, c

    def edge_count(self) -> int:
        return sum(1 for _ in self.edges())

    @abstractmethod
    def _set_capacity(self, u: int, v: int, capacity: int):
        """Store the capacity and link u and v in both adjacency lists."""

    @abstractmethod
    def capacity(self, u: int, v: int) -> int: ...

    @abstractmethod
    def flow(self, u: int, v: int) -> int: ...

    @abstractmethod
    def neighbors(self, u: int) -> List[int]: ...

    @abstractmethod
    def push(self, u: int, v: int, amount: int): ...


class DenseNetwork(ResidualNetwork):
    """Capacity and flow matrices, O(n^2) memory."""

    def __init__(self, n: int, duplicate_policy: str = "overwrite"):
        super().__init__(n, duplicate_policy)
        self.cap = [[0]*n for _ in range(n)]
        self.flw = [[0]*n for _ in range(n)]
        self.adj = [[] for _ in range(n)]
        self._linked = [set() for _ in range(n)]

    def _link(self, u, v):
        if v not in self._linked[u]:
            self._linked[u].add(v)
            self.adj[u].append(v)

    def _set_capacity(self, u, v, capacity):
        self.cap[u][v] = capacity
        self._link(u, v); self._link(v, u)

    def capacity(self, u, v):
        return self.cap[u][v]

    def flow(self, u, v):
        return self.flw[u][v]

    def residual_capacity(self, u, v):
        return self.cap[u][v] - self.flw[u][v]

    def neighbors(self, u):
        return self.adj[u]

    def push(self, u, v, amount):
        self.flw[u][v] += amount
        self.flw[v][u] -= amount

    def edges(self):
        for u in range(self.n):
            row = self.cap[u]
            for v in range(self.n):
                if row[v] > 0:
                    yield u, v, row[v]


class SparseNetwork(ResidualNetwork):
    """
        Edge list with a per-node index, O(n + m) memory.

        Every registered pair (u, v) owns an arc and a twin arc (v, u); an arc
        created as a twin is reused when (v, u) is later registered as an edge.
    """

    def __init__(self, n: int, duplicate_policy: str = "overwrite"):
        super().__init__(n, duplicate_policy)
        self.head: List[int] = []
        self.cap: List[int] = []
        self.flw: List[int] = []
        self.twin: List[int] = []
        self.index = [dict() for _ in range(n)]

    def _new_arc(self, u, v):
        arc = len(self.head)
        self.head.append(v)
        self.cap.append(0)
        self.flw.append(0)
        self.twin.append(-1)
        self.index[u][v] = arc
        return arc

    def _arc(self, u, v):
        arc = self.index[u].get(v)
        if arc is None:
            arc = self._new_arc(u, v)
            if u == v:
                self.twin[arc] = arc
            else:
                back = self._new_arc(v, u)
                self.twin[arc] = back
                self.twin[back] = arc
        return arc

    def _set_capacity(self, u, v, capacity):
        self.cap[self._arc(u, v)] = capacity

    def capacity(self, u, v):
        arc = self.index[u].get(v)
        return 0 if arc is None else self.cap[arc]

    def flow(self, u, v):
        arc = self.index[u].get(v)
        return 0 if arc is None else self.flw[arc]

    def neighbors(self, u):
        return list(self.index[u])

    def push(self, u, v, amount):
        arc = self.index[u][v]
        self.flw[arc] += amount
        self.flw[self.twin[arc]] -= amount


def density(n: int, m: int) -> float:
    return m / float(n * n) if n > 0 else 0.0


def build_network(n: int, edges: Iterable[Tuple[int, int, int]], representation: str = "auto",
                  density_threshold: float = 0.1, duplicate_policy: str = "overwrite") -> ResidualNetwork:
    edges = list(edges)
    if representation == "auto":
        representation = "dense" if n > 0 and density(n, len(edges)) >= density_threshold else "sparse"

    if representation == "dense":
        network = DenseNetwork(n, duplicate_policy)
    elif representation == "sparse":
        network = SparseNetwork(n, duplicate_policy)
    else:
        raise InvalidNetworkError(f"unknown representation {representation!r}")

    for u, v, c in edges:
        network.register_edge(u, v, c)
    return network
