import logging
from collections import deque
from typing import Any, Dict, List, NamedTuple, Optional, Tuple

from .config import Settings
from .errors import FlowOverflowError, SourceSinkError
from .network import ResidualNetwork, build_network

logger = logging.getLogger(__name__)


class AugmentationStep(NamedTuple):
    path: List[int]
    bottleneck: int
    flow_so_far: int


class MinCut(NamedTuple):
    S: List[int]
    T: List[int]
    edges_S_to_T: List[Tuple[int, int]]


def bfs(network: ResidualNetwork, s: int, t: int) -> Optional[List[Optional[int]]]:
    """
        Shortest augmenting path search. Returns the predecessor map when t is
        reachable through edges with positive residual capacity, else None.
    """
    parent: List[Optional[int]] = [None]*network.n
    parent[s] = s
    q = deque([s])
    while q:
        u = q.popleft()
        for v in network.neighbors(u):
            if parent[v] is None and network.residual_capacity(u, v) > 0:
                parent[v] = u
                if v == t:
                    return parent
                q.append(v)
    return None


def augment(network: ResidualNetwork, parent: List[Optional[int]], s: int, t: int,
            flow_limit: Optional[int] = None, flow_so_far: int = 0) -> Tuple[int, List[int]]:
    """
        Push the bottleneck capacity along the path recorded in parent.
        Nothing is pushed when flow_so_far + bottleneck would exceed flow_limit.
    """
    path, v = [t], t
    bottleneck = None
    while v != s:
        u = parent[v]
        r = network.residual_capacity(u, v)
        bottleneck = r if bottleneck is None else min(bottleneck, r)
        path.append(u)
        v = u
    path.reverse()

    if flow_limit is not None and flow_so_far + bottleneck > flow_limit:
        raise FlowOverflowError(flow_so_far + bottleneck, flow_limit)

    for u, v in zip(path, path[1:]):
        network.push(u, v, bottleneck)
    return bottleneck, path


def compute_max_flow(network: ResidualNetwork, s: int, t: int, trace: bool = False,
                     flow_limit: Optional[int] = None) -> Tuple[int, List[AugmentationStep]]:
    network.check_node(s, "source")
    network.check_node(t, "sink")
    if s == t:
        raise SourceSinkError(f"source and sink are the same node ({s})")

    flow = 0
    steps: List[AugmentationStep] = []
    while True:
        parent = bfs(network, s, t)
        if parent is None:
            break
        bottleneck, path = augment(network, parent, s, t, flow_limit, flow)
        flow += bottleneck
        logger.debug("augmenting path %s bottleneck=%d flow=%d", path, bottleneck, flow)
        if trace:
            steps.append(AugmentationStep(path, bottleneck, flow))

    logger.info("max flow %d -> %d on %d nodes: %d", s, t, network.n, flow)
    return flow, steps


def active_edges(network: ResidualNetwork) -> List[Tuple[int, int, int, int]]:
    return [(u, v, network.flow(u, v), c) for u, v, c in network.edges() if network.flow(u, v) > 0]


def flow_assignments(network: ResidualNetwork) -> List[Tuple[int, int, int]]:
    return [(u, v, max(0, network.flow(u, v))) for u, v, _ in network.edges()]


def min_cut(network: ResidualNetwork, s: int) -> MinCut:
    seen = [False]*network.n
    dq = deque([s]); seen[s] = True
    while dq:
        u = dq.popleft()
        for v in network.neighbors(u):
            if not seen[v] and network.residual_capacity(u, v) > 0:
                seen[v] = True; dq.append(v)
    S = [i for i in range(network.n) if seen[i]]
    T = [i for i in range(network.n) if not seen[i]]
    crossing = [(u, v) for u, v, _ in network.edges() if seen[u] and not seen[v]]
    return MinCut(S, T, crossing)


def edmonds_karp(n: int, edges: List[Tuple[int, int, int]], s: int, t: int,
                 settings: Optional[Settings] = None) -> Dict[str, Any]:
    settings = settings or Settings()
    network = build_network(n, edges, settings.representation, settings.density_threshold,
                            settings.duplicate_policy)
    flow, steps = compute_max_flow(network, s, t, trace=True, flow_limit=settings.flow_limit)
    cut = min_cut(network, s)

    return {
        "max_flow": flow,
        "logs": [step._asdict() for step in steps],
        "flow_assignments": [{"u": u, "v": v, "flow": f} for u, v, f in flow_assignments(network)],
        "active_edges": [{"u": u, "v": v, "flow": f, "capacity": c} for u, v, f, c in active_edges(network)],
        "min_cut": cut._asdict()
    }
