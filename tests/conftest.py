import pytest

from maxflow.network import build_network

# name: (n, edges, source, sink, max flow)
GRAPHS = {
    "parallel_paths": (4, [(0, 1, 10), (0, 2, 10), (1, 3, 10), (2, 3, 10)], 0, 3, 20),
    "single_edge": (2, [(0, 1, 5)], 0, 1, 5),
    "disconnected": (2, [], 0, 1, 0),
    "bottleneck_chain": (4, [(0, 1, 10), (1, 2, 1), (2, 3, 10)], 0, 3, 1),
    "clrs": (6, [(0, 1, 16), (0, 2, 13), (1, 3, 12), (2, 1, 4), (2, 4, 14),
                 (3, 2, 9), (3, 5, 20), (4, 3, 7), (4, 5, 4)], 0, 5, 23),
    "named_vertices": (6, [(0, 1, 3), (0, 2, 7), (1, 3, 3), (1, 4, 4), (2, 1, 5),
                           (2, 4, 3), (3, 4, 3), (3, 5, 2), (4, 5, 6)], 0, 5, 8),
    "antiparallel": (3, [(0, 1, 4), (1, 0, 3), (1, 2, 2), (0, 2, 1)], 0, 2, 3),
}


@pytest.fixture(params=["dense", "sparse"])
def representation(request):
    return request.param


@pytest.fixture
def make_network(representation):
    def make(n, edges, duplicate_policy="overwrite"):
        return build_network(n, edges, representation, duplicate_policy=duplicate_policy)
    return make


@pytest.fixture
def parallel_paths(make_network):
    n, edges, _, _, _ = GRAPHS["parallel_paths"]
    return make_network(n, edges)
