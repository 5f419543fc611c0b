from .algorithms import (active_edges, augment, bfs, compute_max_flow, edmonds_karp,
                         flow_assignments, min_cut)
from .network import DenseNetwork, ResidualNetwork, SparseNetwork, build_network
