import random
from typing import Any, Dict, Optional

from .config import Settings
from .errors import InvalidNetworkError


def random_graph(n: int = 8, density: float = 0.3, cmin: int = 1, cmax: int = 20,
                 rng: Optional[random.Random] = None, settings: Optional[Settings] = None) -> Dict[str, Any]:
    settings = settings or Settings()
    settings.check_node_count(n)
    if not 0 <= density <= 1:
        raise InvalidNetworkError(f"density must be within [0, 1], got {density}")
    if not 1 <= cmin <= cmax:
        raise InvalidNetworkError(f"need 1 <= cmin <= cmax, got cmin={cmin} cmax={cmax}")

    rng = rng or random.Random()
    edges = []
    for u in range(n):
        for v in range(n):
            if u != v and rng.random() < density:
                edges.append({"u": u, "v": v, "capacity": rng.randint(cmin, cmax)})
    # at least one edge out of the source and one into the sink
    if not any(e["u"] == 0 for e in edges):
        edges.append({"u": 0, "v": rng.randint(1, n-1), "capacity": rng.randint(cmin, cmax)})
    if not any(e["v"] == n-1 for e in edges):
        edges.append({"u": rng.randint(0, n-2), "v": n-1, "capacity": rng.randint(cmin, cmax)})
    return {"n": n, "edges": edges, "source": 0, "sink": n-1}
