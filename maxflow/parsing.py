"""
    Edge-list input: the node count followed by `from to capacity` triples,
    separated by any whitespace.
"""

import logging
from typing import List, Optional, Tuple

from .config import Settings
from .errors import ParseError
from .network import ResidualNetwork, build_network

logger = logging.getLogger(__name__)


def _to_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ParseError(f"{what}: expected an integer, got {token!r}") from None


def parse_edge_list(text: str) -> Tuple[int, List[Tuple[int, int, int]]]:
    tokens = text.split()
    if not tokens:
        raise ParseError("missing node count")

    n = _to_int(tokens[0], "node count")
    if n < 1:
        raise ParseError(f"node count must be positive, got {n}")

    body = tokens[1:]
    if len(body) % 3:
        raise ParseError(f"incomplete edge after {len(body) // 3} edges")

    edges = []
    for i in range(0, len(body), 3):
        k = i // 3 + 1
        u = _to_int(body[i], f"edge {k} from")
        v = _to_int(body[i + 1], f"edge {k} to")
        c = _to_int(body[i + 2], f"edge {k} capacity")
        if not (0 <= u < n and 0 <= v < n):
            raise ParseError(f"edge {k} ({u}, {v}) out of range [0, {n})")
        if c < 0:
            raise ParseError(f"edge {k} ({u}, {v}) has negative capacity {c}")
        edges.append((u, v, c))

    logger.debug("parsed %d nodes, %d edges", n, len(edges))
    return n, edges


def decode_input(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"input is not valid UTF-8 text: {e}") from e


def parse_file(path: str) -> Tuple[int, List[Tuple[int, int, int]]]:
    with open(path, "rb") as f:
        return parse_edge_list(decode_input(f.read()))


def load_network(path: str, settings: Optional[Settings] = None) -> ResidualNetwork:
    settings = settings or Settings()
    n, edges = parse_file(path)
    return build_network(n, edges, settings.representation, settings.density_threshold,
                         settings.duplicate_policy)
