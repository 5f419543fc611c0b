import pytest

from maxflow.config import Settings
from maxflow.errors import ParseError
from maxflow.network import DenseNetwork, SparseNetwork
from maxflow.parsing import load_network, parse_edge_list, parse_file


def test_parse_edge_list():
    text = "4\n0 1 10\n0 2 10\n1 3 10\n2 3 10\n"
    assert parse_edge_list(text) == (4, [(0, 1, 10), (0, 2, 10), (1, 3, 10), (2, 3, 10)])


def test_parse_any_whitespace():
    assert parse_edge_list("3 0 1 5\t1 2   7") == (3, [(0, 1, 5), (1, 2, 7)])


def test_parse_node_count_only():
    assert parse_edge_list("2\n") == (2, [])


@pytest.mark.parametrize("text, message", [
    ("", "missing node count"),
    ("   \n", "missing node count"),
    ("four\n0 1 2", "node count"),
    ("0", "must be positive"),
    ("3\n0 1 5\n1 2", "incomplete edge after 1 edges"),
    ("3\n0 x 5", "edge 1 to"),
    ("3\n0 1 5\n1 2 2.5", "edge 2 capacity"),
    ("3\n0 3 5", "out of range"),
    ("3\n-1 2 5", "out of range"),
    ("3\n0 1 -5", "negative capacity"),
])
def test_parse_errors(text, message):
    with pytest.raises(ParseError, match=message):
        parse_edge_list(text)


def test_parse_file(tmp_path):
    path = tmp_path / "network.txt"
    path.write_text("2\n0 1 5\n")
    assert parse_file(str(path)) == (2, [(0, 1, 5)])


def test_parse_file_missing(tmp_path):
    with pytest.raises(OSError):
        parse_file(str(tmp_path / "missing.txt"))


def test_load_network_uses_settings(tmp_path):
    path = tmp_path / "network.txt"
    path.write_text("2\n0 1 5\n0 1 3\n")
    g = load_network(str(path), Settings(representation="sparse", duplicate_policy="sum"))
    assert isinstance(g, SparseNetwork)
    assert g.capacity(0, 1) == 8
    assert isinstance(load_network(str(path)), DenseNetwork)


def test_parse_file_not_utf8(tmp_path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\x00binary")
    with pytest.raises(ParseError, match="not valid UTF-8"):
        parse_file(str(path))
