import csv

import pytest

from maxflow.cli import CSV_FIELDS, main, process_file
from maxflow.config import CONFIG_ENV, Settings

PARALLEL = "4\n0 1 10\n0 2 10\n1 3 10\n2 3 10\n"
CHAIN = "4\n0 1 10\n1 2 1\n2 3 10\n"


@pytest.fixture(autouse=True)
def no_config(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV, raising=False)


@pytest.fixture
def inputs(tmp_path):
    a = tmp_path / "parallel.txt"
    a.write_text(PARALLEL)
    b = tmp_path / "chain.txt"
    b.write_text(CHAIN)
    return a, b


def read_rows(path):
    with open(path, newline="") as f:
        return list(csv.DictReader(f))


def test_process_file_verbose(inputs, capsys):
    report = process_file(str(inputs[0]), Settings())
    assert (report.nodes, report.edges, report.max_flow) == (4, 4, 20)
    assert report.ok
    out = capsys.readouterr().out
    assert "Network loaded with 4 nodes and 4 edges" in out
    assert "Path: 0 → 1 → 3, Flow added: 10, Total flow: 10" in out
    assert "Path: 0 → 2 → 3, Flow added: 10, Total flow: 20" in out
    assert "Maximum Flow: 20" in out
    assert "Edge (0,1): Flow = 10 / Capacity = 10" in out


def test_process_file_hides_flow_of_large_networks(inputs, capsys):
    process_file(str(inputs[0]), Settings(flow_print_node_limit=3))
    assert "Final Flow Distribution" not in capsys.readouterr().out


def test_process_file_quiet(inputs, capsys):
    report = process_file(str(inputs[1]), Settings(), verbose=False)
    assert report.max_flow == 1
    assert capsys.readouterr().out == ""


def test_process_file_custom_terminals(inputs):
    assert process_file(str(inputs[1]), Settings(), False, source=1, sink=2).max_flow == 1


def test_process_file_failures(tmp_path):
    missing = process_file(str(tmp_path / "missing.txt"), Settings(), verbose=False)
    assert not missing.ok
    assert (missing.file, missing.max_flow) == ("missing.txt", 0)

    bad = tmp_path / "bad.txt"
    bad.write_text("3\n0 1")
    assert not process_file(str(bad), Settings(), verbose=False).ok

    same = tmp_path / "same.txt"
    same.write_text("2\n0 1 4")
    assert not process_file(str(same), Settings(), False, source=1, sink=1).ok


def test_main_writes_csv_for_several_files(inputs, tmp_path, capsys):
    out = tmp_path / "results.csv"
    assert main([str(inputs[0]), str(inputs[1]), "--csv", str(out)]) == 0
    rows = read_rows(out)
    assert list(rows[0]) == list(CSV_FIELDS.values())
    assert [(r["File"], r["Nodes"], r["Edges"], r["Max Flow"]) for r in rows] == [
        ("parallel.txt", "4", "4", "20"), ("chain.txt", "4", "3", "1")]
    assert "Results saved to" in capsys.readouterr().out


def test_main_directory(inputs, tmp_path, capsys):
    out = tmp_path / "results.csv"
    assert main(["-d", str(tmp_path), "-q", "--csv", str(out)]) == 0
    rows = read_rows(out)
    assert [r["File"] for r in rows] == ["chain.txt", "parallel.txt"]
    assert "Max Flow = 20" in capsys.readouterr().out


def test_main_benchmark_files(tmp_path, monkeypatch):
    (tmp_path / "ladder_2.txt").write_text(PARALLEL)
    (tmp_path / "bridge_1.txt").write_text("2\n0 1 5\n")
    (tmp_path / "other.txt").write_text("2\n0 1 9\n")
    monkeypatch.chdir(tmp_path)
    assert main(["-a", "--representation", "sparse"]) == 0
    rows = read_rows(tmp_path / "network_flow_results.csv")
    assert [(r["File"], r["Max Flow"]) for r in rows] == [("bridge_1.txt", "5"), ("ladder_2.txt", "20")]


def test_main_single_file_no_csv(inputs, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main([str(inputs[0])]) == 0
    assert not (tmp_path / "network_flow_results.csv").exists()


def test_main_reports_failures(inputs, tmp_path):
    out = tmp_path / "results.csv"
    missing = str(tmp_path / "missing.txt")
    assert main([str(inputs[0]), missing, "--csv", str(out)]) == 1
    assert read_rows(out)[1]["Max Flow"] == "0"


def test_main_no_matching_files(tmp_path, capsys):
    empty = tmp_path / "empty"
    empty.mkdir()
    assert main(["-d", str(empty)]) == 2
    assert "No files to process" in capsys.readouterr().out


def test_main_default_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "network.txt").write_text("2\n0 1 5\n")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Running with default file 'network.txt'" in out
    assert "Maximum Flow: 5" in out


def test_main_config_file(inputs, tmp_path):
    config = tmp_path / "maxflow.yaml"
    config.write_text("flow_limit: 15\n")
    assert main([str(inputs[0]), "--config", str(config)]) == 1


def test_main_directory_with_binary_file(tmp_path, capsys):
    (tmp_path / "a.txt").write_text(CHAIN)
    (tmp_path / "b.txt").write_bytes(b"\xff\xfe\x00binary")
    out = tmp_path / "results.csv"
    assert main(["-d", str(tmp_path), "-q", "--csv", str(out)]) == 1
    rows = read_rows(out)
    assert [(r["File"], r["Max Flow"]) for r in rows] == [("a.txt", "1"), ("b.txt", "0")]
