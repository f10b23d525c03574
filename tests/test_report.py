import pytest

from routegraph.__main__ import main
from routegraph.config import AnalysisConfig
from routegraph.core.routegraph import pyroutegraph
from routegraph.operations.report import format_report, summarize_network


def test_summary_of_triangle(triangle_graph):
    summary = summarize_network(triangle_graph)
    assert summary.node_count == 3
    assert summary.edge_count == 3
    assert summary.max_degree == 2
    assert summary.average_degree == pytest.approx(2.0)
    assert summary.hubs == [("A", 2), ("B", 1), ("C", 0)]
    assert summary.is_power_law is False
    assert summary.average_path_length == pytest.approx(1.0)
    assert summary.degree_distribution == {2: 1, 1: 1, 0: 1}


def test_format_report(triangle_graph):
    text = format_report(summarize_network(triangle_graph))
    assert "Total airports: 3" in text
    assert "Maximum connections (degree): 2" in text
    assert "Average connections per airport: 2.00" in text
    assert "--- Top 10 Most Connected Airports ---" in text
    assert "1. A - 2 connections" in text
    assert "Does the degree distribution follow a power law? Likely no" in text
    assert "Average Path Length (in hops): 1.00" in text


def test_report_uses_configured_location_name(chain_graph):
    config = AnalysisConfig(iTop_n=1, sLocation_name="stations")
    text = format_report(summarize_network(chain_graph, config), config)
    assert "Total stations: 3" in text
    assert "--- Top 1 Most Connected Stations ---" in text
    assert "2. " not in text


def test_singular_noun_only_drops_one_trailing_s(chain_graph):
    config = AnalysisConfig(sLocation_name="bus")
    text = format_report(summarize_network(chain_graph, config), config)
    assert "Average connections per bus: 1.33" in text

    config = AnalysisConfig(sLocation_name="glasses")
    text = format_report(summarize_network(chain_graph, config), config)
    assert "Average connections per glasse: 1.33" in text


def test_facade_delegates():
    graph = pyroutegraph([("A", "B"), ("B", "C")], AnalysisConfig(iTop_n=2))
    assert graph.get_node_count() == 3
    assert graph.get_edge_count() == 2
    assert graph.calculate_degree_distribution() == {1: 2, 0: 1}
    assert graph.get_hubs() == [("A", 1), ("B", 1)]
    assert graph.analyze_power_law() is False
    assert graph.get_distance("A", "C") == 2
    assert graph.calculate_average_path_length() == pytest.approx(4 / 3)
    assert graph.summarize().node_count == 3


def test_cli_runs_pipeline(write_routes, tmp_path, capsys):
    path = write_routes("origin,destination\nA,B\nB,C\nA,C\nA,B\n")
    out = tmp_path / "out.csv"
    assert main([str(path), "--export", str(out)]) == 0
    captured = capsys.readouterr().out
    assert "Read 3 routes" in captured
    assert "Total airports: 3" in captured
    assert "Average Path Length (in hops): 1.00" in captured
    assert out.read_text().splitlines()[0] == "degree,count"


def test_cli_reports_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.csv"), "--export", str(tmp_path / "out.csv")]) == 1


def test_cli_rejects_negative_top(write_routes):
    with pytest.raises(SystemExit):
        main([str(write_routes("origin,destination\nA,B\n")), "--top", "-1"])
