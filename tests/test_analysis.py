"""Tests for the algorithm registry and engine comparison."""

import logging

import pytest

from netroute.analysis import (
    ALGORITHMS,
    AlgorithmSummary,
    compare_algorithms,
    get_algorithm,
    run_algorithm,
)
from netroute.lib.algorithms.base import RouteAlg
from netroute.lib.algorithms.bgp import StaticAttributeGenerator


class TestRegistry:
    def test_all_engines_registered(self):
        assert set(ALGORITHMS) == {RouteAlg.DIJKSTRA, RouteAlg.BELLMAN_FORD, RouteAlg.BGP}
        assert [spec.name for spec in ALGORITHMS.values()] == [
            "Dijkstra",
            "Bellman-Ford",
            "BGP",
        ]

    @pytest.mark.parametrize(
        "key,expected",
        [
            (RouteAlg.DIJKSTRA, "Dijkstra"),
            ("dijkstra", "Dijkstra"),
            ("Bellman-Ford", "Bellman-Ford"),
            ("BELLMAN_FORD", "Bellman-Ford"),
            (" bgp ", "BGP"),
        ],
    )
    def test_get_algorithm(self, key, expected):
        assert get_algorithm(key).name == expected

    def test_get_algorithm_unknown(self):
        with pytest.raises(ValueError, match="Unknown routing algorithm"):
            get_algorithm("ospfv3")


class TestRunAlgorithm:
    def test_run_by_name(self, six_node):
        nodes, edges = six_node
        result = run_algorithm("Bellman-Ford", nodes, edges, "A", "E")
        assert result.path == ["A", "B", "F", "E"]

    def test_engine_options_forwarded(self, six_node):
        nodes, edges = six_node
        result = run_algorithm(
            RouteAlg.BGP, nodes, edges, "A", "E", attributes=StaticAttributeGenerator()
        )
        assert result.path == ["A", "D", "E"]

    def test_same_source_and_destination_rejected(self, six_node):
        nodes, edges = six_node
        with pytest.raises(ValueError, match="must differ"):
            run_algorithm("Dijkstra", nodes, edges, "A", "A")

    def test_unknown_nodes_rejected(self, six_node):
        nodes, edges = six_node
        with pytest.raises(ValueError, match="Source node 'Z'"):
            run_algorithm("Dijkstra", nodes, edges, "Z", "A")
        with pytest.raises(ValueError, match="Destination node 'Z'"):
            run_algorithm("Dijkstra", nodes, edges, "A", "Z")


class TestCompareAlgorithms:
    def test_scenario_comparison(self, six_node):
        nodes, edges = six_node
        report = compare_algorithms(
            nodes, edges, "A", "E", attributes=StaticAttributeGenerator()
        )
        assert [s.name for s in report.summaries] == ["Dijkstra", "Bellman-Ford", "BGP"]
        assert report.get("Dijkstra").total_cost == 8
        assert report.get("Bellman-Ford").total_cost == 8
        assert report.get("BGP").total_cost == 9
        assert report.get("BGP").path_length == 3
        assert report.get("OSPF") is None
        assert report.agree_on_cost(["Dijkstra", "Bellman-Ford"])
        assert not report.agree_on_cost()

    def test_subset_in_given_order(self, line1):
        nodes, edges = line1
        report = compare_algorithms(nodes, edges, "A", "C", algorithms=["bgp", "dijkstra"])
        assert [s.name for s in report.summaries] == ["BGP", "Dijkstra"]
        assert report.agree_on_cost()

    def test_failing_engine_recorded(self, negative_triangle, caplog):
        nodes, edges = negative_triangle
        with caplog.at_level(logging.ERROR, logger="netroute"):
            report = compare_algorithms(
                nodes, edges, "A", "C", attributes=StaticAttributeGenerator()
            )
        failed = report.get("Bellman-Ford")
        assert failed.error is not None
        assert "negative cycle" in failed.error
        assert failed.result is None
        assert report.get("Dijkstra").error is None
        assert report.get("BGP").error is None
        assert "Bellman-Ford failed" in caplog.text

    def test_empty_selection_runs_nothing(self, six_node):
        nodes, edges = six_node
        report = compare_algorithms(nodes, edges, "A", "E", algorithms=[])
        assert report.summaries == []
        assert report.format_table() == ""

    def test_invalid_query_raises_before_running(self, six_node):
        nodes, edges = six_node
        with pytest.raises(ValueError):
            compare_algorithms(nodes, edges, "A", "A")

    def test_unreachable_destination(self, disconnected):
        nodes, edges = disconnected
        report = compare_algorithms(nodes, edges, "A", "D", algorithms=["Dijkstra"])
        summary = report.get("Dijkstra")
        assert summary.path_length == 0
        assert summary.to_dict()["total_cost"] is None

    def test_format_table(self, six_node):
        nodes, edges = six_node
        report = compare_algorithms(
            nodes, edges, "A", "E", attributes=StaticAttributeGenerator()
        )
        table = report.format_table()
        lines = table.splitlines()
        assert len(lines) == 5
        assert "Algorithm" in lines[0]
        assert "Execution Time" in lines[0]
        assert "-+-" in lines[1]
        assert "4 nodes" in lines[2]
        assert " ms" in lines[2]

    def test_format_table_error_row(self, negative_triangle):
        nodes, edges = negative_triangle
        report = compare_algorithms(nodes, edges, "A", "C", algorithms=["Bellman-Ford"])
        table = report.format_table()
        assert "N/A" in table
        assert "error: Graph contains negative cycle" in table

    def test_to_dict(self, line1):
        nodes, edges = line1
        data = compare_algorithms(nodes, edges, "A", "C", algorithms=["Dijkstra"]).to_dict()
        assert data["source"] == "A"
        assert data["destination"] == "C"
        assert data["summaries"][0]["total_cost"] == 3
        assert data["summaries"][0]["error"] is None


def test_summary_defaults():
    summary = AlgorithmSummary(name="BGP", error="boom")
    assert summary.to_dict()["total_cost"] is None
    assert summary.path_length == 0
