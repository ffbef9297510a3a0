"""NetRoute: routing-decision engine for weighted, undirected networks.

NetRoute computes best paths and per-destination routing tables with three
interchangeable strategies that all return an ``AlgorithmResult``:

    shortest_path()        - Dijkstra, link-state style (OSPF-like)
    distance_vector_path() - Bellman-Ford with negative-cycle detection (RIP-like)
    select_policy_path()   - BGP-style best-path election over candidate paths

Example:
    from netroute import Edge, Node, shortest_path

    nodes = [Node("A"), Node("B"), Node("C")]
    edges = [Edge("A-B", "A", "B", 1), Edge("B-C", "B", "C", 2)]
    result = shortest_path(nodes, edges, "A", "C")
    result.path            # ["A", "B", "C"]
    result.routing_table   # one RoutingTableEntry per reachable node
"""

from __future__ import annotations

from netroute import logging
from netroute._version import __version__
from netroute.analysis import (
    ALGORITHMS,
    AlgorithmSummary,
    ComparisonReport,
    compare_algorithms,
    get_algorithm,
    run_algorithm,
)
from netroute.config import ROUTING_CONFIG, RoutingConfig
from netroute.lib.algorithms.base import RouteAlg
from netroute.lib.algorithms.bellman_ford import NegativeCycleError, distance_vector_path
from netroute.lib.algorithms.bgp import (
    RandomAttributeGenerator,
    StaticAttributeGenerator,
    select_policy_path,
)
from netroute.lib.algorithms.spf import shortest_path
from netroute.lib.algorithms.types import AlgorithmResult, BGPPath, RoutingTableEntry
from netroute.lib.graph import Edge, Node, RouteGraph, build_adjacency, build_graph
from netroute.seed_manager import SeedManager

__all__ = [
    # Version
    "__version__",
    # Topology
    "Node",
    "Edge",
    "RouteGraph",
    "build_graph",
    "build_adjacency",
    # Engines
    "shortest_path",
    "distance_vector_path",
    "select_policy_path",
    "NegativeCycleError",
    "RandomAttributeGenerator",
    "StaticAttributeGenerator",
    # Results
    "AlgorithmResult",
    "RoutingTableEntry",
    "BGPPath",
    # Registry and comparison
    "RouteAlg",
    "ALGORITHMS",
    "get_algorithm",
    "run_algorithm",
    "compare_algorithms",
    "ComparisonReport",
    "AlgorithmSummary",
    # Configuration
    "RoutingConfig",
    "ROUTING_CONFIG",
    "SeedManager",
    # Utilities
    "logging",
]
