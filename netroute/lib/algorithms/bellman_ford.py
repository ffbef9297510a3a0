from __future__ import annotations

from time import perf_counter
from typing import Iterator, List, Optional, Sequence, Tuple

from netroute.lib.algorithms.base import INF, Cost, DistanceMap, PredecessorMap
from netroute.lib.algorithms.path_utils import resolve_path
from netroute.lib.algorithms.routing_table import build_routing_table
from netroute.lib.algorithms.types import AlgorithmResult
from netroute.lib.graph import Edge, Node, NodeID, RouteGraph, build_graph
from netroute.logging import get_logger

logger = get_logger(__name__)


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source.

    Attributes:
        edge: The (from, to) pair that could still be relaxed after the final
            relaxation pass.
    """

    def __init__(self, edge: Optional[Tuple[NodeID, NodeID]] = None) -> None:
        self.edge = edge
        msg = "Graph contains negative cycle"
        if edge is not None:
            msg += f" (edge {edge[0]} -> {edge[1]} still relaxable)"
        super().__init__(msg)


def _directed_arcs(
    graph: RouteGraph, edges: Optional[Sequence[Edge]] = None
) -> Iterator[Tuple[NodeID, NodeID, Cost]]:
    """Yield every undirected edge twice, once per direction.

    Arcs follow the order of edges when given, otherwise graph order. Weights
    always come from graph, so a repeated node pair uses its surviving weight.
    """
    if edges is None:
        pairs = list(graph.edges())
    else:
        pairs = [(edge.source, edge.target) for edge in edges]
    for u, v in pairs:
        weight = graph.weight(u, v)
        yield u, v, weight
        yield v, u, weight


def bellman_ford(
    graph: RouteGraph,
    src_node: NodeID,
    edges: Optional[Sequence[Edge]] = None,
) -> Tuple[DistanceMap, PredecessorMap, int]:
    """
    Compute shortest paths from src_node by repeated edge relaxation.

    Runs at most |V| - 1 passes over all edges (both directions) and stops
    early after a pass that changes nothing. A final scan then checks that no
    edge can still be relaxed.

    Args:
        graph: The topology (RouteGraph).
        src_node: The source node.
        edges: Edge list fixing the scan order of each pass. When two routes
            tie, the edge scanned first decides the predecessor. Defaults to
            graph order.

    Returns:
        A tuple of (distances, previous, iterations) where iterations is the
        number of relaxation passes performed.

    Raises:
        KeyError: If src_node does not exist in graph.
        NegativeCycleError: If a negative-weight cycle is reachable from src_node.
    """
    if src_node not in graph:
        raise KeyError(f"Source node '{src_node}' is not in the graph.")

    distances: DistanceMap = {node_id: INF for node_id in graph.nodes}
    previous: PredecessorMap = {node_id: None for node_id in graph.nodes}
    distances[src_node] = 0
    arcs: List[Tuple[NodeID, NodeID, Cost]] = list(_directed_arcs(graph, edges))
    iterations = 0

    for _ in range(len(distances) - 1):
        iterations += 1
        updated = False
        for u, v, weight in arcs:
            if distances[u] != INF and distances[u] + weight < distances[v]:
                distances[v] = distances[u] + weight
                previous[v] = u
                updated = True
        if not updated:
            break

    for u, v, weight in arcs:
        if distances[u] != INF and distances[u] + weight < distances[v]:
            logger.warning(
                "Negative cycle reachable from %s via edge %s -> %s", src_node, u, v
            )
            raise NegativeCycleError((u, v))

    logger.debug(
        "Bellman-Ford from %s converged after %d passes", src_node, iterations
    )
    return distances, previous, iterations


def distance_vector_path(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    source: NodeID,
    destination: NodeID,
) -> AlgorithmResult:
    """
    Run distance-vector style (Bellman-Ford) routing for one query.

    Each relaxation pass scans edges in the order given, both directions per
    edge, so input order decides between equal-cost routes.

    Args:
        nodes: Topology nodes.
        edges: Topology edges (undirected).
        source: Source node ID.
        destination: Destination node ID.

    Returns:
        AlgorithmResult with distances, predecessors, best path and routing table.

    Raises:
        NegativeCycleError: If a negative-weight cycle is reachable from source.
    """
    start = perf_counter()

    graph = build_graph(nodes, edges)
    distances, previous, iterations = bellman_ford(graph, source, edges)
    path = resolve_path(source, destination, previous)
    routing_table = build_routing_table(graph.nodes, distances, previous, source)

    return AlgorithmResult(
        distances=distances,
        previous=previous,
        path=path,
        routing_table=routing_table,
        execution_time=perf_counter() - start,
        iterations=iterations,
    )
