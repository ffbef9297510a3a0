from __future__ import annotations

from time import perf_counter
from typing import List, Optional, Sequence, Tuple

from netroute.lib.algorithms.base import INF, DistanceMap, PredecessorMap
from netroute.lib.algorithms.path_utils import resolve_path
from netroute.lib.algorithms.routing_table import build_routing_table
from netroute.lib.algorithms.types import AlgorithmResult
from netroute.lib.graph import Edge, Node, NodeID, RouteGraph, build_graph
from netroute.logging import get_logger

logger = get_logger(__name__)


def spf(
    graph: RouteGraph,
    src_node: NodeID,
    dst_node: Optional[NodeID] = None,
) -> Tuple[DistanceMap, PredecessorMap, int]:
    """
    Compute shortest paths from a source node using Dijkstra's method.

    The next node to settle is found by a linear scan over the unvisited
    nodes, so ties are broken by graph insertion order (the first node with
    the minimal distance wins). Weights must be non-negative.

    Args:
        graph: The topology (RouteGraph).
        src_node: The source node from which to compute shortest paths.
        dst_node: If given, stop as soon as this node is settled. Distances
            of nodes not yet settled at that point are tentative.

    Returns:
        A tuple of (distances, previous, iterations):
          - distances: Every node's distance from src_node (inf if not reached).
          - previous: Every node's predecessor on its shortest path, or None.
          - iterations: Number of nodes settled (outer loop passes).

    Raises:
        KeyError: If src_node does not exist in graph.
    """
    adjacencies = graph._adj
    if src_node not in adjacencies:
        raise KeyError(f"Source node '{src_node}' is not in the graph.")

    distances: DistanceMap = {node_id: INF for node_id in adjacencies}
    previous: PredecessorMap = {node_id: None for node_id in adjacencies}
    distances[src_node] = 0
    unvisited: List[NodeID] = list(adjacencies)
    visited = set()
    iterations = 0

    while unvisited:
        iterations += 1

        current = unvisited[0]
        for node_id in unvisited[1:]:
            if distances[node_id] < distances[current]:
                current = node_id

        if distances[current] == INF:
            # Everything left is unreachable
            break

        for neighbor_id, attr in adjacencies[current].items():
            if neighbor_id in visited:
                continue
            new_distance = distances[current] + attr["weight"]
            if new_distance < distances[neighbor_id]:
                distances[neighbor_id] = new_distance
                previous[neighbor_id] = current

        visited.add(current)
        unvisited.remove(current)

        if current == dst_node:
            break

    logger.debug(
        "SPF from %s settled %d of %d nodes in %d passes",
        src_node,
        len(visited),
        len(adjacencies),
        iterations,
    )
    return distances, previous, iterations


def shortest_path(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    source: NodeID,
    destination: NodeID,
    stop_at_destination: bool = False,
) -> AlgorithmResult:
    """
    Run link-state style shortest-path-first routing for one query.

    By default the whole shortest-path tree is computed so that every routing
    table row carries a final cost. With stop_at_destination=True the search
    ends once the destination is settled; the path to the destination is
    still exact but other rows may hold tentative costs. iterations counts
    settled nodes, so a full run reports one pass per reachable node (plus one
    when unreachable nodes remain) even for a destination next to the source;
    an early stop reports only the passes up to the destination.

    Args:
        nodes: Topology nodes.
        edges: Topology edges (undirected).
        source: Source node ID.
        destination: Destination node ID.
        stop_at_destination: End the search early at the destination.

    Returns:
        AlgorithmResult with distances, predecessors, best path and routing table.
    """
    start = perf_counter()

    graph = build_graph(nodes, edges)
    distances, previous, iterations = spf(
        graph, source, destination if stop_at_destination else None
    )
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
