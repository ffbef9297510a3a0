from __future__ import annotations

from typing import List, Sequence

from netroute.lib.algorithms.base import Cost, PredecessorMap
from netroute.lib.graph import NodeID, RouteGraph


def resolve_path(
    src_node: NodeID,
    dst_node: NodeID,
    previous: PredecessorMap,
) -> List[NodeID]:
    """
    Rebuild the src_node -> dst_node path by walking predecessor links.

    Args:
        src_node: Source node ID.
        dst_node: Destination node ID.
        previous: Predecessor map from SPF or Bellman-Ford.

    Returns:
        Node IDs from src_node to dst_node, or an empty list when the walk
        does not arrive at src_node (destination unreachable).
    """
    path: List[NodeID] = []
    seen = set()
    current = dst_node
    while current is not None and current not in seen:
        seen.add(current)
        path.append(current)
        current = previous.get(current)
    path.reverse()

    if not path or path[0] != src_node:
        return []
    return path


def path_cost(graph: RouteGraph, path: Sequence[NodeID]) -> Cost:
    """
    Sum link weights along consecutive nodes of path.

    Links are undirected, so (u, v) and (v, u) resolve to the same weight.

    Raises:
        KeyError: If two consecutive nodes are not adjacent.
    """
    total: Cost = 0
    for u, v in zip(path, path[1:]):
        total += graph.weight(u, v)
    return total
