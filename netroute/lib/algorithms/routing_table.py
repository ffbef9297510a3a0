from __future__ import annotations

import math
from typing import Iterable, List, Sequence

from netroute.lib.algorithms.base import Cost, DistanceMap, PredecessorMap
from netroute.lib.algorithms.path_utils import resolve_path
from netroute.lib.algorithms.types import RoutingTableEntry
from netroute.lib.graph import NodeID


def routing_entry_for_path(path: Sequence[NodeID], cost: Cost) -> RoutingTableEntry:
    """
    Build a routing table row from a full source -> destination path.

    The next hop is the second node of the path; a single-node path uses its
    only node as both destination and next hop.
    """
    return RoutingTableEntry(
        destination=path[-1],
        next_hop=path[1] if len(path) > 1 else path[-1],
        cost=cost,
        hops=len(path) - 1,
        path=list(path),
    )


def build_routing_table(
    node_ids: Iterable[NodeID],
    distances: DistanceMap,
    previous: PredecessorMap,
    src_node: NodeID,
) -> List[RoutingTableEntry]:
    """
    Derive one routing table entry per reachable destination.

    Nodes are visited in the order given. The source itself and nodes with
    infinite distance are skipped, so an omitted node has no path from the
    source.

    Args:
        node_ids: All node IDs of the topology.
        distances: Shortest distance per node.
        previous: Predecessor per node.
        src_node: The router owning the table.

    Returns:
        Routing table entries in node order.
    """
    table: List[RoutingTableEntry] = []
    for node_id in node_ids:
        if node_id == src_node:
            continue
        cost = distances.get(node_id, math.inf)
        if math.isinf(cost):
            continue
        path = resolve_path(src_node, node_id, previous)
        if not path:
            continue
        table.append(routing_entry_for_path(path, cost))
    return table
