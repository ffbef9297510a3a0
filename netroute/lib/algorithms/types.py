"""Result types shared by all routing engines."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from netroute.lib.algorithms.base import Cost, DistanceMap, PredecessorMap
from netroute.lib.graph import NodeID


def _finite_or_none(value: Cost) -> Optional[Cost]:
    return None if math.isinf(value) else value


@dataclass(frozen=True)
class RoutingTableEntry:
    """One row of a source router's routing table.

    Attributes:
        destination: Destination node id.
        next_hop: Second node on the path from the source (the destination
            itself when it is directly adjacent).
        cost: Total path cost.
        hops: Number of links on the path.
        path: Full ordered path, source first.
    """

    destination: NodeID
    next_hop: NodeID
    cost: Cost
    hops: int
    path: List[NodeID]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "destination": self.destination,
            "next_hop": self.next_hop,
            "cost": self.cost,
            "hops": self.hops,
            "path": list(self.path),
        }


@dataclass(frozen=True)
class AlgorithmResult:
    """Uniform result returned by every routing engine.

    Attributes:
        distances: Shortest distance per node; unreachable nodes map to inf.
        previous: Predecessor per node, or None.
        path: Best path from source to destination; empty if unreachable.
        routing_table: One entry per reachable node other than the source.
        execution_time: Wall-clock duration of the call in seconds.
        iterations: Work counter (outer passes, relaxation passes or
            enumerated candidate paths, depending on the engine).
    """

    distances: DistanceMap
    previous: PredecessorMap
    path: List[NodeID]
    routing_table: List[RoutingTableEntry]
    execution_time: float
    iterations: int

    @property
    def reachable(self) -> bool:
        """True if a path to the destination was found."""
        return bool(self.path)

    @property
    def cost(self) -> Cost:
        """Distance recorded for the path's destination (inf if unreachable)."""
        if not self.path:
            return math.inf
        return self.distances[self.path[-1]]

    def entry_for(self, destination: NodeID) -> Optional[RoutingTableEntry]:
        """Return the routing table row for destination, if any."""
        for entry in self.routing_table:
            if entry.destination == destination:
                return entry
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dict; infinite distances become None."""
        return {
            "distances": {n: _finite_or_none(d) for n, d in self.distances.items()},
            "previous": dict(self.previous),
            "path": list(self.path),
            "routing_table": [entry.to_dict() for entry in self.routing_table],
            "execution_time": self.execution_time,
            "iterations": self.iterations,
        }


@dataclass(frozen=True)
class BGPPath:
    """A candidate path annotated with policy attributes.

    Built per candidate for a single (source, destination) query and thrown
    away once the election finishes.

    Attributes:
        path: Ordered node sequence, source first.
        cost: Sum of link weights along the path.
        local_pref: Simulated local preference (higher wins).
        as_path_length: Hop count (shorter wins).
        med: Simulated multi-exit discriminator (lower wins).
        igp_cost: Cost to reach the next-hop AS; equals cost in this model.
    """

    path: Tuple[NodeID, ...]
    cost: Cost
    local_pref: int
    as_path_length: int
    med: int
    igp_cost: Cost

    @property
    def destination(self) -> NodeID:
        return self.path[-1]
