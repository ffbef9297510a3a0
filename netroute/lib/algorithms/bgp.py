"""Path-vector (BGP-style) policy path selection.

Candidate paths are enumerated exhaustively up to a hop limit, annotated with
policy attributes and ranked by the BGP decision process:

1. Highest local preference
2. Shortest AS path
3. Lowest MED
4. Lowest IGP cost

Local preference and MED cannot be derived from topology alone; they come
from a pluggable attribute generator. The default one draws them at random,
so elections over paths that differ only in those attributes may vary from
call to call. Supply a seeded or static generator for reproducible results.
Ties that survive all four steps go to the lexicographically smallest node
sequence.
"""

from __future__ import annotations

import random
from time import perf_counter
from typing import (
    Callable,
    Dict,
    FrozenSet,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
)

from netroute.config import ROUTING_CONFIG
from netroute.lib.algorithms.base import INF, DistanceMap, PredecessorMap
from netroute.lib.algorithms.path_utils import path_cost
from netroute.lib.algorithms.routing_table import routing_entry_for_path
from netroute.lib.algorithms.types import AlgorithmResult, BGPPath, RoutingTableEntry
from netroute.lib.graph import Edge, Node, NodeID, RouteGraph, build_graph
from netroute.logging import get_logger
from netroute.seed_manager import SeedManager

logger = get_logger(__name__)

NodePath = Tuple[NodeID, ...]

#: Callable returning (local_pref, med) for a candidate path.
AttributeGenerator = Callable[[NodePath], Tuple[int, int]]


class RandomAttributeGenerator:
    """Draws local preference and MED uniformly from inclusive ranges.

    Each instance owns its own ``random.Random``; pass a seed (or use
    ``from_seed_manager``) for reproducible draws.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        local_pref_range: Optional[Tuple[int, int]] = None,
        med_range: Optional[Tuple[int, int]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.local_pref_range = local_pref_range or ROUTING_CONFIG.local_pref_range
        self.med_range = med_range or ROUTING_CONFIG.med_range
        self._rng = rng if rng is not None else random.Random(seed)

    @classmethod
    def from_seed_manager(
        cls, seed_manager: SeedManager, *components: object
    ) -> RandomAttributeGenerator:
        """Build a generator whose random state is derived from seed_manager."""
        return cls(rng=seed_manager.create_random_state("bgp_attributes", *components))

    def __call__(self, path: NodePath) -> Tuple[int, int]:
        local_pref = self._rng.randint(*self.local_pref_range)
        med = self._rng.randint(*self.med_range)
        return local_pref, med


class StaticAttributeGenerator:
    """Returns fixed attributes, optionally overridden per node sequence."""

    def __init__(
        self,
        local_pref: int = 100,
        med: int = 0,
        overrides: Optional[Mapping[Sequence[NodeID], Tuple[int, int]]] = None,
    ) -> None:
        self.local_pref = local_pref
        self.med = med
        self.overrides: Dict[NodePath, Tuple[int, int]] = {
            tuple(path): attrs for path, attrs in (overrides or {}).items()
        }

    def __call__(self, path: NodePath) -> Tuple[int, int]:
        return self.overrides.get(tuple(path), (self.local_pref, self.med))


def enumerate_paths(
    graph: RouteGraph,
    src_node: NodeID,
    dst_node: NodeID,
    max_depth: Optional[int] = None,
) -> List[NodePath]:
    """
    Enumerate all simple paths from src_node to dst_node within a hop limit.

    Depth-first; neighbors are explored in graph insertion order. Each branch
    carries its own copy of the visited set, so no state is shared between
    sibling branches.

    Args:
        graph: The topology (RouteGraph).
        src_node: Source node ID.
        dst_node: Destination node ID.
        max_depth: Maximum number of hops. Defaults to ROUTING_CONFIG.max_path_depth.

    Returns:
        Node sequences, each starting at src_node and ending at dst_node.

    Raises:
        KeyError: If src_node does not exist in graph.
    """
    adjacencies = graph._adj
    if src_node not in adjacencies:
        raise KeyError(f"Source node '{src_node}' is not in the graph.")
    depth_limit = ROUTING_CONFIG.clamp_depth(max_depth)

    def walk(
        current: NodeID, trail: NodePath, visited: FrozenSet[NodeID], depth: int
    ) -> Iterator[NodePath]:
        if depth > depth_limit:
            return
        if current == dst_node:
            yield trail + (current,)
            return
        visited = visited | {current}
        trail = trail + (current,)
        for neighbor_id in adjacencies[current]:
            if neighbor_id not in visited:
                yield from walk(neighbor_id, trail, visited, depth + 1)

    return list(walk(src_node, (), frozenset(), 0))


def annotate_paths(
    graph: RouteGraph,
    paths: Sequence[NodePath],
    attributes: AttributeGenerator,
) -> List[BGPPath]:
    """Attach cost, AS-path length, IGP cost and policy attributes to paths."""
    candidates: List[BGPPath] = []
    for path in paths:
        cost = path_cost(graph, path)
        local_pref, med = attributes(path)
        candidates.append(
            BGPPath(
                path=tuple(path),
                cost=cost,
                local_pref=local_pref,
                as_path_length=len(path) - 1,
                med=med,
                igp_cost=cost,
            )
        )
    return candidates


def select_best_path(candidates: Sequence[BGPPath]) -> Optional[BGPPath]:
    """
    Elect one path using the BGP decision process.

    Each step keeps only the candidates holding the best value of its
    attribute and the election ends as soon as one candidate is left.

    Args:
        candidates: Annotated candidate paths.

    Returns:
        The winning path, or None when there are no candidates.
    """
    if not candidates:
        return None

    steps = (
        ("LOCAL_PREF", lambda p: p.local_pref, max),
        ("AS_PATH", lambda p: p.as_path_length, min),
        ("MED", lambda p: p.med, min),
        ("IGP_COST", lambda p: p.igp_cost, min),
    )

    remaining = list(candidates)
    for name, key, pick in steps:
        if len(remaining) == 1:
            return remaining[0]
        best = pick(key(p) for p in remaining)
        before = len(remaining)
        remaining = [p for p in remaining if key(p) == best]
        logger.debug("%s = %s: %d -> %d candidates", name, best, before, len(remaining))

    if len(remaining) > 1:
        logger.debug("Tie after all criteria; using lowest node sequence")
    return min(remaining, key=lambda p: p.path)


def _elect(
    graph: RouteGraph,
    src_node: NodeID,
    dst_node: NodeID,
    attributes: AttributeGenerator,
    max_depth: Optional[int],
) -> Tuple[Optional[BGPPath], int]:
    paths = enumerate_paths(graph, src_node, dst_node, max_depth)
    winner = select_best_path(annotate_paths(graph, paths, attributes))
    return winner, len(paths)


def select_policy_path(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    source: NodeID,
    destination: NodeID,
    attributes: Optional[AttributeGenerator] = None,
    max_depth: Optional[int] = None,
) -> AlgorithmResult:
    """
    Run BGP-style policy routing for one query.

    Only nodes on the elected path receive a distance and predecessor; every
    other node keeps inf/None even if reachable, as a BGP speaker advertises a
    single best path. The source gets distance 0 and every other node on the
    path gets the full path cost. The routing table is built separately: each
    node other than the source gets its own election over the paths ending at
    it (the destination reuses the main election).

    Args:
        nodes: Topology nodes.
        edges: Topology edges (undirected).
        source: Source node ID.
        destination: Destination node ID.
        attributes: Local-preference/MED generator. Defaults to a fresh,
            unseeded RandomAttributeGenerator.
        max_depth: Hop limit for path enumeration.

    Returns:
        AlgorithmResult; iterations counts every enumerated candidate path.
    """
    start = perf_counter()
    if attributes is None:
        attributes = RandomAttributeGenerator()

    graph = build_graph(nodes, edges)
    best, iterations = _elect(graph, source, destination, attributes, max_depth)

    distances: DistanceMap = {node_id: INF for node_id in graph.nodes}
    previous: PredecessorMap = {node_id: None for node_id in graph.nodes}
    if best is not None:
        for idx, node_id in enumerate(best.path):
            distances[node_id] = 0 if idx == 0 else best.cost
            if idx > 0:
                previous[node_id] = best.path[idx - 1]

    routing_table: List[RoutingTableEntry] = []
    for node_id in graph.nodes:
        if node_id == source:
            continue
        if node_id == destination:
            winner = best
        else:
            winner, count = _elect(graph, source, node_id, attributes, max_depth)
            iterations += count
        if winner is not None:
            routing_table.append(routing_entry_for_path(winner.path, winner.cost))

    logger.debug(
        "BGP %s -> %s elected %s from %d candidates",
        source,
        destination,
        list(best.path) if best else None,
        iterations,
    )
    return AlgorithmResult(
        distances=distances,
        previous=previous,
        path=list(best.path) if best else [],
        routing_table=routing_table,
        execution_time=perf_counter() - start,
        iterations=iterations,
    )
