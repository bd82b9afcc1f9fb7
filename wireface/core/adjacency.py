"""Per-vertex angular ordering of incident edges.

The table is built once from a :class:`~wireface.core.graph.PlanarGraph` and
is read-only afterwards. Two orderings are available:

``global``
    Incident edges sorted by the absolute atan2 angle from the vertex to the
    far endpoint, ascending (counter-clockwise). The table winding is ``ccw``.

``relative``
    Incident edges ranked by :func:`~wireface.core.geometry.clockwise_turn`
    from the vertex's lowest-indexed incident edge. The table winding is
    ``cw``; the cyclic successor of any entry edge is therefore the tightest
    clockwise turn away from it.

Either way :meth:`AdjacencyTable.next_edge` steps clockwise, which is the
rule that keeps a bounded face on the left of the walk.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .errors import TraceConsistencyError
from .geometry import angle_from_x_axis, clockwise_turn, edge_direction
from .graph import PlanarGraph
from .logging_utils import get_logger

logger = get_logger('wireface.adjacency')


def incident_edges(graph: PlanarGraph) -> List[List[int]]:
    """Unordered incidence lists: edge indices touching each vertex, in edge order."""
    incidence: List[List[int]] = [[] for _ in range(graph.num_vertices)]
    for e, (a, b) in enumerate(graph.edges.tolist()):
        incidence[a].append(e)
        incidence[b].append(e)
    return incidence


def global_angle_key(graph: PlanarGraph, center: int, edge_index: int) -> float:
    """Absolute angle of ``edge_index`` seen from ``center``."""
    other = graph.other_endpoint(edge_index, center)
    return angle_from_x_axis(graph.points[center], graph.points[other])


def relative_turn_key(graph: PlanarGraph, center: int, entry_edge: int, edge_index: int) -> float:
    """Clockwise turn from ``entry_edge`` to ``edge_index``, both anchored at ``center``.

    Pure ranking function: the center and the entry edge are explicit
    arguments, so the same rule can rank candidates during a walk or order a
    whole incidence list relative to a reference edge.
    """
    if edge_index == entry_edge:
        return 0.0
    entry_dir = edge_direction(graph.points, graph.edges[entry_edge], center)
    cand_dir = edge_direction(graph.points, graph.edges[edge_index], center)
    return clockwise_turn(entry_dir, cand_dir)


@dataclass(frozen=True)
class AdjacencyTable:
    """Immutable mapping vertex -> ordered incident edge indices."""
    order: Tuple[Tuple[int, ...], ...]
    winding: str

    @property
    def num_vertices(self) -> int:
        return len(self.order)

    def edges_at(self, vertex: int) -> Tuple[int, ...]:
        return self.order[vertex]

    def degree(self, vertex: int) -> int:
        return len(self.order[vertex])

    def next_edge(self, vertex: int, entry_edge: int) -> int:
        """Circular successor of ``entry_edge`` at ``vertex``, in the clockwise sense.

        A vertex of degree one returns the entry edge itself (a U-turn).
        """
        ring = self.order[vertex]
        try:
            i = ring.index(entry_edge)
        except ValueError:
            raise TraceConsistencyError(
                f"edge {entry_edge} is not in the adjacency list of vertex {vertex}") from None
        step = 1 if self.winding == 'cw' else -1
        return ring[(i + step) % len(ring)]

    def to_dict(self) -> Dict[int, List[int]]:
        return {v: list(ring) for v, ring in enumerate(self.order)}


def build_adjacency(graph: PlanarGraph, ordering: str = 'relative') -> AdjacencyTable:
    """Order the edges around every vertex of ``graph``.

    Degenerate geometry is not repaired: a zero-length edge ranks as NaN and
    its position in the ring is undefined.
    """
    incidence = incident_edges(graph)
    rings = []
    if ordering == 'global':
        for v, edges in enumerate(incidence):
            rings.append(tuple(sorted(edges, key=lambda e, v=v: global_angle_key(graph, v, e))))
        winding = 'ccw'
    elif ordering == 'relative':
        for v, edges in enumerate(incidence):
            if not edges:
                rings.append(())
                continue
            reference = edges[0]
            rings.append(tuple(sorted(
                edges, key=lambda e, v=v, r=reference: relative_turn_key(graph, v, r, e))))
        winding = 'cw'
    else:
        raise ValueError(f"unknown ordering {ordering!r}")
    logger.debug('built %s adjacency for %d vertices (%d isolated)',
                 ordering, len(rings), sum(1 for r in rings if not r))
    return AdjacencyTable(order=tuple(rings), winding=winding)


__all__ = [
    'AdjacencyTable', 'build_adjacency', 'incident_edges',
    'global_angle_key', 'relative_turn_key',
]
