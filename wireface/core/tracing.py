"""Face tracing over an angularly ordered adjacency table.

Every (vertex, incident edge) pair seeds one walk. At each vertex the walk
leaves along the tightest clockwise turn from the edge it arrived on, which
keeps the face being traced on its left. A walk stops when:

- it returns to the seed vertex: the cycle is a face candidate;
- it reaches a vertex with a lower index than the seed: the face belongs to
  a lower seed (or cannot be seeded here) and the walk is dropped;
- it turns wider than a straight line (``outer_boundary='turn'``): the walk
  is following the unbounded exterior and is dropped.

Under ``outer_boundary='winding'`` reflex turns are tolerated and a closed
cycle is dropped only when its signed area is not positive, so concave
faces survive.

A walk that does none of these within ``2 * E`` transitions (the number of
half-edges) can only come from an inconsistent adjacency table and raises
:class:`~wireface.core.errors.TraceConsistencyError`.
"""
from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .adjacency import AdjacencyTable
from .config import ReconstructionConfig
from .errors import TraceConsistencyError
from .geometry import edge_direction, is_outward_turn, polygon_signed_area
from .graph import PlanarGraph
from .logging_utils import get_logger
from .stats import TraceStats

logger = get_logger('wireface.tracing')

CLOSED = 'closed'
LOWER_SEED = 'lower_seed'
OUTER = 'outer'
DEGENERATE = 'degenerate'


@dataclass(frozen=True)
class Polygon:
    """Ordered vertex cycle. Only closed polygons leave :func:`trace_faces`."""
    vertices: Tuple[int, ...]
    closed: bool = False

    def __len__(self) -> int:
        return len(self.vertices)

    def edge_pairs(self) -> List[Tuple[int, int]]:
        """Consecutive (a, b) vertex pairs, including the closing pair."""
        n = len(self.vertices)
        return [(self.vertices[i], self.vertices[(i + 1) % n]) for i in range(n)]


def trace_from_seed(graph: PlanarGraph, adjacency: AdjacencyTable, seed_vertex: int, seed_edge: int,
                    outer_boundary: str = 'turn', turn_tol: float = 0.0,
                    area_tol: float = 0.0) -> Tuple[Polygon, str]:
    """Walk one face starting at ``seed_vertex`` along ``seed_edge``.

    Returns the (possibly open) polygon and the outcome tag: one of
    ``'closed'``, ``'lower_seed'``, ``'outer'`` or ``'degenerate'``.
    """
    points = graph.points
    edges = graph.edges
    cycle = [seed_vertex]
    current_vertex = seed_vertex
    current_edge = seed_edge
    for _ in range(2 * graph.num_edges):
        w = graph.other_endpoint(current_edge, current_vertex)
        if w == seed_vertex:
            if len(cycle) < 3:
                return Polygon(tuple(cycle)), DEGENERATE
            if outer_boundary == 'winding' and polygon_signed_area(points[cycle]) <= area_tol:
                return Polygon(tuple(cycle)), OUTER
            return Polygon(tuple(cycle), closed=True), CLOSED
        if w < seed_vertex:
            return Polygon(tuple(cycle)), LOWER_SEED
        cycle.append(w)
        nxt = adjacency.next_edge(w, current_edge)
        if outer_boundary == 'turn':
            arrived = edge_direction(points, edges[current_edge], w)
            leaving = edge_direction(points, edges[nxt], w)
            if is_outward_turn(arrived, leaving, turn_tol):
                return Polygon(tuple(cycle)), OUTER
        current_edge = nxt
        current_vertex = w
    raise TraceConsistencyError(
        f"trace seeded at vertex {seed_vertex} via edge {seed_edge} did not terminate "
        f"after {2 * graph.num_edges} transitions")


def _trace_vertices(graph: PlanarGraph, adjacency: AdjacencyTable, vertices: Sequence[int],
                    config: ReconstructionConfig) -> Tuple[List[Polygon], TraceStats]:
    polygons: List[Polygon] = []
    stats = TraceStats()
    for v in vertices:
        for e in adjacency.edges_at(v):
            stats.attempts += 1
            poly, outcome = trace_from_seed(
                graph, adjacency, v, e,
                outer_boundary=config.outer_boundary,
                turn_tol=config.turn_tol,
                area_tol=config.area_tol,
            )
            if outcome == CLOSED:
                stats.closed += 1
                polygons.append(poly)
            elif outcome == LOWER_SEED:
                stats.discarded_lower_seed += 1
            elif outcome == OUTER:
                stats.discarded_outer += 1
                logger.debug('seed (%d, e%d): outer boundary after %s', v, e, list(poly.vertices))
            else:
                stats.discarded_degenerate += 1
                logger.debug('seed (%d, e%d): degenerate cycle %s', v, e, list(poly.vertices))
    return polygons, stats


def _vertex_blocks(n_vertices: int, n_blocks: int) -> List[range]:
    n_blocks = max(1, min(n_blocks, n_vertices))
    size, extra = divmod(n_vertices, n_blocks)
    blocks = []
    start = 0
    for i in range(n_blocks):
        stop = start + size + (1 if i < extra else 0)
        blocks.append(range(start, stop))
        start = stop
    return blocks


def trace_faces(graph: PlanarGraph, adjacency: AdjacencyTable,
                config: Optional[ReconstructionConfig] = None) -> Tuple[List[Polygon], TraceStats]:
    """Trace every seed and return the closed polygons in seed order.

    Seeds are visited by ascending vertex index, then adjacency order. With
    ``config.workers > 1`` contiguous vertex blocks are traced on a thread
    pool and merged in block order, so the output matches a serial run.
    """
    config = config or ReconstructionConfig()
    t0 = time.perf_counter()
    n = graph.num_vertices
    if config.workers <= 1 or n < 2:
        polygons, stats = _trace_vertices(graph, adjacency, range(n), config)
    else:
        blocks = _vertex_blocks(n, int(config.workers))
        polygons, stats = [], TraceStats()
        with ThreadPoolExecutor(max_workers=len(blocks)) as executor:
            futures = [executor.submit(_trace_vertices, graph, adjacency, block, config)
                       for block in blocks]
            # Collect in submission order; results are merged, never raced
            for block, future in zip(blocks, futures):
                block_polys, block_stats = future.result()
                polygons.extend(block_polys)
                stats.merge(block_stats)
                logger.debug('vertices [%d, %d): %d faces', block.start, block.stop, len(block_polys))
    stats.time_total = time.perf_counter() - t0
    return polygons, stats


__all__ = ['Polygon', 'trace_from_seed', 'trace_faces', 'CLOSED', 'LOWER_SEED', 'OUTER', 'DEGENERATE']
