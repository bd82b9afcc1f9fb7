"""Reconstructed mesh: a planar graph together with its traced faces.

:func:`reconstruct` is the single transformation from a raw
:class:`~wireface.core.graph.PlanarGraph` to a :class:`Mesh`. A mesh is a
value; it is never recomputed in place, and handing an existing mesh back to
:func:`reconstruct` returns it unchanged.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from .adjacency import AdjacencyTable, build_adjacency
from .config import ReconstructionConfig
from .graph import PlanarGraph, validate_graph
from .logging_utils import get_logger
from .stats import TraceStats
from .tracing import Polygon, trace_faces

logger = get_logger('wireface.mesh')


@dataclass(frozen=True, eq=False)
class Mesh:
    graph: PlanarGraph
    polygons: Tuple[Polygon, ...]
    adjacency: AdjacencyTable = field(repr=False)
    config: ReconstructionConfig = field(default_factory=ReconstructionConfig)
    stats: TraceStats = field(default_factory=TraceStats, repr=False)

    @property
    def num_vertices(self) -> int:
        return self.graph.num_vertices

    @property
    def num_edges(self) -> int:
        return self.graph.num_edges

    @property
    def num_polygons(self) -> int:
        return len(self.polygons)

    def get_vertex(self, index: int) -> Tuple[float, float]:
        return self.graph.get_vertex(index)

    def get_edge(self, index: int) -> Tuple[int, int]:
        return self.graph.get_edge(index)

    def get_polygon(self, index: int) -> Tuple[int, ...]:
        return self.polygons[index].vertices

    def polygon_coordinates(self, index: int):
        """(k, 2) coordinate array of polygon ``index`` in cycle order."""
        return self.graph.points[list(self.polygons[index].vertices)]


def reconstruct(source: Union[PlanarGraph, Mesh],
                config: Optional[ReconstructionConfig] = None) -> Mesh:
    """Build the adjacency table of ``source`` and trace its internal faces.

    Passing a :class:`Mesh` is a no-op that returns the same object, so
    reconstruction runs at most once per mesh value.
    """
    if isinstance(source, Mesh):
        logger.debug('reconstruct called on an existing mesh; returning it unchanged')
        return source
    config = config or ReconstructionConfig()
    if config.validate:
        validate_graph(source.points, source.edges, length_tol=config.length_tol)
    adjacency = build_adjacency(source, ordering=config.ordering)
    polygons, stats = trace_faces(source, adjacency, config)
    logger.info('reconstructed %d faces from %d vertices / %d edges (%d traces, %d discarded)',
                len(polygons), source.num_vertices, source.num_edges,
                stats.attempts, stats.discarded)
    return Mesh(graph=source, polygons=tuple(polygons), adjacency=adjacency,
                config=config, stats=stats)


def mesh_from_arrays(points, edges, config: Optional[ReconstructionConfig] = None) -> Mesh:
    """Convenience: wrap raw arrays in a :class:`PlanarGraph` and reconstruct."""
    config = config or ReconstructionConfig()
    return reconstruct(PlanarGraph.from_arrays(points, edges), config)


__all__ = ['Mesh', 'reconstruct', 'mesh_from_arrays']
