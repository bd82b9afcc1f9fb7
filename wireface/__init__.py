"""Public package API for wireface.

Rebuilds the closed internal faces of a planar graph given as 2D vertex
coordinates and undirected edges. This facade provides a flat import surface
on top of the internal ``wireface.core`` package and defers the matplotlib
plotting module until first use to keep ``import wireface`` fast.

Example
-------
    from wireface import PlanarGraph, reconstruct

    graph = PlanarGraph.from_arrays([[0, 0], [2, 0], [2, 2], [0, 2]],
                                    [[0, 1], [1, 2], [0, 2], [0, 3], [2, 3]])
    mesh = reconstruct(graph)
    mesh.num_polygons   # 2
"""
from importlib import import_module as _imp
import logging as _logging

from importlib.metadata import version as _pkg_version, PackageNotFoundError as _PNF

try:
    __version__ = _pkg_version("wireface")  # populated when installed
except _PNF:  # pragma: no cover - source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from .core.adjacency import AdjacencyTable, build_adjacency
from .core.config import ReconstructionConfig
from .core.constants import EPS_AREA, EPS_LENGTH, EPS_TURN
from .core.errors import (
    WirefaceError, InvalidGraphError, TraceConsistencyError, MeshFormatError,
)
from .core.geometry import clockwise_turn, edges_equal, polygon_signed_area, turn_cross
from .core.graph import PlanarGraph
from .core.logging_utils import configure_logging, get_logger
from .core.mesh import Mesh, mesh_from_arrays, reconstruct
from .core.stats import TraceStats, format_trace_stats
from .core.tracing import Polygon, trace_faces
from .core import io


def _lazy_module(mod_name):
    class _ModuleProxy:
        __slots__ = ('_m',)
        def _load(self):
            try:
                return self._m
            except AttributeError:
                self._m = _imp(mod_name)
                return self._m
        def __getattr__(self, item):
            if item == '_m':
                raise AttributeError(item)
            return getattr(self._load(), item)
        def __dir__(self):
            return dir(self._load())
    return _ModuleProxy()


# Lazily loaded matplotlib-backed module
visualization = _lazy_module('wireface.core.visualization')


def plot_faces(*args, **kwargs):
    return visualization.plot_faces(*args, **kwargs)


__all__ = [
    '__version__',
    # data model
    'PlanarGraph', 'Mesh', 'Polygon', 'AdjacencyTable',
    # operations
    'reconstruct', 'mesh_from_arrays', 'build_adjacency', 'trace_faces',
    # geometry
    'clockwise_turn', 'turn_cross', 'edges_equal', 'polygon_signed_area',
    # configuration / tolerances
    'ReconstructionConfig', 'EPS_AREA', 'EPS_TURN', 'EPS_LENGTH',
    # errors
    'WirefaceError', 'InvalidGraphError', 'TraceConsistencyError', 'MeshFormatError',
    # stats / logging
    'TraceStats', 'format_trace_stats', 'configure_logging', 'get_logger',
    # namespaces
    'io', 'visualization', 'plot_faces',
]
