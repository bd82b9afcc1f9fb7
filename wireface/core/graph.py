"""Raw planar graph: immutable vertex coordinates plus an undirected edge table.

Canonical array layout, shared with the rest of the package:
    points: (V, 2) float64 array
    edges:  (E, 2) int64 array of vertex index pairs
Both arrays are marked read-only once a :class:`PlanarGraph` owns them.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .constants import EPS_LENGTH
from .errors import InvalidGraphError


def _as_points(points) -> np.ndarray:
    try:
        pts = np.array(points, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidGraphError(f"points are not a numeric (V, 2) array: {exc}") from exc
    if pts.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise InvalidGraphError(f"points must be (V, 2), got shape {pts.shape}")
    return pts


def _as_edges(edges) -> np.ndarray:
    try:
        arr = np.array(edges)
    except ValueError as exc:
        raise InvalidGraphError(f"edges are not an (E, 2) array: {exc}") from exc
    if arr.size == 0:
        return np.empty((0, 2), dtype=np.int64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidGraphError(f"edges must be (E, 2), got shape {arr.shape}")
    if arr.dtype.kind not in 'iuf':
        raise InvalidGraphError(f"edges must be numeric, got dtype {arr.dtype}")
    if arr.dtype.kind == 'f':
        if not np.all(np.equal(np.mod(arr, 1), 0)):
            raise InvalidGraphError("edges must contain integer vertex indices")
    return arr.astype(np.int64)


def validate_graph(points: np.ndarray, edges: np.ndarray, length_tol: float = EPS_LENGTH) -> None:
    """Reject inputs the tracer cannot handle meaningfully.

    Raises
    ------
    InvalidGraphError
        On non-finite coordinates, out-of-range or negative indices,
        self-loops, or edges shorter than ``length_tol``.
    """
    if not np.isfinite(points).all():
        bad = np.argwhere(~np.isfinite(points))[:, 0]
        raise InvalidGraphError(f"non-finite coordinates at vertices {sorted(set(bad.tolist()))}")
    if edges.shape[0] == 0:
        return
    n = points.shape[0]
    out_of_range = (edges < 0) | (edges >= n)
    if out_of_range.any():
        e = int(np.argwhere(out_of_range.any(axis=1))[0, 0])
        raise InvalidGraphError(
            f"edge {e} {tuple(edges[e].tolist())} references a vertex outside [0, {n})")
    loops = edges[:, 0] == edges[:, 1]
    if loops.any():
        e = int(np.argmax(loops))
        raise InvalidGraphError(f"edge {e} is a self-loop on vertex {int(edges[e, 0])}")
    lengths = np.linalg.norm(points[edges[:, 1]] - points[edges[:, 0]], axis=1)
    short = lengths <= length_tol
    if short.any():
        e = int(np.argmax(short))
        raise InvalidGraphError(f"edge {e} {tuple(edges[e].tolist())} has zero length")


@dataclass(frozen=True, eq=False)
class PlanarGraph:
    """Vertex positions and undirected edges, immutable after construction.

    Use :meth:`from_arrays` rather than the raw constructor so the arrays are
    normalized and frozen.
    """
    points: np.ndarray
    edges: np.ndarray

    @classmethod
    def from_arrays(cls, points, edges, validate: bool = False,
                    length_tol: float = EPS_LENGTH) -> 'PlanarGraph':
        pts = _as_points(points)
        eds = _as_edges(edges)
        if validate:
            validate_graph(pts, eds, length_tol=length_tol)
        pts.setflags(write=False)
        eds.setflags(write=False)
        return cls(points=pts, edges=eds)

    @property
    def num_vertices(self) -> int:
        return int(self.points.shape[0])

    @property
    def num_edges(self) -> int:
        return int(self.edges.shape[0])

    def get_vertex(self, index: int) -> Tuple[float, float]:
        x, y = self.points[index]
        return float(x), float(y)

    def get_edge(self, index: int) -> Tuple[int, int]:
        a, b = self.edges[index]
        return int(a), int(b)

    def other_endpoint(self, edge_index: int, vertex: int) -> int:
        a, b = self.edges[edge_index]
        return int(b) if int(a) == vertex else int(a)

    def same_as(self, other: 'PlanarGraph') -> bool:
        """Exact equality of coordinates and edge tables (order-sensitive)."""
        return (np.array_equal(self.points, other.points)
                and np.array_equal(self.edges, other.edges))


__all__ = ['PlanarGraph', 'validate_graph']
