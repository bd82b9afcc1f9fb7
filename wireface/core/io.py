"""JSON mesh document I/O for wireface.

Document layout (keys may appear in any order)::

    {
      "vertices": [[x0, y0], [x1, y1], ...],
      "edges":    [[a0, b0], [a1, b1], ...],
      "polygons": [[v, v, v, ...], ...]        # written, ignored on read
    }

Decoding produces a :class:`~wireface.core.graph.PlanarGraph`; faces are
always recomputed with :func:`~wireface.core.mesh.reconstruct`, never trusted
from the document. Encoding lists vertices, edges and polygons in index order.
"""
from __future__ import annotations

import json
import numbers
from typing import Any, IO, List, Union

import numpy as np

from .errors import MeshFormatError
from .graph import PlanarGraph
from .mesh import Mesh


def _pairs(doc: dict, key: str, kind: str) -> List[list]:
    if key not in doc:
        raise MeshFormatError(f"Missing '{key}' in mesh document")
    rows = doc[key]
    if not isinstance(rows, list):
        raise MeshFormatError(f"'{key}' must be a list, got {type(rows).__name__}")
    out = []
    for i, row in enumerate(rows):
        if not isinstance(row, (list, tuple)) or len(row) != 2:
            raise MeshFormatError(f"{key}[{i}] must be a pair, got {row!r}")
        for value in row:
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise MeshFormatError(f"{key}[{i}] holds a non-numeric value {value!r}")
            if kind == 'int' and not float(value).is_integer():
                raise MeshFormatError(f"{key}[{i}] holds a non-integer index {value!r}")
        out.append([int(v) for v in row] if kind == 'int' else [float(v) for v in row])
    return out


def graph_from_document(doc: Any, validate: bool = False) -> PlanarGraph:
    """Build a :class:`PlanarGraph` from an already parsed JSON object.

    Raises
    ------
    MeshFormatError
        If the object is not a mapping or lacks well-formed ``vertices`` /
        ``edges`` lists.
    InvalidGraphError
        If ``validate`` is set and the graph violates a precondition.
    """
    if not isinstance(doc, dict):
        raise MeshFormatError(f"Mesh document must be a JSON object, got {type(doc).__name__}")
    vertices = _pairs(doc, 'vertices', 'float')
    edges = _pairs(doc, 'edges', 'int')
    return PlanarGraph.from_arrays(
        np.array(vertices, dtype=np.float64).reshape(-1, 2),
        np.array(edges, dtype=np.int64).reshape(-1, 2),
        validate=validate,
    )


def loads(text: str, validate: bool = False) -> PlanarGraph:
    """Decode a JSON string into a :class:`PlanarGraph`.

    Examples
    --------
    >>> g = loads('{"vertices": [[0, 0], [1, 0], [0, 1]], "edges": [[0, 1], [1, 2], [2, 0]]}')
    >>> g.num_vertices, g.num_edges
    (3, 3)
    """
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MeshFormatError(f"Invalid JSON: {exc}") from exc
    return graph_from_document(doc, validate=validate)


def load(fp: IO[str], validate: bool = False) -> PlanarGraph:
    return loads(fp.read(), validate=validate)


def read_json(filepath: str, validate: bool = False) -> PlanarGraph:
    """Read a mesh document from ``filepath``.

    Raises
    ------
    FileNotFoundError
        If the file doesn't exist
    MeshFormatError
        If the document is malformed
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        return load(f, validate=validate)


def mesh_to_document(mesh: Mesh) -> dict:
    """Plain-Python projection of ``mesh`` in index order."""
    return {
        'vertices': [list(mesh.get_vertex(i)) for i in range(mesh.num_vertices)],
        'edges': [list(mesh.get_edge(i)) for i in range(mesh.num_edges)],
        'polygons': [list(mesh.get_polygon(i)) for i in range(mesh.num_polygons)],
    }


def dumps(mesh: Mesh, indent: Union[int, None] = None) -> str:
    """Encode ``mesh`` as a JSON string."""
    return json.dumps(mesh_to_document(mesh), indent=indent)


def dump(mesh: Mesh, fp: IO[str], indent: Union[int, None] = None) -> None:
    fp.write(dumps(mesh, indent=indent))


def write_json(filepath: str, mesh: Mesh, indent: Union[int, None] = 2) -> None:
    """Write ``mesh`` (vertices, edges, polygons) to ``filepath``."""
    with open(filepath, 'w', encoding='utf-8') as f:
        dump(mesh, f, indent=indent)
        f.write('\n')


__all__ = [
    'loads', 'load', 'read_json', 'graph_from_document',
    'dumps', 'dump', 'write_json', 'mesh_to_document',
]
