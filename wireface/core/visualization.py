"""Visualization helpers for reconstructed meshes."""
from __future__ import annotations

import os as _os
import matplotlib as _mpl
# Ensure a non-interactive backend in headless environments before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import numpy as np
import matplotlib.pyplot as plt

from .logging_utils import get_logger

logger = get_logger('wireface.viz')


def plot_faces(
    mesh,
    outname="faces.png",
    vertex_labels: bool = False,
    face_labels: bool = True,
    title=None,
):
    """Plot the wireframe of a reconstructed mesh with its faces filled.

    Args:
        mesh: Mesh-like with .graph.points, .graph.edges and .polygons
        outname: output image path
        vertex_labels: if True, label vertices with their index
        face_labels: if True, label each face at its centroid with its index
        title: optional figure title; defaults to a face count summary
    """
    pts = np.asarray(mesh.graph.points)
    edges = np.asarray(mesh.graph.edges)
    plt.figure(figsize=(6, 6))
    cmap = plt.get_cmap('tab20')
    for i, poly in enumerate(mesh.polygons):
        coords = pts[list(poly.vertices)]
        plt.fill(coords[:, 0], coords[:, 1], facecolor=cmap(i % 20), alpha=0.45, edgecolor='none')
        if face_labels:
            c = coords.mean(axis=0)
            plt.text(c[0], c[1], str(i), ha='center', va='center', fontsize=8)
    for a, b in edges.tolist():
        plt.plot([pts[a, 0], pts[b, 0]], [pts[a, 1], pts[b, 1]], color='black', lw=0.8)
    if pts.shape[0]:
        # scale markers by vertex count
        s = max(0.6, min(12.0, 200.0 / float(max(1, pts.shape[0]))))
        plt.scatter(pts[:, 0], pts[:, 1], s=s, color='black', zorder=3)
    if vertex_labels:
        for v, (x, y) in enumerate(pts.tolist()):
            plt.annotate(str(v), (x, y), textcoords='offset points', xytext=(3, 3), fontsize=7)
    plt.title(title or f"{len(mesh.polygons)} faces / {edges.shape[0]} edges")
    plt.gca().set_aspect('equal')
    plt.savefig(outname, dpi=150)
    plt.close()
    logger.debug('wrote face plot %s', outname)


__all__ = ['plot_faces']
