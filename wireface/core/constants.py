"""Central numerical tolerances for face reconstruction.

Tiny thresholds used by the adjacency builder and the face tracer are kept
here so they can be tuned consistently and referenced without scattering
literals.
"""
from __future__ import annotations

# Geometry tolerances
EPS_AREA: float = 1e-12           # minimum positive signed area of a retained face
EPS_TURN: float = 1e-12           # normalized cross product treated as a straight line
EPS_LENGTH: float = 1e-15         # shortest edge accepted when validation is on

__all__ = [
    'EPS_AREA',
    'EPS_TURN',
    'EPS_LENGTH',
]
