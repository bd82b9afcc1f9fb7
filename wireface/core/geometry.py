"""Geometry primitives for angular edge ordering and face tests.

All direction arguments are 2-vectors (array-like). Turns are measured at a
vertex between two edges anchored there: the edge just arrived on and a
candidate edge leaving it.
"""
from __future__ import annotations
import math
import numpy as np

__all__ = [
	'angle_from_x_axis','edge_direction','turn_cross','clockwise_turn','is_outward_turn',
	'polygon_signed_area','normalize_edge','edges_equal'
]


def angle_from_x_axis(p0, p1):
	"""Absolute angle (radians, in [-pi, pi]) of the segment p0 -> p1."""
	return math.atan2(float(p1[1]) - float(p0[1]), float(p1[0]) - float(p0[0]))


def edge_direction(points, edge, center):
	"""Vector from ``center`` to the other endpoint of ``edge``.

	``edge`` is an (a, b) index pair incident to ``center``.
	"""
	a, b = int(edge[0]), int(edge[1])
	other = b if a == center else a
	return points[other] - points[center]


def _normalized_cross_dot(a, b):
	ax, ay = float(a[0]), float(a[1])
	bx, by = float(b[0]), float(b[1])
	denom = math.hypot(ax, ay) * math.hypot(bx, by)
	if denom == 0.0:
		return math.nan, math.nan
	return (ax*by - ay*bx) / denom, (ax*bx + ay*by) / denom


def turn_cross(a, b):
	"""Normalized cross product (ax*by - ay*bx) / (|a||b|).

	For ``a`` the edge arrived on and ``b`` the edge leaving, both anchored at
	the same vertex, a negative value is a bounding (convex) turn and a
	positive value turns wider than a straight line. NaN for zero-length input.
	"""
	return _normalized_cross_dot(a, b)[0]


def clockwise_turn(a, b):
	"""Clockwise angle in [0, 2*pi) swept from direction ``a`` to direction ``b``.

	This is the ranking used for entry-aware ordering: among the edges at a
	vertex, the one with the smallest positive value relative to the entry
	edge is the tightest clockwise turn. Identical directions rank 0. NaN
	for zero-length input.
	"""
	cross, dot = _normalized_cross_dot(a, b)
	if math.isnan(cross):
		return math.nan
	theta = math.atan2(-cross, dot) % (2.0 * math.pi)
	# atan2 of a tiny positive cross wraps to 2*pi under the modulo
	return 0.0 if theta >= 2.0 * math.pi else theta


def is_outward_turn(a, b, tol=0.0):
	"""True when leaving along ``b`` after arriving on ``a`` turns past a straight line.

	A U-turn (``b`` pointing back along ``a``) also counts as outward.
	"""
	cross, dot = _normalized_cross_dot(a, b)
	if cross > tol:
		return True
	return abs(cross) <= tol and dot > 0.0


def polygon_signed_area(polygon):
	"""Return signed area of polygon (sequence of (x,y)); positive if CCW."""
	arr = np.asarray(polygon, dtype=np.float64)
	if arr.ndim != 2 or arr.shape[0] < 3:
		return 0.0
	x = arr[:,0]; y = arr[:,1]
	return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1)))


def normalize_edge(u, v):
	"""
	Return a normalized edge representation as (min, max).

	Edges (u, v) and (v, u) map to the same tuple.
	"""
	return (min(u, v), max(u, v))


def edges_equal(e1, e2):
	"""Unordered-pair equality of two edges."""
	return normalize_edge(int(e1[0]), int(e1[1])) == normalize_edge(int(e2[0]), int(e2[1]))
