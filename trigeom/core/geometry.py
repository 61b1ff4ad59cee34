"""Line intersection and derived triangle/polygon quantities.

Constructions that can fail (parallel lines, collinear triangles) return a
NaN point rather than raising; check the result with
:func:`trigeom.core.vector.is_real` before using it. :func:`find_line_intersection`
and :meth:`LineIntersection.point` offer the same answer as ``None`` instead.
"""
from __future__ import annotations
import math
from typing import NamedTuple, Optional
import numpy as np

from .constants import EPS_PARALLEL
from .logging_utils import get_logger
from .vector import as_point, nan_point

__all__ = [
    'LineIntersection', 'rotate_right_angle', 'line_line_intersection',
    'line_line_intersection_point', 'find_line_intersection',
    'circumcircle_center', 'circumcircle_radius', 'triangle_centroid', 'area',
]

logger = get_logger('trigeom.geometry')


class LineIntersection(NamedTuple):
    """Coefficients of a line/line intersection.

    If the lines meet at X then ``X = p0 + m0 * v0 = p1 + m1 * v1``. Checking
    the signs and magnitudes of m0/m1 turns this into a segment or ray test.
    When ``intersects`` is False both coefficients are NaN.
    """
    m0: float
    m1: float
    intersects: bool

    def point(self, p0, v0) -> Optional[np.ndarray]:
        """Intersection point on the line (p0, v0), or None if there is none."""
        if not self.intersects:
            return None
        return as_point(p0) + self.m0 * as_point(v0)


def rotate_right_angle(v) -> np.ndarray:
    """Rotate ``v`` by 90 degrees: (x, y) -> (-y, x).

    This is a counter-clockwise rotation.
    """
    v = as_point(v)
    return np.array([-v[1], v[0]], dtype=np.float64)


def line_line_intersection(p0, v0, p1, v1) -> LineIntersection:
    """Intersect the line through p0 along v0 with the line through p1 along v1.

    Lines whose direction determinant is below EPS_PARALLEL in magnitude are
    treated as parallel and reported as not intersecting.
    """
    p0x, p0y = float(p0[0]), float(p0[1])
    p1x, p1y = float(p1[0]), float(p1[1])
    v0x, v0y = float(v0[0]), float(v0[1])
    v1x, v1y = float(v1[0]), float(v1[1])

    det = v0x * v1y - v0y * v1x
    if abs(det) < EPS_PARALLEL:
        return LineIntersection(math.nan, math.nan, False)

    m0 = ((p0y - p1y) * v1x - (p0x - p1x) * v1y) / det
    # back-substitute through whichever component of v1 is safe to divide by
    if abs(v1x) >= EPS_PARALLEL:
        m1 = (p0x + m0 * v0x - p1x) / v1x
    else:
        m1 = (p0y + m0 * v0y - p1y) / v1y
    return LineIntersection(m0, m1, True)


def line_line_intersection_point(p0, v0, p1, v1) -> np.ndarray:
    """Intersection point of two lines, or the NaN point if they are parallel."""
    hit = line_line_intersection(p0, v0, p1, v1)
    if not hit.intersects:
        return nan_point()
    return as_point(p0) + hit.m0 * as_point(v0)


def find_line_intersection(p0, v0, p1, v1) -> Optional[np.ndarray]:
    """Like line_line_intersection_point but returns None for parallel lines."""
    return line_line_intersection(p0, v0, p1, v1).point(p0, v0)


def circumcircle_center(c0, c1, c2) -> np.ndarray:
    """Center of the circle through c0, c1 and c2.

    Found as the crossing of the perpendicular bisectors of c0-c1 and c1-c2.
    Collinear (or nearly collinear) input yields the NaN point.
    """
    c0 = as_point(c0); c1 = as_point(c1); c2 = as_point(c2)
    mp0 = 0.5 * (c0 + c1)
    mp1 = 0.5 * (c1 + c2)
    v0 = rotate_right_angle(c0 - c1)
    v1 = rotate_right_angle(c1 - c2)
    hit = line_line_intersection(mp0, v0, mp1, v1)
    if not hit.intersects:
        logger.debug("degenerate triangle %s, %s, %s has no circumcenter", c0, c1, c2)
    return mp0 + hit.m0 * v0


def circumcircle_radius(c0, c1, c2) -> float:
    center = circumcircle_center(c0, c1, c2)
    return float(np.linalg.norm(center - as_point(c0)))


def triangle_centroid(c0, c1, c2) -> np.ndarray:
    return (as_point(c0) + as_point(c1) + as_point(c2)) / 3.0


def area(polygon) -> float:
    """Signed area of a closed polygon (shoelace formula).

    Counter-clockwise polygons have positive area, clockwise ones negative.
    Fewer than three vertices give 0.0; input not shaped (N,2) raises
    ValueError.
    """
    pts = np.asarray(polygon, dtype=np.float64)
    if pts.size == 0:
        return 0.0
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f"expected an (N,2) polygon, got shape {pts.shape}")
    if pts.shape[0] < 3:
        return 0.0
    x = pts[:, 0]; y = pts[:, 1]
    x1 = np.roll(x, -1); y1 = np.roll(y, -1)
    return float(0.5 * np.sum(x * y1 - x1 * y))
