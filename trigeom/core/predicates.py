"""Orientation, containment and in-circle predicates.

These are the tests an incremental or flip-based Delaunay triangulation asks
on every insertion and flip. All of them work on plain float64 values with
fixed tolerances from :mod:`trigeom.core.constants`; none is exact.

Triangles passed to :func:`point_in_triangle` and :func:`inside_circumcircle`
must be counter-clockwise. The library does not correct winding; a clockwise
triangle gives a wrong but well-defined answer unless winding checks are
enabled through :func:`trigeom.core.run_context.winding_checks`.
"""
from __future__ import annotations
import math

from .constants import EPS_COINCIDENT, EPS_INCIRCLE
from .errors import WindingOrderError
from .logging_utils import get_logger
from . import run_context

__all__ = [
    'are_coincident', 'orient', 'to_the_left', 'to_the_right',
    'point_in_triangle', 'inside_circumcircle', 'is_ccw', 'check_winding',
]

logger = get_logger('trigeom.predicates')


def are_coincident(a, b) -> bool:
    """Are ``a`` and ``b`` closer than EPS_COINCIDENT?"""
    return math.hypot(float(a[0]) - float(b[0]), float(a[1]) - float(b[1])) < EPS_COINCIDENT


def orient(p, l0, l1) -> float:
    """Cross product (l1 - l0) x (p - l0).

    Positive when p is left of the directed line l0->l1, negative when right,
    zero when collinear. Equals twice the signed area of (l0, l1, p).
    """
    px, py = float(p[0]), float(p[1])
    ax, ay = float(l0[0]), float(l0[1])
    bx, by = float(l1[0]), float(l1[1])
    return (bx - ax) * (py - ay) - (by - ay) * (px - ax)


def to_the_left(p, l0, l1) -> bool:
    """Is ``p`` on or to the left of the directed line from l0 to l1?

    Collinear points count as left.
    """
    return bool(orient(p, l0, l1) >= 0)


def to_the_right(p, l0, l1) -> bool:
    """Is ``p`` strictly to the right of the directed line from l0 to l1?"""
    return not to_the_left(p, l0, l1)


def is_ccw(c0, c1, c2) -> bool:
    """True when (c0, c1, c2) has strictly positive orientation."""
    return bool(orient(c2, c0, c1) > 0)


def check_winding(c0, c1, c2) -> None:
    """Raise WindingOrderError unless (c0, c1, c2) is counter-clockwise."""
    o = orient(c2, c0, c1)
    if not o > 0:
        logger.debug("winding check failed for %s, %s, %s (orientation=%g)", c0, c1, c2, o)
        raise WindingOrderError(c0, c1, c2, o)


def _maybe_check_winding(c0, c1, c2) -> None:
    if run_context.get('check_winding', False):
        check_winding(c0, c1, c2)


def point_in_triangle(p, c0, c1, c2) -> bool:
    """Is ``p`` inside the CCW triangle (c0, c1, c2)?

    Points on an edge or at a vertex are inside.
    """
    _maybe_check_winding(c0, c1, c2)
    return (to_the_left(p, c0, c1)
            and to_the_left(p, c1, c2)
            and to_the_left(p, c2, c0))


def inside_circumcircle(p, c0, c1, c2) -> bool:
    """Is ``p`` strictly inside the circle through the CCW triangle (c0, c1, c2)?

    Evaluates the in-circle determinant with the three vertices translated
    so that ``p`` is the origin. The determinant must exceed EPS_INCIRCLE, so
    points on or very near the circle are reported as outside.
    """
    _maybe_check_winding(c0, c1, c2)
    px, py = float(p[0]), float(p[1])
    ax = float(c0[0]) - px
    ay = float(c0[1]) - py
    bx = float(c1[0]) - px
    by = float(c1[1]) - py
    cx = float(c2[0]) - px
    cy = float(c2[1]) - py

    det = ((ax * ax + ay * ay) * (bx * cy - cx * by)
           - (bx * bx + by * by) * (ax * cy - cx * ay)
           + (cx * cx + cy * cy) * (ax * by - bx * ay))
    return bool(det > EPS_INCIRCLE)
