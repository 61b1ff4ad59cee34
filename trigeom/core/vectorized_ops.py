"""Vectorized batch versions of the hot predicates.

Each function evaluates the same formula and tolerance as its scalar
counterpart in :mod:`trigeom.core.predicates` / :mod:`trigeom.core.geometry`
over many points (or triangles) at once with NumPy broadcasting. Results agree
element-wise with the scalar functions. Winding checks are never applied here.
"""
from __future__ import annotations
from typing import Sequence
import numpy as np

from .constants import EPS_INCIRCLE, EPS_PARALLEL
from .geometry import area

__all__ = [
    'orient_vectorized', 'to_the_left_vectorized', 'points_in_triangle',
    'inside_circumcircle_vectorized', 'triangles_circumcenters', 'polygon_areas',
]


def _as_points(points) -> np.ndarray:
    pts = np.asarray(points, dtype=np.float64)
    if pts.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f"expected an (M,2) array of points, got shape {pts.shape}")
    return pts


def orient_vectorized(points, l0, l1) -> np.ndarray:
    """Cross products (l1 - l0) x (p - l0) for every row p of ``points``.

    points : array of shape (M,2)
    l0, l1 : single points (2,)
    Returns array of shape (M,).
    """
    p = _as_points(points)
    a = np.asarray(l0, dtype=np.float64); b = np.asarray(l1, dtype=np.float64)
    return (b[0] - a[0]) * (p[:, 1] - a[1]) - (b[1] - a[1]) * (p[:, 0] - a[0])


def to_the_left_vectorized(points, l0, l1) -> np.ndarray:
    """Boolean mask of points on or left of the directed line l0->l1."""
    return orient_vectorized(points, l0, l1) >= 0


def points_in_triangle(points, c0, c1, c2) -> np.ndarray:
    """Boolean mask of points inside (or on the boundary of) a CCW triangle."""
    return (to_the_left_vectorized(points, c0, c1)
            & to_the_left_vectorized(points, c1, c2)
            & to_the_left_vectorized(points, c2, c0))


def inside_circumcircle_vectorized(points, c0, c1, c2) -> np.ndarray:
    """Boolean mask of points strictly inside the circumcircle of a CCW triangle."""
    p = _as_points(points)
    c0 = np.asarray(c0, dtype=np.float64)
    c1 = np.asarray(c1, dtype=np.float64)
    c2 = np.asarray(c2, dtype=np.float64)
    a = c0[None, :] - p
    b = c1[None, :] - p
    c = c2[None, :] - p
    ax, ay = a[:, 0], a[:, 1]
    bx, by = b[:, 0], b[:, 1]
    cx, cy = c[:, 0], c[:, 1]
    det = ((ax * ax + ay * ay) * (bx * cy - cx * by)
           - (bx * bx + by * by) * (ax * cy - cx * ay)
           + (cx * cx + cy * cy) * (ax * by - bx * ay))
    return det > EPS_INCIRCLE


def triangles_circumcenters(points, tris) -> np.ndarray:
    """Circumcenters for a batch of triangles.

    points: (N,2) float array
    tris:   (M,3) int array
    Returns: (M,2) float64 array; rows of NaN for degenerate triangles.
    """
    pts = np.asarray(points, dtype=np.float64)
    T = np.asarray(tris, dtype=np.int64)
    if T.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if T.ndim != 2 or T.shape[1] != 3:
        raise ValueError(f"expected an (M,3) array of triangles, got shape {T.shape}")
    c0 = pts[T[:, 0]]; c1 = pts[T[:, 1]]; c2 = pts[T[:, 2]]
    mp0 = 0.5 * (c0 + c1)
    mp1 = 0.5 * (c1 + c2)
    e0 = c0 - c1
    e1 = c1 - c2
    # rotate_right_angle: (x, y) -> (-y, x)
    v0 = np.column_stack([-e0[:, 1], e0[:, 0]])
    v1 = np.column_stack([-e1[:, 1], e1[:, 0]])
    det = v0[:, 0] * v1[:, 1] - v0[:, 1] * v1[:, 0]
    ok = np.abs(det) >= EPS_PARALLEL
    m0 = np.full(T.shape[0], np.nan, dtype=np.float64)
    num = (mp0[:, 1] - mp1[:, 1]) * v1[:, 0] - (mp0[:, 0] - mp1[:, 0]) * v1[:, 1]
    m0[ok] = num[ok] / det[ok]
    return mp0 + m0[:, None] * v0


def polygon_areas(polygons: Sequence) -> np.ndarray:
    """Signed areas for a list of polygons (each an (Ni,2) array-like)."""
    return np.array([area(poly) for poly in polygons], dtype=np.float64)
