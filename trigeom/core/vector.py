"""2D point/vector primitives shared by the predicates.

Points are float64 numpy arrays of shape (2,). Every public function accepts
any array-like pair (tuples, lists, arrays).
"""
from __future__ import annotations
import math
import numpy as np

__all__ = ['as_point', 'nan_point', 'is_real', 'to_2d', 'to_3d', 'cross']


def as_point(p) -> np.ndarray:
    """Coerce ``p`` to a float64 array of shape (2,)."""
    arr = np.asarray(p, dtype=np.float64)
    if arr.shape != (2,):
        raise ValueError(f"expected a 2D point, got shape {arr.shape}")
    return arr


def nan_point() -> np.ndarray:
    """Sentinel point returned when a construction has no answer."""
    return np.array([math.nan, math.nan], dtype=np.float64)


def is_real(value) -> bool:
    """True when ``value`` (scalar, 2D or 3D point) has only finite components."""
    return bool(np.all(np.isfinite(np.asarray(value, dtype=np.float64))))


def to_2d(v3) -> np.ndarray:
    v = np.asarray(v3, dtype=np.float64)
    return v[:2].copy()


def to_3d(v2) -> np.ndarray:
    v = as_point(v2)
    return np.array([v[0], v[1], 0.0], dtype=np.float64)


def cross(a, b) -> float:
    """2D cross product a.x*b.y - a.y*b.x."""
    return float(a[0]) * float(b[1]) - float(a[1]) * float(b[0])
