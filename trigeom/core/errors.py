"""Exception types raised on API misuse.

Geometric failures (parallel lines, collinear triangles) are reported through
NaN sentinels or ``None``; the classes here only cover invalid input.
"""
from __future__ import annotations


class TrigeomError(Exception):
    """Base error for the package."""


class WindingOrderError(TrigeomError, ValueError):
    """A triangle expected in counter-clockwise order is not."""

    def __init__(self, c0, c1, c2, orientation: float):
        self.triangle = (tuple(c0), tuple(c1), tuple(c2))
        self.orientation = float(orientation)
        super().__init__(
            f"triangle {self.triangle} is not counter-clockwise "
            f"(orientation={self.orientation:g})"
        )


__all__ = ['TrigeomError', 'WindingOrderError']
