"""Unit tests for orientation, containment and in-circle predicates."""
import numpy as np
import pytest

from trigeom.core.predicates import (
    are_coincident, orient, to_the_left, to_the_right, point_in_triangle,
    inside_circumcircle, is_ccw,
)
from trigeom.core.geometry import circumcircle_center

TRI = [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)]  # CCW


class TestOrientation:

    def test_orient_sign(self):
        assert orient((0, 1), (0, 0), (1, 0)) > 0
        assert orient((0, -1), (0, 0), (1, 0)) < 0
        assert orient((3, 0), (0, 0), (1, 0)) == 0

    def test_left_and_right(self):
        assert to_the_left((0.0, 1.0), (0.0, 0.0), (1.0, 0.0)) is True
        assert to_the_right((0.0, 1.0), (0.0, 0.0), (1.0, 0.0)) is False
        assert to_the_left((0.0, -1.0), (0.0, 0.0), (1.0, 0.0)) is False
        assert to_the_right((0.0, -1.0), (0.0, 0.0), (1.0, 0.0)) is True

    def test_collinear_counts_as_left(self):
        for p in [(2.0, 0.0), (-5.0, 0.0), (0.5, 0.0), (0.0, 0.0)]:
            assert to_the_left(p, (0.0, 0.0), (1.0, 0.0))
            assert not to_the_right(p, (0.0, 0.0), (1.0, 0.0))

    def test_exactly_one_side_holds(self):
        rng = np.random.default_rng(7)
        pts = rng.uniform(-10, 10, size=(200, 3, 2))
        for p, l0, l1 in pts:
            assert to_the_left(p, l0, l1) != to_the_right(p, l0, l1)

    def test_accepts_numpy_points(self):
        res = to_the_left(np.array([0.0, 1.0]), np.array([0.0, 0.0]), np.array([1.0, 0.0]))
        assert isinstance(res, bool) and res

    def test_is_ccw(self):
        assert is_ccw(*TRI)
        assert not is_ccw(TRI[0], TRI[2], TRI[1])
        assert not is_ccw((0, 0), (1, 1), (2, 2))


class TestPointInTriangle:

    def test_vertices_are_inside(self):
        for v in TRI:
            assert point_in_triangle(v, *TRI)

    def test_edge_points_are_inside(self):
        assert point_in_triangle((0.5, 0.0), *TRI)
        assert point_in_triangle((0.0, 0.5), *TRI)
        assert point_in_triangle((0.5, 0.5), *TRI)

    def test_interior_and_exterior(self):
        assert point_in_triangle((0.25, 0.25), *TRI)
        assert not point_in_triangle((1.0, 1.0), *TRI)
        assert not point_in_triangle((-0.1, 0.2), *TRI)
        assert not point_in_triangle((0.2, -0.1), *TRI)

    def test_clockwise_triangle_gives_defined_answer(self):
        # winding is the caller's job; a CW triangle rejects its own interior
        assert point_in_triangle((0.25, 0.25), TRI[0], TRI[2], TRI[1]) is False


class TestInsideCircumcircle:

    def test_circumcenter_is_inside(self):
        assert inside_circumcircle((0.5, 0.5), *TRI)

    def test_far_point_is_outside(self):
        assert not inside_circumcircle((10.0, 10.0), *TRI)
        assert not inside_circumcircle((-3.0, 0.5), *TRI)

    def test_point_on_circle_is_outside(self):
        # (1,1) lies exactly on the circle through the unit right triangle
        assert not inside_circumcircle((1.0, 1.0), *TRI)

    def test_vertices_are_not_inside(self):
        for v in TRI:
            assert not inside_circumcircle(v, *TRI)

    def test_clockwise_triangle_flips_answer(self):
        assert not inside_circumcircle((0.5, 0.5), TRI[0], TRI[2], TRI[1])

    def test_random_triangles_contain_their_circumcenter(self):
        rng = np.random.default_rng(11)
        checked = 0
        for _ in range(300):
            c0, c1, c2 = rng.uniform(0, 10, size=(3, 2))
            if orient(c2, c0, c1) < 0:
                c1, c2 = c2, c1
            if abs(orient(c2, c0, c1)) < 1.0:
                continue
            center = circumcircle_center(c0, c1, c2)
            assert inside_circumcircle(center, c0, c1, c2)
            checked += 1
        assert checked > 100

    def test_agrees_with_scipy_delaunay(self):
        Delaunay = pytest.importorskip('scipy.spatial').Delaunay
        rng = np.random.default_rng(3)
        pts = rng.uniform(0.0, 1.0, size=(30, 2))
        tri = Delaunay(pts)
        for simplex in tri.simplices:
            i, j, k = (int(s) for s in simplex)
            if orient(pts[k], pts[i], pts[j]) < 0:
                j, k = k, j
            others = set(range(len(pts))) - {i, j, k}
            for o in others:
                assert not inside_circumcircle(pts[o], pts[i], pts[j], pts[k])


class TestAreCoincident:

    def test_close_points(self):
        assert are_coincident((0.0, 0.0), (0.0, 5e-7))
        assert are_coincident((1.5, -2.0), (1.5, -2.0))

    def test_distinct_points(self):
        assert not are_coincident((0.0, 0.0), (0.0, 1e-5))
        assert not are_coincident((0.0, 0.0), (1.0, 1.0))
