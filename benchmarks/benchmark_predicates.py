#!/usr/bin/env python3
"""Benchmark scalar predicates against their vectorized batch versions."""

import argparse
import time
import numpy as np
from trigeom.core import predicates, vectorized_ops, geometry
from trigeom.core.sampling import SeedCounter, random_site


def _timeit(fn, n_iters):
    fn()  # warm up
    start = time.perf_counter()
    for _ in range(n_iters):
        fn()
    return (time.perf_counter() - start) / n_iters


def benchmark_in_circle(points, tri, n_iters):
    scalar = _timeit(lambda: [predicates.inside_circumcircle(p, *tri) for p in points], n_iters)
    batch = _timeit(lambda: vectorized_ops.inside_circumcircle_vectorized(points, *tri), n_iters)
    return scalar, batch


def benchmark_point_in_triangle(points, tri, n_iters):
    scalar = _timeit(lambda: [predicates.point_in_triangle(p, *tri) for p in points], n_iters)
    batch = _timeit(lambda: vectorized_ops.points_in_triangle(points, *tri), n_iters)
    return scalar, batch


def benchmark_circumcenters(points, tris, n_iters):
    scalar = _timeit(lambda: [geometry.circumcircle_center(points[a], points[b], points[c]) for a, b, c in tris], n_iters)
    batch = _timeit(lambda: vectorized_ops.triangles_circumcenters(points, tris), n_iters)
    return scalar, batch


def main():
    ap = argparse.ArgumentParser(description=__doc__)
    ap.add_argument('--points', type=int, default=10000, help='Number of sample sites (default: 10000)')
    ap.add_argument('--iters', type=int, default=5, help='Timed iterations per case (default: 5)')
    ap.add_argument('--seed', type=int, default=1, help='Seed counter start (default: 1)')
    args = ap.parse_args()

    points = random_site((0.0, 0.0), args.points, SeedCounter(args.seed))
    tri = (np.array([-1.0, -1.0]), np.array([1.0, -1.0]), np.array([0.0, 1.0]))
    tris = np.arange((len(points) // 3) * 3).reshape(-1, 3)

    print("=" * 70)
    print(f"PREDICATE BENCHMARK ({len(points)} points, {len(tris)} triangles)")
    print("=" * 70)
    for label, fn, args_ in [
        ("inside_circumcircle", benchmark_in_circle, (points, tri)),
        ("point_in_triangle", benchmark_point_in_triangle, (points, tri)),
        ("circumcircle_center", benchmark_circumcenters, (points, tris)),
    ]:
        scalar, batch = fn(*args_, args.iters)
        speedup = scalar / batch if batch > 0 else float('inf')
        print(f"{label:22s} scalar {scalar*1000:9.3f} ms  vectorized {batch*1000:8.3f} ms  ({speedup:6.1f}x)")


if __name__ == "__main__":
    main()
