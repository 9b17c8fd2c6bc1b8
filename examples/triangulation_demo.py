#!/usr/bin/env python3
"""
Demonstration of the sweephull triangulation.

Shows:
1. Triangulating a random point set
2. Walking the half-edge structure
3. The collinear fallback
"""

import time

import numpy as np
from py_sweephull import Delaunator, triangulate
from py_sweephull.core import EMPTY


def main():
    print("=== Sweephull Triangulation Demo ===\n")

    # 1. Random points
    print("1. Triangulating random points...")
    rng = np.random.default_rng(2024)
    points = rng.random((5000, 2)) * 1000

    start = time.time()
    result = Delaunator.from_points(points).build()
    elapsed = time.time() - start

    print(f"   - Points: {len(points)}")
    print(f"   - Triangles: {result.triangle_count}")
    print(f"   - Hull size: {len(result.hull)}")
    print(f"   - Build time: {elapsed:.3f}s")

    # 2. Half-edges
    print("\n2. Inspecting the half-edge structure...")
    hull_edges = int(np.sum(result.halfedges == EMPTY))
    edge_count = sum(1 for _ in result.edges())
    print(f"   - Hull half-edges: {hull_edges}")
    print(f"   - Unique edges: {edge_count}")

    t = 0
    print(f"   - Triangle {t}: points {result.triangle_points(t)}, "
          f"neighbours {result.triangles_adjacent_to_triangle(t)}")

    # 3. Degenerate input
    print("\n3. Collinear input...")
    line = triangulate([0, 0, 3, 3, 1, 1, 2, 2])
    print(f"   - Hull: {line.hull.tolist()}")
    print(f"   - Triangles: {line.triangle_count}")

    print("\n=== Demo Complete ===")


if __name__ == "__main__":
    main()
