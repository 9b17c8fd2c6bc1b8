"""Triangulation result and half-edge navigation."""

import numpy as np
from typing import Iterator, List, Tuple
from dataclasses import dataclass

# Half-edge slot with no opposite, i.e. an edge on the convex hull.
EMPTY = -1


def next_halfedge(e: int) -> int:
    """Next half-edge within the same triangle."""
    return e - 2 if e % 3 == 2 else e + 1


def prev_halfedge(e: int) -> int:
    """Previous half-edge within the same triangle."""
    return e + 2 if e % 3 == 0 else e - 1


def triangle_of_edge(e: int) -> int:
    return e // 3


def edges_of_triangle(t: int) -> Tuple[int, int, int]:
    return 3 * t, 3 * t + 1, 3 * t + 2


@dataclass(frozen=True)
class Triangulation:
    """
    Delaunay triangulation of a point set in half-edge form.

    Triangle t occupies triangles[3t:3t + 3]; slot e is the half-edge that
    starts at point triangles[e]. halfedges[e] is the opposite half-edge in
    the neighbouring triangle, or EMPTY on the hull. Triangles are wound
    clockwise with y pointing up (counter-clockwise on screen).
    """
    hull: np.ndarray       # point ids along the hull, starting at the last hull start
    triangles: np.ndarray  # 3 point ids per triangle
    halfedges: np.ndarray  # opposite half-edge per slot, EMPTY on the hull
    coords: np.ndarray     # flat [x0, y0, x1, y1, ...] input coordinates

    @property
    def points(self) -> np.ndarray:
        """Input coordinates as an (n, 2) view."""
        return self.coords.reshape(-1, 2)

    @property
    def triangle_count(self) -> int:
        return len(self.triangles) // 3

    def triangle_points(self, t: int) -> Tuple[int, int, int]:
        """Point ids of triangle t, in winding order."""
        a, b, c = edges_of_triangle(t)
        return int(self.triangles[a]), int(self.triangles[b]), int(self.triangles[c])

    def triangles_adjacent_to_triangle(self, t: int) -> List[int]:
        """
        Neighbouring triangles of t across each of its edges.

        Hull edges have no neighbour and are left out.
        """
        adjacent = []
        for e in edges_of_triangle(t):
            opposite = int(self.halfedges[e])
            if opposite != EMPTY:
                adjacent.append(triangle_of_edge(opposite))
        return adjacent

    def edges_around_point(self, start: int) -> List[int]:
        """
        Incoming half-edges of the point that half-edge `start` points to.

        Walks the fan around the point until it closes, or stops at the hull
        for points on the boundary.

        Args:
            start: Any half-edge ending at the point

        Returns:
            List of half-edge ids, each ending at the same point
        """
        result = []
        incoming = start
        while True:
            result.append(incoming)
            outgoing = next_halfedge(incoming)
            incoming = int(self.halfedges[outgoing])
            if incoming == EMPTY or incoming == start:
                break
        return result

    def edges(self) -> Iterator[Tuple[int, int]]:
        """Yield every undirected edge once as (p, q) point ids."""
        for e in range(len(self.triangles)):
            opposite = self.halfedges[e]
            if e > opposite:
                yield int(self.triangles[e]), int(self.triangles[next_halfedge(e)])
