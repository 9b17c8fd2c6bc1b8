"""
Delaunay triangulation by sweephull.

Points are inserted in order of distance from the circumcenter of a small
seed triangle. Each insertion fans new triangles out to the visible part of
the advancing convex hull, then flips edges until every triangle pair is
Delaunay again. The mesh lives in flat index arrays; there are no node
objects.
"""

import math
import numpy as np
from typing import List, Optional
import structlog

from ..config import Settings, settings as default_settings
from .geometry import (
    squared_distance,
    in_circle,
    circumradius,
    circumcenter,
    pseudo_angle,
    quicksort,
)
from .predicates import orient2d
from .triangulation import EMPTY, Triangulation

logger = structlog.get_logger()

# Points closer than this in both coordinates to the previous inserted point are dropped.
EPSILON = 2.0 ** -52


class Delaunator:
    """
    Sweephull Delaunay triangulator for one point set.

    The instance owns every scratch array used by build(), so separate
    instances can run on separate threads.
    """

    def __init__(self, coords, settings: Optional[Settings] = None):
        """
        Validate the input and allocate scratch arrays.

        Args:
            coords: Flat sequence [x0, y0, x1, y1, ...] of 2n floats
            settings: Tuning settings, defaults to the module-level settings

        Raises:
            ValueError: If coords is not flat or has an odd length
        """
        coords = np.asarray(coords, dtype=np.float64)
        if coords.ndim != 1:
            raise ValueError(
                f"Expected a flat coordinate array, got shape {coords.shape}; use Delaunator.from_points"
            )
        if len(coords) % 2 != 0:
            raise ValueError(f"Expected an even number of coordinates, got {len(coords)}")

        self.settings = settings if settings is not None else default_settings
        self.coords = coords
        self.n = len(coords) // 2

        # Plain floats are much faster than numpy scalars in the insertion loop
        self._coords: List[float] = coords.tolist()

        n = self.n
        self.max_triangles = max(2 * n - 5, 0)

        # advancing convex hull
        self._hash_size = int(math.ceil(math.sqrt(n)))
        self._hull_prev = [0] * n
        self._hull_next = [0] * n
        self._hull_tri = [0] * n
        self._hull_hash = [EMPTY] * self._hash_size
        self._hull_start = 0

        # insertion order
        self._ids = [0] * n
        self._dists = [0.0] * n

        self._edge_stack = [0] * self.settings.edge_stack_size
        self._triangles: List[int] = []
        self._halfedges: List[int] = []
        self._triangles_len = 0
        self._dropped_flips = 0

        self._cx = 0.0
        self._cy = 0.0

    @classmethod
    def from_points(cls, points, settings: Optional[Settings] = None) -> "Delaunator":
        """
        Create a triangulator from an (n, 2) array of points.

        Raises:
            ValueError: If points is not shaped (n, 2)
        """
        points = np.asarray(points, dtype=np.float64)
        if points.size == 0:
            return cls(np.empty(0, dtype=np.float64), settings)
        if points.ndim != 2 or points.shape[1] != 2:
            raise ValueError(f"Expected points of shape (n, 2), got {points.shape}")
        return cls(points.reshape(-1), settings)

    def _hash_key(self, x: float, y: float) -> int:
        angle = pseudo_angle(x - self._cx, y - self._cy)
        return int(math.floor(angle * self._hash_size)) % self._hash_size

    def _link(self, a: int, b: int) -> None:
        self._halfedges[a] = b
        if b != EMPTY:
            self._halfedges[b] = a

    def _add_triangle(self, i0: int, i1: int, i2: int, a: int, b: int, c: int) -> int:
        """Append triangle (i0, i1, i2) and link its edges to half-edges a, b, c."""
        t = self._triangles_len

        self._triangles[t] = i0
        self._triangles[t + 1] = i1
        self._triangles[t + 2] = i2

        self._link(t, a)
        self._link(t + 1, b)
        self._link(t + 2, c)

        self._triangles_len += 3
        return t

    def _legalize(self, a: int) -> int:
        """
        Flip edges around half-edge a until the Delaunay condition holds.

        For edge a with opposite b, the two triangles are (p0, pr, pl) on the
        a side and (pr, p1, pl) on the b side. If p1 falls inside the
        circumcircle of the a triangle, edge pr-pl is replaced by p0-p1 and
        the two edges that became outer edges of the new pair are checked
        next. Pending edges wait on a fixed-size stack instead of the call
        stack; when it is full further flips are not queued.

        Args:
            a: Half-edge just created opposite the inserted point

        Returns:
            Half-edge ar of the last examined triangle, which the caller
            keeps as the hull triangle of the inserted point
        """
        triangles = self._triangles
        halfedges = self._halfedges
        coords = self._coords
        edge_stack = self._edge_stack
        stack_size = len(edge_stack)

        i = 0
        ar = 0

        while True:
            b = halfedges[a]
            a0 = a - a % 3
            ar = a0 + (a + 2) % 3

            if b == EMPTY:
                if i == 0:
                    break
                i -= 1
                a = edge_stack[i]
                continue

            b0 = b - b % 3
            al = a0 + (a + 1) % 3
            bl = b0 + (b + 2) % 3

            p0 = triangles[ar]
            pr = triangles[a]
            pl = triangles[al]
            p1 = triangles[bl]

            illegal = in_circle(
                coords[2 * p0], coords[2 * p0 + 1],
                coords[2 * pr], coords[2 * pr + 1],
                coords[2 * pl], coords[2 * pl + 1],
                coords[2 * p1], coords[2 * p1 + 1])

            if illegal:
                triangles[a] = p1
                triangles[b] = p0

                hbl = halfedges[bl]

                # bl was a hull edge: the hull triangle cache still points at it
                if hbl == EMPTY:
                    e = self._hull_start
                    while True:
                        if self._hull_tri[e] == bl:
                            self._hull_tri[e] = a
                            break
                        e = self._hull_prev[e]
                        if e == self._hull_start:
                            break

                self._link(a, hbl)
                self._link(b, halfedges[ar])
                self._link(ar, bl)

                br = b0 + (b + 1) % 3

                if i < stack_size:
                    edge_stack[i] = br
                    i += 1
                else:
                    self._dropped_flips += 1
            else:
                if i == 0:
                    break
                i -= 1
                a = edge_stack[i]

        return ar

    def _collinear_hull(self) -> Triangulation:
        """Order all points along their common line; no triangles exist."""
        coords = self._coords
        ids = self._ids
        dists = self._dists
        n = self.n

        for i in range(n):
            dx = coords[2 * i] - coords[0]
            dists[i] = dx if dx != 0 else coords[2 * i + 1] - coords[1]

        quicksort(ids, dists, 0, n - 1, self.settings.insertion_sort_threshold)

        hull = []
        d0 = -math.inf
        for i in range(n):
            point_id = ids[i]
            if dists[point_id] > d0:
                hull.append(point_id)
                d0 = dists[point_id]

        logger.info("All points collinear, returning hull only",
                    points=n, hull_size=len(hull))

        return Triangulation(
            hull=np.array(hull, dtype=np.int32),
            triangles=np.empty(0, dtype=np.int32),
            halfedges=np.empty(0, dtype=np.int32),
            coords=self.coords,
        )

    def build(self) -> Triangulation:
        """
        Triangulate the point set.

        Returns:
            Triangulation with the hull, triangles and halfedges arrays
        """
        coords = self._coords
        n = self.n
        ids = self._ids
        dists = self._dists

        self._triangles = [0] * (self.max_triangles * 3)
        self._halfedges = [EMPTY] * (self.max_triangles * 3)
        self._triangles_len = 0
        self._dropped_flips = 0

        if n == 0:
            return self._collinear_hull()

        min_x = math.inf
        min_y = math.inf
        max_x = -math.inf
        max_y = -math.inf

        for i in range(n):
            x = coords[2 * i]
            y = coords[2 * i + 1]
            if x < min_x:
                min_x = x
            if y < min_y:
                min_y = y
            if x > max_x:
                max_x = x
            if y > max_y:
                max_y = y
            ids[i] = i

        cx = (min_x + max_x) / 2.0
        cy = (min_y + max_y) / 2.0

        min_dist = math.inf
        i0 = i1 = i2 = 0

        # seed point closest to the bounding box center
        for i in range(n):
            d = squared_distance(cx, cy, coords[2 * i], coords[2 * i + 1])
            if d < min_dist:
                i0 = i
                min_dist = d

        i0x = coords[2 * i0]
        i0y = coords[2 * i0 + 1]

        min_dist = math.inf

        # closest distinct point to the seed
        for i in range(n):
            if i == i0:
                continue
            d = squared_distance(i0x, i0y, coords[2 * i], coords[2 * i + 1])
            if d < min_dist and d > 0:
                i1 = i
                min_dist = d

        i1x = coords[2 * i1]
        i1y = coords[2 * i1 + 1]

        min_radius = math.inf

        # third point forming the smallest circumcircle with the first two
        for i in range(n):
            if i == i0 or i == i1:
                continue
            r = circumradius(i0x, i0y, i1x, i1y, coords[2 * i], coords[2 * i + 1])
            if r < min_radius:
                i2 = i
                min_radius = r

        if min_radius == math.inf:
            return self._collinear_hull()

        i2x = coords[2 * i2]
        i2y = coords[2 * i2 + 1]

        # every triangle inherits the winding of the seed triangle
        if orient2d(i0x, i0y, i1x, i1y, i2x, i2y) > 0:
            i1, i2 = i2, i1
            i1x, i2x = i2x, i1x
            i1y, i2y = i2y, i1y

        self._cx, self._cy = circumcenter(i0x, i0y, i1x, i1y, i2x, i2y)

        logger.debug("Seed triangle selected", i0=i0, i1=i1, i2=i2,
                     center_x=self._cx, center_y=self._cy)

        for i in range(n):
            dists[i] = squared_distance(coords[2 * i], coords[2 * i + 1], self._cx, self._cy)

        quicksort(ids, dists, 0, n - 1, self.settings.insertion_sort_threshold)

        hull_next = self._hull_next
        hull_prev = self._hull_prev
        hull_tri = self._hull_tri
        hash_size = self._hash_size

        self._hull_start = i0
        hull_size = 3

        hull_next[i0] = hull_prev[i2] = i1
        hull_next[i1] = hull_prev[i0] = i2
        hull_next[i2] = hull_prev[i1] = i0

        hull_tri[i0] = 0
        hull_tri[i1] = 1
        hull_tri[i2] = 2

        self._hull_hash = hull_hash = [EMPTY] * hash_size
        hull_hash[self._hash_key(i0x, i0y)] = i0
        hull_hash[self._hash_key(i1x, i1y)] = i1
        hull_hash[self._hash_key(i2x, i2y)] = i2

        self._add_triangle(i0, i1, i2, EMPTY, EMPTY, EMPTY)

        xp = 0.0
        yp = 0.0
        skipped = 0

        for k in range(n):
            i = ids[k]
            x = coords[2 * i]
            y = coords[2 * i + 1]

            if k > 0 and abs(x - xp) <= EPSILON and abs(y - yp) <= EPSILON:
                skipped += 1
                continue
            xp = x
            yp = y

            if i == i0 or i == i1 or i == i2:
                continue

            # a live hull point near the angle of the new point
            start = EMPTY
            key = self._hash_key(x, y)
            for j in range(hash_size):
                candidate = hull_hash[(key + j) % hash_size]
                if candidate != EMPTY and candidate != hull_next[candidate]:
                    start = candidate
                    break
            if start == EMPTY:
                start = self._hull_start

            start = hull_prev[start]
            e = start
            q = hull_next[e]
            while orient2d(x, y, coords[2 * e], coords[2 * e + 1],
                           coords[2 * q], coords[2 * q + 1]) <= 0:
                e = q
                if e == start:
                    e = EMPTY
                    break
                q = hull_next[e]

            # no visible edge: almost certainly a near-duplicate
            if e == EMPTY:
                skipped += 1
                continue

            t = self._add_triangle(e, i, hull_next[e], EMPTY, EMPTY, hull_tri[e])

            hull_tri[i] = self._legalize(t + 2)
            hull_tri[e] = t
            hull_size += 1

            # fan forward over the edges the point can still see
            nxt = hull_next[e]
            q = hull_next[nxt]
            while orient2d(x, y, coords[2 * nxt], coords[2 * nxt + 1],
                           coords[2 * q], coords[2 * q + 1]) > 0:
                t = self._add_triangle(nxt, i, q, hull_tri[i], EMPTY, hull_tri[nxt])
                hull_tri[i] = self._legalize(t + 2)
                hull_next[nxt] = nxt  # removed from the hull
                hull_size -= 1
                nxt = q
                q = hull_next[nxt]

            # and backward, when the first visible edge was the walk start
            if e == start:
                q = hull_prev[e]
                while orient2d(x, y, coords[2 * q], coords[2 * q + 1],
                               coords[2 * e], coords[2 * e + 1]) > 0:
                    t = self._add_triangle(q, i, e, EMPTY, hull_tri[e], hull_tri[q])
                    self._legalize(t + 2)
                    hull_tri[q] = t
                    hull_next[e] = e  # removed from the hull
                    hull_size -= 1
                    e = q
                    q = hull_prev[e]

            self._hull_start = hull_prev[i] = e
            hull_next[e] = hull_prev[nxt] = i
            hull_next[i] = nxt

            hull_hash[self._hash_key(x, y)] = i
            hull_hash[self._hash_key(coords[2 * e], coords[2 * e + 1])] = e

        hull = []
        e = self._hull_start
        for _ in range(hull_size):
            hull.append(e)
            e = hull_next[e]

        triangles_len = self._triangles_len

        logger.info("Triangulation built",
                    points=n,
                    triangles=triangles_len // 3,
                    hull_size=hull_size,
                    skipped_points=skipped,
                    dropped_flips=self._dropped_flips)

        return Triangulation(
            hull=np.array(hull, dtype=np.int32),
            triangles=np.array(self._triangles[:triangles_len], dtype=np.int32),
            halfedges=np.array(self._halfedges[:triangles_len], dtype=np.int32),
            coords=self.coords,
        )


def triangulate(coords, settings: Optional[Settings] = None) -> Triangulation:
    """
    Delaunay triangulation of a flat coordinate array in one call.

    Args:
        coords: Flat sequence [x0, y0, x1, y1, ...]
        settings: Optional tuning settings

    Returns:
        Triangulation of the points
    """
    return Delaunator(coords, settings).build()
