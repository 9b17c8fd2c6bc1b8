"""
Geometric primitives for the sweephull triangulation.

Plain float functions, no state. They are called inside the insertion loop
for every point, so they work on scalar coordinates rather than arrays.
"""

import math
from typing import MutableSequence, Sequence, Tuple

INSERTION_SORT_THRESHOLD = 20


def squared_distance(ax: float, ay: float, bx: float, by: float) -> float:
    """Squared euclidean distance, used for comparisons only."""
    dx = ax - bx
    dy = ay - by
    return dx * dx + dy * dy


def in_circle(ax: float, ay: float, bx: float, by: float,
              cx: float, cy: float, px: float, py: float) -> bool:
    """
    Check whether p lies strictly inside the circumcircle of (a, b, c).

    Non-exact floating point test. The sign of the determinant depends on the
    winding of (a, b, c); the triangulation always calls it with the winding
    its triangles are emitted in.

    Args:
        ax, ay, bx, by, cx, cy: Triangle corners
        px, py: Point to test

    Returns:
        True if p is inside the circle
    """
    dx = ax - px
    dy = ay - py
    ex = bx - px
    ey = by - py
    fx = cx - px
    fy = cy - py

    ap = dx * dx + dy * dy
    bp = ex * ex + ey * ey
    cp = fx * fx + fy * fy

    return dx * (ey * cp - bp * fy) - \
        dy * (ex * cp - bp * fx) + \
        ap * (ex * fy - ey * fx) < 0


def circumradius(ax: float, ay: float, bx: float, by: float,
                 cx: float, cy: float) -> float:
    """
    Squared circumradius of triangle (a, b, c).

    Returns +inf for collinear (or coincident) corners; seed selection relies
    on that to detect a fully collinear input.
    """
    dx = bx - ax
    dy = by - ay
    ex = cx - ax
    ey = cy - ay

    cross = dx * ey - dy * ex
    if cross == 0:
        return math.inf

    bl = dx * dx + dy * dy
    cl = ex * ex + ey * ey
    d = 0.5 / cross

    x = (ey * bl - dy * cl) * d
    y = (dx * cl - ex * bl) * d

    return x * x + y * y


def circumcenter(ax: float, ay: float, bx: float, by: float,
                 cx: float, cy: float) -> Tuple[float, float]:
    """
    Circumcenter of triangle (a, b, c).

    Args:
        ax, ay, bx, by, cx, cy: Triangle corners

    Returns:
        (x, y) of the center, or (nan, nan) when the corners are collinear
    """
    dx = bx - ax
    dy = by - ay
    ex = cx - ax
    ey = cy - ay

    cross = dx * ey - dy * ex
    if cross == 0:
        return math.nan, math.nan

    bl = dx * dx + dy * dy
    cl = ex * ex + ey * ey
    d = 0.5 / cross

    x = ax + (ey * bl - dy * cl) * d
    y = ay + (dx * cl - ex * bl) * d

    return x, y


def pseudo_angle(dx: float, dy: float) -> float:
    """
    Monotonic stand-in for the polar angle of (dx, dy), in [0, 1).

    Grows with the real angle but needs no trigonometry. The zero vector
    maps to 0.25.
    """
    denominator = abs(dx) + abs(dy)
    p = dx / denominator if denominator > 0 else 0.0
    return (3 - p if dy > 0 else 1 + p) / 4.0


def _swap(arr: MutableSequence[int], i: int, j: int) -> None:
    arr[i], arr[j] = arr[j], arr[i]


def quicksort(ids: MutableSequence[int], dists: Sequence[float], left: int, right: int,
              threshold: int = INSERTION_SORT_THRESHOLD) -> None:
    """
    Sort ids[left:right + 1] in place by dists[id], ascending.

    Median-of-three Hoare partitioning, with insertion sort for short spans.
    Recurses into the smaller side and loops on the larger one so the call
    depth stays logarithmic. Not stable.

    Args:
        ids: Index permutation to reorder
        dists: Sort key per index (indexed by id, not by position)
        left: First position of the range
        right: Last position of the range (inclusive)
        threshold: Span at or below which insertion sort takes over
    """
    while right - left > threshold:
        median = (left + right) >> 1
        i = left + 1
        j = right
        _swap(ids, median, i)
        if dists[ids[left]] > dists[ids[right]]:
            _swap(ids, left, right)
        if dists[ids[i]] > dists[ids[right]]:
            _swap(ids, i, right)
        if dists[ids[left]] > dists[ids[i]]:
            _swap(ids, left, i)

        temp = ids[i]
        temp_dist = dists[temp]
        while True:
            i += 1
            while dists[ids[i]] < temp_dist:
                i += 1
            j -= 1
            while dists[ids[j]] > temp_dist:
                j -= 1
            if j < i:
                break
            _swap(ids, i, j)

        ids[left + 1] = ids[j]
        ids[j] = temp

        if right - i + 1 >= j - left:
            quicksort(ids, dists, left, j - 1, threshold)
            left = i
        else:
            quicksort(ids, dists, i, right, threshold)
            right = j - 1

    _insertion_sort(ids, dists, left, right)


def _insertion_sort(ids: MutableSequence[int], dists: Sequence[float],
                    left: int, right: int) -> None:
    for i in range(left + 1, right + 1):
        temp = ids[i]
        temp_dist = dists[temp]
        j = i - 1
        while j >= left and dists[ids[j]] > temp_dist:
            ids[j + 1] = ids[j]
            j -= 1
        ids[j + 1] = temp

