"""
Robust orientation predicate.

The float determinant is accepted when it clears Shewchuk's stage-A error
bound; anything closer to zero is recomputed exactly with rationals. Every
double converts to a Fraction without loss, so the sign of the fallback is
always correct.
"""

from fractions import Fraction
from typing import Sequence

# Machine epsilon as Shewchuk defines it: half an ulp of 1.0.
EPSILON = 2.0 ** -53
CCW_ERRBOUND_A = (3.0 + 16.0 * EPSILON) * EPSILON


def orient2d(ax: float, ay: float, bx: float, by: float, cx: float, cy: float) -> float:
    """
    Orientation of the triple (a, b, c).

    Computes (ax - cx) * (by - cy) - (ay - cy) * (bx - cx) with an exact sign.

    Args:
        ax, ay, bx, by, cx, cy: Point coordinates

    Returns:
        Positive if a, b, c turn counter-clockwise with y pointing up
        (clockwise on a y-down screen), negative for the opposite turn,
        zero if they are collinear. Values produced by the exact fallback
        carry only the sign.
    """
    detleft = (ax - cx) * (by - cy)
    detright = (ay - cy) * (bx - cx)
    det = detleft - detright

    if detleft > 0.0:
        if detright <= 0.0:
            return det
        detsum = detleft + detright
    elif detleft < 0.0:
        if detright >= 0.0:
            return det
        detsum = -detleft - detright
    else:
        return det

    errbound = CCW_ERRBOUND_A * detsum
    if det >= errbound or -det >= errbound:
        return det

    return _orient2d_exact(ax, ay, bx, by, cx, cy)


def _orient2d_exact(ax: float, ay: float, bx: float, by: float, cx: float, cy: float) -> float:
    fcx = Fraction(cx)
    fcy = Fraction(cy)
    det = (Fraction(ax) - fcx) * (Fraction(by) - fcy) - (Fraction(ay) - fcy) * (Fraction(bx) - fcx)
    if det > 0:
        return 1.0
    if det < 0:
        return -1.0
    return 0.0


def orientation(a: Sequence[float], b: Sequence[float], c: Sequence[float]) -> int:
    """Sign of orient2d for three (x, y) pairs: 1, -1 or 0."""
    ccw = orient2d(float(a[0]), float(a[1]), float(b[0]), float(b[1]), float(c[0]), float(c[1]))
    return (ccw > 0) - (ccw < 0)
