"""Forward-hit selection among the two line/ellipse crossings.

Two policies are used. The launch policy applies to the first hit from the
starting point on the major axis; the bounce policy to every later hit, where
the ray starts on the boundary itself.
"""

from __future__ import annotations

import math

from ellipse_billiard.geometry.intersect import Intersections
from ellipse_billiard.geometry.vec_math import Point


def select_launch_hit(intersections: Intersections, angle: float) -> Point:
    """Pick the first boundary hit of a ray launched from the major axis.

    When root A lies exactly on the x axis the ray runs along the major axis:
    angle 0 hits the positive vertex, anything else the negative one.
    Otherwise angles above pi go to the lower crossing (y < 0) and the rest
    to the upper one.

    Parameters:
        intersections: Crossings of the launch line.
        angle: Launch angle in radians, as given by the caller (not reduced).

    Returns:
        The selected boundary point.
    """
    (ix0, iy0), (ix1, iy1) = intersections.root_a, intersections.root_b
    if iy0 == 0.0:
        if angle == 0.0:
            return (abs(ix0), 0.0)
        return (-abs(ix0), 0.0)

    if iy0 < 0.0:
        lower, upper = (ix0, iy0), (ix1, iy1)
    else:
        lower, upper = (ix1, iy1), (ix0, iy0)
    if angle > math.pi:
        return lower
    return upper


def select_bounce_hit(intersections: Intersections, x0: float) -> Point:
    """Pick the next hit from a boundary point: the crossing farther from ``x0`` in x.

    One crossing is (up to rounding) the current point itself, so the other
    one is the hit ahead of the ray. Ties go to root B.
    """
    d0 = abs(intersections.root_a[0] - x0)
    d1 = abs(intersections.root_b[0] - x0)
    if d0 > d1:
        return intersections.root_a
    return intersections.root_b
