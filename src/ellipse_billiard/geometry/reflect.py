"""Specular reflection at a point of the ellipse boundary."""

from __future__ import annotations

import math

from ellipse_billiard.errors import NonFiniteAngleError
from ellipse_billiard.geometry.conic import Ellipse
from ellipse_billiard.geometry.vec_math import Vec2, _vdot, _vhat, _vperp, _vscl, _vsub


def tangent_vector(ellipse: Ellipse, x0: float, y0: float) -> Vec2:
    """Tangent direction (not normalized) at boundary point (x0, y0).

    Vertices are special-cased: (0, 1) on the x axis, (1, 0) on the y axis.
    Elsewhere (x0, y0 - b^2/y0), which is parallel to (a^2 y0, -b^2 x0) on
    the boundary.
    """
    if y0 == 0.0:
        return (0.0, 1.0)
    if x0 == 0.0:
        return (1.0, 0.0)
    return (x0, y0 - (ellipse.b * ellipse.b / y0))


def normal_vector(ellipse: Ellipse, x0: float, y0: float) -> Vec2:
    """Unit normal at boundary point (x0, y0), pointing into the ellipse."""
    n = _vhat(_vperp(tangent_vector(ellipse, x0, y0)))
    # Outward normals have a non-negative dot product with the position vector.
    if _vdot(n, (x0, y0)) >= 0.0:
        return (-n[0], -n[1])
    return n


def reflect(v: Vec2, n: Vec2) -> Vec2:
    """Reflect v about the line with unit normal n: v - 2 (v.n) n."""
    return _vsub(v, _vscl(2.0 * _vdot(v, n), n))


def outgoing_angle(ellipse: Ellipse, sx: float, sy: float, x0: float, y0: float) -> float:
    """Direction after bouncing at (x0, y0) for a ray that came from (sx, sy).

    Parameters:
        ellipse: The billiard table.
        sx, sy: Where the incoming ray started.
        x0, y0: Bounce point on the boundary.

    Returns:
        Outgoing angle in radians, in (-pi, pi].

    Raises:
        NonFiniteAngleError: The reflected direction is NaN or infinite.
    """
    v = (x0 - sx, y0 - sy)
    ox, oy = reflect(v, normal_vector(ellipse, x0, y0))
    angle = math.atan2(oy, ox)
    if not math.isfinite(angle):
        raise NonFiniteAngleError(sx, sy, x0, y0, angle)
    return angle
