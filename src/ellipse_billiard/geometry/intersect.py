"""Line/ellipse intersection: both crossings of the line through a point at an angle."""

from __future__ import annotations

import math
from typing import Literal, NamedTuple

from ellipse_billiard.errors import NegativeDiscriminantError
from ellipse_billiard.geometry.conic import Ellipse
from ellipse_billiard.geometry.vec_math import Point

# Above this |sin(angle)| the line is treated as steep and solved for y.
STEEP_SINE = 0.5


class Intersections(NamedTuple):
    """The two algebraic crossings of a line with the ellipse.

    root_a uses +sqrt(delta), root_b uses -sqrt(delta). solved_a/solved_b are
    the quadratic's solutions in the coordinate named by solved_axis.
    """

    root_a: Point
    root_b: Point
    solved_axis: Literal['x', 'y']
    solved_a: float
    solved_b: float


def _solve_quadratic(
    alpha: float, beta: float, gamma: float, x0: float, y0: float, angle: float
) -> tuple[float, float]:
    """Roots (+sqrt, -sqrt) of alpha*u^2 + beta*u + gamma = 0; raises on delta < 0."""
    delta = beta * beta - 4.0 * alpha * gamma
    if not delta >= 0.0:
        raise NegativeDiscriminantError(x0, y0, angle, delta)
    sqrt_delta = math.sqrt(delta)
    return ((-beta + sqrt_delta) / (2.0 * alpha), (-beta - sqrt_delta) / (2.0 * alpha))


def ray_intersections(ellipse: Ellipse, x0: float, y0: float, angle: float) -> Intersections:
    """Intersect the line through (x0, y0) with direction ``angle`` with the ellipse.

    Substituting the line into x^2/a^2 + y^2/b^2 = 1 gives a quadratic in one
    coordinate. Steep lines (|sin| >= 0.5) are solved for y with
    x = y * cot(angle) + offset; shallow lines for x with
    y = x * tan(angle) + offset. Both are the same line; the split keeps the
    slope factor bounded by sqrt(3).

    Parameters:
        ellipse: Ellipse to intersect.
        x0, y0: A point on the line, normally inside or on the ellipse.
        angle: Line direction in radians.

    Returns:
        Intersections with both crossing points.

    Raises:
        NegativeDiscriminantError: The line misses the ellipse (the point was
            outside it) or the inputs are not finite.
    """
    a = ellipse.a
    b = ellipse.b
    sin_t = math.sin(angle)
    if abs(sin_t) >= STEEP_SINE:
        factor = math.cos(angle) / sin_t
        offset = x0 - factor * y0

        alpha = a * a + (b * factor) ** 2
        beta = 2.0 * b * b * offset * factor
        gamma = b * b * (offset * offset - a * a)

        iy0, iy1 = _solve_quadratic(alpha, beta, gamma, x0, y0, angle)
        return Intersections(
            (iy0 * factor + offset, iy0),
            (iy1 * factor + offset, iy1),
            'y',
            iy0,
            iy1,
        )

    factor = math.tan(angle)
    offset = y0 - factor * x0

    alpha = b * b + (a * factor) ** 2
    beta = 2.0 * a * a * offset * factor
    gamma = a * a * (offset * offset - b * b)

    ix0, ix1 = _solve_quadratic(alpha, beta, gamma, x0, y0, angle)
    return Intersections(
        (ix0, factor * ix0 + offset),
        (ix1, factor * ix1 + offset),
        'x',
        ix0,
        ix1,
    )
