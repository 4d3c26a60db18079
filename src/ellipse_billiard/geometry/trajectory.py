"""Trajectory generator: launch, then a fixed number of intersect/select/reflect steps."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ellipse_billiard.geometry.branch import select_bounce_hit, select_launch_hit
from ellipse_billiard.geometry.conic import Ellipse
from ellipse_billiard.geometry.intersect import ray_intersections
from ellipse_billiard.geometry.reflect import outgoing_angle
from ellipse_billiard.geometry.vec_math import Point

logger = logging.getLogger(__name__)

Segment = tuple[Point, Point]


@dataclass(frozen=True)
class Trajectory:
    """A computed billiard path.

    Attributes:
        ellipse: The table the ball moves in.
        launch: Starting point on the major axis.
        launch_angle: Launch direction in radians.
        points: launch followed by the successive boundary hits;
            len(points) == reflection_count + 1.
        next_hit: Boundary hit reached after the last entry of ``points``
            (the first hit when reflection_count is 0).
        final_angle: Outgoing direction at ``next_hit``.
    """

    ellipse: Ellipse
    launch: Point
    launch_angle: float
    points: tuple[Point, ...]
    next_hit: Point
    final_angle: float

    @property
    def reflection_count(self) -> int:
        """Number of bounce points after the launch point."""
        return len(self.points) - 1

    @property
    def first_hit(self) -> Point:
        """First boundary point hit from the launch point."""
        if len(self.points) > 1:
            return self.points[1]
        return self.next_hit

    @property
    def bounce_points(self) -> tuple[Point, ...]:
        """Boundary hits in order, without the launch point."""
        return self.points[1:]

    @property
    def launch_segment(self) -> Segment:
        """Leg from the launch point to the first boundary hit."""
        return (self.launch, self.first_hit)

    @property
    def segments(self) -> list[Segment]:
        """All legs in order: launch segment, then bounce-to-bounce legs."""
        legs = [self.launch_segment]
        bounces = self.bounce_points
        legs.extend(zip(bounces[:-1], bounces[1:]))
        return legs


def trajectory_from_ellipse(
    ellipse: Ellipse,
    launch: Point,
    launch_angle: float,
    reflection_count: int,
) -> Trajectory:
    """Compute the trajectory of a ball launched from ``launch`` inside ``ellipse``.

    The first hit uses the launch selection policy; each of the
    ``reflection_count`` following steps intersects the outgoing ray from the
    current boundary point, keeps the farther crossing and reflects there.

    Parameters:
        ellipse: The billiard table.
        launch: Starting point; must lie on the major axis for the launch
            policy to pick the forward hit.
        launch_angle: Launch direction in radians.
        reflection_count: Number of bounce points to emit (>= 0).

    Returns:
        Trajectory with reflection_count + 1 points.

    Raises:
        ValueError: reflection_count is negative.
        NegativeDiscriminantError: A line missed the ellipse.
        NonFiniteAngleError: A reflection produced a non-finite direction.
    """
    if reflection_count < 0:
        raise ValueError(f'reflection_count must be >= 0, got {reflection_count}')

    sx, sy = launch
    first = select_launch_hit(ray_intersections(ellipse, sx, sy, launch_angle), launch_angle)
    angle = outgoing_angle(ellipse, sx, sy, first[0], first[1])
    logger.debug(
        'Launch from (%.6g, %.6g) at %.6g rad hits (%.6g, %.6g), leaves at %.6g rad',
        sx,
        sy,
        launch_angle,
        first[0],
        first[1],
        angle,
    )

    points: list[Point] = [launch]
    current = first
    for _ in range(reflection_count):
        x0, y0 = current
        nxt = select_bounce_hit(ray_intersections(ellipse, x0, y0, angle), x0)
        angle = outgoing_angle(ellipse, x0, y0, nxt[0], nxt[1])
        points.append(current)
        current = nxt

    logger.debug(
        'Computed %d bounces in ellipse a=%.6g b=%.6g', reflection_count, ellipse.a, ellipse.b
    )
    return Trajectory(
        ellipse=ellipse,
        launch=launch,
        launch_angle=launch_angle,
        points=tuple(points),
        next_hit=current,
        final_angle=angle,
    )


def compute_trajectory(
    eccentricity: float,
    launch_angle: float,
    start_offset: float,
    reflection_count: int,
) -> Trajectory:
    """Compute the billiard trajectory for one parameter set.

    Parameters:
        eccentricity: Ellipse eccentricity in (0, 1); b = 1, a = 1/sqrt(1 - e^2).
        launch_angle: Launch direction in radians (0 = +x).
        start_offset: Launch point as a fraction of a along the major axis,
            in (-1, 1).
        reflection_count: Number of bounce points (>= 0).

    Returns:
        Trajectory with reflection_count + 1 points, launch point first.
    """
    ellipse = Ellipse.from_eccentricity(eccentricity)
    launch = (start_offset * ellipse.a, 0.0)
    return trajectory_from_ellipse(ellipse, launch, launch_angle, reflection_count)
