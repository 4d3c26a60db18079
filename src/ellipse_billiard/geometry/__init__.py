"""Ellipse billiard geometry core.

Components, leaf first:

  - conic       Ellipse model (semi-axes from eccentricity, membership tests).
  - intersect   Both crossings of an infinite line with the ellipse boundary.
  - branch      Choice of the forward crossing (launch and bounce policies).
  - reflect     Tangent, inward normal and specular reflection at a boundary point.
  - trajectory  Repeated intersect/select/reflect producing the bounce sequence.

All coordinates are in the ellipse's own plane: origin at the center, x along
the major axis. Directions are angles in radians, 0 meaning +x.
"""

from __future__ import annotations

from ellipse_billiard.geometry.conic import Ellipse, eccentricity_to_radius
from ellipse_billiard.geometry.intersect import Intersections, ray_intersections
from ellipse_billiard.geometry.trajectory import (
    Trajectory,
    compute_trajectory,
    trajectory_from_ellipse,
)

__all__ = [
    'Ellipse',
    'Intersections',
    'Trajectory',
    'compute_trajectory',
    'eccentricity_to_radius',
    'ray_intersections',
    'trajectory_from_ellipse',
]
