"""Billiard in an ellipse: trajectories of a ball reflecting off an elliptical wall.

This package provides:
- Geometry core: ray/ellipse intersection, root selection and specular reflection
- Trajectory generator: the sequence of bounce points for a launch configuration
- Output: fixed-width point tables and PostScript (or matplotlib) drawings
- CLI: ``ellipse-billiard trajectory|draw``
"""

from ellipse_billiard.geometry.conic import Ellipse, eccentricity_to_radius
from ellipse_billiard.geometry.trajectory import Trajectory, compute_trajectory

__all__: list[str] = [
    'Ellipse',
    'Trajectory',
    'compute_trajectory',
    'eccentricity_to_radius',
]
