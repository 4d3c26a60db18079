"""Ellipse model: axis-aligned, centered at the origin, built from an eccentricity."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from ellipse_billiard.constants import BOUNDARY_REL_TOL, TWOPI


def eccentricity_to_radius(e: float) -> tuple[float, float]:
    """Return semi-axes (a, b) of the ellipse with eccentricity ``e`` and b = 1.

    No range check: ``e`` must lie in (0, 1). At e = 1 the division fails and
    beyond it the square root does.
    """
    a = 1.0 / math.sqrt(1.0 - e * e)
    return (a, 1.0)


@dataclass(frozen=True)
class Ellipse:
    """Ellipse x^2/a^2 + y^2/b^2 = 1 with semi-major a along x and semi-minor b along y."""

    a: float
    b: float

    @classmethod
    def from_eccentricity(cls, e: float) -> Ellipse:
        """Build the ellipse with b = 1 and the given eccentricity."""
        a, b = eccentricity_to_radius(e)
        return cls(a, b)

    @property
    def eccentricity(self) -> float:
        """Eccentricity sqrt(1 - b^2/a^2)."""
        return math.sqrt(1.0 - (self.b * self.b) / (self.a * self.a))

    @property
    def focal_distance(self) -> float:
        """Distance from center to each focus, sqrt(a^2 - b^2)."""
        return math.sqrt(max(self.a * self.a - self.b * self.b, 0.0))

    @property
    def foci(self) -> tuple[tuple[float, float], tuple[float, float]]:
        """The two foci, (-c, 0) then (c, 0)."""
        c = self.focal_distance
        return ((-c, 0.0), (c, 0.0))

    def level(self, x: float, y: float) -> float:
        """Value of x^2/a^2 + y^2/b^2 (1 on the boundary, < 1 inside)."""
        return (x * x) / (self.a * self.a) + (y * y) / (self.b * self.b)

    def contains(self, x: float, y: float) -> bool:
        """True if (x, y) is inside or on the boundary."""
        return self.level(x, y) <= 1.0

    def on_boundary(self, x: float, y: float, rel_tol: float = BOUNDARY_REL_TOL) -> bool:
        """True if (x, y) satisfies the ellipse equation within ``rel_tol``."""
        return math.isclose(self.level(x, y), 1.0, rel_tol=rel_tol)

    def outline(self, resolution: int) -> np.ndarray:
        """Closed outline as an (n + 1, 2) array of boundary points.

        Parameters:
            resolution: Samples per unit of plane length along the major axis
                (at least 8 points are always produced).

        Returns:
            Array of points; the last row repeats the first.
        """
        count = max(int(math.ceil(TWOPI * self.a * resolution)), 8)
        t = np.linspace(0.0, TWOPI, count + 1)
        points = np.column_stack((self.a * np.cos(t), self.b * np.sin(t)))
        points[-1] = points[0]
        return points
