"""Plane-to-device coordinate mapping for billiard drawings."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from ellipse_billiard.constants import DEFAULT_SCALE, RESOLUTION
from ellipse_billiard.geometry.conic import Ellipse
from ellipse_billiard.geometry.vec_math import Point


class Plotter:
    """Maps ellipse-plane coordinates to a device rectangle.

    The plane origin sits at the center of the device area, y pointing up,
    and one plane unit is ``scale`` device units.
    """

    def __init__(
        self,
        resolution: int = RESOLUTION,
        width: float = 600.0,
        height: float = 600.0,
        scale: float = DEFAULT_SCALE,
        origin: Point = (0.0, 0.0),
    ) -> None:
        """Set up a device area of width x height with lower-left corner at ``origin``."""
        self.resolution = resolution
        self.scale = scale
        # Device extent in plane units
        self.width = width / scale
        self.height = height / scale
        self.origin = origin

    @classmethod
    def fit(
        cls,
        ellipse: Ellipse,
        width: float,
        height: float,
        margin: float = 0.0,
        resolution: int = RESOLUTION,
        origin: Point = (0.0, 0.0),
    ) -> Plotter:
        """Plotter whose scale makes ``ellipse`` fill the area inside ``margin``."""
        usable_w = width - 2.0 * margin
        usable_h = height - 2.0 * margin
        if usable_w <= 0.0 or usable_h <= 0.0:
            raise ValueError(f'margin {margin!r} leaves no room in {width!r} x {height!r}')
        scale = min(usable_w / (2.0 * ellipse.a), usable_h / (2.0 * ellipse.b))
        return cls(resolution, width, height, scale, origin)

    def screen_coord(self, x: float, y: float) -> Point:
        """Device coordinates of plane point (x, y)."""
        return (
            self.origin[0] + (x + self.width / 2.0) * self.scale,
            self.origin[1] + (y + self.height / 2.0) * self.scale,
        )

    def path(self, points: Iterable[Point]) -> list[Point]:
        """Map a polyline to device coordinates."""
        return [self.screen_coord(x, y) for x, y in points]

    def centered_ellipse(self, ellipse: Ellipse) -> list[Point]:
        """Device polyline of the ellipse outline (closed)."""
        outline = ellipse.outline(self.resolution)
        dev = (outline + np.array([self.width / 2.0, self.height / 2.0])) * self.scale
        dev += np.array(self.origin)
        return [(float(px), float(py)) for px, py in dev]

    def circle(self, x: float, y: float, radius: float) -> tuple[Point, float]:
        """Device center and radius of a circle given in plane units."""
        return (self.screen_coord(x, y), radius * self.scale)
