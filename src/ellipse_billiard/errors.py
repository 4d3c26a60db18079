"""Geometry failures raised by the trajectory engine."""

from __future__ import annotations


class BilliardGeometryError(RuntimeError):
    """Base class: the ellipse/ray geometry assumptions were violated."""


class NegativeDiscriminantError(BilliardGeometryError):
    """The line through a point did not cross the ellipse in two real points."""

    def __init__(self, x0: float, y0: float, angle: float, delta: float) -> None:
        super().__init__(
            f'negative discriminant {delta!r} for line through ({x0!r}, {y0!r}) '
            f'at angle {angle!r}; is the point inside the ellipse?'
        )
        self.x0 = x0
        self.y0 = y0
        self.angle = angle
        self.delta = delta


class NonFiniteAngleError(BilliardGeometryError):
    """The reflected direction at a bounce point is NaN or infinite."""

    def __init__(self, sx: float, sy: float, x0: float, y0: float, angle: float) -> None:
        super().__init__(
            f'outgoing angle {angle!r} is not finite for ray ({sx!r}, {sy!r}) -> '
            f'({x0!r}, {y0!r})'
        )
        self.sx = sx
        self.sy = sy
        self.x0 = x0
        self.y0 = y0
        self.angle = angle
