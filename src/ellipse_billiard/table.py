"""Text table of trajectory points."""

from __future__ import annotations

from typing import TextIO

from ellipse_billiard.geometry.trajectory import Trajectory
from ellipse_billiard.record import Record

_INDEX_WIDTH = 5
_COORD_WIDTH = 13
_COORD_DECIMALS = 9
_RESID_WIDTH = 10
_RESID_DECIMALS = 2


def write_trajectory_table(stream: TextIO, trajectory: Trajectory) -> None:
    """Write one row per trajectory point: index, x, y, boundary residual.

    Row 0 is the launch point; its residual is x^2/a^2 + y^2/b^2 - 1 like the
    others and is negative since it lies inside the ellipse.
    """
    ellipse = trajectory.ellipse
    rec = Record()
    rec.append('#', _INDEX_WIDTH)
    rec.append('x', _COORD_WIDTH)
    rec.append('y', _COORD_WIDTH)
    rec.append('residual', _RESID_WIDTH)
    rec.write(stream)
    for i, (x, y) in enumerate(trajectory.points):
        rec.append(str(i), _INDEX_WIDTH)
        rec.append_float(x, _COORD_WIDTH, _COORD_DECIMALS)
        rec.append_float(y, _COORD_WIDTH, _COORD_DECIMALS)
        rec.append_exp(ellipse.level(x, y) - 1.0, _RESID_WIDTH, _RESID_DECIMALS)
        rec.write(stream)
