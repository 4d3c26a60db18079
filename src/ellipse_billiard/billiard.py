"""Billiard tool: trajectory table and PostScript drawing for one parameter set."""

from __future__ import annotations

import logging

from ellipse_billiard.geometry.trajectory import Trajectory, compute_trajectory
from ellipse_billiard.params import BilliardParams, validate_params
from ellipse_billiard.rendering.draw_billiard import draw_billiard
from ellipse_billiard.table import write_trajectory_table

logger = logging.getLogger(__name__)


def run_billiard(params: BilliardParams) -> Trajectory:
    """Validate inputs, compute the trajectory and write the requested outputs.

    Parameters:
        params: Inputs plus optional output_ps / output_txt streams.

    Returns:
        The computed trajectory.

    Raises:
        ValueError: Inputs outside the accepted ranges.
        BilliardGeometryError: The geometry core failed (a RuntimeError).
    """
    validate_params(params)
    trajectory = compute_trajectory(
        params.eccentricity,
        params.angle,
        params.start_offset,
        params.reflection_count,
    )
    logger.info(
        'Trajectory: %d points, first hit (%.6f, %.6f)',
        len(trajectory.points),
        trajectory.first_hit[0],
        trajectory.first_hit[1],
    )
    if params.output_ps is not None:
        draw_billiard(params.output_ps, trajectory, title=params.title)
    if params.output_txt is not None:
        write_trajectory_table(params.output_txt, trajectory)
    return trajectory
