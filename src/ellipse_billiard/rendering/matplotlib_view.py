"""Matplotlib-based billiard drawing (alternative to PostScript)."""

from __future__ import annotations

from ellipse_billiard.constants import (
    BOUNCE_LINE_WIDTH,
    BOUNCE_RGB,
    ELLIPSE_LINE_WIDTH,
    ELLIPSE_RGB,
    FOCUS_RADIUS,
    FOCUS_RGB,
    LAUNCH_LINE_WIDTH,
    LAUNCH_RGB,
    RESOLUTION,
)
from ellipse_billiard.geometry.trajectory import Trajectory


def draw_billiard_mpl(
    trajectory: Trajectory,
    output_path: str | None = None,
    title: str = '',
) -> None:
    """Render the trajectory with matplotlib. Requires the matplotlib optional dependency."""
    try:
        import matplotlib
        matplotlib.use('Agg')
        import matplotlib.pyplot as plt
        from matplotlib.patches import Circle
    except ImportError:
        raise ImportError('matplotlib is required for draw_billiard_mpl') from None

    ellipse = trajectory.ellipse
    fig, ax = plt.subplots()
    outline = ellipse.outline(RESOLUTION)
    ax.plot(outline[:, 0], outline[:, 1], color=ELLIPSE_RGB, linewidth=ELLIPSE_LINE_WIDTH)
    bounces = trajectory.bounce_points
    if len(bounces) > 1:
        xs, ys = zip(*bounces)
        ax.plot(xs, ys, color=BOUNCE_RGB, linewidth=BOUNCE_LINE_WIDTH)
    (sx, sy), (hx, hy) = trajectory.launch_segment
    ax.plot([sx, hx], [sy, hy], color=LAUNCH_RGB, linewidth=LAUNCH_LINE_WIDTH)
    for fx, fy in ellipse.foci:
        ax.add_patch(Circle((fx, fy), FOCUS_RADIUS, color=FOCUS_RGB))
    ax.set_aspect('equal')
    ax.set_axis_off()
    if title:
        ax.set_title(title)
    if output_path:
        fig.savefig(output_path)
    plt.close(fig)
