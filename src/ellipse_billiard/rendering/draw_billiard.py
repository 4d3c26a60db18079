"""PostScript drawing of a billiard trajectory: outline, launch, bounces, foci."""

from __future__ import annotations

import logging
from typing import TextIO

from ellipse_billiard.constants import (
    BOUNCE_LINE_WIDTH,
    BOUNCE_RGB,
    ELLIPSE_LINE_WIDTH,
    ELLIPSE_RGB,
    FOCUS_RADIUS,
    FOCUS_RGB,
    LAUNCH_LINE_WIDTH,
    LAUNCH_RGB,
    PAGE_HEIGHT_PT,
    PAGE_MARGIN_PT,
    PAGE_WIDTH_PT,
)
from ellipse_billiard.geometry.trajectory import Trajectory
from ellipse_billiard.rendering.plotter import Plotter
from ellipse_billiard.rendering.postscript import PostScriptFile

logger = logging.getLogger(__name__)

# Space reserved under the top margin for the title line
_TITLE_BAND_PT = 24.0
_TITLE_FONT_SIZE = 12.0


def draw_billiard(
    stream: TextIO,
    trajectory: Trajectory,
    title: str = '',
    width_pt: float = PAGE_WIDTH_PT,
    height_pt: float = PAGE_HEIGHT_PT,
) -> None:
    """Write a one-page PostScript drawing of ``trajectory``.

    Draw order: ellipse outline, bounce polyline, launch segment, then both
    foci as filled discs so they stay visible over the path.

    Parameters:
        stream: Output text stream.
        trajectory: Computed trajectory.
        title: Optional caption at the top of the page.
        width_pt: Page width in points.
        height_pt: Page height in points.
    """
    ps = PostScriptFile(stream)
    ps.header(width_pt, height_pt, title=title)

    area_h = height_pt - (_TITLE_BAND_PT if title else 0.0)
    plotter = Plotter.fit(trajectory.ellipse, width_pt, area_h, margin=PAGE_MARGIN_PT)
    logger.debug('Drawing %d points at scale %.3f pt/unit', len(trajectory.points), plotter.scale)

    ps.set_line_width(ELLIPSE_LINE_WIDTH)
    ps.set_rgb(*ELLIPSE_RGB)
    ps.polyline(plotter.centered_ellipse(trajectory.ellipse), close=True)

    ps.set_line_width(BOUNCE_LINE_WIDTH)
    ps.set_rgb(*BOUNCE_RGB)
    ps.polyline(plotter.path(trajectory.bounce_points))

    ps.set_line_width(LAUNCH_LINE_WIDTH)
    ps.set_rgb(*LAUNCH_RGB)
    ps.polyline(plotter.path(trajectory.launch_segment))

    ps.set_rgb(*FOCUS_RGB)
    for fx, fy in trajectory.ellipse.foci:
        (cx, cy), radius = plotter.circle(fx, fy, FOCUS_RADIUS)
        ps.fill_circle(cx, cy, radius)

    if title:
        ps.set_gray(0.0)
        ps.write_string(
            title,
            PAGE_MARGIN_PT,
            height_pt - PAGE_MARGIN_PT - _TITLE_FONT_SIZE,
            size=_TITLE_FONT_SIZE,
        )
    ps.footer()
