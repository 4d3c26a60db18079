"""Fixed constants: demo defaults, limits and drawing styles."""

import math

TWOPI = 2.0 * math.pi

# Initial demo state
DEFAULT_ECCENTRICITY = 0.8
DEFAULT_ANGLE = math.pi / 4.0
DEFAULT_START_OFFSET = 0.3
DEFAULT_REFLECTION_COUNT = 50

# Upper bound on reflection_count when ELLIPSE_BILLIARD_MAX_REFLECTIONS is unset
DEFAULT_MAX_REFLECTION_COUNT = 1000

ANGLE_UNITS = ('rad', 'deg', 'tau')

# Boundary membership tolerance (relative, on x^2/a^2 + y^2/b^2)
BOUNDARY_REL_TOL = 1e-9

# Plotter: outline samples per plane unit, device units per plane unit
RESOLUTION = 100
DEFAULT_SCALE = 100.0

# Page size in PostScript points (US letter) and margin
PAGE_WIDTH_PT = 612.0
PAGE_HEIGHT_PT = 792.0
PAGE_MARGIN_PT = 36.0

# Stroke/fill styles (line width in points, RGB in 0..1)
ELLIPSE_LINE_WIDTH = 2.0
ELLIPSE_RGB = (0.0, 0.0, 0.0)
BOUNCE_LINE_WIDTH = 1.0
BOUNCE_RGB = (1.0, 0.0, 0.0)
LAUNCH_LINE_WIDTH = 2.0
LAUNCH_RGB = (0.0, 0.0, 1.0)
FOCUS_RGB = (0.3, 0.21, 0.82)
FOCUS_RADIUS = 0.05
