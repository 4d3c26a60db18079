"""Input Parameters section written ahead of each result."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from ellipse_billiard.constants import TWOPI
from ellipse_billiard.geometry.conic import eccentricity_to_radius

if TYPE_CHECKING:
    from ellipse_billiard.params import BilliardParams

_LABEL_WIDTH = 15


def _w(stream: TextIO, label: str, value: str) -> None:
    """Write one 'label: value' line with labels right-aligned."""
    stream.write(f'{label:>{_LABEL_WIDTH}}: {value}\n')


def write_input_parameters(stream: TextIO, params: BilliardParams) -> None:
    """Summarize the request: eccentricity and axes, launch, reflection count.

    Parameters:
        stream: Output text stream.
        params: Validated billiard parameters (eccentricity must be in (0, 1)).
    """
    a, b = eccentricity_to_radius(params.eccentricity)
    stream.write('Input Parameters\n')
    stream.write('----------------\n')
    stream.write('\n')
    if params.title:
        _w(stream, 'Title', params.title)
    _w(stream, 'Eccentricity', f'{params.eccentricity:.4f}')
    _w(stream, 'Semi-axes', f'a = {a:.6f}, b = {b:.6f}')
    _w(stream, 'Launch angle', f'{params.angle:.6f} rad ({params.angle / TWOPI:.4f} tau)')
    _w(stream, 'Starting offset', f'{params.start_offset:.4f} ({params.start_offset * a:.6f}, 0)')
    _w(stream, 'Reflections', str(params.reflection_count))
    stream.write('\n')
