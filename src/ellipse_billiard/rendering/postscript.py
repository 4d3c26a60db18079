"""PostScript output device: paths, strokes, fills, colour and text."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

from ellipse_billiard.geometry.vec_math import Point


def _fmt(value: float) -> str:
    """Compact number for PostScript operands."""
    return f'{value:.3f}'.rstrip('0').rstrip('.')


class PostScriptFile:
    """PostScript device: move, line, stroke, set colour, fill, text."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def _emit(self, s: str) -> None:
        self._stream.write(s + '\n')

    def header(self, width_pt: float = 612, height_pt: float = 792, title: str = '') -> None:
        """Write the document header for a single portrait page."""
        self._emit('%!PS-Adobe-3.0')
        self._emit('%%Creator: ellipse_billiard')
        if title:
            self._emit(f'%%Title: {title}')
        self._emit(f'%%BoundingBox: 0 0 {int(width_pt)} {int(height_pt)}')
        self._emit('%%Pages: 1')
        self._emit('%%EndComments')
        self._emit('%%Page: 1 1')
        self._emit('save')
        self._emit('1 setlinejoin 1 setlinecap')

    def footer(self) -> None:
        """Write PostScript footer."""
        self._emit('restore')
        self._emit('showpage')
        self._emit('%%Trailer')
        self._emit('%%EOF')

    def set_line_width(self, points: float) -> None:
        """Set line width in points."""
        self._emit(f'{_fmt(points)} setlinewidth')

    def set_gray(self, level: float) -> None:
        """Set gray level 0 (black) to 1 (white)."""
        self._emit(f'{_fmt(level)} setgray')

    def set_rgb(self, r: float, g: float, b: float) -> None:
        """Set stroke/fill colour, components in 0..1."""
        self._emit(f'{_fmt(r)} {_fmt(g)} {_fmt(b)} setrgbcolor')

    def move_to(self, x: float, y: float) -> None:
        """Move current point (no draw)."""
        self._emit(f'{_fmt(x)} {_fmt(y)} moveto')

    def line_to(self, x: float, y: float) -> None:
        """Append line to path."""
        self._emit(f'{_fmt(x)} {_fmt(y)} lineto')

    def polyline(self, points: Sequence[Point], close: bool = False) -> None:
        """Stroke a polyline; fewer than two points draws nothing."""
        if len(points) < 2:
            return
        self._emit('newpath')
        self.move_to(*points[0])
        for x, y in points[1:]:
            self.line_to(x, y)
        if close:
            self._emit('closepath')
        self.stroke()

    def fill_circle(self, x: float, y: float, radius: float) -> None:
        """Fill a disc of ``radius`` centered at (x, y)."""
        self._emit('newpath')
        self._emit(f'{_fmt(x)} {_fmt(y)} {_fmt(radius)} 0 360 arc')
        self._emit('closepath fill')

    def stroke(self) -> None:
        """Stroke the current path and clear it."""
        self._emit('stroke')

    def write_string(
        self, text: str, x: float, y: float, size: float = 10, font: str = 'Helvetica'
    ) -> None:
        """Draw a text string at (x, y) with given font and size."""
        self._emit(f'/{font} findfont {_fmt(size)} scalefont setfont')
        self.move_to(x, y)
        safe = text.replace('\\', '\\\\').replace('(', '\\(').replace(')', '\\)')
        self._emit(f'({safe}) show')
