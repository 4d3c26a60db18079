"""Tests for the plotter and the PostScript/matplotlib drawings."""

from __future__ import annotations

import math
from io import StringIO
from pathlib import Path

import pytest

from ellipse_billiard import compute_trajectory
from ellipse_billiard.geometry.conic import Ellipse
from ellipse_billiard.rendering.draw_billiard import draw_billiard
from ellipse_billiard.rendering.plotter import Plotter
from ellipse_billiard.rendering.postscript import PostScriptFile


def test_plotter_fit_centers_ellipse() -> None:
    """Fitted scale maps the ellipse onto the device area around its center."""
    plotter = Plotter.fit(Ellipse(2.0, 1.0), 400.0, 400.0)
    assert plotter.scale == pytest.approx(100.0)
    assert plotter.screen_coord(0.0, 0.0) == pytest.approx((200.0, 200.0))
    assert plotter.screen_coord(2.0, 0.0) == pytest.approx((400.0, 200.0))
    assert plotter.screen_coord(0.0, 1.0) == pytest.approx((200.0, 300.0))


def test_plotter_origin_and_margin() -> None:
    """Margin shrinks the scale; origin shifts every device coordinate."""
    plotter = Plotter.fit(Ellipse(1.0, 1.0), 300.0, 200.0, margin=50.0, origin=(10.0, 20.0))
    assert plotter.scale == pytest.approx(50.0)
    assert plotter.screen_coord(0.0, 0.0) == pytest.approx((160.0, 120.0))
    with pytest.raises(ValueError, match='margin'):
        Plotter.fit(Ellipse(1.0, 1.0), 100.0, 100.0, margin=60.0)


def test_plotter_ellipse_path_and_circle() -> None:
    """Outline stays inside the area and closes; circles scale their radius."""
    plotter = Plotter.fit(Ellipse(2.0, 1.0), 400.0, 400.0)
    outline = plotter.centered_ellipse(Ellipse(2.0, 1.0))
    assert outline[0] == outline[-1]
    for x, y in outline:
        assert -1e-9 <= x <= 400.0 + 1e-9
        assert 100.0 - 1e-9 <= y <= 300.0 + 1e-9
    assert plotter.path([(1.0, 0.5)])[0] == pytest.approx((300.0, 250.0))
    center, radius = plotter.circle(1.0, 0.0, 0.05)
    assert center == pytest.approx((300.0, 200.0))
    assert radius == pytest.approx(5.0)


def test_postscript_primitives() -> None:
    """Colour, polyline and disc operators are written in PostScript syntax."""
    out = StringIO()
    ps = PostScriptFile(out)
    ps.set_rgb(1.0, 0.0, 0.5)
    ps.polyline([(0.0, 0.0)])
    ps.polyline([(0.0, 0.0), (10.0, 0.0), (10.0, 12.5)], close=True)
    ps.fill_circle(5.0, 5.0, 2.0)
    lines = out.getvalue().splitlines()
    assert lines[0] == '1 0 0.5 setrgbcolor'
    assert lines[1:7] == [
        'newpath',
        '0 0 moveto',
        '10 0 lineto',
        '10 12.5 lineto',
        'closepath',
        'stroke',
    ]
    assert '5 5 2 0 360 arc' in lines


def test_draw_billiard_emits_complete_page() -> None:
    """Drawing has header, outline, red bounces, blue launch, two foci and footer."""
    traj = compute_trajectory(0.8, math.pi / 4.0, 0.3, 50)
    out = StringIO()
    draw_billiard(out, traj, title='Billiard (e=0.8)')
    text = out.getvalue()
    lines = text.splitlines()
    assert lines[0] == '%!PS-Adobe-3.0'
    assert '%%Title: Billiard (e=0.8)' in lines
    assert '1 0 0 setrgbcolor' in lines
    assert '0 0 1 setrgbcolor' in lines
    assert '0.3 0.21 0.82 setrgbcolor' in lines
    assert sum(1 for line in lines if line.endswith(' arc')) == 2
    assert '(Billiard \\(e=0.8\\)) show' in lines
    assert lines.count('stroke') == 3
    assert 'showpage' in lines
    assert lines[-1] == '%%EOF'


def test_draw_billiard_without_title_or_bounces() -> None:
    """Zero reflections still draws outline and launch segment only."""
    traj = compute_trajectory(0.5, 2.0, -0.5, 0)
    out = StringIO()
    draw_billiard(out, traj)
    lines = out.getvalue().splitlines()
    assert not any(line.startswith('%%Title') for line in lines)
    assert not any(line.endswith(' show') for line in lines)
    assert lines.count('stroke') == 2


def test_draw_billiard_paths_stay_inside_margins() -> None:
    """Every moveto/lineto of a long trajectory lies inside the page margins."""
    traj = compute_trajectory(0.8, 5.5, -0.6, 100)
    out = StringIO()
    draw_billiard(out, traj)
    coords = [
        (float(parts[0]), float(parts[1]))
        for parts in (line.split() for line in out.getvalue().splitlines())
        if len(parts) == 3 and parts[2] in ('moveto', 'lineto')
    ]
    assert len(coords) > 100
    for x, y in coords:
        assert 36.0 - 0.01 <= x <= 612.0 - 36.0 + 0.01
        assert 36.0 - 0.01 <= y <= 792.0 - 36.0 + 0.01


def test_draw_billiard_mpl_writes_png(tmp_path: Path) -> None:
    """Matplotlib rendering writes an image file."""
    pytest.importorskip('matplotlib')
    from ellipse_billiard.rendering.matplotlib_view import draw_billiard_mpl

    traj = compute_trajectory(0.8, math.pi / 4.0, 0.3, 20)
    path = tmp_path / 'billiard.png'
    draw_billiard_mpl(traj, str(path), title='Billiard')
    assert path.exists()
    assert path.stat().st_size > 0
