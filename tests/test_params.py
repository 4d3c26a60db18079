"""Tests for parameter validation and CGI-style parsing."""

from __future__ import annotations

import logging
import math

import pytest

from ellipse_billiard import compute_trajectory
from ellipse_billiard.params import (
    BilliardParams,
    normalize_angle_unit,
    params_from_env,
    parse_angle,
    validate_params,
    wrap_angle,
)

_ENV_KEYS = ('eccentricity', 'angle', 'angle_unit', 'start_offset', 'reflection_count', 'title')


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for key in (*_ENV_KEYS, 'ELLIPSE_BILLIARD_MAX_REFLECTIONS'):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_params_defaults() -> None:
    """BilliardParams defaults to the demo's initial state."""
    params = BilliardParams()
    assert params.eccentricity == 0.8
    assert params.angle == pytest.approx(math.pi / 4.0)
    assert params.start_offset == 0.3
    assert params.reflection_count == 50
    assert params.title == ''
    assert params.output_ps is None
    assert params.output_txt is None


def test_validate_accepts_defaults(clean_env: pytest.MonkeyPatch) -> None:
    """Default parameters are valid."""
    validate_params(BilliardParams())


@pytest.mark.parametrize(
    ('field', 'value', 'message'),
    [
        ('eccentricity', 1.0, 'eccentricity'),
        ('eccentricity', 0.0, 'eccentricity'),
        ('eccentricity', -0.2, 'eccentricity'),
        ('start_offset', 1.0, 'start_offset'),
        ('start_offset', -1.0, 'start_offset'),
        ('angle', math.inf, 'angle'),
        ('angle', math.nan, 'angle'),
        ('angle', -0.5, 'angle'),
        ('angle', 7.0, 'angle'),
        ('angle', 2.0 * math.pi, 'angle'),
        ('reflection_count', -1, 'reflection_count'),
        ('reflection_count', 1001, 'reflection_count'),
        ('reflection_count', 2.5, 'reflection_count'),
    ],
)
def test_validate_rejects_out_of_range(
    clean_env: pytest.MonkeyPatch, field: str, value: float, message: str
) -> None:
    """Inputs the geometry cannot handle raise ValueError naming the field."""
    params = BilliardParams()
    setattr(params, field, value)
    with pytest.raises(ValueError, match=message):
        validate_params(params)


def test_validate_uses_configured_reflection_limit(clean_env: pytest.MonkeyPatch) -> None:
    """ELLIPSE_BILLIARD_MAX_REFLECTIONS lowers the accepted count."""
    clean_env.setenv('ELLIPSE_BILLIARD_MAX_REFLECTIONS', '10')
    validate_params(BilliardParams(reflection_count=10))
    with pytest.raises(ValueError, match=r'\[0, 10\]'):
        validate_params(BilliardParams(reflection_count=11))


def test_parse_angle_units() -> None:
    """Radians pass through; degrees and turns are converted."""
    assert parse_angle(1.25) == 1.25
    assert parse_angle('180', 'deg') == pytest.approx(math.pi)
    assert parse_angle(0.25, 'tau') == pytest.approx(math.pi / 2.0)
    assert parse_angle('0.5', 'Turns') == pytest.approx(math.pi)


def test_parse_angle_rejects_bad_input() -> None:
    """Unknown units and non-numeric values raise ValueError."""
    with pytest.raises(ValueError, match='Unknown angle unit'):
        parse_angle(1.0, 'grad')
    with pytest.raises(ValueError):
        parse_angle('north', 'deg')
    assert normalize_angle_unit('') == 'rad'


def _forward(angle: float) -> float:
    traj = compute_trajectory(0.8, angle, 0.3, 1)
    (sx, sy), (hx, hy) = traj.launch_segment
    return (hx - sx) * math.cos(angle) + (hy - sy) * math.sin(angle)


def test_wrap_angle_into_one_turn() -> None:
    """Angles outside one turn reduce into [0, 2pi); non-finite values pass through."""
    assert wrap_angle(0.0) == 0.0
    assert wrap_angle(math.pi) == math.pi
    assert wrap_angle(7.0) == pytest.approx(7.0 - 2.0 * math.pi)
    assert wrap_angle(-math.pi / 4.0) == pytest.approx(1.75 * math.pi)
    assert wrap_angle(2.0 * math.pi) == 0.0
    assert 0.0 <= wrap_angle(-1e-300) < 2.0 * math.pi
    assert math.isnan(wrap_angle(math.nan))
    assert wrap_angle(math.inf) == math.inf


@pytest.mark.parametrize(
    ('value', 'unit'),
    [(-0.5, 'rad'), (7.0, 'rad'), (2.0 * math.pi + 0.5, 'rad'), (-45.0, 'deg'), (1.1, 'tau')],
)
def test_parsed_angles_launch_forward(
    clean_env: pytest.MonkeyPatch, value: float, unit: str
) -> None:
    """Wrapped angles validate and the first hit lies ahead of the launch point."""
    angle = parse_angle(value, unit)
    assert 0.0 <= angle < 2.0 * math.pi
    validate_params(BilliardParams(angle=angle))
    assert _forward(angle) > 0.0


def test_params_from_env_missing_eccentricity(clean_env: pytest.MonkeyPatch) -> None:
    """Without an eccentricity form field there is no request."""
    assert params_from_env() is None


def test_params_from_env_reads_all_fields(clean_env: pytest.MonkeyPatch) -> None:
    """All form fields are parsed, with the angle converted from turns."""
    clean_env.setenv('eccentricity', '0.5')
    clean_env.setenv('angle', '0.125')
    clean_env.setenv('angle_unit', 'tau')
    clean_env.setenv('start_offset', '-0.2')
    clean_env.setenv('reflection_count', '12')
    clean_env.setenv('title', 'Test run')
    params = params_from_env()
    assert params is not None
    assert params.eccentricity == 0.5
    assert params.angle == pytest.approx(math.pi / 4.0)
    assert params.start_offset == -0.2
    assert params.reflection_count == 12
    assert params.title == 'Test run'


def test_params_from_env_invalid_values_fall_back(
    clean_env: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """Unparseable numbers are logged and replaced by the defaults."""
    clean_env.setenv('eccentricity', 'oval')
    clean_env.setenv('angle', 'up')
    clean_env.setenv('angle_unit', 'gon')
    clean_env.setenv('reflection_count', 'many')
    with caplog.at_level(logging.WARNING, logger='ellipse_billiard.params'):
        params = params_from_env()
    assert params is not None
    assert params.eccentricity == 0.8
    assert params.angle == pytest.approx(math.pi / 4.0)
    assert params.reflection_count == 50
    assert 'Invalid eccentricity' in caplog.text
    assert 'Invalid reflection_count' in caplog.text
    assert 'Unknown angle unit' in caplog.text


@pytest.mark.parametrize(
    ('raw', 'unit', 'expected'),
    [
        ('-0.5', 'rad', 2.0 * math.pi - 0.5),
        ('7', 'rad', 7.0 - 2.0 * math.pi),
        ('-45', 'deg', 1.75 * math.pi),
        ('1.1', 'tau', 0.2 * math.pi),
    ],
)
def test_params_from_env_wraps_angle(
    clean_env: pytest.MonkeyPatch, raw: str, unit: str, expected: float
) -> None:
    """Form angles outside one turn are wrapped and still launch forward."""
    clean_env.setenv('eccentricity', '0.8')
    clean_env.setenv('angle', raw)
    clean_env.setenv('angle_unit', unit)
    params = params_from_env()
    assert params is not None
    assert params.angle == pytest.approx(expected)
    validate_params(params)
    assert _forward(params.angle) > 0.0
