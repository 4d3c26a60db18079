"""Billiard parameters: dataclass, validation and parsing (CLI, CGI env, API)."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TextIO

from ellipse_billiard.cli.cgi import get_key, has_key
from ellipse_billiard.config import get_max_reflection_count
from ellipse_billiard.constants import (
    ANGLE_UNITS,
    DEFAULT_ANGLE,
    DEFAULT_ECCENTRICITY,
    DEFAULT_REFLECTION_COUNT,
    DEFAULT_START_OFFSET,
    TWOPI,
)

logger = logging.getLogger(__name__)

_ANGLE_UNIT_ALIASES: dict[str, str] = {
    'rad': 'rad',
    'radian': 'rad',
    'radians': 'rad',
    'deg': 'deg',
    'degree': 'deg',
    'degrees': 'deg',
    'tau': 'tau',
    'turn': 'tau',
    'turns': 'tau',
}


@dataclass
class BilliardParams:
    """Inputs for one billiard trajectory plus output options."""

    eccentricity: float = DEFAULT_ECCENTRICITY
    angle: float = DEFAULT_ANGLE
    start_offset: float = DEFAULT_START_OFFSET
    reflection_count: int = DEFAULT_REFLECTION_COUNT
    title: str = ''
    output_ps: TextIO | None = None
    output_txt: TextIO | None = None


def normalize_angle_unit(unit: str) -> str:
    """Map an angle unit name or alias to 'rad', 'deg' or 'tau'.

    Raises:
        ValueError: Unknown unit.
    """
    key = (unit or 'rad').strip().lower()
    if key in _ANGLE_UNIT_ALIASES:
        return _ANGLE_UNIT_ALIASES[key]
    raise ValueError(f'Unknown angle unit {unit!r}; expected one of {", ".join(ANGLE_UNITS)}')


def wrap_angle(angle: float) -> float:
    """Reduce a finite angle in radians into [0, 2pi); non-finite values pass through."""
    if not math.isfinite(angle):
        return angle
    wrapped = math.fmod(angle, TWOPI)
    if wrapped < 0.0:
        wrapped += TWOPI
    # -tiny + 2pi rounds to 2pi
    if wrapped >= TWOPI:
        wrapped = 0.0
    return wrapped


def parse_angle(value: float | str, unit: str = 'rad') -> float:
    """Convert an angle in ``unit`` to radians in [0, 2pi).

    'tau' is a fraction of a full turn, as the demo's angle slider shows it.
    Angles outside one turn are wrapped, so -45 deg becomes 315 deg.

    Raises:
        ValueError: Value is not numeric or the unit is unknown.
    """
    number = float(value)
    u = normalize_angle_unit(unit)
    if u == 'deg':
        return wrap_angle(math.radians(number))
    if u == 'tau':
        return wrap_angle(number * TWOPI)
    return wrap_angle(number)


def validate_params(params: BilliardParams) -> None:
    """Reject inputs the geometry core cannot handle.

    Raises:
        ValueError: eccentricity outside (0, 1), start_offset outside (-1, 1),
            angle outside [0, 2pi), or reflection_count outside [0, max].
    """
    e = params.eccentricity
    if not (0.0 < e < 1.0):
        raise ValueError(f'eccentricity must be in (0, 1), got {e!r}')
    s = params.start_offset
    if not (-1.0 < s < 1.0):
        raise ValueError(f'start_offset must be in (-1, 1), got {s!r}')
    if not math.isfinite(params.angle):
        raise ValueError(f'angle must be finite, got {params.angle!r}')
    if not (0.0 <= params.angle < TWOPI):
        raise ValueError(f'angle must be in [0, 2pi) radians, got {params.angle!r}')
    n = params.reflection_count
    limit = get_max_reflection_count()
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f'reflection_count must be an integer, got {n!r}')
    if n < 0 or n > limit:
        raise ValueError(f'reflection_count must be in [0, {limit}], got {n}')


def _env_float(name: str, default: float) -> float:
    raw = get_key(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as e:
        logger.error('Invalid %s %r (must be number): %s; using %g', name, raw, e, default)
        return default


def params_from_env() -> BilliardParams | None:
    """Build BilliardParams from CGI-style environment variables.

    Reads eccentricity, angle, angle_unit, start_offset, reflection_count and
    title. Unparseable numbers fall back to the demo defaults.

    Returns:
        BilliardParams, or None if the eccentricity key is missing.
    """
    if not has_key('eccentricity'):
        return None
    eccentricity = _env_float('eccentricity', DEFAULT_ECCENTRICITY)

    unit_raw = get_key('angle_unit', 'rad')
    try:
        unit = normalize_angle_unit(unit_raw)
    except ValueError as e:
        logger.warning('%s; using radians', e)
        unit = 'rad'
    angle = DEFAULT_ANGLE
    angle_raw = get_key('angle')
    if angle_raw:
        try:
            angle = parse_angle(angle_raw, unit)
        except ValueError as e:
            logger.error('Invalid angle %r: %s; using %g rad', angle_raw, e, DEFAULT_ANGLE)

    start_offset = _env_float('start_offset', DEFAULT_START_OFFSET)

    reflection_count = DEFAULT_REFLECTION_COUNT
    count_raw = get_key('reflection_count')
    if count_raw:
        try:
            reflection_count = int(count_raw)
        except ValueError as e:
            logger.error(
                'Invalid reflection_count %r (must be integer): %s; using %d',
                count_raw,
                e,
                DEFAULT_REFLECTION_COUNT,
            )

    return BilliardParams(
        eccentricity=eccentricity,
        angle=angle,
        start_offset=start_offset,
        reflection_count=reflection_count,
        title=get_key('title'),
    )
