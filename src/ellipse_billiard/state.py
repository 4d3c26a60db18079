"""Billiard demo state: current inputs plus the trajectory cached for them."""

from __future__ import annotations

import logging

from ellipse_billiard.constants import (
    DEFAULT_ANGLE,
    DEFAULT_ECCENTRICITY,
    DEFAULT_REFLECTION_COUNT,
    DEFAULT_START_OFFSET,
)
from ellipse_billiard.geometry.trajectory import Trajectory, compute_trajectory

logger = logging.getLogger(__name__)

_FIELDS = ('eccentricity', 'angle', 'start_offset', 'reflection_count')


class BilliardState:
    """Inputs of the demo and a lazily computed trajectory.

    Any call to ``update`` clears the cache; the next ``trajectory`` access
    recomputes the whole path.
    """

    def __init__(
        self,
        eccentricity: float = DEFAULT_ECCENTRICITY,
        angle: float = DEFAULT_ANGLE,
        start_offset: float = DEFAULT_START_OFFSET,
        reflection_count: int = DEFAULT_REFLECTION_COUNT,
    ) -> None:
        self.eccentricity = eccentricity
        self.angle = angle
        self.start_offset = start_offset
        self.reflection_count = reflection_count
        self._cache: Trajectory | None = None

    def update(self, **changes: float) -> None:
        """Set one or more inputs by name and invalidate the cached trajectory.

        Raises:
            TypeError: Unknown parameter name.
        """
        for name, value in changes.items():
            if name not in _FIELDS:
                raise TypeError(f'unknown billiard parameter {name!r}')
            if name == 'reflection_count':
                value = int(value)
            setattr(self, name, value)
        self.clear()

    def clear(self) -> None:
        """Drop the cached trajectory."""
        self._cache = None

    @property
    def is_cached(self) -> bool:
        return self._cache is not None

    @property
    def trajectory(self) -> Trajectory:
        """Trajectory for the current inputs, computed on first access."""
        if self._cache is None:
            logger.debug(
                'Recomputing trajectory: e=%g angle=%g offset=%g count=%d',
                self.eccentricity,
                self.angle,
                self.start_offset,
                self.reflection_count,
            )
            self._cache = compute_trajectory(
                self.eccentricity, self.angle, self.start_offset, self.reflection_count
            )
        return self._cache
