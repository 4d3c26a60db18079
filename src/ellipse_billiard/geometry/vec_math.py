"""Plane vector utilities on (x, y) tuples."""

from __future__ import annotations

import math

Vec2 = tuple[float, float]
Point = tuple[float, float]


def _vdot(a: Vec2, b: Vec2) -> float:
    """Dot product of two 2-vectors."""
    return a[0] * b[0] + a[1] * b[1]


def _vnorm(v: Vec2) -> float:
    """Euclidean norm of 2-vector."""
    return math.sqrt(v[0] * v[0] + v[1] * v[1])


def _vsub(a: Vec2, b: Vec2) -> Vec2:
    """Vector difference a - b."""
    return (a[0] - b[0], a[1] - b[1])


def _vscl(s: float, v: Vec2) -> Vec2:
    """Scale vector: s * v."""
    return (s * v[0], s * v[1])


def _vperp(v: Vec2) -> Vec2:
    """Rotate v by +90 degrees: (x, y) -> (-y, x)."""
    return (-v[1], v[0])


def _vhat(v: Vec2) -> Vec2:
    """Unit vector in direction of v; zero vector if v is zero."""
    n = _vnorm(v)
    if n == 0.0:
        return (0.0, 0.0)
    return (v[0] / n, v[1] / n)
