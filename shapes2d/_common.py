"""Shared vector helpers used by the shapes2d primitives and geometry.

This module provides:

* **Type alias**: :data:`_F`
* **Vector constructors**: :func:`vec2`, :func:`as_points`
* **Math helpers**: :func:`length`, :func:`dot`
* **Rotations**: :func:`rotate_by_degrees`, :func:`rotate_by_30_degrees`

Not meant to be imported directly by end users — import from
``shapes2d.primitives`` instead.
"""

from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt

# ---------------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------------
_F = npt.NDArray[np.floating]

__all__ = [
    "_F",
    "vec2", "as_points",
    "length", "dot",
    "rotate_by_degrees", "rotate_by_30_degrees",
]

# Truncated cos 30°; vertical hexagon distances depend on this exact value.
_COS_30 = 0.86602540378
_SIN_30 = 0.5


# ===========================================================================
# Vector constructors
# ===========================================================================

def vec2(x: _F, y: _F) -> _F:
    """Stack *x* and *y* into a ``(..., 2)`` array."""
    x, y = np.broadcast_arrays(x, y)
    return np.stack([x, y], axis=-1)


def as_points(p) -> _F:
    """Coerce *p* (tuple, list, ``Vector2D`` or array) to a float ``(..., 2)`` array."""
    return np.asarray(p, dtype=float)


# ===========================================================================
# Math helpers
# ===========================================================================

def length(v: _F) -> _F:
    """Euclidean length along the last axis."""
    return np.linalg.norm(v, axis=-1)


def dot(a: _F, b: _F) -> _F:
    """Dot product along the last axis."""
    return np.sum(a * b, axis=-1)


# ===========================================================================
# Rotations
# ===========================================================================

def _rotate(p: _F, c: float, s: float) -> _F:
    x = p[..., 0]
    y = p[..., 1]
    return vec2(x * c - y * s, x * s + y * c)


def rotate_by_degrees(p: _F, angle_in_degrees: float) -> _F:
    """Rotate *p* counter-clockwise about the origin by *angle_in_degrees*."""
    theta = math.radians(angle_in_degrees)
    return _rotate(p, math.cos(theta), math.sin(theta))


def rotate_by_30_degrees(p: _F) -> _F:
    """Rotate *p* counter-clockwise by 30° using the fixed ``(0.86602540378, 0.5)`` pair."""
    return _rotate(p, _COS_30, _SIN_30)
