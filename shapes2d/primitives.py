"""2-D SDF math primitives for the shapes2d package.

Re-exports all shared helpers from :mod:`shapes2d._common`, then adds the
primitive SDF for each shape family.

All functions accept and return ``numpy.ndarray`` objects and support
broadcasting over arbitrary leading batch dimensions.  A "point array" *p*
has shape ``(..., 2)`` and is expressed in the shape's local frame (shape
centred at the origin, axis-aligned); scalar SDF results have shape ``(...,)``.

Formulas are adapted from Inigo Quilez's distance function reference:
https://iquilezles.org/articles/distfunctions2d/
"""

from __future__ import annotations

import numpy as np

from ._common import *  # noqa: F401, F403  — re-export shared helpers
from ._common import _F

# Truncated √3 shared by every hexagon quantity (inradius, area, edge normal).
SQRT_3 = 1.7320508


# ===========================================================================
# 2-D primitive SDFs
# ===========================================================================

def sdCircle(p: _F, r: float) -> _F:
    """2-D circle of radius *r* centred at origin."""
    return length(p) - r


def sdBox2D(p: _F, b: _F) -> _F:
    """2-D axis-aligned box with half-extents *b* ``(bx, by)``.

    Not used by the shape classes; kept as the canonical sharp box that
    :func:`sdQuadRoundedBox2D` must reduce to with zero radii.
    """
    d = np.abs(p) - b
    return length(np.maximum(d, 0.0)) + np.minimum(np.maximum(d[..., 0], d[..., 1]), 0.0)


def select_corner_radius(p: _F, r: _F) -> _F:
    """Pick the corner radius of the quadrant each point lies in.

    *r* is ``(top_left, top_right, bottom_left, bottom_right)``.  Points on
    an axis go to the right / top side.
    """
    top_left, top_right, bottom_left, bottom_right = r
    right = p[..., 0] >= 0.0
    top = p[..., 1] >= 0.0
    return np.where(
        right,
        np.where(top, top_right, bottom_right),
        np.where(top, top_left, bottom_left),
    )


def sdQuadRoundedBox2D(p: _F, b: _F, r: _F) -> _F:
    """2-D box with half-extents *b* and an independent radius per corner.

    *r* is ``(top_left, top_right, bottom_left, bottom_right)``.  With all
    radii zero this is exactly :func:`sdBox2D`.
    """
    rq = select_corner_radius(p, r)
    d = np.abs(p) - b + rq[..., None]
    return (
        length(np.maximum(d, 0.0))
        + np.minimum(np.maximum(d[..., 0], d[..., 1]), 0.0)
        - rq
    )


def sdHexagon2D(p: _F, r: float) -> _F:
    """2-D regular hexagon with inradius *r*, flat faces left and right.

    ``|p|`` folds the point into the first quadrant; the larger of the
    slanted-face and vertical-face plane distances is the true distance
    inside and along the symmetry axes.
    """
    q = np.abs(p)
    s = np.array([0.5, 0.5 * SQRT_3])
    return np.maximum(dot(q, s), q[..., 0]) - r
