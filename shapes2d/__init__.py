"""
shapes2d — 2D Geometric Primitives
==================================

Circles, rectangles (optionally rotated, with independently rounded corners)
and hexagons, each answering three queries: :meth:`~Shape.area`,
:meth:`~Shape.perimeter` and :meth:`~Shape.sdf` (signed distance to the
boundary, negative inside).

Implemented features
--------------------
- Shapes: :class:`Circle`, :class:`Rectangle`, :class:`Hexagon`
- Value types: :class:`Vector2D`, :class:`RoundFactors`, :class:`HexagonOrientation`
- Construction: :class:`ShapeFactory` (optionally validating)
- Sampling: :class:`Grid2D`, :func:`sample_sdf_grid`

Quick start
-----------
::

    from shapes2d import Rectangle, RoundFactors, Vector2D

    rect = Rectangle(
        center=Vector2D(10.0, 10.0),
        dimensions=Vector2D(20.0, 20.0),
        rotation_angle_in_degrees=45.0,
        round_factors=RoundFactors.uniform(2.0),
    )
    rect.area()
    rect.sdf((0.0, 0.0))

    import numpy as np
    pts = np.random.rand(100, 2) * 20.0
    rect.sdf(pts)          # shape (100,)
"""

from .vector import Vector2D
from .geometry import (
    # Base class
    Shape,

    # Shapes
    Circle,
    Rectangle,
    RoundFactors,
    Hexagon,
    HexagonOrientation,
)
from .factory import ShapeFactory
from .errors import ShapeConfigurationError
from .grid import Grid2D, sample_sdf_grid

__version__ = "0.1.0"

__all__ = [
    # Vectors
    "Vector2D",

    # Base
    "Shape",

    # Shapes
    "Circle",
    "Rectangle",
    "RoundFactors",
    "Hexagon",
    "HexagonOrientation",

    # Construction
    "ShapeFactory",
    "ShapeConfigurationError",

    # Grid utilities
    "Grid2D",
    "sample_sdf_grid",
]
