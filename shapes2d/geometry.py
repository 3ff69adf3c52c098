"""2D shape value types with area, perimeter and signed distance queries."""

from __future__ import annotations

import enum
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Sequence, Union

import numpy as np
import numpy.typing as npt

from . import primitives as sdf
from .vector import Vector2D

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------
_Array = npt.NDArray[np.floating]
_PointLike = Union[Vector2D, Sequence[float], _Array]


# ===========================================================================
# Base class
# ===========================================================================

class Shape(ABC):
    """Base class for 2D shapes.

    Every shape answers three queries:

    - :meth:`area` — measure of the enclosed region.
    - :meth:`perimeter` — boundary length.
    - :meth:`sdf` — signed distance to the boundary, negative strictly
      inside, zero on the boundary and positive outside.

    ``sdf`` accepts a single point (``Vector2D`` or length-2 sequence) or a
    ``(..., 2)`` array of points and broadcasts over the leading axes.
    """

    @abstractmethod
    def area(self) -> float:
        ...

    @abstractmethod
    def perimeter(self) -> float:
        ...

    @abstractmethod
    def sdf(self, point: _PointLike) -> _Array:
        ...

    def __call__(self, point: _PointLike) -> _Array:
        return self.sdf(point)

    def contains(self, point: _PointLike) -> _Array:
        """``True`` where *point* lies inside or on the boundary."""
        return self.sdf(point) <= 0.0

    def _local(self, point: _PointLike, center: Vector2D) -> _Array:
        return sdf.as_points(point) - np.asarray(center)


# ===========================================================================
# Circle
# ===========================================================================

@dataclass(frozen=True)
class Circle(Shape):
    """Circle with *center* and *radius*."""

    center: Vector2D
    radius: float

    def __post_init__(self):
        object.__setattr__(self, "center", Vector2D.of(self.center))
        object.__setattr__(self, "radius", float(self.radius))

    @property
    def diameter(self) -> float:
        return self.radius * 2.0

    def circumference(self) -> float:
        return 2.0 * math.pi * self.radius

    def area(self) -> float:
        return math.pi * self.radius ** 2

    def perimeter(self) -> float:
        return self.circumference()

    def sdf(self, point: _PointLike) -> _Array:
        return sdf.sdCircle(self._local(point, self.center), self.radius)


# ===========================================================================
# Rectangle
# ===========================================================================

@dataclass(frozen=True)
class RoundFactors:
    """Corner radii of a rectangle, one per corner (all zero = sharp corners)."""

    top_left: float = 0.0
    top_right: float = 0.0
    bottom_left: float = 0.0
    bottom_right: float = 0.0

    def __post_init__(self):
        for name in ("top_left", "top_right", "bottom_left", "bottom_right"):
            object.__setattr__(self, name, float(getattr(self, name)))

    @classmethod
    def uniform(cls, radius: float) -> "RoundFactors":
        return cls(radius, radius, radius, radius)

    @classmethod
    def of(cls, value: Union["RoundFactors", float, Sequence[float], None]) -> "RoundFactors":
        """Coerce ``None``, a single radius or a 4-sequence to ``RoundFactors``."""
        if value is None:
            return cls()
        if isinstance(value, RoundFactors):
            return value
        if np.ndim(value) == 0:
            return cls.uniform(float(value))
        return cls(*(float(v) for v in value))

    def as_array(self) -> _Array:
        """``(top_left, top_right, bottom_left, bottom_right)`` as an array."""
        return np.array(
            [self.top_left, self.top_right, self.bottom_left, self.bottom_right],
            dtype=float,
        )

    def mean(self) -> float:
        return float(np.mean(self.as_array()))

    def mean_square(self) -> float:
        return float(np.mean(self.as_array() ** 2))


@dataclass(frozen=True)
class Rectangle(Shape):
    """Rectangle with full-size *dimensions* ``(width, height)`` about *center*.

    The rectangle is rotated counter-clockwise about its center by
    *rotation_angle_in_degrees* and each corner may be rounded by its own
    radius in *round_factors*.  Plain, oriented and rounded rectangles are
    all this one type with the unused parameters left at their defaults.

    Parameters
    ----------
    center:
        Center of the rectangle.
    dimensions:
        ``(width, height)``, not half-extents.
    rotation_angle_in_degrees:
        Counter-clockwise rotation about *center*.
    round_factors:
        :class:`RoundFactors`, a single radius for all corners, or a
        ``(top_left, top_right, bottom_left, bottom_right)`` sequence.
        Corners are named in the rectangle's own (unrotated) frame.
    """

    center: Vector2D
    dimensions: Vector2D
    rotation_angle_in_degrees: float = 0.0
    round_factors: RoundFactors = field(default_factory=RoundFactors)

    def __post_init__(self):
        object.__setattr__(self, "center", Vector2D.of(self.center))
        object.__setattr__(self, "dimensions", Vector2D.of(self.dimensions))
        object.__setattr__(
            self, "rotation_angle_in_degrees", float(self.rotation_angle_in_degrees)
        )
        object.__setattr__(self, "round_factors", RoundFactors.of(self.round_factors))

    @property
    def width(self) -> float:
        return self.dimensions.x

    @property
    def height(self) -> float:
        return self.dimensions.y

    @property
    def half_extents(self) -> Vector2D:
        return self.dimensions * 0.5

    # ------------------------------------------------------------------
    # Corners (rotated about the center)
    # ------------------------------------------------------------------

    def _corner(self, sx: float, sy: float) -> Vector2D:
        h = self.half_extents
        offset = Vector2D(sx * h.x, sy * h.y)
        if self.rotation_angle_in_degrees != 0.0:
            offset = offset.rotate(self.rotation_angle_in_degrees)
        return self.center + offset

    @property
    def top_left(self) -> Vector2D:
        return self._corner(-1.0, 1.0)

    @property
    def top_right(self) -> Vector2D:
        return self._corner(1.0, 1.0)

    @property
    def bottom_left(self) -> Vector2D:
        return self._corner(-1.0, -1.0)

    @property
    def bottom_right(self) -> Vector2D:
        return self._corner(1.0, -1.0)

    # ------------------------------------------------------------------
    # Shape queries
    # ------------------------------------------------------------------

    def area(self) -> float:
        # Each corner loses an r×r square and gains a quarter disc of the
        # mean-square radius; exact when all four radii agree.
        r_squared = self.round_factors.mean_square()
        return self.width * self.height - 4.0 * r_squared + math.pi * r_squared

    def perimeter(self) -> float:
        r = self.round_factors.mean()
        return 2.0 * (self.width + self.height) - 8.0 * r + 2.0 * math.pi * r

    def sdf(self, point: _PointLike) -> _Array:
        p = self._local(point, self.center)
        if self.rotation_angle_in_degrees != 0.0:
            p = sdf.rotate_by_degrees(p, -self.rotation_angle_in_degrees)
        return sdf.sdQuadRoundedBox2D(
            p, np.asarray(self.half_extents), self.round_factors.as_array()
        )


# ===========================================================================
# Hexagon
# ===========================================================================

class HexagonOrientation(enum.Enum):
    """Which way a hexagon points.

    ``HORIZONTAL`` is pointy-top (flat faces left and right); ``VERTICAL``
    is flat-top.
    """

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def _missing_(cls, value):
        # Accept "Vertical", "HORIZONTAL", ...
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        return None


@dataclass(frozen=True)
class Hexagon(Shape):
    """Regular hexagon with *center*, *circumradius* and *orientation*."""

    center: Vector2D
    circumradius: float
    orientation: HexagonOrientation = HexagonOrientation.HORIZONTAL

    def __post_init__(self):
        object.__setattr__(self, "center", Vector2D.of(self.center))
        object.__setattr__(self, "circumradius", float(self.circumradius))
        object.__setattr__(self, "orientation", HexagonOrientation(self.orientation))

    @property
    def inradius(self) -> float:
        return (sdf.SQRT_3 / 2.0) * self.circumradius

    @property
    def apothem(self) -> float:
        return self.inradius

    @property
    def side_length(self) -> float:
        return self.circumradius

    @property
    def maximal_diameter(self) -> float:
        return self.circumradius * 2.0

    @property
    def minimal_diameter(self) -> float:
        return self.inradius * 2.0

    def area(self) -> float:
        return 2.0 * self.inradius ** 2 * sdf.SQRT_3

    def perimeter(self) -> float:
        return 6.0 * self.circumradius

    def sdf(self, point: _PointLike) -> _Array:
        p = self._local(point, self.center)
        if self.orientation is HexagonOrientation.VERTICAL:
            p = sdf.rotate_by_30_degrees(p)
        return sdf.sdHexagon2D(p, self.inradius)
