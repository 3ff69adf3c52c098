"""Immutable 2-D vector value type."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence, Union

import numpy as np

_VectorLike = Union["Vector2D", Sequence[float], np.ndarray]


@dataclass(frozen=True)
class Vector2D:
    """A 2-D floating-point vector.

    Interoperates with NumPy: ``np.asarray(v)`` gives a ``(2,)`` float array,
    so a ``Vector2D`` can be passed anywhere a point array is accepted.
    """

    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def of(cls, value: _VectorLike) -> "Vector2D":
        """Coerce *value* (a ``Vector2D`` or any length-2 sequence) to a ``Vector2D``."""
        if isinstance(value, Vector2D):
            return value
        x, y = np.asarray(value, dtype=float).reshape(2)
        return cls(x, y)

    # ---- arithmetic ----
    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def __mul__(self, k: float) -> "Vector2D":
        return Vector2D(self.x * k, self.y * k)

    __rmul__ = __mul__

    # ---- geometry ----
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def dot(self, other: "Vector2D") -> float:
        return self.x * other.x + self.y * other.y

    def abs(self) -> "Vector2D":
        """Component-wise absolute value."""
        return Vector2D(abs(self.x), abs(self.y))

    def rotate(self, angle_in_degrees: float) -> "Vector2D":
        """Rotate counter-clockwise about the origin."""
        theta = math.radians(angle_in_degrees)
        c = math.cos(theta)
        s = math.sin(theta)
        return Vector2D(self.x * c - self.y * s, self.x * s + self.y * c)

    # ---- interop ----
    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return np.array([self.x, self.y], dtype=dtype or float)
