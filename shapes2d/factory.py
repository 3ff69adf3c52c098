"""Construction helpers returning :class:`~shapes2d.geometry.Shape` instances."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Sequence, Union

from .errors import ShapeConfigurationError
from .geometry import (
    Circle,
    Hexagon,
    HexagonOrientation,
    Rectangle,
    RoundFactors,
    Shape,
)
from .vector import Vector2D

logger = logging.getLogger(__name__)

_VectorLike = Union[Vector2D, Sequence[float]]


class ShapeFactory:
    """Build shapes by kind.

    Parameters
    ----------
    validate:
        When ``True``, reject out-of-domain parameters (negative radii,
        negative round factors, non-positive rectangle dimensions) with
        :class:`ShapeConfigurationError`.  When ``False`` (the default) they
        are accepted as-is and a warning is logged; the resulting shape
        computes formally valid but physically meaningless values.
    """

    def __init__(self, validate: bool = False) -> None:
        self.validate = validate
        self._builders: Dict[str, Callable[..., Shape]] = {
            "circle": self.circle,
            "rectangle": self.rectangle,
            "hexagon": self.hexagon,
        }

    # ------------------------------------------------------------------
    # Generic entry point
    # ------------------------------------------------------------------

    def create(self, kind: str, **params: Any) -> Shape:
        """Create a shape by *kind* name (``circle``, ``rectangle``, ``hexagon``)."""
        try:
            builder = self._builders[kind.lower()]
        except KeyError:
            raise ShapeConfigurationError(
                f"Unknown shape kind {kind!r}; expected one of {sorted(self._builders)}"
            ) from None
        return builder(**params)

    # ------------------------------------------------------------------
    # Per-kind constructors
    # ------------------------------------------------------------------

    def circle(self, center: _VectorLike, radius: float) -> Circle:
        self._check(radius >= 0.0, f"circle radius must be >= 0, got {radius}")
        shape = Circle(center, radius)
        logger.debug("Created %r", shape)
        return shape

    def rectangle(
        self,
        center: _VectorLike,
        dimensions: _VectorLike,
        rotation_angle_in_degrees: float = 0.0,
        round_factors: Optional[Union[RoundFactors, float, Sequence[float]]] = None,
    ) -> Rectangle:
        shape = Rectangle(center, dimensions, rotation_angle_in_degrees, round_factors)
        self._check(
            shape.width > 0.0 and shape.height > 0.0,
            f"rectangle dimensions must be > 0, got {tuple(shape.dimensions)}",
        )
        rf = shape.round_factors
        self._check(
            min(rf.top_left, rf.top_right, rf.bottom_left, rf.bottom_right) >= 0.0,
            f"round factors must be >= 0, got {rf}",
        )
        logger.debug("Created %r", shape)
        return shape

    def oriented_rectangle(
        self,
        center: _VectorLike,
        dimensions: _VectorLike,
        rotation_angle_in_degrees: float,
    ) -> Rectangle:
        """Rectangle rotated about its center, with sharp corners."""
        return self.rectangle(center, dimensions, rotation_angle_in_degrees)

    def rounded_rectangle(
        self,
        center: _VectorLike,
        dimensions: _VectorLike,
        round_factors: Union[RoundFactors, float, Sequence[float]],
    ) -> Rectangle:
        """Axis-aligned rectangle with rounded corners."""
        return self.rectangle(center, dimensions, 0.0, round_factors)

    def hexagon(
        self,
        center: _VectorLike,
        circumradius: float,
        orientation: Union[HexagonOrientation, str] = HexagonOrientation.HORIZONTAL,
    ) -> Hexagon:
        self._check(
            circumradius >= 0.0, f"hexagon circumradius must be >= 0, got {circumradius}"
        )
        shape = Hexagon(center, circumradius, HexagonOrientation(orientation))
        logger.debug("Created %r", shape)
        return shape

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _check(self, ok: bool, message: str) -> None:
        if ok:
            return
        if self.validate:
            raise ShapeConfigurationError(message)
        logger.warning("Accepting degenerate shape: %s", message)
