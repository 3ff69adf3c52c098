"""Fixed-size 2D value grid and SDF sampling onto it."""

from __future__ import annotations

import logging

import numpy as np
import numpy.typing as npt

from .geometry import Shape

logger = logging.getLogger(__name__)

_Array = npt.NDArray[np.floating]


class Grid2D:
    """Row-major grid of ``columns × rows`` floats, zero-initialised.

    Raises
    ------
    ValueError
        If *columns* or *rows* is smaller than 1.
    """

    def __init__(self, columns: int, rows: int) -> None:
        if columns < 1 or rows < 1:
            raise ValueError("Grid size of rows and columns must be greater than zero.")
        self._columns = int(columns)
        self._rows = int(rows)
        self._grid = np.zeros(self._columns * self._rows, dtype=float)

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def values(self) -> _Array:
        """Read-only ``(rows, columns)`` view of the grid."""
        view = self._grid.reshape(self._rows, self._columns).view()
        view.flags.writeable = False
        return view

    def get_value_by_index(self, index: int) -> float:
        return float(self._grid[index])

    def get_value(self, column: int, row: int) -> float:
        return float(self._grid[self._index(column, row)])

    def set_value_by_index(self, index: int, value: float) -> None:
        self._grid[index] = value

    def set_value(self, column: int, row: int, value: float) -> None:
        self._grid[self._index(column, row)] = value

    def get_smallest_number(self) -> float:
        return float(np.nanmin(self._grid))

    def get_largest_number(self) -> float:
        return float(np.nanmax(self._grid))

    def _index(self, column: int, row: int) -> int:
        if not (0 <= column < self._columns and 0 <= row < self._rows):
            raise IndexError(
                f"Cell ({column}, {row}) outside {self._columns}x{self._rows} grid"
            )
        return row * self._columns + column


def sample_sdf_grid(shape: Shape, columns: int, rows: int) -> Grid2D:
    """Evaluate *shape* at every integer lattice point ``(column, row)``.

    Parameters
    ----------
    shape:
        Any :class:`~shapes2d.geometry.Shape`.
    columns, rows:
        Grid size; cell ``(c, r)`` holds ``shape.sdf((c, r))``.

    Returns
    -------
    Grid2D
        Grid filled with signed distances.
    """
    grid = Grid2D(columns, rows)
    logger.debug("Sampling %s on a %dx%d grid", type(shape).__name__, columns, rows)

    Y, X = np.meshgrid(
        np.arange(rows, dtype=float), np.arange(columns, dtype=float), indexing="ij"
    )
    p = np.stack([X, Y], axis=-1)
    grid._grid[:] = np.asarray(shape.sdf(p), dtype=float).ravel()
    return grid
