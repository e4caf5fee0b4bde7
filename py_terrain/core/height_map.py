"""
Height map data model.

A height map is a fixed-size 2D grid of normalized elevation values in
[0, 1]. Coordinates are validated on every access; values are clamped.
"""

import numbers
from typing import NamedTuple, Tuple

import numpy as np

from .exceptions import InvalidDimensionError, InvalidValueError, OutOfRangeError


class HeightStatistics(NamedTuple):
    """Aggregate statistics of a height map."""

    min: float
    max: float
    average: float

    @property
    def range(self) -> float:
        return self.max - self.min

    @property
    def midpoint(self) -> float:
        return (self.max + self.min) / 2


def is_integer(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


class HeightMap:
    """
    Two-dimensional terrain height map.

    Heights are stored as float32 in an array of shape (height, width),
    indexed by (x, y) where x is the column and y the row. All cells start
    at 0.0.
    """

    def __init__(self, width: int, height: int):
        """
        Create an empty height map.

        Args:
            width: Number of columns, must be a positive integer
            height: Number of rows, must be a positive integer

        Raises:
            InvalidDimensionError: If either dimension is not a positive integer
        """
        if not is_integer(width) or width <= 0:
            raise InvalidDimensionError(f"Width must be greater than zero, got {width!r}")
        if not is_integer(height) or height <= 0:
            raise InvalidDimensionError(f"Height must be greater than zero, got {height!r}")

        self._width = int(width)
        self._height = int(height)
        self._heights = np.zeros((self._height, self._width), dtype=np.float32)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """Array shape as (height, width)."""
        return self._heights.shape

    def _validate_coordinates(self, x: int, y: int) -> None:
        if not is_integer(x) or not 0 <= x < self._width:
            raise OutOfRangeError(f"X coordinate {x!r} is out of range [0, {self._width - 1}]")
        if not is_integer(y) or not 0 <= y < self._height:
            raise OutOfRangeError(f"Y coordinate {y!r} is out of range [0, {self._height - 1}]")

    def get(self, x: int, y: int) -> float:
        """Height at column x, row y."""
        self._validate_coordinates(x, y)
        return float(self._heights[y, x])

    def set(self, x: int, y: int, value: float) -> None:
        """
        Store a height at column x, row y, clamped into [0, 1].

        Raises:
            OutOfRangeError: If the coordinates fall outside the map
            InvalidValueError: If value is not a real number or is NaN
        """
        self._validate_coordinates(x, y)
        if not isinstance(value, numbers.Real):
            raise InvalidValueError(f"Height at ({x}, {y}) must be a real number, got {value!r}")
        value = float(value)
        if np.isnan(value):
            raise InvalidValueError(f"Height at ({x}, {y}) cannot be NaN")
        self._heights[y, x] = min(max(value, 0.0), 1.0)

    def __getitem__(self, key: Tuple[int, int]) -> float:
        x, y = key
        return self.get(x, y)

    def __setitem__(self, key: Tuple[int, int], value: float) -> None:
        x, y = key
        self.set(x, y, value)

    def assign(self, values: np.ndarray) -> None:
        """
        Overwrite every cell at once.

        Args:
            values: Array of shape (height, width); clamped into [0, 1]

        Raises:
            InvalidDimensionError: If the array shape does not match the map
            InvalidValueError: If any value is NaN
        """
        values = np.asarray(values, dtype=np.float64)
        if values.shape != self._heights.shape:
            raise InvalidDimensionError(
                f"Expected array of shape {self._heights.shape}, got {values.shape}"
            )
        if np.isnan(values).any():
            raise InvalidValueError("Height values cannot be NaN")
        self._heights[:] = np.clip(values, 0.0, 1.0)

    def clear(self) -> None:
        """Reset every cell to 0.0."""
        self._heights.fill(0.0)

    def statistics(self) -> HeightStatistics:
        """Minimum, maximum and average height over the whole grid."""
        if self._heights.size == 0:
            return HeightStatistics(0.0, 0.0, 0.0)

        total = float(np.sum(self._heights, dtype=np.float64))
        return HeightStatistics(
            min=float(self._heights.min()),
            max=float(self._heights.max()),
            average=total / (self._width * self._height),
        )

    def to_array(self) -> np.ndarray:
        """Copy of the heights as a (height, width) float32 array."""
        return self._heights.copy()

    def __repr__(self) -> str:
        return f"HeightMap(width={self._width}, height={self._height})"
