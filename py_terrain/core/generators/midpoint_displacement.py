"""
Midpoint displacement (diamond-square) terrain generation.

Builds a square working grid of size 2^n + 1, displaces square and
diamond midpoints with a shrinking random offset, then resamples the
grid onto the target map with bilinear interpolation.
"""

from dataclasses import dataclass

import numpy as np

from ..alea_prng import Seed
from ..exceptions import ConfigurationError
from ..height_map import HeightMap
from .base import TerrainGenerator


@dataclass
class MidpointDisplacementOptions:
    """Options for midpoint displacement generation."""

    roughness: float = 0.5  # Initial displacement scale and per-round decay (0-1)
    min_height: float = 0.0  # Minimum initial corner height
    max_height: float = 1.0  # Maximum initial corner height
    seed: Seed = 42

    def __post_init__(self):
        if not 0.0 <= self.roughness <= 1.0:
            raise ConfigurationError(f"roughness must be within [0, 1], got {self.roughness}")
        if self.min_height > self.max_height:
            raise ConfigurationError(
                f"min_height ({self.min_height}) must not exceed max_height ({self.max_height})"
            )


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n, for n >= 1."""
    return 1 << (n - 1).bit_length()


def _scaled_coordinates(length: int, size: int) -> np.ndarray:
    """Target cell coordinates mapped into working grid space."""
    if length == 1:
        # A single row/column samples the working grid's first row/column
        return np.zeros(1, dtype=np.float64)
    return np.arange(length, dtype=np.float64) * (size - 1) / (length - 1)


class MidpointDisplacementGenerator(TerrainGenerator):
    """Creates fractal-like landscapes with adjustable roughness."""

    name = "Midpoint Displacement Terrain"
    description = "Generates terrain using the midpoint displacement (diamond-square) algorithm"

    def __init__(self, options: MidpointDisplacementOptions = None):
        self.options = options or MidpointDisplacementOptions()
        super().__init__(self.options.seed)

    def _random_height(self) -> float:
        return self._prng.uniform(self.options.min_height, self.options.max_height)

    def _random_displacement(self, displacement: float) -> float:
        return (self._prng.random() * 2 - 1) * displacement

    def build_grid(self, size: int) -> np.ndarray:
        """
        Run diamond-square on a size x size grid.

        Args:
            size: Grid side length, a power of two plus one

        Returns:
            Working grid indexed as grid[y, x]
        """
        grid = np.zeros((size, size), dtype=np.float64)

        grid[0, 0] = self._random_height()
        grid[0, size - 1] = self._random_height()
        grid[size - 1, 0] = self._random_height()
        grid[size - 1, size - 1] = self._random_height()

        roughness = self.options.roughness
        displacement = (self.options.max_height - self.options.min_height) * roughness
        step = size - 1

        while step > 1:
            half_step = step // 2

            # Square step
            for y in range(0, size - 1, step):
                for x in range(0, size - 1, step):
                    average = (
                        grid[y, x]
                        + grid[y, x + step]
                        + grid[y + step, x]
                        + grid[y + step, x + step]
                    ) * 0.25
                    grid[y + half_step, x + half_step] = average + self._random_displacement(
                        displacement
                    )

            # Diamond step
            for y in range(0, size, half_step):
                for x in range((y + half_step) % step, size, step):
                    total = 0.0
                    count = 0
                    if y >= half_step:
                        total += grid[y - half_step, x]
                        count += 1
                    if y + half_step < size:
                        total += grid[y + half_step, x]
                        count += 1
                    if x >= half_step:
                        total += grid[y, x - half_step]
                        count += 1
                    if x + half_step < size:
                        total += grid[y, x + half_step]
                        count += 1

                    grid[y, x] = total / count + self._random_displacement(displacement)

            displacement *= roughness
            step = half_step

        return grid

    def _generate(self, height_map: HeightMap) -> None:
        size = next_power_of_two(max(height_map.width, height_map.height)) + 1
        grid = self.build_grid(size)

        scaled_x = _scaled_coordinates(height_map.width, size)
        scaled_y = _scaled_coordinates(height_map.height, size)[:, np.newaxis]

        x1 = scaled_x.astype(np.int64)
        y1 = scaled_y.astype(np.int64)
        x2 = np.minimum(x1 + 1, size - 1)
        y2 = np.minimum(y1 + 1, size - 1)
        fx = scaled_x - x1
        fy = scaled_y - y1

        # Bilinear interpolation
        values = (
            grid[y1, x1] * (1 - fx) * (1 - fy)
            + grid[y1, x2] * fx * (1 - fy)
            + grid[y2, x1] * (1 - fx) * fy
            + grid[y2, x2] * fx * fy
        )
        height_map.assign(values)
