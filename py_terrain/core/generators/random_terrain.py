"""Uniform random terrain: every cell is an independent random height."""

from dataclasses import dataclass

import numpy as np

from ..alea_prng import Seed
from ..exceptions import ConfigurationError
from ..height_map import HeightMap
from .base import TerrainGenerator


@dataclass
class RandomTerrainOptions:
    """Options for random terrain generation."""

    min_height: float = 0.0
    max_height: float = 1.0
    seed: Seed = 42

    def __post_init__(self):
        if self.min_height > self.max_height:
            raise ConfigurationError(
                f"min_height ({self.min_height}) must not exceed max_height ({self.max_height})"
            )


class RandomTerrainGenerator(TerrainGenerator):
    """Produces noise-like terrain with no coherent features."""

    name = "Random Terrain"
    description = "Generates terrain using random noise with configurable height range"

    def __init__(self, options: RandomTerrainOptions = None):
        self.options = options or RandomTerrainOptions()
        super().__init__(self.options.seed)

    def _generate(self, height_map: HeightMap) -> None:
        low = self.options.min_height
        high = self.options.max_height

        # Row-major draw order keeps output reproducible for a given seed
        values = np.empty(height_map.shape, dtype=np.float64)
        for y in range(height_map.height):
            for x in range(height_map.width):
                values[y, x] = self._prng.uniform(low, high)

        height_map.assign(values)
