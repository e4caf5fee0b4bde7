"""
Terrain generation algorithms.
"""

from .base import TerrainGenerator
from .random_terrain import RandomTerrainGenerator, RandomTerrainOptions
from .perlin_noise import PerlinNoiseGenerator, PerlinNoiseOptions, perlin_noise
from .midpoint_displacement import (
    MidpointDisplacementGenerator,
    MidpointDisplacementOptions,
    next_power_of_two,
)

__all__ = ['TerrainGenerator',
           'RandomTerrainGenerator', 'RandomTerrainOptions',
           'PerlinNoiseGenerator', 'PerlinNoiseOptions', 'perlin_noise',
           'MidpointDisplacementGenerator', 'MidpointDisplacementOptions', 'next_power_of_two']
