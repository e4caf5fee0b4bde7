"""
Core terrain generation functionality.
"""

from .exceptions import (
    TerrainGenerationError,
    ConfigurationError,
    InvalidDimensionError,
    OutOfRangeError,
    InvalidInputError,
    InvalidValueError,
    GenerationError,
)
from .alea_prng import AleaPRNG
from .height_map import HeightMap, HeightStatistics
from .generators import (
    TerrainGenerator,
    RandomTerrainGenerator, RandomTerrainOptions,
    PerlinNoiseGenerator, PerlinNoiseOptions,
    MidpointDisplacementGenerator, MidpointDisplacementOptions,
)
from .terrain_factory import create_all_generators, get_generator, create_height_map, generate_terrain

__all__ = ['TerrainGenerationError', 'ConfigurationError', 'InvalidDimensionError',
           'OutOfRangeError', 'InvalidInputError', 'InvalidValueError', 'GenerationError',
           'AleaPRNG', 'HeightMap', 'HeightStatistics',
           'TerrainGenerator', 'RandomTerrainGenerator', 'RandomTerrainOptions',
           'PerlinNoiseGenerator', 'PerlinNoiseOptions',
           'MidpointDisplacementGenerator', 'MidpointDisplacementOptions',
           'create_all_generators', 'get_generator', 'create_height_map', 'generate_terrain']
