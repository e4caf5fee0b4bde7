"""py-terrain public API."""

from .core import (
    HeightMap,
    HeightStatistics,
    TerrainGenerator,
    RandomTerrainGenerator,
    RandomTerrainOptions,
    PerlinNoiseGenerator,
    PerlinNoiseOptions,
    MidpointDisplacementGenerator,
    MidpointDisplacementOptions,
    TerrainGenerationError,
    ConfigurationError,
    InvalidDimensionError,
    OutOfRangeError,
    InvalidInputError,
    InvalidValueError,
    GenerationError,
    create_all_generators,
    get_generator,
    create_height_map,
    generate_terrain,
)
from .utils.logging import configure_logging

__all__ = [
    "HeightMap",
    "HeightStatistics",
    "TerrainGenerator",
    "RandomTerrainGenerator",
    "RandomTerrainOptions",
    "PerlinNoiseGenerator",
    "PerlinNoiseOptions",
    "MidpointDisplacementGenerator",
    "MidpointDisplacementOptions",
    "TerrainGenerationError",
    "ConfigurationError",
    "InvalidDimensionError",
    "OutOfRangeError",
    "InvalidInputError",
    "InvalidValueError",
    "GenerationError",
    "create_all_generators",
    "get_generator",
    "create_height_map",
    "generate_terrain",
    "configure_logging",
]

__version__ = "0.1.0"
