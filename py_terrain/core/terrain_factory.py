"""
Generator registry and terrain generation workflow.

The registry is an explicit, caller-built list; callers pass it to
whatever front end selects a generator.
"""

from typing import List, Optional, Sequence

import structlog

from ..config import settings
from .alea_prng import Seed
from .exceptions import ConfigurationError, InvalidDimensionError
from .generators import (
    MidpointDisplacementGenerator,
    MidpointDisplacementOptions,
    PerlinNoiseGenerator,
    PerlinNoiseOptions,
    RandomTerrainGenerator,
    RandomTerrainOptions,
    TerrainGenerator,
)
from .height_map import HeightMap, HeightStatistics, is_integer

logger = structlog.get_logger()


def create_all_generators(seed: Optional[Seed] = None) -> List[TerrainGenerator]:
    """
    Create one instance of every available generator.

    Args:
        seed: Seed for every generator; settings.default_seed when omitted

    Returns:
        Generators in menu order
    """
    if seed is None:
        seed = settings.default_seed

    return [
        RandomTerrainGenerator(RandomTerrainOptions(seed=seed)),
        PerlinNoiseGenerator(PerlinNoiseOptions(seed=seed)),
        MidpointDisplacementGenerator(MidpointDisplacementOptions(seed=seed)),
    ]


def get_generator(generators: Sequence[TerrainGenerator], name: str) -> TerrainGenerator:
    """
    Look up a generator by display name (case-insensitive).

    Raises:
        ConfigurationError: If the list is empty or no generator matches
    """
    if not generators:
        raise ConfigurationError("No generators exist. Ensure there is at least one terrain generator")

    wanted = name.strip().lower()
    for generator in generators:
        if generator.name.lower() == wanted:
            return generator

    available = ", ".join(g.name for g in generators)
    raise ConfigurationError(f"Unknown generator '{name}'. Available: {available}")


def create_height_map(width: Optional[int] = None, height: Optional[int] = None) -> HeightMap:
    """
    Create an empty height map, defaulting to the configured map size.

    Raises:
        InvalidDimensionError: If a dimension is non-positive or above the configured maximum
    """
    if width is None:
        width = settings.default_map_width
    if height is None:
        height = settings.default_map_height

    if is_integer(width) and width > settings.max_map_width:
        raise InvalidDimensionError(
            f"Width {width} exceeds maximum of {settings.max_map_width}"
        )
    if is_integer(height) and height > settings.max_map_height:
        raise InvalidDimensionError(
            f"Height {height} exceeds maximum of {settings.max_map_height}"
        )

    return HeightMap(width, height)


def generate_terrain(height_map: HeightMap, generator: TerrainGenerator) -> HeightStatistics:
    """
    Clear the map, run the generator and return the resulting statistics.

    Errors from the generator propagate unchanged.
    """
    if isinstance(height_map, HeightMap):
        height_map.clear()
    generator.generate(height_map)

    stats = height_map.statistics()
    logger.info(
        "Terrain ready",
        generator=generator.name,
        min_height=stats.min,
        max_height=stats.max,
        average_height=stats.average,
        height_range=stats.range,
    )
    return stats
