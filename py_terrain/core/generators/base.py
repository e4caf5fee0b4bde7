"""Common contract shared by all terrain generators."""

from abc import ABC, abstractmethod
from typing import Optional

import structlog

from ..alea_prng import AleaPRNG, Seed
from ..exceptions import GenerationError, InvalidInputError
from ..height_map import HeightMap

logger = structlog.get_logger()


class TerrainGenerator(ABC):
    """
    Base class for terrain generation algorithms.

    Subclasses set ``name`` and ``description`` and implement
    ``_generate``. Each instance owns its own seeded PRNG.
    """

    name: str = ""
    description: str = ""

    def __init__(self, seed: Seed = 42):
        self.seed = seed
        self._prng = AleaPRNG(seed)

    def reseed(self, seed: Optional[Seed] = None) -> None:
        """
        Restart the random sequence.

        Args:
            seed: New seed; the generator's current seed when omitted
        """
        if seed is not None:
            self.seed = seed
        self._prng = AleaPRNG(self.seed)

    def generate(self, height_map: HeightMap) -> None:
        """
        Fill the height map in place, overwriting all existing content.

        Args:
            height_map: The terrain map to populate

        Raises:
            InvalidInputError: If height_map is None or not a HeightMap
            GenerationError: If the algorithm fails
        """
        if height_map is None:
            raise InvalidInputError(f"{self.name}: terrain map cannot be None")
        if not isinstance(height_map, HeightMap):
            raise InvalidInputError(
                f"{self.name}: expected HeightMap, got {type(height_map).__name__}"
            )

        logger.info(
            "Generating terrain",
            generator=self.name,
            width=height_map.width,
            height=height_map.height,
        )

        try:
            self._generate(height_map)
        except Exception as e:
            logger.error("Terrain generation failed", generator=self.name, error=str(e))
            raise GenerationError(self.name, e) from e

        stats = height_map.statistics()
        logger.info(
            "Terrain generated",
            generator=self.name,
            min_height=stats.min,
            max_height=stats.max,
            average_height=stats.average,
            random_calls=self._prng.call_count,
        )

    @abstractmethod
    def _generate(self, height_map: HeightMap) -> None:
        """Run the algorithm against a validated height map."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self.seed!r})"
