"""Tests for the shared generator contract and error taxonomy."""

import pytest
import numpy as np
from py_terrain.core.height_map import HeightMap
from py_terrain.core.exceptions import (
    GenerationError, InvalidInputError, TerrainGenerationError
)
from py_terrain.core.generators import (
    TerrainGenerator, RandomTerrainGenerator, PerlinNoiseGenerator, MidpointDisplacementGenerator
)

ALL_GENERATORS = [RandomTerrainGenerator, PerlinNoiseGenerator, MidpointDisplacementGenerator]


class TestGeneratorContract:
    """Test behaviour common to every generator."""

    @pytest.mark.parametrize("generator_class", ALL_GENERATORS)
    def test_is_terrain_generator(self, generator_class):
        """Test that every generator exposes name, description and generate."""
        generator = generator_class()
        assert isinstance(generator, TerrainGenerator)
        assert generator.name
        assert generator.description
        assert callable(generator.generate)

    def test_abstract_base(self):
        """Test that the base class cannot be instantiated."""
        with pytest.raises(TypeError):
            TerrainGenerator()

    @pytest.mark.parametrize("generator_class", ALL_GENERATORS)
    def test_none_map(self, generator_class):
        """Test that a missing map fails fast."""
        generator = generator_class()
        with pytest.raises(InvalidInputError):
            generator.generate(None)
        # No random draws are consumed before validation
        assert generator._prng.call_count == 0

    @pytest.mark.parametrize("generator_class", ALL_GENERATORS)
    def test_wrong_map_type(self, generator_class):
        """Test that something other than a HeightMap is rejected."""
        with pytest.raises(InvalidInputError):
            generator_class().generate(np.zeros((4, 4)))

    @pytest.mark.parametrize("generator_class", ALL_GENERATORS)
    def test_single_cell(self, generator_class):
        """Test that a 1x1 map completes with a value in [0, 1]."""
        height_map = HeightMap(1, 1)
        generator_class().generate(height_map)

        value = height_map.get(0, 0)
        assert np.isfinite(value)
        assert 0.0 <= value <= 1.0

    @pytest.mark.parametrize("generator_class", ALL_GENERATORS)
    def test_internal_fault_is_wrapped(self, generator_class, monkeypatch):
        """Test that faults inside an algorithm are reported with the generator name."""
        generator = generator_class()
        fault = RuntimeError("entropy exhausted")

        def broken_random():
            raise fault

        monkeypatch.setattr(generator._prng, "random", broken_random)

        with pytest.raises(GenerationError) as exc_info:
            generator.generate(HeightMap(5, 5))

        error = exc_info.value
        assert error.generator_name == generator.name
        assert error.cause is fault
        assert error.__cause__ is fault
        assert generator.name in str(error)
        assert "entropy exhausted" in str(error)
        assert isinstance(error, TerrainGenerationError)

    def test_failed_generation_leaves_map_unchanged(self, monkeypatch):
        """Test that a fault before the write step does not touch the map."""
        height_map = HeightMap(4, 4)
        height_map.set(1, 1, 0.75)
        generator = MidpointDisplacementGenerator()

        def broken_random():
            raise MemoryError("no room for working grid")

        monkeypatch.setattr(generator._prng, "random", broken_random)

        with pytest.raises(GenerationError):
            generator.generate(height_map)
        assert height_map.get(1, 1) == 0.75

    def test_repr(self):
        """Test that the repr names the class and seed."""
        assert repr(RandomTerrainGenerator()) == "RandomTerrainGenerator(seed=42)"
