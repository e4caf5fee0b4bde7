"""Exception hierarchy for terrain generation."""


class TerrainGenerationError(Exception):
    """Base class for all terrain generation errors."""


class ConfigurationError(TerrainGenerationError):
    """Invalid generator options or generator registry lookup."""


class InvalidDimensionError(TerrainGenerationError, ValueError):
    """Height map width or height is not a positive integer."""


class OutOfRangeError(TerrainGenerationError, IndexError):
    """Cell coordinates fall outside the height map."""


class InvalidInputError(TerrainGenerationError, ValueError):
    """A generator was handed no height map (or something that is not one)."""


class InvalidValueError(TerrainGenerationError, ValueError):
    """A height value that cannot be clamped into [0, 1] (NaN)."""


class GenerationError(TerrainGenerationError):
    """
    Unexpected fault while a generator was running.

    Attributes:
        generator_name: Name of the generator that failed
        cause: The underlying exception
    """

    def __init__(self, generator_name: str, cause: BaseException):
        self.generator_name = generator_name
        self.cause = cause
        super().__init__(f"Error generating {generator_name}: {cause}")
