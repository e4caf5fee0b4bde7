"""
Perlin noise terrain generation.

Sums several octaves of classic 2D gradient noise to produce continuous
terrain with hills and valleys. The permutation table driving the
gradients is rebuilt from the generator's PRNG on every call.
"""

import numbers
from dataclasses import dataclass
from typing import Union

import numpy as np

from ..alea_prng import AleaPRNG, Seed
from ..exceptions import ConfigurationError
from ..height_map import HeightMap
from .base import TerrainGenerator

ArrayLike = Union[float, np.ndarray]

PERMUTATION_SIZE = 256


@dataclass
class PerlinNoiseOptions:
    """Options for Perlin noise generation."""

    scale: float = 20.0  # Controls how zoomed in the noise is
    amplitude: float = 1.0  # Height multiplier of the first octave
    octaves: int = 4  # Number of noise layers
    persistence: float = 0.5  # Amplitude decay per octave
    lacunarity: float = 2.0  # Frequency growth per octave
    seed: Seed = 42

    def __post_init__(self):
        if self.scale <= 0:
            raise ConfigurationError(f"scale must be positive, got {self.scale}")
        if not isinstance(self.octaves, numbers.Integral) or isinstance(self.octaves, bool):
            raise ConfigurationError(f"octaves must be an integer, got {self.octaves!r}")
        if self.octaves < 1:
            raise ConfigurationError(f"octaves must be at least 1, got {self.octaves}")


def generate_permutation_table(prng: AleaPRNG) -> np.ndarray:
    """Shuffle 0..255 with Fisher-Yates driven by the given PRNG."""
    permutation = list(range(PERMUTATION_SIZE))
    for i in range(PERMUTATION_SIZE - 1, 0, -1):
        j = prng.next_int(i + 1)
        permutation[i], permutation[j] = permutation[j], permutation[i]
    return np.array(permutation, dtype=np.int64)


def fade(t: ArrayLike) -> ArrayLike:
    """Quintic fade curve 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6 - 15) + 10)


def lerp(a: ArrayLike, b: ArrayLike, t: ArrayLike) -> ArrayLike:
    return a + t * (b - a)


def _dot_grid_gradient(ix, iy, x, y, permutation: np.ndarray):
    # Corner gradient angle comes from the permutation table, scaled to [0, 2pi)
    angle = permutation[(ix + permutation[iy & 255]) & 255] * (2 * np.pi / PERMUTATION_SIZE)
    return (x - ix) * np.cos(angle) + (y - iy) * np.sin(angle)


def perlin_noise(x: ArrayLike, y: ArrayLike, permutation: np.ndarray) -> ArrayLike:
    """
    Classic 2D gradient noise.

    Args:
        x: Sample x coordinate(s)
        y: Sample y coordinate(s), broadcastable against x
        permutation: 256-entry permutation table

    Returns:
        Noise value(s), nominally in [-1, 1]; a float for scalar input
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    x0 = np.floor(x).astype(np.int64)
    y0 = np.floor(y).astype(np.int64)
    x1 = x0 + 1
    y1 = y0 + 1

    top_left = _dot_grid_gradient(x0, y0, x, y, permutation)
    top_right = _dot_grid_gradient(x1, y0, x, y, permutation)
    bottom_left = _dot_grid_gradient(x0, y1, x, y, permutation)
    bottom_right = _dot_grid_gradient(x1, y1, x, y, permutation)

    tx = fade(x - x0)
    ty = fade(y - y0)

    top = lerp(top_left, top_right, tx)
    bottom = lerp(bottom_left, bottom_right, tx)
    result = lerp(top, bottom, ty)

    if result.ndim == 0:
        return float(result)
    return result


class PerlinNoiseGenerator(TerrainGenerator):
    """Generates natural-looking continuous terrain from octave noise."""

    name = "Perlin Noise Terrain"
    description = "Generates realistic-looking terrain using Perlin noise with multiple octaves"

    def __init__(self, options: PerlinNoiseOptions = None):
        self.options = options or PerlinNoiseOptions()
        super().__init__(self.options.seed)

    def _generate(self, height_map: HeightMap) -> None:
        opts = self.options
        permutation = generate_permutation_table(self._prng)

        ys, xs = np.mgrid[0:height_map.height, 0:height_map.width].astype(np.float64)
        noise_height = np.zeros(height_map.shape, dtype=np.float64)

        amplitude = opts.amplitude
        frequency = 1.0
        for _ in range(opts.octaves):
            sample_x = xs / opts.scale * frequency
            sample_y = ys / opts.scale * frequency
            noise_height += perlin_noise(sample_x, sample_y, permutation) * amplitude

            amplitude *= opts.persistence
            frequency *= opts.lacunarity

        # Octave sums can overshoot [-1, 1]; the map clamps on write
        height_map.assign((noise_height + 1) * 0.5)
