"""
Height Field Module
===================

Deterministic, infinite-domain terrain elevation built from seeded
simplex noise. Single Responsibility: only answers "how high is the
ground at (x, y)".
"""

import numpy as np
from noise import snoise2
from typing import Optional

from ..config import TerrainConfig


def sample_grid(field, width: int, height: int) -> np.ndarray:
    """
    Evaluate any object with an ``elevation(x, y)`` method on the
    integer pixel lattice.

    Returns:
        float32 array of shape (height, width), indexed [y, x]
    """
    grid = np.empty((height, width), dtype=np.float32)
    for y in range(height):
        for x in range(width):
            grid[y, x] = field.elevation(x, y)
    return grid


class HeightField:
    """
    Seeded simplex-noise height field.

    elevation(x, y) = amplitude * snoise2(x / noise_scale + seed, y / noise_scale + seed)

    The seed shifts the sampling window through noise space, so
    different seeds give unrelated terrain. Holds no mutable state, so
    a single instance may be queried from several threads.
    """

    def __init__(self, config: Optional[TerrainConfig] = None):
        self.config = config or TerrainConfig()
        self.seed = self.config.seed
        self.noise_scale = self.config.noise_scale
        self.amplitude = self.config.amplitude
        self.octaves = self.config.octaves

    def elevation(self, x: float, y: float) -> float:
        """Terrain height in meters at world position (x, y)"""
        value = snoise2(
            x / self.noise_scale + self.seed,
            y / self.noise_scale + self.seed,
            octaves=self.octaves,
        )
        return self.amplitude * value

    def __call__(self, x: float, y: float) -> float:
        return self.elevation(x, y)

    def sample_grid(self, width: int, height: int) -> np.ndarray:
        """Evaluate the field on the integer pixel lattice, indexed [y, x]"""
        return sample_grid(self, width, height)

    def __repr__(self) -> str:
        return (f'HeightField(seed={self.seed}, noise_scale={self.noise_scale}, '
                f'amplitude={self.amplitude}, octaves={self.octaves})')
