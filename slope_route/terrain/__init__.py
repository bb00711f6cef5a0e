"""
Terrain Module
==============

Procedural height field used by the planner and the renderer.
"""

from .heightfield import HeightField, sample_grid

__all__ = [
    'HeightField',
    'sample_grid',
]
