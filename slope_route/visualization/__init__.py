"""
Visualization Module
====================

Terrain and route rendering.
"""

from .renderer import RouteRenderer

__all__ = [
    'RouteRenderer',
]
