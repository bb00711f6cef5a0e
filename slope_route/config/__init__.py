"""
Configuration Module
====================

Centralized, immutable configuration for the route planner.
"""

from .settings import (
    Config,
    ConfigError,
    TerrainConfig,
    MotionConfig,
    CostConfig,
    MapConfig,
    SearchConfig,
    VisualizationConfig,
)

__all__ = [
    'Config',
    'ConfigError',
    'TerrainConfig',
    'MotionConfig',
    'CostConfig',
    'MapConfig',
    'SearchConfig',
    'VisualizationConfig',
]
