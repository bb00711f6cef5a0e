"""
Slope Route Planner
===================

Turn-constrained, minimum-slope route planning across procedural terrain.

A vehicle enters a seeded simplex-noise height field on the left edge
and must reach the right edge, turning at most a few degrees per fixed
length leg. A* over (position, elevation, heading) states finds the
crossing with the least accumulated absolute slope; the result is
rendered over the terrain as an image.

Key Features:
- Immutable dataclass configuration
- Deterministic, seeded height field
- Cooperative, step-wise A* search with an expansion safety bound
- Route metrics and image/route export

Version: 0.1.0
"""

__version__ = "0.1.0"

from .config import Config, ConfigError
from .terrain import HeightField
from .planning import (
    TravelState,
    ExpansionPolicy,
    SlopeCostModel,
    RightEdgeGoal,
    AStarSearch,
    RoutePlanner,
    Route,
    PlanningError,
    SearchExhausted,
    ExpansionLimitReached,
)
from .metrics import RouteMetrics
from .visualization import RouteRenderer
from .pipeline import RouteRunner, RunResult

__all__ = [
    'Config', 'ConfigError',
    'HeightField',
    'TravelState', 'ExpansionPolicy', 'SlopeCostModel', 'RightEdgeGoal',
    'AStarSearch', 'RoutePlanner', 'Route',
    'PlanningError', 'SearchExhausted', 'ExpansionLimitReached',
    'RouteMetrics',
    'RouteRenderer',
    'RouteRunner', 'RunResult',
]
