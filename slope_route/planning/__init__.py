"""
Planning Module
===============

Travel states, successor generation, slope costs and A* search.
"""

from .state import TravelState, DegenerateGeometryError, angle_deg_between, signed_heading_deg, heading_of
from .costs import SlopeCostModel, absolute_slope
from .expansion import ExpansionPolicy
from .goal import RightEdgeGoal
from .astar import (
    AStarSearch,
    RoutePlanner,
    Route,
    PlannerStats,
    PlanningError,
    SearchExhausted,
    ExpansionLimitReached,
)

__all__ = [
    'TravelState',
    'DegenerateGeometryError',
    'angle_deg_between',
    'signed_heading_deg',
    'heading_of',
    'SlopeCostModel',
    'absolute_slope',
    'ExpansionPolicy',
    'RightEdgeGoal',
    'AStarSearch',
    'RoutePlanner',
    'Route',
    'PlannerStats',
    'PlanningError',
    'SearchExhausted',
    'ExpansionLimitReached',
]
