"""
Route Metrics Module
====================

Summary statistics for a planned route.
"""

import math
import numpy as np
from typing import Dict, List
from dataclasses import dataclass, field

from ..planning import Route


def heading_changes(route: Route) -> List[int]:
    """Absolute heading change across each leg"""
    return [abs(b.heading - a.heading) for a, b in zip(route.states, route.states[1:])]


@dataclass
class RouteMetrics:
    """
    Metrics for a planned route.

    Tracks:
    - Step count, search cost and travelled distance
    - Total climb and descent (meters)
    - Steepest leg and sharpest turn
    """

    num_steps: int = 0
    total_cost: int = 0
    total_distance: float = 0.0  # meters, along integer cells
    total_climb: float = 0.0     # meters
    total_descent: float = 0.0   # meters
    max_abs_slope: float = 0.0
    max_heading_change: int = 0
    final_x: int = 0

    slopes: List[float] = field(default_factory=list)

    @classmethod
    def from_route(cls, route: Route, leg_distance: float,
                   height_multiplier: int = 1000) -> 'RouteMetrics':
        metrics = cls(
            num_steps=route.num_steps,
            total_cost=route.total_cost,
            final_x=route.end.x,
        )

        for prev, curr in zip(route.states, route.states[1:]):
            metrics.total_distance += math.hypot(curr.x - prev.x, curr.y - prev.y)

            dh = (curr.elevation - prev.elevation) / height_multiplier
            if dh > 0:
                metrics.total_climb += dh
            else:
                metrics.total_descent -= dh
            metrics.slopes.append(abs(dh) / leg_distance)

        if metrics.slopes:
            metrics.max_abs_slope = max(metrics.slopes)
        changes = heading_changes(route)
        if changes:
            metrics.max_heading_change = max(changes)

        return metrics

    @property
    def mean_abs_slope(self) -> float:
        return float(np.mean(self.slopes)) if self.slopes else 0.0

    @property
    def net_elevation_change(self) -> float:
        return self.total_climb - self.total_descent

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization"""
        return {
            'num_steps': self.num_steps,
            'total_cost': self.total_cost,
            'total_distance_m': round(self.total_distance, 2),
            'total_climb_m': round(self.total_climb, 3),
            'total_descent_m': round(self.total_descent, 3),
            'net_elevation_change_m': round(self.net_elevation_change, 3),
            'max_abs_slope': round(self.max_abs_slope, 4),
            'mean_abs_slope': round(self.mean_abs_slope, 4),
            'max_heading_change_deg': self.max_heading_change,
            'final_x': self.final_x,
        }
