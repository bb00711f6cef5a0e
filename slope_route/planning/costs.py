"""
Cost Model Module
=================

Slope-based edge weights.
"""

from .state import DegenerateGeometryError


def absolute_slope(distance: float, height_from: float, height_to: float) -> float:
    """Rise over run, sign dropped"""
    if distance <= 0:
        raise DegenerateGeometryError('slope undefined for a non-positive distance')
    return abs((height_to - height_from) / distance)


class SlopeCostModel:
    """
    Integer edge weight proportional to the absolute slope of a leg.

    Uphill and downhill cost the same; level ground costs nothing.
    """

    def __init__(self, leg_distance: float, cost_scale: float = 1000.0):
        if leg_distance <= 0:
            raise DegenerateGeometryError('leg_distance must be positive')
        self.leg_distance = leg_distance
        self.cost_scale = cost_scale

    def edge_cost(self, height_from: float, height_to: float) -> int:
        slope = absolute_slope(self.leg_distance, height_from, height_to)
        return int(round(self.cost_scale * slope))
