"""
Goal and Heuristic Module
=========================

Termination test and remaining-cost estimate for a rightward crossing.
"""

from typing import Optional

from ..config import Config
from .state import TravelState


class RightEdgeGoal:
    """
    Goal: reach or pass the right edge of the canvas (x >= width).

    The heuristic is the remaining x-distance to the edge, scaled by
    ``heuristic_weight``. A weight of 0 turns A* into uniform-cost search.
    """

    def __init__(self, width: int, heuristic_weight: float = 1.0):
        self.width = width
        self.heuristic_weight = heuristic_weight

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> 'RightEdgeGoal':
        config = config or Config()
        return cls(config.map.width, config.search.heuristic_weight)

    def is_goal(self, state: TravelState) -> bool:
        return state.position[0] >= self.width

    def remaining_distance(self, state: TravelState) -> int:
        return max(0, self.width - state.position[0])

    def heuristic(self, state: TravelState) -> int:
        return int(round(self.heuristic_weight * self.remaining_distance(state)))
