"""
Expansion Policy Module
=======================

Successor generation under a per-step turning limit.
"""

import math
from typing import List, Tuple, Optional

from ..config import Config
from .state import TravelState, heading_of
from .costs import SlopeCostModel


class ExpansionPolicy:
    """
    Enumerates the states reachable in one leg from a given state.

    For every whole-degree heading in [heading - max_turn, heading + max_turn)
    the vehicle moves ``leg_distance`` along that heading. The new cell is
    the current cell plus the step truncated toward zero; the new height
    is sampled at the exact, untruncated position.
    """

    def __init__(self, height_field, config: Optional[Config] = None,
                 cost_model: Optional[SlopeCostModel] = None):
        """
        Args:
            height_field: Any object with ``elevation(x, y) -> float``
            config: Configuration object
            cost_model: Edge cost model (built from config if None)
        """
        self.config = config or Config()
        self.height_field = height_field
        self.max_turn = self.config.motion.max_turn_deg
        self.leg_distance = self.config.motion.leg_distance
        self.signed_heading = self.config.motion.signed_heading
        self.height_multiplier = self.config.cost.height_multiplier
        self.cost_model = cost_model or SlopeCostModel(
            self.leg_distance, self.config.cost.slope_cost_scale
        )

    def quantize(self, height: float) -> int:
        return int(round(height * self.height_multiplier))

    def start_state(self, position: Optional[Tuple[int, int]] = None) -> TravelState:
        """State at the entry point, facing along +x"""
        if position is None:
            position = self.config.map.start_position
        height = self.height_field.elevation(float(position[0]), float(position[1]))
        return TravelState(position=tuple(position), elevation=self.quantize(height), heading=0)

    def step_vector(self, heading_deg: int) -> Tuple[float, float]:
        angle = math.radians(heading_deg)
        return (self.leg_distance * math.cos(angle), self.leg_distance * math.sin(angle))

    def successors(self, state: TravelState) -> List[Tuple[TravelState, int]]:
        """All (successor, edge cost) pairs for ``state``"""
        x, y = state.position
        current_height = state.real_elevation(self.height_multiplier)

        result = []
        for heading in range(state.heading - self.max_turn, state.heading + self.max_turn):
            dx, dy = self.step_vector(heading)
            new_height = self.height_field.elevation(x + dx, y + dy)

            successor = TravelState(
                position=(x + int(dx), y + int(dy)),
                elevation=self.quantize(new_height),
                heading=heading_of((dx, dy), signed=self.signed_heading),
            )
            result.append((successor, self.cost_model.edge_cost(current_height, new_height)))

        return result

    __call__ = successors
