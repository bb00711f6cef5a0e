"""
Travel State Module
===================

Search-graph node and heading geometry helpers.
"""

import math
from dataclasses import dataclass
from typing import Tuple


class DegenerateGeometryError(ValueError):
    """Raised when an angle is requested for a zero-length vector"""


@dataclass(frozen=True)
class TravelState:
    """
    Standing at ``position`` with ground height ``elevation``, having
    just arrived facing ``heading``.

    Elevation is the real height scaled by the height multiplier and
    rounded, so states stay hashable. Equality covers all three fields:
    the same cell reached with a different heading is a different node.
    """
    position: Tuple[int, int]
    elevation: int
    heading: int

    @property
    def x(self) -> int:
        return self.position[0]

    @property
    def y(self) -> int:
        return self.position[1]

    def real_elevation(self, height_multiplier: int) -> float:
        """Elevation in meters"""
        return self.elevation / height_multiplier


def angle_deg_between(first: Tuple[float, float], second: Tuple[float, float]) -> int:
    """
    Unsigned angle between two vectors in whole degrees.

    Uses acos of the normalized dot product, so mirror-image vectors
    (above and below ``second``) give the same value.
    """
    len_first = math.hypot(first[0], first[1])
    len_second = math.hypot(second[0], second[1])
    if len_first < 1e-12 or len_second < 1e-12:
        raise DegenerateGeometryError('angle undefined for a zero-length vector')

    cos_angle = (first[0] * second[0] + first[1] * second[1]) / (len_first * len_second)
    # Clamp rounding overshoot outside acos' domain
    cos_angle = max(-1.0, min(1.0, cos_angle))
    return int(round(math.degrees(math.acos(cos_angle))))


def signed_heading_deg(step: Tuple[float, float]) -> int:
    """Signed heading of a step vector relative to (1, 0), in (-180, 180]"""
    if math.hypot(step[0], step[1]) < 1e-12:
        raise DegenerateGeometryError('heading undefined for a zero-length step')
    return int(round(math.degrees(math.atan2(step[1], step[0]))))


def heading_of(step: Tuple[float, float], signed: bool = False) -> int:
    """Arrival heading for a step vector"""
    if signed:
        return signed_heading_deg(step)
    return angle_deg_between(step, (1.0, 0.0))
