import math
import dataclasses

import pytest

from slope_route.planning import (
    TravelState,
    DegenerateGeometryError,
    angle_deg_between,
    signed_heading_deg,
    heading_of,
)


def test_angle_between_axis_vectors():
    assert angle_deg_between((1.0, 0.0), (1.0, 0.0)) == 0
    assert angle_deg_between((0.0, 1.0), (1.0, 0.0)) == 90
    assert angle_deg_between((-1.0, 0.0), (1.0, 0.0)) == 180


def test_angle_is_unsigned():
    up = (20 * math.cos(math.radians(5)), 20 * math.sin(math.radians(5)))
    down = (20 * math.cos(math.radians(-5)), 20 * math.sin(math.radians(-5)))
    assert angle_deg_between(up, (1.0, 0.0)) == 5
    assert angle_deg_between(down, (1.0, 0.0)) == 5


def test_signed_heading_keeps_direction():
    down = (20 * math.cos(math.radians(-5)), 20 * math.sin(math.radians(-5)))
    assert signed_heading_deg(down) == -5
    assert heading_of(down, signed=True) == -5
    assert heading_of(down, signed=False) == 5


def test_zero_length_vectors_are_rejected():
    with pytest.raises(DegenerateGeometryError):
        angle_deg_between((0.0, 0.0), (1.0, 0.0))
    with pytest.raises(DegenerateGeometryError):
        heading_of((0.0, 0.0), signed=True)


def test_travel_state_structural_equality():
    a = TravelState((10, 20), 1500, 3)
    assert a == TravelState((10, 20), 1500, 3)
    assert hash(a) == hash(TravelState((10, 20), 1500, 3))
    assert a != TravelState((10, 20), 1500, 4)
    assert a != TravelState((10, 20), 1501, 3)
    assert len({a, TravelState((10, 20), 1500, 4)}) == 2


def test_travel_state_is_immutable():
    state = TravelState((0, 0), 0, 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.heading = 7


def test_real_elevation():
    state = TravelState((3, 4), -2500, 0)
    assert state.x == 3 and state.y == 4
    assert state.real_elevation(1000) == pytest.approx(-2.5)
