import math

from slope_route.config import Config
from slope_route.planning import ExpansionPolicy, TravelState

from conftest import FunctionField


def test_start_state_defaults(flat_field):
    policy = ExpansionPolicy(flat_field, Config())
    start = policy.start_state()
    assert start == TravelState((0, 256), 0, 0)


def test_start_state_quantizes_height():
    field = FunctionField(lambda x, y: 1.23456)
    start = ExpansionPolicy(field, Config()).start_state((5, 7))
    assert start.position == (5, 7)
    assert start.elevation == 1235


def test_window_is_half_open(flat_field, make_config):
    policy = ExpansionPolicy(flat_field, make_config(max_turn=5))
    successors = policy.successors(TravelState((0, 50), 0, 0))
    assert len(successors) == 10

    policy = ExpansionPolicy(flat_field, make_config(max_turn=0))
    assert policy.successors(TravelState((0, 50), 0, 0)) == []


def test_flat_terrain_costs_nothing(flat_field, make_config):
    policy = ExpansionPolicy(flat_field, make_config())
    for _, cost in policy.successors(TravelState((0, 50), 0, 0)):
        assert cost == 0


def test_positions_are_truncated_steps(flat_field, make_config):
    policy = ExpansionPolicy(flat_field, make_config())
    positions = {s.position for s, _ in policy.successors(TravelState((0, 50), 0, 0))}
    # straight ahead
    assert (20, 50) in positions
    # -5 deg: (19.92, -1.74) truncates toward zero
    assert (19, 49) in positions
    # +4 deg: (19.95, 1.39)
    assert (19, 51) in positions


def test_unsigned_headings_fold_turn_direction(flat_field, make_config):
    policy = ExpansionPolicy(flat_field, make_config())
    headings = sorted(s.heading for s, _ in policy.successors(TravelState((0, 50), 0, 0)))
    assert headings == [0, 1, 1, 2, 2, 3, 3, 4, 4, 5]


def test_signed_headings(flat_field, make_config):
    policy = ExpansionPolicy(flat_field, make_config(signed=True))
    headings = sorted(s.heading for s, _ in policy.successors(TravelState((0, 50), 0, 0)))
    assert headings == list(range(-5, 5))


def test_height_sampled_at_exact_position(make_config):
    field = FunctionField(lambda x, y: x)
    policy = ExpansionPolicy(field, make_config())
    # Successors come in heading order, starting at heading - max_turn
    first, _ = policy.successors(TravelState((0, 50), 0, 0))[0]
    exact_x = 20 * math.cos(math.radians(-5))
    assert first.position == (19, 49)
    assert first.elevation == int(round(exact_x * 1000))


def test_uphill_and_downhill_cost(ramp_field, make_config):
    policy = ExpansionPolicy(ramp_field, make_config())

    uphill = dict((s.position, c) for s, c in policy.successors(TravelState((0, 50), 0, 0)))
    assert uphill[(20, 50)] == 100

    # Facing back down the ramp from x=100 (height 10 m)
    start = TravelState((100, 50), 10000, 180)
    downhill = dict((s.position, c) for s, c in policy.successors(start))
    assert downhill[(80, 50)] == 100
