import matplotlib
matplotlib.use('Agg')

import pytest

from slope_route.config import Config, MapConfig, SearchConfig, MotionConfig


class FunctionField:
    """Height field backed by a plain function of (x, y)"""

    def __init__(self, fn):
        self.fn = fn

    def elevation(self, x, y):
        return self.fn(x, y)


@pytest.fixture
def flat_field():
    return FunctionField(lambda x, y: 0.0)


@pytest.fixture
def ramp_field():
    # 10 cm rise per meter along +x
    return FunctionField(lambda x, y: 0.1 * x)


@pytest.fixture
def small_config():
    return Config(
        map=MapConfig(width=60, height=60),
        search=SearchConfig(max_expansions=50_000),
    )


@pytest.fixture
def make_config():
    def _make(width=100, height=100, max_turn=5, leg=20.0, signed=False,
              weight=1.0, max_expansions=50_000):
        return Config(
            map=MapConfig(width=width, height=height),
            motion=MotionConfig(max_turn_deg=max_turn, leg_distance=leg, signed_heading=signed),
            search=SearchConfig(heuristic_weight=weight, max_expansions=max_expansions),
        )
    return _make
