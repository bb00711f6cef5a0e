import pytest

from slope_route.planning import SlopeCostModel, absolute_slope, DegenerateGeometryError


def test_absolute_slope_is_symmetric():
    assert absolute_slope(20.0, 1.0, 3.0) == pytest.approx(0.1)
    assert absolute_slope(20.0, 3.0, 1.0) == pytest.approx(0.1)


def test_edge_cost_scales_slope():
    model = SlopeCostModel(leg_distance=20.0)
    assert model.edge_cost(0.0, 2.0) == 100
    assert model.edge_cost(2.0, 0.0) == 100
    assert model.edge_cost(-1.25, -1.25) == 0


def test_edge_cost_is_integer_and_non_negative():
    model = SlopeCostModel(leg_distance=20.0, cost_scale=1000.0)
    for a, b in [(0.0, 0.013), (5.0, -4.2), (-3.3, -3.31)]:
        cost = model.edge_cost(a, b)
        assert isinstance(cost, int)
        assert cost >= 0


def test_non_positive_distance_is_rejected():
    with pytest.raises(DegenerateGeometryError):
        absolute_slope(0.0, 1.0, 2.0)
    with pytest.raises(DegenerateGeometryError):
        SlopeCostModel(leg_distance=0.0)
