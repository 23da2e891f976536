import math

import numpy as np
import pytest

from motion.endpoints import Corner, corner_centers
from motion.errors import InvalidParameter
from motion.projection import (
    DecelerationRate,
    closest_endpoint,
    intended_endpoint,
    project,
    project_point,
    projection_factor,
    reduce_secondary_axis,
)

UNIT_SQUARE = [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (1.0, 1.0)]


def test_project_matches_closed_form():
    expected = -1000.0 / (1000.0 * math.log(0.998))
    assert project(1000.0, 0.0, 0.998) == pytest.approx(expected, abs=1e-6)


def test_project_defaults_to_normal_rate():
    assert DecelerationRate.NORMAL == 0.998
    assert project(1000.0, 10.0) == pytest.approx(project(1000.0, 10.0, 0.998))


def test_fast_rate_stops_sooner():
    assert projection_factor(DecelerationRate.FAST) == pytest.approx(-1.0 / (1000.0 * math.log(0.99)))
    assert project(500.0, 0.0, DecelerationRate.FAST) < project(500.0, 0.0, DecelerationRate.NORMAL)


def test_project_negative_velocity():
    assert project(-200.0, 50.0) == pytest.approx(50.0 - 200.0 * projection_factor())


@pytest.mark.parametrize("rate", [0.0, 1.0, 1.5, -0.3, float("nan")])
def test_project_rejects_invalid_rate(rate):
    with pytest.raises(InvalidParameter):
        project(1000.0, 0.0, rate)
    with pytest.raises(InvalidParameter):
        project_point((1.0, 1.0), (0.0, 0.0), rate)


def test_project_point_projects_axes_independently():
    p = project_point((300.0, -120.0), (10.0, 20.0), 0.99)
    assert p == pytest.approx([project(300.0, 10.0, 0.99), project(-120.0, 20.0, 0.99)])


def test_reduce_secondary_axis():
    assert reduce_secondary_axis((1000.0, 100.0)) == pytest.approx([1000.0, 10.0])
    assert reduce_secondary_axis((-200.0, 800.0)) == pytest.approx([-50.0, 800.0])
    assert reduce_secondary_axis((-300.0, 300.0)) == pytest.approx([-300.0, 300.0])


def test_reduce_secondary_axis_zero_velocity():
    v = reduce_secondary_axis((0.0, 0.0))
    assert v.tolist() == [0.0, 0.0]
    assert not np.any(np.isnan(v))


def test_closest_endpoint_sequence_returns_index():
    assert closest_endpoint((0.9, 0.2), UNIT_SQUARE) == 1
    assert closest_endpoint((-5.0, 7.0), UNIT_SQUARE) == 2


def test_closest_endpoint_mapping_returns_key():
    endpoints = {"left": (0.0, 0.0), "right": (10.0, 0.0)}
    assert closest_endpoint((6.0, 3.0), endpoints) == "right"


def test_closest_endpoint_tie_prefers_first():
    assert closest_endpoint((0.5, 0.5), UNIT_SQUARE) == 0
    assert closest_endpoint((0.5, 0.0), UNIT_SQUARE) == 0


def test_closest_endpoint_empty():
    with pytest.raises(InvalidParameter):
        closest_endpoint((0.0, 0.0), [])


def test_secondary_axis_noise_does_not_flip_endpoint():
    position = (0.2, 0.45)
    velocity = (1.2, 0.15)
    # projecting the raw velocity would pick the top-right corner
    assert closest_endpoint(project_point(velocity, position), UNIT_SQUARE) == 3
    assert intended_endpoint(velocity, position, UNIT_SQUARE) == 1


def test_intended_endpoint_without_velocity_picks_nearest():
    assert intended_endpoint((0.0, 0.0), (0.8, 0.9), UNIT_SQUARE) == 3


def test_intended_endpoint_with_corners():
    endpoints = corner_centers((0.0, 0.0, 400.0, 800.0))
    assert intended_endpoint((-800.0, 60.0), (200.0, 300.0), endpoints) is Corner.TOP_LEFT
    assert intended_endpoint((40.0, 1500.0), (100.0, 200.0), endpoints) is Corner.BOTTOM_LEFT
    assert intended_endpoint((40.0, 1500.0), (100.0, 200.0), endpoints, DecelerationRate.FAST) is Corner.TOP_LEFT
