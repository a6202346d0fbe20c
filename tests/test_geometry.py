import math

import numpy as np
import pytest

from driveposture.pose import Landmark, angle_between, vertical_tilt
from driveposture.pose.geometry import round_angle


def P(x, y):
    return Landmark(x=x, y=y, visibility=1.0)


def test_right_angle():
    assert angle_between(P(1, 0), P(0, 0), P(0, 1)) == pytest.approx(90.0)


def test_straight_line_is_180():
    assert angle_between(P(0.5, 0.2), P(0.5, 0.5), P(0.5, 0.8)) == pytest.approx(180.0)


def test_reflex_difference_is_folded():
    # raw atan2 difference here is 270 degrees
    assert angle_between(P(-1, -0.0001), P(0, 0), P(0, 1)) == pytest.approx(90.0, abs=0.01)


@pytest.mark.parametrize("a, b, c", [
    (P(0.1, 0.2), P(0.4, 0.5), P(0.9, 0.3)),
    (P(0.7, 0.9), P(0.5, 0.5), P(0.2, 0.1)),
    (P(-1, 0), P(0, 0), P(0, -1)),
])
def test_symmetric_in_outer_points(a, b, c):
    assert angle_between(a, b, c) == pytest.approx(angle_between(c, b, a))


def test_degenerate_ray_is_finite():
    value = angle_between(P(0.5, 0.5), P(0.5, 0.5), P(0.9, 0.1))
    assert not math.isnan(value)
    assert 0.0 <= value <= 180.0
    assert angle_between(P(0.5, 0.5), P(0.5, 0.5), P(0.5, 0.5)) == 0.0


@pytest.mark.parametrize("missing", [0, 1, 2])
def test_missing_point_gives_zero(missing):
    points = [P(0, 1), P(0, 0), P(1, 0)]
    points[missing] = None
    assert angle_between(*points) == 0.0


def test_range_over_random_points():
    rng = np.random.default_rng(7)
    coords = rng.uniform(-0.5, 1.5, size=(500, 3, 2))
    for a, b, c in coords:
        value = angle_between(P(*a), P(*b), P(*c))
        assert 0.0 <= value <= 180.0


def test_vertical_tilt_upright_is_zero():
    assert vertical_tilt(P(0.5, 0.2), P(0.5, 0.5)) == 0.0


def test_vertical_tilt_ignores_lean_direction():
    forward = vertical_tilt(P(0.8, 0.2), P(0.5, 0.5))
    backward = vertical_tilt(P(0.2, 0.2), P(0.5, 0.5))
    assert forward == pytest.approx(45.0)
    assert backward == pytest.approx(forward)


def test_vertical_tilt_horizontal_and_missing():
    assert vertical_tilt(P(0.9, 0.5), P(0.5, 0.5)) == pytest.approx(90.0)
    assert vertical_tilt(None, P(0.5, 0.5)) == 0.0
    assert vertical_tilt(P(0.5, 0.2), None) == 0.0


@pytest.mark.parametrize("value, expected", [
    (0.0, 0), (0.4, 0), (0.5, 1), (2.5, 3), (89.5, 90), (179.99, 180),
])
def test_round_angle_half_up(value, expected):
    assert round_angle(value) == expected
