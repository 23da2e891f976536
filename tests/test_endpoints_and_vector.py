import numpy as np
import pytest

import config
from motion.endpoints import Corner, corner_centers, inset
from motion.errors import InvalidParameter
from motion.vector import distance, pixel_epsilon, round_to_pixel, vec2


def test_corner_centers():
    centers = corner_centers((0.0, 0.0, 400.0, 800.0), size=(100.0, 180.0), padding=20.0)
    assert list(centers) == [Corner.TOP_LEFT, Corner.TOP_RIGHT, Corner.BOTTOM_LEFT, Corner.BOTTOM_RIGHT]
    assert centers[Corner.TOP_LEFT] == pytest.approx([70.0, 110.0])
    assert centers[Corner.TOP_RIGHT] == pytest.approx([330.0, 110.0])
    assert centers[Corner.BOTTOM_LEFT] == pytest.approx([70.0, 690.0])
    assert centers[Corner.BOTTOM_RIGHT] == pytest.approx([330.0, 690.0])


def test_corner_centers_default_layout():
    centers = corner_centers((10.0, 10.0, 500.0, 500.0))
    w, h = config.Layout.card_size
    p = config.Layout.padding
    assert centers[Corner.TOP_LEFT] == pytest.approx([10.0 + p + w / 2, 10.0 + p + h / 2])


def test_corner_centers_rejects_small_bounds():
    with pytest.raises(InvalidParameter):
        corner_centers((0.0, 0.0, 120.0, 800.0), size=(100.0, 180.0), padding=20.0)
    with pytest.raises(InvalidParameter):
        corner_centers((0.0, 0.0, 400.0, 800.0), size=(0.0, 180.0))


def test_inset():
    assert inset((0, 0, 100, 50), 5) == (5.0, 5.0, 90.0, 40.0)


def test_vec2():
    assert vec2(3).tolist() == [3.0, 3.0]
    assert vec2(np.float64(2.5)).tolist() == [2.5, 2.5]
    assert vec2([1, 2]).tolist() == [1.0, 2.0]
    src = np.array([1.0, 2.0])
    out = vec2(src)
    out[0] = 9.0
    assert src[0] == 1.0


def test_distance():
    assert distance((0, 0), (3, 4)) == pytest.approx(5.0)


def test_pixel_epsilon():
    assert pixel_epsilon(3.0) == pytest.approx(1.0 / 3.0)
    assert pixel_epsilon(0.5) == 1.0
    assert pixel_epsilon(0.0) == 1.0
    with pytest.raises(InvalidParameter):
        pixel_epsilon(float("nan"))


def test_round_to_pixel():
    assert round_to_pixel((10.26, -3.74), 2.0) == pytest.approx([10.5, -3.5])
    assert round_to_pixel((0.25, -0.25), 2.0) == pytest.approx([0.5, -0.5])
    assert round_to_pixel((7.4, 7.6), 0.5) == pytest.approx([7.0, 8.0])


def test_invalid_parameter_message():
    err = InvalidParameter("mass", -1.0, "> 0")
    assert isinstance(err, ValueError)
    assert err.name == "mass"
    assert str(err) == "mass must be > 0 (got -1.0)"
