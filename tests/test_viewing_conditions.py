import math

import pytest

from materialhue.colorspace import (
    WHITE_POINT_D65,
    XYZ_TO_CAM16RGB,
    matrix_multiply,
    y_from_lstar,
)
from materialhue.viewing_conditions import ViewingConditions

DEFAULT_LUMINANCE = 200.0 / math.pi * y_from_lstar(50.0) / 100.0


def test_default_matches_make_with_default_parameters():
    made = ViewingConditions.make(WHITE_POINT_D65, DEFAULT_LUMINANCE, 50.0, 2.0, False)
    assert ViewingConditions.default() == made


def test_default_is_shared():
    first = ViewingConditions.default()
    second = ViewingConditions.default()
    assert first is second
    assert (first.aw, first.nbb, first.fl, first.z) == (
        second.aw,
        second.nbb,
        second.fl,
        second.z,
    )


def test_default_derived_relations():
    vc = ViewingConditions.default()
    assert vc.fl_root == pytest.approx(vc.fl**0.25)
    assert vc.ncb == vc.nbb
    assert vc.nbb == pytest.approx(0.725 / vc.n**0.2)
    assert vc.z == pytest.approx(1.48 + math.sqrt(vc.n))
    assert vc.n == pytest.approx(y_from_lstar(50.0) / 100.0)
    assert vc.nc == pytest.approx(0.8 + 2.0 / 10.0)


def test_average_surround_gives_upper_c():
    vc = ViewingConditions.default()
    assert vc.c == pytest.approx(0.69)


@pytest.mark.parametrize("surround", [0.0, 0.5, 1.0, 1.5, 2.0])
def test_c_increases_with_surround_within_bounds(surround):
    vc = ViewingConditions.make(WHITE_POINT_D65, DEFAULT_LUMINANCE, 50.0, surround, False)
    assert 0.525 <= vc.c <= 0.69 + 1e-12
    assert vc.nc == pytest.approx(0.8 + surround / 10.0)


def test_c_monotonic_in_surround():
    values = [
        ViewingConditions.make(WHITE_POINT_D65, DEFAULT_LUMINANCE, 50.0, s, False).c
        for s in (0.0, 0.5, 1.0, 1.5, 2.0)
    ]
    assert values == sorted(values)


def test_discounting_illuminant_fully_adapts():
    vc = ViewingConditions.make(WHITE_POINT_D65, DEFAULT_LUMINANCE, 50.0, 2.0, True)
    # With full adaptation, every discounted white channel becomes 100.
    rgb_w = matrix_multiply(WHITE_POINT_D65, XYZ_TO_CAM16RGB)
    for factor, w in zip(vc.rgb_d, rgb_w):
        assert factor * w == pytest.approx(100.0)


def test_brighter_background_lowers_nbb():
    dark = ViewingConditions.make(WHITE_POINT_D65, DEFAULT_LUMINANCE, 20.0, 2.0, False)
    light = ViewingConditions.make(WHITE_POINT_D65, DEFAULT_LUMINANCE, 80.0, 2.0, False)
    assert light.n > dark.n
    assert light.nbb < dark.nbb


def test_conditions_are_immutable():
    vc = ViewingConditions.make(WHITE_POINT_D65, DEFAULT_LUMINANCE, 50.0, 2.0, False)
    original_aw = vc.aw
    with pytest.raises(AttributeError):
        vc.aw = 1.0
    assert vc.aw == original_aw
    assert vc.aw != 1.0