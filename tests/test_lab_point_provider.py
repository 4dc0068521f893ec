import pytest

from materialhue.lab_point_provider import LabPointProvider

COLORS = [
    (0xFF, 0xFF, 0x00, 0x00),
    (0xFF, 0x00, 0xFF, 0x00),
    (0xFF, 0x00, 0x00, 0xFF),
    (0xFF, 0xFF, 0xFF, 0xFF),
    (0xFF, 0x00, 0x00, 0x00),
    (0xFF, 0x77, 0x77, 0x77),
    (0xFF, 0x12, 0x34, 0x56),
]


@pytest.fixture
def provider():
    return LabPointProvider()


@pytest.mark.parametrize("color", COLORS)
def test_round_trip(provider, color):
    assert provider.to_argb(provider.from_argb(color)) == color


def test_white_has_full_lightness_and_no_chroma(provider):
    l, a, b = provider.from_argb((0xFF, 0xFF, 0xFF, 0xFF))
    assert l == pytest.approx(100.0, abs=1e-3)
    assert a == pytest.approx(0.0, abs=1e-3)
    assert b == pytest.approx(0.0, abs=1e-3)


def test_black_is_origin(provider):
    point = provider.from_argb((0xFF, 0x00, 0x00, 0x00))
    assert point == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)


def test_distance_to_self_is_zero(provider):
    point = provider.from_argb(COLORS[0])
    assert provider.distance(point, point) == 0.0


def test_distance_is_squared(provider):
    assert provider.distance((0.0, 0.0, 0.0), (3.0, 4.0, 0.0)) == pytest.approx(25.0)


def test_distance_is_symmetric(provider):
    red = provider.from_argb(COLORS[0])
    blue = provider.from_argb(COLORS[2])
    assert provider.distance(red, blue) == pytest.approx(provider.distance(blue, red))
    assert provider.distance(red, blue) > 0.0


def test_similar_colors_are_closer(provider):
    red = provider.from_argb((0xFF, 0xFF, 0x00, 0x00))
    dark_red = provider.from_argb((0xFF, 0xF0, 0x00, 0x00))
    blue = provider.from_argb((0xFF, 0x00, 0x00, 0xFF))
    assert provider.distance(red, dark_red) < provider.distance(red, blue)