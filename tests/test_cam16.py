import pytest

from materialhue.cam16 import Cam16
from materialhue.viewing_conditions import ViewingConditions

BLACK = (0xFF, 0x00, 0x00, 0x00)
WHITE = (0xFF, 0xFF, 0xFF, 0xFF)
RED = (0xFF, 0xFF, 0x00, 0x00)
GREEN = (0xFF, 0x00, 0xFF, 0x00)
BLUE = (0xFF, 0x00, 0x00, 0xFF)
MIDGRAY = (0xFF, 0x77, 0x77, 0x77)


def approx(value):
    return pytest.approx(value, abs=0.001)


def test_conversions_are_reflexive():
    cam = Cam16.from_argb(RED)
    assert cam.viewed(ViewingConditions.default()) == RED


def test_cam_red():
    cam = Cam16.from_argb(RED)
    assert cam.j == approx(46.445)
    assert cam.chroma == approx(113.357)
    assert cam.hue == approx(27.408)
    assert cam.m == approx(89.494)
    assert cam.s == approx(91.889)
    assert cam.q == approx(105.988)


def test_cam_green():
    cam = Cam16.from_argb(GREEN)
    assert cam.j == approx(79.331)
    assert cam.chroma == approx(108.410)
    assert cam.hue == approx(142.139)
    assert cam.m == approx(85.587)
    assert cam.s == approx(78.604)
    assert cam.q == approx(138.520)


def test_cam_blue():
    cam = Cam16.from_argb(BLUE)
    assert cam.j == approx(25.465)
    assert cam.chroma == approx(87.230)
    assert cam.hue == approx(282.788)
    assert cam.m == approx(68.867)
    assert cam.s == approx(93.674)
    assert cam.q == approx(78.481)


def test_cam_black():
    cam = Cam16.from_argb(BLACK)
    assert cam.j == approx(0.0)
    assert cam.chroma == approx(0.0)
    assert cam.hue == approx(0.0)
    assert cam.m == approx(0.0)
    assert cam.s == approx(0.0)
    assert cam.q == approx(0.0)


def test_cam_white():
    cam = Cam16.from_argb(WHITE)
    assert cam.j == approx(100.0)
    assert cam.chroma == approx(2.869)
    assert cam.hue == approx(209.492)
    assert cam.m == approx(2.265)
    assert cam.s == approx(12.068)
    assert cam.q == approx(155.521)


@pytest.mark.parametrize("argb", [BLACK, WHITE, RED, GREEN, BLUE, MIDGRAY])
def test_to_argb_round_trip(argb):
    assert Cam16.from_argb(argb).to_argb() == argb


@pytest.mark.parametrize("argb", [WHITE, RED, GREEN, BLUE, MIDGRAY])
def test_from_jch_round_trip(argb):
    cam = Cam16.from_argb(argb)
    rebuilt = Cam16.from_jch(cam.j, cam.chroma, cam.hue)
    assert rebuilt.to_argb() == argb
    assert rebuilt.jstar == pytest.approx(cam.jstar)
    assert rebuilt.astar == pytest.approx(cam.astar)
    assert rebuilt.bstar == pytest.approx(cam.bstar)


@pytest.mark.parametrize("argb", [WHITE, RED, GREEN, BLUE, MIDGRAY])
def test_from_ucs_round_trip(argb):
    cam = Cam16.from_argb(argb)
    rebuilt = Cam16.from_ucs(cam.jstar, cam.astar, cam.bstar)
    assert rebuilt.j == pytest.approx(cam.j, abs=1e-6)
    assert rebuilt.chroma == pytest.approx(cam.chroma, abs=1e-6)
    assert rebuilt.to_argb() == argb


def test_explicit_default_conditions_match_default():
    vc = ViewingConditions.default()
    assert Cam16.from_argb_in_viewing_conditions(BLUE, vc) == Cam16.from_argb(BLUE)
    cam = Cam16.from_argb(GREEN)
    assert Cam16.from_jch_in_viewing_conditions(cam.j, cam.chroma, cam.hue, vc) == (
        Cam16.from_jch(cam.j, cam.chroma, cam.hue)
    )
    assert Cam16.from_ucs_in_viewing_conditions(cam.jstar, cam.astar, cam.bstar, vc) == (
        Cam16.from_ucs(cam.jstar, cam.astar, cam.bstar)
    )


def test_distance_properties():
    red = Cam16.from_argb(RED)
    blue = Cam16.from_argb(BLUE)
    gray = Cam16.from_argb(MIDGRAY)
    assert red.distance(Cam16.from_argb(RED)) == 0.0
    assert red.distance(blue) == pytest.approx(blue.distance(red))
    assert red.distance(blue) > 0.0
    assert Cam16.from_argb(BLACK).distance(Cam16.from_argb(WHITE)) > gray.distance(
        Cam16.from_argb(WHITE)
    )


def test_hue_in_range():
    for argb in (RED, GREEN, BLUE, WHITE, (255, 200, 30, 180)):
        assert 0.0 <= Cam16.from_argb(argb).hue < 360.0