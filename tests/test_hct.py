import pytest

from materialhue.cam16 import Cam16
from materialhue.colorspace import lstar_from_argb
from materialhue.hct import Hct

BLACK = (0xFF, 0x00, 0x00, 0x00)
WHITE = (0xFF, 0xFF, 0xFF, 0xFF)
RED = (0xFF, 0xFF, 0x00, 0x00)
GREEN = (0xFF, 0x00, 0xFF, 0x00)
BLUE = (0xFF, 0x00, 0x00, 0xFF)
MIDGRAY = (0xFF, 0x77, 0x77, 0x77)


@pytest.mark.parametrize("color", [RED, GREEN, BLUE, WHITE, BLACK])
def test_gamut_map_colors(color):
    cam = Cam16.from_argb(color)
    result = Hct.from_hct(cam.hue, cam.chroma, lstar_from_argb(color)).argb
    assert result == color


def test_red_hue_and_chroma():
    hct = Hct(RED)
    assert hct.hue == pytest.approx(27.408, abs=0.001)
    assert hct.chroma == pytest.approx(113.357, abs=0.001)


def test_blue_hue_and_chroma():
    hct = Hct(BLUE)
    assert hct.hue == pytest.approx(282.788, abs=0.001)
    assert hct.chroma == pytest.approx(87.230, abs=0.001)


@pytest.mark.parametrize("color", [RED, GREEN, BLUE, MIDGRAY])
def test_tone_is_lstar(color):
    assert Hct(color).tone == pytest.approx(lstar_from_argb(color))


@pytest.mark.parametrize("color", [RED, GREEN, BLUE, MIDGRAY, WHITE])
def test_argb_round_trip(color):
    assert Hct(color).argb == color


def test_set_tone_moves_tone():
    hct = Hct(RED)
    hct.tone = 70.0
    assert hct.tone == pytest.approx(70.0, abs=0.5)
    assert abs(hct.hue - 27.408) < 3.0


def test_set_chroma_zero_gives_gray():
    hct = Hct(GREEN)
    hct.chroma = 0.0
    _, r, g, b = hct.argb
    assert r == g == b


def test_set_hue_keeps_tone():
    hct = Hct(MIDGRAY)
    tone = hct.tone
    hct.chroma = 20.0
    hct.hue = 200.0
    assert hct.tone == pytest.approx(tone, abs=0.5)
    assert hct.hue == pytest.approx(200.0, abs=2.0)


def test_equality_by_color():
    assert Hct(RED) == Hct(RED)
    assert not (Hct(RED) == Hct(BLUE))


def test_wrong_length_raises():
    with pytest.raises(ValueError):
        Hct((255, 0, 0))