import random

import pytest

from materialhue.quantizer_wu import QuantizerWu

RED = (0xFF, 0xFF, 0x00, 0x00)
GREEN = (0xFF, 0x00, 0xFF, 0x00)
BLUE = (0xFF, 0x00, 0x00, 0xFF)


def test_single_color():
    assert QuantizerWu().quantize([RED], 128) == [RED]


def test_repeated_single_color():
    assert QuantizerWu().quantize([BLUE] * 5, 128) == [BLUE]


def test_empty_input_gives_no_colors():
    assert QuantizerWu().quantize([], 16) == []


def test_distinct_primaries_are_kept():
    result = QuantizerWu().quantize([RED, GREEN, BLUE], 128)
    assert sorted(result) == sorted([RED, GREEN, BLUE])


def test_two_colors():
    result = QuantizerWu().quantize([RED, RED, GREEN, GREEN, GREEN], 128)
    assert sorted(result) == sorted([RED, GREEN])


def test_max_colors_one_merges_everything():
    result = QuantizerWu().quantize([RED, BLUE], 1)
    assert len(result) == 1


def test_output_is_opaque():
    transparent = (0x00, 0x40, 0x80, 0xC0)
    result = QuantizerWu().quantize([transparent], 4)
    assert result == [(0xFF, 0x40, 0x80, 0xC0)]


def test_result_respects_max_colors():
    rng = random.Random(7)
    pixels = [
        (0xFF, rng.randrange(256), rng.randrange(256), rng.randrange(256))
        for _ in range(500)
    ]
    for max_colors in (1, 4, 16):
        result = QuantizerWu().quantize(pixels, max_colors)
        assert 1 <= len(result) <= max_colors
        assert all(color[0] == 0xFF for color in result)
        assert all(0 <= channel <= 255 for color in result for channel in color)


def test_quantizer_can_be_reused():
    quantizer = QuantizerWu()
    first = quantizer.quantize([RED, GREEN], 8)
    quantizer.quantize([BLUE] * 3, 8)
    second = quantizer.quantize([RED, GREEN], 8)
    assert first == second


def test_zero_max_colors_is_rejected():
    with pytest.raises(ValueError):
        QuantizerWu().quantize([RED], 0)