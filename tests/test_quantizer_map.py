from materialhue.quantizer_map import quantize_map

RED = (0xFF, 0xFF, 0x00, 0x00)
GREEN = (0xFF, 0x00, 0xFF, 0x00)
BLUE = (0xFF, 0x00, 0x00, 0xFF)


def test_empty_input_gives_empty_map():
    assert quantize_map([]) == {}


def test_counts_each_color():
    result = quantize_map([RED, RED, GREEN, GREEN, GREEN, BLUE])
    assert result == {RED: 2, GREEN: 3, BLUE: 1}


def test_total_count_equals_number_of_pixels():
    pixels = [RED, GREEN, BLUE, RED, BLUE, BLUE, BLUE]
    result = quantize_map(pixels)
    assert sum(result.values()) == len(pixels)
    assert set(result) == {RED, GREEN, BLUE}


def test_alpha_distinguishes_colors():
    transparent_red = (0x00, 0xFF, 0x00, 0x00)
    result = quantize_map([RED, transparent_red, transparent_red])
    assert result[RED] == 1
    assert result[transparent_red] == 2


def test_accepts_lists_and_generators():
    result = quantize_map(list(p) for p in [RED, RED])
    assert result == {RED: 2}