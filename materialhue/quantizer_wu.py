"""Wu's color quantizer: recursive variance-minimizing cuts of the RGB cube."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Iterable, List, NamedTuple, Optional, Sequence

from materialhue.colorspace import Argb
from materialhue.quantizer_map import quantize_map

# The histogram uses 5 of the 8 bits of each channel, giving a cube of ~32,000 cells.
_INDEX_BITS = 5
_BITS_TO_REMOVE = 8 - _INDEX_BITS
_SIDE_LENGTH = (1 << _INDEX_BITS) + 1
_TOTAL_SIZE = _SIDE_LENGTH * _SIDE_LENGTH * _SIDE_LENGTH


class Direction(enum.Enum):
    """The axis along which a box is cut."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"


def _index(r: int, g: int, b: int) -> int:
    return (r << (_INDEX_BITS * 2)) + (r << (_INDEX_BITS + 1)) + r + (g << _INDEX_BITS) + g + b


@dataclass
class _Box:
    """A box in the histogram, from the exclusive corner 0 to the inclusive corner 1."""

    r0: int = 0
    g0: int = 0
    b0: int = 0
    r1: int = 0
    g1: int = 0
    b1: int = 0
    vol: int = 0

    def calculate_vol(self) -> int:
        return (self.r1 - self.r0) * (self.g1 - self.g0) * (self.b1 - self.b0)


class _Maximized(NamedTuple):
    cut_location: Optional[int]
    maximum: float


class QuantizerWu:
    """Divides pixels into clusters by recursively cutting the RGB cube where
    the variance between the two halves is largest."""

    def __init__(self) -> None:
        self._weights: List[int] = [0] * _TOTAL_SIZE
        self._moments_r: List[int] = [0] * _TOTAL_SIZE
        self._moments_g: List[int] = [0] * _TOTAL_SIZE
        self._moments_b: List[int] = [0] * _TOTAL_SIZE
        self._moments: List[int] = [0] * _TOTAL_SIZE
        self._cubes: List[_Box] = []

    def quantize(self, pixels: Iterable[Sequence[int]], max_colors: int) -> List[Argb]:
        """At most ``max_colors`` opaque colors representing ``pixels``."""
        if max_colors < 1:
            raise ValueError(f"max_colors must be at least 1, got {max_colors}")
        self._construct_histogram(pixels)
        self._compute_moments()
        result_count = self._create_boxes(max_colors)
        return self._create_result(result_count)

    def _construct_histogram(self, pixels: Iterable[Sequence[int]]) -> None:
        self._weights = [0] * _TOTAL_SIZE
        self._moments_r = [0] * _TOTAL_SIZE
        self._moments_g = [0] * _TOTAL_SIZE
        self._moments_b = [0] * _TOTAL_SIZE
        self._moments = [0] * _TOTAL_SIZE

        for (_, red, green, blue), count in quantize_map(pixels).items():
            index = _index(
                (red >> _BITS_TO_REMOVE) + 1,
                (green >> _BITS_TO_REMOVE) + 1,
                (blue >> _BITS_TO_REMOVE) + 1,
            )
            self._weights[index] += count
            self._moments_r[index] += count * red
            self._moments_g[index] += count * green
            self._moments_b[index] += count * blue
            self._moments[index] += count * (red * red + green * green + blue * blue)

    def _compute_moments(self) -> None:
        weights = self._weights
        moments_r = self._moments_r
        moments_g = self._moments_g
        moments_b = self._moments_b
        moments = self._moments
        for r in range(1, _SIDE_LENGTH):
            area = [0] * _SIDE_LENGTH
            area_r = [0] * _SIDE_LENGTH
            area_g = [0] * _SIDE_LENGTH
            area_b = [0] * _SIDE_LENGTH
            area2 = [0] * _SIDE_LENGTH
            for g in range(1, _SIDE_LENGTH):
                line = line_r = line_g = line_b = line2 = 0
                for b in range(1, _SIDE_LENGTH):
                    index = _index(r, g, b)
                    line += weights[index]
                    line_r += moments_r[index]
                    line_g += moments_g[index]
                    line_b += moments_b[index]
                    line2 += moments[index]

                    area[b] += line
                    area_r[b] += line_r
                    area_g[b] += line_g
                    area_b[b] += line_b
                    area2[b] += line2

                    previous = _index(r - 1, g, b)
                    weights[index] = weights[previous] + area[b]
                    moments_r[index] = moments_r[previous] + area_r[b]
                    moments_g[index] = moments_g[previous] + area_g[b]
                    moments_b[index] = moments_b[previous] + area_b[b]
                    moments[index] = moments[previous] + area2[b]

    def _create_boxes(self, max_colors: int) -> int:
        self._cubes = [_Box() for _ in range(max_colors)]
        max_index = _SIDE_LENGTH - 1
        self._cubes[0] = _Box(0, 0, 0, max_index, max_index, max_index)
        volume_variance = [0.0] * max_colors

        generated_color_count = max_colors
        next_index = 0
        index = 1
        while index < max_colors:
            if self._cut(next_index, index):
                next_cube = self._cubes[next_index]
                volume_variance[next_index] = (
                    self._variance(next_cube) if next_cube.vol > 1 else 0.0
                )
                current_cube = self._cubes[index]
                volume_variance[index] = (
                    self._variance(current_cube) if current_cube.vol > 1 else 0.0
                )
            else:
                volume_variance[next_index] = 0.0
                index -= 1

            next_index = 0
            temp = volume_variance[0]
            for j in range(1, index + 1):
                if volume_variance[j] > temp:
                    temp = volume_variance[j]
                    next_index = j
            if temp <= 0.0:
                generated_color_count = index + 1
                break
            index += 1

        return generated_color_count

    def _create_result(self, color_count: int) -> List[Argb]:
        colors: List[Argb] = []
        for cube in self._cubes[:color_count]:
            weight = self._volume(cube, self._weights)
            if weight == 0:
                continue
            r = self._volume(cube, self._moments_r) // weight
            g = self._volume(cube, self._moments_g) // weight
            b = self._volume(cube, self._moments_b) // weight
            colors.append((0xFF, r & 0xFF, g & 0xFF, b & 0xFF))
        return colors

    def _variance(self, cube: _Box) -> float:
        dr = float(self._volume(cube, self._moments_r))
        dg = float(self._volume(cube, self._moments_g))
        db = float(self._volume(cube, self._moments_b))
        xx = float(self._volume(cube, self._moments))
        hypotenuse = dr * dr + dg * dg + db * db
        volume = float(self._volume(cube, self._weights))
        return xx - hypotenuse / volume

    def _cut(self, next_index: int, current_index: int) -> bool:
        one = replace(self._cubes[next_index])
        two = replace(self._cubes[current_index])

        whole_r = self._volume(one, self._moments_r)
        whole_g = self._volume(one, self._moments_g)
        whole_b = self._volume(one, self._moments_b)
        whole_w = self._volume(one, self._weights)
        wholes = (whole_r, whole_g, whole_b, whole_w)

        max_r = self._maximize(one, Direction.RED, one.r0 + 1, one.r1, *wholes)
        max_g = self._maximize(one, Direction.GREEN, one.g0 + 1, one.g1, *wholes)
        max_b = self._maximize(one, Direction.BLUE, one.b0 + 1, one.b1, *wholes)

        if max_r.maximum >= max_g.maximum and max_r.maximum >= max_b.maximum:
            if max_r.cut_location is None:
                return False
            direction = Direction.RED
        elif max_g.maximum >= max_r.maximum and max_g.maximum >= max_b.maximum:
            direction = Direction.GREEN
        else:
            direction = Direction.BLUE

        two.r1, two.g1, two.b1 = one.r1, one.g1, one.b1

        if direction is Direction.RED:
            one.r1 = max_r.cut_location or 0
            two.r0, two.g0, two.b0 = one.r1, one.g0, one.b0
        elif direction is Direction.GREEN:
            one.g1 = max_g.cut_location or 0
            two.r0, two.g0, two.b0 = one.r0, one.g1, one.b0
        else:
            one.b1 = max_b.cut_location or 0
            two.r0, two.g0, two.b0 = one.r0, one.g0, one.b1

        one.vol = one.calculate_vol()
        two.vol = two.calculate_vol()
        self._cubes[next_index] = one
        self._cubes[current_index] = two
        return True

    def _maximize(
        self,
        cube: _Box,
        direction: Direction,
        first: int,
        last: int,
        whole_r: int,
        whole_g: int,
        whole_b: int,
        whole_w: int,
    ) -> _Maximized:
        bottom_r = self._bottom(cube, direction, self._moments_r)
        bottom_g = self._bottom(cube, direction, self._moments_g)
        bottom_b = self._bottom(cube, direction, self._moments_b)
        bottom_w = self._bottom(cube, direction, self._weights)

        maximum = 0.0
        cut: Optional[int] = None
        for position in range(first, last):
            half_r = bottom_r + self._top(cube, direction, position, self._moments_r)
            half_g = bottom_g + self._top(cube, direction, position, self._moments_g)
            half_b = bottom_b + self._top(cube, direction, position, self._moments_b)
            half_w = bottom_w + self._top(cube, direction, position, self._weights)
            if half_w == 0:
                continue
            temp = _spread(half_r, half_g, half_b, half_w)

            half_r = whole_r - half_r
            half_g = whole_g - half_g
            half_b = whole_b - half_b
            half_w = whole_w - half_w
            if half_w == 0:
                continue
            temp += _spread(half_r, half_g, half_b, half_w)

            if temp > maximum:
                maximum = temp
                cut = position
        return _Maximized(cut, maximum)

    @staticmethod
    def _volume(cube: _Box, moment: List[int]) -> int:
        return (
            moment[_index(cube.r1, cube.g1, cube.b1)]
            - moment[_index(cube.r1, cube.g1, cube.b0)]
            - moment[_index(cube.r1, cube.g0, cube.b1)]
            + moment[_index(cube.r1, cube.g0, cube.b0)]
            - moment[_index(cube.r0, cube.g1, cube.b1)]
            + moment[_index(cube.r0, cube.g1, cube.b0)]
            + moment[_index(cube.r0, cube.g0, cube.b1)]
            - moment[_index(cube.r0, cube.g0, cube.b0)]
        )

    @staticmethod
    def _bottom(cube: _Box, direction: Direction, moment: List[int]) -> int:
        if direction is Direction.RED:
            return (
                moment[_index(cube.r0, cube.g1, cube.b0)]
                + moment[_index(cube.r0, cube.g0, cube.b1)]
                - moment[_index(cube.r0, cube.g0, cube.b0)]
                - moment[_index(cube.r0, cube.g1, cube.b1)]
            )
        if direction is Direction.GREEN:
            return (
                moment[_index(cube.r1, cube.g0, cube.b0)]
                + moment[_index(cube.r0, cube.g0, cube.b1)]
                - moment[_index(cube.r0, cube.g0, cube.b0)]
                - moment[_index(cube.r1, cube.g0, cube.b1)]
            )
        return (
            moment[_index(cube.r1, cube.g0, cube.b0)]
            + moment[_index(cube.r0, cube.g1, cube.b0)]
            - moment[_index(cube.r0, cube.g0, cube.b0)]
            - moment[_index(cube.r1, cube.g1, cube.b0)]
        )

    @staticmethod
    def _top(cube: _Box, direction: Direction, position: int, moment: List[int]) -> int:
        if direction is Direction.RED:
            return (
                moment[_index(position, cube.g1, cube.b1)]
                - moment[_index(position, cube.g1, cube.b0)]
                - moment[_index(position, cube.g0, cube.b1)]
                + moment[_index(position, cube.g0, cube.b0)]
            )
        if direction is Direction.GREEN:
            return (
                moment[_index(cube.r1, position, cube.b1)]
                - moment[_index(cube.r1, position, cube.b0)]
                - moment[_index(cube.r0, position, cube.b1)]
                + moment[_index(cube.r0, position, cube.b0)]
            )
        return (
            moment[_index(cube.r1, cube.g1, position)]
            - moment[_index(cube.r1, cube.g0, position)]
            - moment[_index(cube.r0, cube.g1, position)]
            + moment[_index(cube.r0, cube.g0, position)]
        )


def _spread(r: int, g: int, b: int, w: int) -> float:
    fr, fg, fb = float(r), float(g), float(b)
    return (fr * fr + fg * fg + fb * fb) / float(w)