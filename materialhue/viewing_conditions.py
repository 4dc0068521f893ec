"""Viewing conditions for the CAM16 color appearance model."""

from __future__ import annotations

import functools
import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from materialhue.colorspace import WHITE_POINT_D65, XYZ_TO_CAM16RGB, lerp, y_from_lstar


@dataclass(frozen=True)
class ViewingConditions:
    """Intermediate CAM16 values that depend only on the viewing environment."""

    aw: float
    nbb: float
    ncb: float
    c: float
    nc: float
    n: float
    rgb_d: Tuple[float, float, float]
    fl: float
    fl_root: float
    z: float

    @classmethod
    def make(
        cls,
        white_point: Sequence[float],
        adapting_luminance: float,
        background_lstar: float,
        surround: float,
        discounting_illuminant: bool,
    ) -> "ViewingConditions":
        """Build conditions from physically meaningful parameters.

        ``white_point`` is in XYZ, ``adapting_luminance`` in cd/m^2,
        ``background_lstar`` is the L* of the surroundings and ``surround``
        ranges from 0 (dark) to 2 (average).
        """
        r_w, g_w, b_w = (
            white_point[0] * row[0] + white_point[1] * row[1] + white_point[2] * row[2]
            for row in XYZ_TO_CAM16RGB
        )
        f = 0.8 + surround / 10.0
        if f >= 0.9:
            c = lerp(0.59, 0.69, (f - 0.9) * 10.0)
        else:
            c = lerp(0.525, 0.59, (f - 0.8) * 10.0)

        if discounting_illuminant:
            d = 1.0
        else:
            d = f * (1.0 - (1.0 / 3.6) * math.exp((-adapting_luminance - 42.0) / 92.0))

        rgb_d = tuple(d * (100.0 / w) + 1.0 - d for w in (r_w, g_w, b_w))
        k = 1.0 / (5.0 * adapting_luminance + 1.0)
        k4 = k * k * k * k
        k4f = 1.0 - k4
        five_la = 5.0 * adapting_luminance
        cbrt = math.copysign(abs(five_la) ** (1.0 / 3.0), five_la)
        fl = k4 * adapting_luminance + 0.1 * k4f * k4f * cbrt

        n = y_from_lstar(background_lstar) / white_point[1]
        z = 1.48 + math.sqrt(n)
        nbb = 0.725 / n**0.2

        rgb_a = []
        for factor, w in zip(rgb_d, (r_w, g_w, b_w)):
            af = (fl * factor * w / 100.0) ** 0.42
            rgb_a.append(400.0 * af / (af + 27.13))
        aw = (2.0 * rgb_a[0] + rgb_a[1] + 0.05 * rgb_a[2]) * nbb

        return cls(
            aw=aw,
            nbb=nbb,
            ncb=nbb,
            c=c,
            nc=f,
            n=n,
            rgb_d=(rgb_d[0], rgb_d[1], rgb_d[2]),
            fl=fl,
            fl_root=fl**0.25,
            z=z,
        )

    @classmethod
    def default(cls) -> "ViewingConditions":
        """sRGB-like conditions: D65, 200 lux, mid-gray background, average surround."""
        return _default_conditions()


@functools.lru_cache(maxsize=None)
def _default_conditions() -> ViewingConditions:
    return ViewingConditions.make(
        WHITE_POINT_D65,
        200.0 / math.pi * y_from_lstar(50.0) / 100.0,
        50.0,
        2.0,
        False,
    )