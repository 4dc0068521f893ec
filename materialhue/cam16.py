"""The CAM16 color appearance model and its CAM16-UCS coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass

from materialhue.colorspace import (
    CAM16RGB_TO_XYZ,
    XYZ_TO_CAM16RGB,
    Argb,
    argb_from_xyz,
    matrix_multiply,
    xyz_from_argb,
)
from materialhue.viewing_conditions import ViewingConditions


def _signum(x: float) -> float:
    return math.copysign(1.0, x)


def _powf(base: float, exponent: float) -> float:
    if base < 0.0 or math.isnan(base):
        return math.nan
    return base**exponent


def _sqrt(x: float) -> float:
    return math.nan if x < 0.0 or math.isnan(x) else math.sqrt(x)


@dataclass(frozen=True)
class Cam16:
    """A color in CAM16: hue, chroma, lightness (j), brightness (q),
    colorfulness (m), saturation (s) and CAM16-UCS coordinates."""

    hue: float
    chroma: float
    j: float
    q: float
    m: float
    s: float
    jstar: float
    astar: float
    bstar: float

    def distance(self, other: "Cam16") -> float:
        """Perceptual distance to another color in CAM16-UCS."""
        d_j = self.jstar - other.jstar
        d_a = self.astar - other.astar
        d_b = self.bstar - other.bstar
        d_eprime = math.sqrt(d_j * d_j + d_a * d_a + d_b * d_b)
        return 1.41 * d_eprime**0.63

    @classmethod
    def from_argb(cls, argb: Argb) -> "Cam16":
        """CAM16 of a color seen in default viewing conditions."""
        return cls.from_argb_in_viewing_conditions(argb, ViewingConditions.default())

    @classmethod
    def from_argb_in_viewing_conditions(
        cls, argb: Argb, viewing_conditions: ViewingConditions
    ) -> "Cam16":
        """CAM16 of a color seen in the given viewing conditions."""
        vc = viewing_conditions
        t_rgb = matrix_multiply(xyz_from_argb(argb), XYZ_TO_CAM16RGB)
        discounted = [factor * value for factor, value in zip(vc.rgb_d, t_rgb)]

        adapted = []
        for d in discounted:
            af = _powf(vc.fl * abs(d) / 100.0, 0.42)
            adapted.append(_signum(d) * 400.0 * af / (af + 27.13))
        r_a, g_a, b_a = adapted

        red_greenness = (11.0 * r_a - 12.0 * g_a + b_a) / 11.0
        yellowness_blueness = (r_a + g_a - 2.0 * b_a) / 9.0
        u = (20.0 * r_a + 20.0 * g_a + 21.0 * b_a) / 20.0
        p2 = (40.0 * r_a + 20.0 * g_a + b_a) / 20.0

        atan_degrees = math.degrees(math.atan2(yellowness_blueness, red_greenness))
        if atan_degrees < 0.0:
            hue = atan_degrees + 360.0
        elif atan_degrees >= 360.0:
            hue = atan_degrees - 360.0
        else:
            hue = atan_degrees
        hue_radians = math.radians(hue)

        ac = p2 * vc.nbb
        lightness = 100.0 * _powf(ac / vc.aw, vc.c * vc.z)
        brightness = (
            4.0 / vc.c * _sqrt(lightness / 100.0) * (vc.aw + 4.0) * vc.fl_root
        )

        hue_prime = hue + 360.0 if hue < 20.14 else hue
        e_hue = 0.25 * (math.cos(math.radians(hue_prime) + 2.0) + 3.8)
        p1 = 50000.0 / 13.0 * e_hue * vc.nc * vc.ncb
        t = p1 * math.hypot(red_greenness, yellowness_blueness) / (u + 0.305)
        alpha = _powf(1.64 - 0.29**vc.n, 0.73) * _powf(t, 0.9)
        chroma = alpha * _sqrt(lightness / 100.0)
        colorfulness = chroma * vc.fl_root
        saturation = 50.0 * _sqrt(alpha * vc.c / (vc.aw + 4.0))

        jstar = (1.0 + 100.0 * 0.007) * lightness / (1.0 + 0.007 * lightness)
        mstar = 1.0 / 0.0228 * math.log1p(0.0228 * colorfulness)
        return cls(
            hue=hue,
            chroma=chroma,
            j=lightness,
            q=brightness,
            m=colorfulness,
            s=saturation,
            jstar=jstar,
            astar=mstar * math.cos(hue_radians),
            bstar=mstar * math.sin(hue_radians),
        )

    @classmethod
    def from_jch(cls, j: float, c: float, h: float) -> "Cam16":
        """CAM16 from lightness, chroma and hue in default viewing conditions."""
        return cls.from_jch_in_viewing_conditions(j, c, h, ViewingConditions.default())

    @classmethod
    def from_jch_in_viewing_conditions(
        cls, j: float, c: float, h: float, viewing_conditions: ViewingConditions
    ) -> "Cam16":
        """CAM16 from lightness, chroma and hue in the given viewing conditions."""
        vc = viewing_conditions
        q = 4.0 / vc.c * _sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root
        m = c * vc.fl_root
        root_j = _sqrt(j / 100.0)
        alpha = c / root_j if root_j != 0.0 else math.copysign(math.inf, c) if c else math.nan
        s = 50.0 * _sqrt(alpha * vc.c / (vc.aw + 4.0))

        hue_radians = math.radians(h)
        jstar = (1.0 + 100.0 * 0.007) * j / (1.0 + 0.007 * j)
        mstar = 1.0 / 0.0228 * math.log1p(0.0228 * m)
        return cls(
            hue=h,
            chroma=c,
            j=j,
            q=q,
            m=m,
            s=s,
            jstar=jstar,
            astar=mstar * math.cos(hue_radians),
            bstar=mstar * math.sin(hue_radians),
        )

    @classmethod
    def from_ucs(cls, jstar: float, astar: float, bstar: float) -> "Cam16":
        """CAM16 from CAM16-UCS coordinates in default viewing conditions."""
        return cls.from_ucs_in_viewing_conditions(
            jstar, astar, bstar, ViewingConditions.default()
        )

    @classmethod
    def from_ucs_in_viewing_conditions(
        cls,
        jstar: float,
        astar: float,
        bstar: float,
        viewing_conditions: ViewingConditions,
    ) -> "Cam16":
        """CAM16 from CAM16-UCS coordinates in the given viewing conditions."""
        m = math.hypot(astar, bstar)
        m2 = math.expm1(m * 0.0228) / 0.0228
        c = m2 / viewing_conditions.fl_root
        h = math.degrees(math.atan2(bstar, astar))
        if h < 0.0:
            h += 360.0
        j = jstar / (1.0 - (jstar - 100.0) * 0.007)
        return cls.from_jch_in_viewing_conditions(j, c, h, viewing_conditions)

    def to_argb(self) -> Argb:
        """The color this represents, seen in default viewing conditions."""
        return self.viewed(ViewingConditions.default())

    def viewed(self, viewing_conditions: ViewingConditions) -> Argb:
        """The color this represents, seen in the given viewing conditions."""
        vc = viewing_conditions
        if self.chroma == 0.0 or self.j == 0.0:
            alpha = 0.0
        else:
            alpha = self.chroma / _sqrt(self.j / 100.0)

        t = _powf(alpha / _powf(1.64 - 0.29**vc.n, 0.73), 1.0 / 0.9)
        h_rad = math.radians(self.hue)
        e_hue = 0.25 * (math.cos(h_rad + 2.0) + 3.8)
        ac = vc.aw * _powf(self.j / 100.0, 1.0 / vc.c / vc.z)
        p1 = e_hue * (50000.0 / 13.0) * vc.nc * vc.ncb
        p2 = ac / vc.nbb

        h_sin = math.sin(h_rad)
        h_cos = math.cos(h_rad)
        gamma = 23.0 * (p2 + 0.305) * t / (23.0 * p1 + 11.0 * t * h_cos + 108.0 * t * h_sin)
        a = gamma * h_cos
        b = gamma * h_sin
        r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
        g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
        b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0

        unadapted = []
        for adapted, factor in zip((r_a, g_a, b_a), vc.rgb_d):
            magnitude = abs(adapted)
            base = max(0.0, 27.13 * magnitude / (400.0 - magnitude))
            component = _signum(adapted) * (100.0 / vc.fl) * _powf(base, 1.0 / 0.42)
            unadapted.append(component / factor)

        return argb_from_xyz(matrix_multiply(unadapted, CAM16RGB_TO_XYZ))