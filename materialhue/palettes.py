"""Tonal and core palettes built from a key color."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Dict

from materialhue.colorspace import Argb
from materialhue.hct import Hct


@dataclass
class TonalPalette:
    """All tones of one hue and chroma; tones are computed on demand and cached."""

    hue: float
    chroma: float
    _cache: Dict[int, Argb] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_argb(cls, argb: Argb) -> "TonalPalette":
        """Palette with the hue and chroma of a color."""
        hct = Hct(argb)
        return cls(hct.hue, hct.chroma)

    @classmethod
    def from_hue_and_chroma(cls, hue: float, chroma: float) -> "TonalPalette":
        """Palette with the given hue and chroma."""
        return cls(hue, chroma)

    def tone(self, tone: int) -> Argb:
        """The color of this palette at the given tone (0 is black, 100 is white)."""
        if not 0 <= tone <= 255:
            raise ValueError(f"tone out of range: {tone}")
        cached = self._cache.get(tone)
        if cached is None:
            cached = Hct.from_hct(self.hue, self.chroma, float(tone)).argb
            self._cache[tone] = cached
        return cached


class ColorPalette(enum.Enum):
    """How the accent hues of a content palette relate to the key hue."""

    DEFAULT = "default"
    TRIADIC = "triadic"
    ADJACENT = "adjacent"


_ACCENT_ANGLES = {ColorPalette.TRIADIC: 90.0, ColorPalette.ADJACENT: 30.0}


@dataclass
class CorePalette:
    """Three accent, two neutral and one error tonal palette derived from a key color."""

    a1: TonalPalette
    a2: TonalPalette
    a3: TonalPalette
    n1: TonalPalette
    n2: TonalPalette
    error: TonalPalette

    @classmethod
    def of(
        cls,
        argb: Argb,
        is_content: bool = False,
        color_palette: ColorPalette = ColorPalette.DEFAULT,
    ) -> "CorePalette":
        """Build the palettes for a key color.

        Content palettes keep the key color's chroma; others use fixed chromas.
        """
        hct = Hct(argb)
        hue = hct.hue
        chroma = hct.chroma
        make = TonalPalette.from_hue_and_chroma
        error = make(25.0, 84.0)

        if not is_content:
            return cls(
                a1=make(hue, max(48.0, chroma)),
                a2=make(hue, 16.0),
                a3=make(hue + 60.0, 24.0),
                n1=make(hue, 6.0),
                n2=make(hue, 8.0),
                error=error,
            )

        angle = _ACCENT_ANGLES.get(color_palette)
        if angle is None:
            a2 = make(hue, chroma / 3.0)
            a3 = make(hue + 60.0, chroma / 2.0)
        else:
            a2 = make(hue + angle, chroma / 3.0)
            a3 = make(hue - angle, chroma / 2.0)
        return cls(
            a1=make(hue, chroma),
            a2=a2,
            a3=a3,
            n1=make(hue, min(chroma / 12.0, 6.0)),
            n2=make(hue, min(chroma / 6.0, 8.0)),
            error=error,
        )