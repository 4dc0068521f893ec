"""Colors described by hue, chroma and tone (HCT)."""

from __future__ import annotations

from typing import Sequence

from materialhue.cam16 import Cam16
from materialhue.colorspace import Argb, lstar_from_argb
from materialhue.hct_solver import solve_to_argb


class Hct:
    """A color as CAM16 hue, CAM16 chroma and L* tone.

    Changing hue, chroma or tone solves for the closest displayable color,
    so chroma may come out lower than requested.
    """

    __slots__ = ("_hue", "_chroma", "_tone", "_argb")

    def __init__(self, argb: Sequence[int]) -> None:
        alpha, red, green, blue = argb
        self._set_internal_state((alpha, red, green, blue))

    @classmethod
    def from_hct(cls, hue: float, chroma: float, tone: float) -> "Hct":
        """The displayable color closest to the given hue, chroma and tone."""
        return cls(solve_to_argb(hue, chroma, tone))

    @property
    def hue(self) -> float:
        """CAM16 hue in degrees, 0 <= hue < 360."""
        return self._hue

    @hue.setter
    def hue(self, value: float) -> None:
        self._set_internal_state(solve_to_argb(value, self._chroma, self._tone))

    @property
    def chroma(self) -> float:
        """CAM16 chroma."""
        return self._chroma

    @chroma.setter
    def chroma(self, value: float) -> None:
        self._set_internal_state(solve_to_argb(self._hue, value, self._tone))

    @property
    def tone(self) -> float:
        """L* tone, 0 <= tone <= 100."""
        return self._tone

    @tone.setter
    def tone(self, value: float) -> None:
        self._set_internal_state(solve_to_argb(self._hue, self._chroma, value))

    @property
    def argb(self) -> Argb:
        """The color as an (alpha, red, green, blue) tuple."""
        return self._argb

    def _set_internal_state(self, argb: Argb) -> None:
        self._argb = argb
        cam = Cam16.from_argb(argb)
        self._hue = cam.hue
        self._chroma = cam.chroma
        self._tone = lstar_from_argb(argb)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hct):
            return NotImplemented
        return self._argb == other._argb

    def __hash__(self) -> int:
        return hash(self._argb)

    def __repr__(self) -> str:
        return (
            f"Hct(hue={self._hue:.3f}, chroma={self._chroma:.3f}, "
            f"tone={self._tone:.3f}, argb={self._argb})"
        )