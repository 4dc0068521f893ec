"""Mapping colors to points in a space where quantizers measure distance."""

from __future__ import annotations

from typing import Protocol, Sequence, Tuple

from materialhue.colorspace import Argb, argb_from_lab, lab_from_argb

Point = Tuple[float, float, float]


class PointProvider(Protocol):
    """A color space that quantizers can work in."""

    def to_argb(self, point: Sequence[float]) -> Argb:
        """Convert a point back to a color."""
        ...

    def from_argb(self, argb: Argb) -> Point:
        """Convert a color to a point."""
        ...

    def distance(self, from_point: Sequence[float], to_point: Sequence[float]) -> float:
        """A measure of distance between two points; only its ordering matters."""
        ...


class LabPointProvider:
    """Points in CIE L*a*b*, compared with squared Euclidean distance."""

    def to_argb(self, point: Sequence[float]) -> Argb:
        """Convert an (L*, a*, b*) point to a color."""
        l, a, b = point
        return argb_from_lab(l, a, b)

    def from_argb(self, argb: Argb) -> Point:
        """Convert a color to an (L*, a*, b*) point."""
        return lab_from_argb(argb)

    def distance(self, from_point: Sequence[float], to_point: Sequence[float]) -> float:
        """Squared CIE 1976 delta E; the square root is left out as ordering is unchanged."""
        return sum((f - t) * (f - t) for f, t in zip(from_point, to_point))