"""Blending colors in HCT and CAM16-UCS."""

from __future__ import annotations

from materialhue.cam16 import Cam16
from materialhue.colorspace import (
    Argb,
    difference_degrees,
    lstar_from_argb,
    rotation_direction,
    sanitize_degrees,
)
from materialhue.hct import Hct


def harmonize(design_color: Argb, source_color: Argb) -> Argb:
    """Shift the hue of ``design_color`` towards that of ``source_color``.

    The shift is half the hue difference, at most 15 degrees, so the design
    color stays recognizable.
    """
    from_hct = Hct(design_color)
    to_hct = Hct(source_color)
    rotation = min(difference_degrees(from_hct.hue, to_hct.hue) * 0.5, 15.0)
    output_hue = sanitize_degrees(
        from_hct.hue + rotation * rotation_direction(from_hct.hue, to_hct.hue)
    )
    return Hct.from_hct(output_hue, from_hct.chroma, from_hct.tone).argb


def hct_hue(from_argb: Argb, to_argb: Argb, amount: float) -> Argb:
    """Blend the hue of ``from_argb`` towards ``to_argb``; chroma and tone are kept.

    ``amount`` ranges from 0.0 to 1.0.
    """
    ucs_cam = Cam16.from_argb(cam16_ucs(from_argb, to_argb, amount))
    from_cam = Cam16.from_argb(from_argb)
    return Hct.from_hct(ucs_cam.hue, from_cam.chroma, lstar_from_argb(from_argb)).argb


def cam16_ucs(from_argb: Argb, to_argb: Argb, amount: float) -> Argb:
    """Blend in CAM16-UCS space; hue, chroma and tone may all change.

    ``amount`` ranges from 0.0 to 1.0.
    """
    from_cam = Cam16.from_argb(from_argb)
    to_cam = Cam16.from_argb(to_argb)
    jstar = from_cam.jstar + (to_cam.jstar - from_cam.jstar) * amount
    astar = from_cam.astar + (to_cam.astar - from_cam.astar) * amount
    bstar = from_cam.bstar + (to_cam.bstar - from_cam.bstar) * amount
    return Cam16.from_jch(jstar, astar, bstar).to_argb()