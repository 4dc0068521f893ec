"""K-Means quantization seeded with the output of Wu's quantizer."""

from __future__ import annotations

from typing import Dict, Iterable, Sequence

from materialhue.colorspace import Argb
from materialhue.quantizer_wsmeans import quantize_wsmeans
from materialhue.quantizer_wu import QuantizerWu


def quantize_celebi(pixels: Iterable[Sequence[int]], max_colors: int) -> Dict[Argb, int]:
    """Reduce ``pixels`` to at most ``max_colors`` colors.

    Returns a mapping of each resulting color to the number of pixels of
    the input that it represents.
    """
    pixel_list = [tuple(pixel) for pixel in pixels]
    colors = QuantizerWu().quantize(pixel_list, max_colors)
    return quantize_wsmeans(pixel_list, colors, max_colors)