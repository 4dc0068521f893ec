"""Counting how often each color occurs."""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, Sequence

from materialhue.colorspace import Argb


def quantize_map(pixels: Iterable[Sequence[int]]) -> Dict[Argb, int]:
    """Map every distinct color in ``pixels`` to the number of times it occurs."""
    counts: Counter = Counter()
    for alpha, red, green, blue in pixels:
        counts[(alpha, red, green, blue)] += 1
    return dict(counts)