"""Weighted square means: K-Means color quantization with deduplicated pixels.

Identical pixels are merged and weighted by their count, and a triangle
inequality rule skips clusters that cannot be closer than the current one.
"""

from __future__ import annotations

import math
import random
from typing import Dict, Iterable, List, Optional, Sequence

from materialhue.colorspace import Argb
from materialhue.lab_point_provider import LabPointProvider, Point

MAX_ITERATIONS = 10
MIN_MOVEMENT_DISTANCE = 3.0


def _random_lab_point(rng: random.Random) -> Point:
    l = rng.random() * 100.0
    a = rng.random() * (100.0 - (-100.0) + 1.0) - 100.0
    b = rng.random() * (100.0 - (-100.0) + 1.0) - 100.0
    return (l, a, b)


def quantize_wsmeans(
    input_pixels: Iterable[Sequence[int]],
    starting_clusters: Iterable[Sequence[int]],
    max_colors: int,
    rng: Optional[random.Random] = None,
) -> Dict[Argb, int]:
    """Cluster ``input_pixels`` into at most ``max_colors`` colors.

    ``starting_clusters`` sets the initial centroids; when it is empty,
    random centroids drawn from ``rng`` are used. Returns a mapping of each
    resulting color to the number of pixels assigned to it.
    """
    if rng is None:
        rng = random.Random()
    provider = LabPointProvider()

    pixel_counts: Dict[Argb, int] = {}
    for alpha, red, green, blue in input_pixels:
        key = (alpha, red, green, blue)
        pixel_counts[key] = pixel_counts.get(key, 0) + 1

    points: List[Point] = [provider.from_argb(pixel) for pixel in pixel_counts]
    counts: List[int] = list(pixel_counts.values())
    point_count = len(points)
    if point_count == 0:
        return {}
    if max_colors < 1:
        raise ValueError(f"max_colors must be at least 1, got {max_colors}")

    starting = [tuple(cluster) for cluster in starting_clusters]
    cluster_count = min(max_colors, point_count)
    if starting:
        cluster_count = min(cluster_count, len(starting))

    clusters: List[Point] = [provider.from_argb(cluster) for cluster in starting]
    if not starting:
        clusters.extend(_random_lab_point(rng) for _ in range(cluster_count))

    cluster_indices = [
        min(int(rng.random() * cluster_count), cluster_count - 1) for _ in points
    ]

    # Populations accumulate over every iteration that recomputes the centroids.
    population = [0] * cluster_count
    for iteration in range(MAX_ITERATIONS):
        between = [
            [provider.distance(clusters[i], clusters[j]) for j in range(cluster_count)]
            for i in range(cluster_count)
        ]

        points_moved = 0
        for i, point in enumerate(points):
            previous_index = cluster_indices[i]
            previous_distance = provider.distance(point, clusters[previous_index])
            minimum_distance = previous_distance
            new_index: Optional[int] = None
            for j, cluster_distance in enumerate(between[previous_index]):
                if cluster_distance >= 4.0 * previous_distance:
                    continue
                distance = provider.distance(point, clusters[j])
                if distance < minimum_distance:
                    minimum_distance = distance
                    new_index = j
            if new_index is not None:
                change = abs(math.sqrt(minimum_distance) - math.sqrt(previous_distance))
                if change > MIN_MOVEMENT_DISTANCE:
                    points_moved += 1
                    cluster_indices[i] = new_index

        if points_moved == 0 and iteration != 0:
            break

        sums = [[0.0, 0.0, 0.0] for _ in range(cluster_count)]
        for point, index, count in zip(points, cluster_indices, counts):
            population[index] += count
            component_sums = sums[index]
            for axis in range(3):
                component_sums[axis] += point[axis] * count

        clusters = [
            (s[0] / n, s[1] / n, s[2] / n) if n else (0.0, 0.0, 0.0)
            for s, n in zip(sums, population)
        ]

    result: Dict[Argb, int] = {}
    for cluster, count in zip(clusters, population):
        if count == 0:
            continue
        color = provider.to_argb(cluster)
        if color in result:
            continue
        result[color] = count
    return result