"""Point-to-segment distance and strict segment crossing tests."""

from __future__ import annotations

import math

from scanqa.exceptions import GeometryError
from scanqa.geometry.contract import EPSILON
from scanqa.geometry.vector import Point, add, cross, dot, is_finite, magnitude, magnitude_squared, scale, subtract


def dist_to_segment(p: Point, a: Point, b: Point) -> float:
    """Shortest distance from ``p`` to the closed segment ``a``-``b``.

    A degenerate segment (squared length below EPSILON) is treated as the point ``a``.

    Raises:
        GeometryError: If any coordinate is NaN or infinite.
    """
    if not (is_finite(p) and is_finite(a) and is_finite(b)):
        raise GeometryError(
            "Segment distance requires finite coordinates",
            {"point": repr(tuple(p)), "start": repr(tuple(a)), "end": repr(tuple(b))},
        )
    ab = subtract(b, a)
    length_sq = magnitude_squared(ab)
    if length_sq < EPSILON:
        return magnitude(subtract(p, a))
    t = dot(subtract(p, a), ab) / length_sq
    t = max(0.0, min(1.0, t))
    projection = add(a, scale(ab, t))
    return magnitude(subtract(p, projection))


def _crossing_parameters(a: Point, b: Point, c: Point, d: Point) -> tuple[float, float] | None:
    if not all(is_finite(point) for point in (a, b, c, d)):
        return None
    ab = subtract(b, a)
    cd = subtract(d, c)
    det = cross(ab, cd)
    if abs(det) < EPSILON:
        return None
    ad = subtract(d, a)
    lam = cross(ad, cd) / det
    gamma = cross(ab, ad) / det
    if not (math.isfinite(lam) and math.isfinite(gamma)):
        return None
    return lam, gamma


def segments_intersect(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True only when ``a``-``b`` and ``c``-``d`` cross strictly inside both segments.

    Parallel, collinear, endpoint-touching and non-finite inputs all yield False.
    """
    params = _crossing_parameters(a, b, c, d)
    if params is None:
        return False
    lam, gamma = params
    return 0.0 < lam < 1.0 and 0.0 < gamma < 1.0


def segment_intersection(a: Point, b: Point, c: Point, d: Point) -> Point | None:
    """Crossing point of two strictly intersecting segments, else None."""
    params = _crossing_parameters(a, b, c, d)
    if params is None:
        return None
    lam, gamma = params
    if not (0.0 < lam < 1.0 and 0.0 < gamma < 1.0):
        return None
    return add(a, scale(subtract(b, a), lam))


def min_distance_between_outlines(first: list[Point], second: list[Point]) -> float:
    """Smallest corner-to-edge distance between two cyclic outlines, both ways.

    Outlines with fewer than two points contribute no edges; the result is
    ``math.inf`` when no pair can be measured.
    """
    best = math.inf
    for corners, other in ((first, second), (second, first)):
        if len(other) < 2:
            continue
        count = len(other)
        for point in corners:
            for k in range(count):
                best = min(best, dist_to_segment(point, other[k], other[(k + 1) % count]))
    return best


__all__ = [
    "dist_to_segment",
    "min_distance_between_outlines",
    "segment_intersection",
    "segments_intersect",
]
