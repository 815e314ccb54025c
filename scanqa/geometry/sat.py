"""Separating Axis Theorem overlap test for convex outlines."""

from __future__ import annotations

from collections.abc import Sequence

from scanqa.geometry.vector import Point, dot


def _project(polygon: Sequence[Point], axis: Point) -> tuple[float, float]:
    values = [dot(point, axis) for point in polygon]
    return min(values), max(values)


def do_polygons_intersect(a: Sequence[Point], b: Sequence[Point]) -> bool:
    """True unless some edge normal of ``a`` or ``b`` separates the two outlines.

    Touching outlines count as intersecting. Non-convex input is effectively
    tested against its convex hull.
    """
    if not a or not b:
        return False
    for polygon in (a, b):
        count = len(polygon)
        for i in range(count):
            p1 = polygon[i]
            p2 = polygon[(i + 1) % count]
            normal = Point(-(p2.y - p1.y), p2.x - p1.x)
            min_a, max_a = _project(a, normal)
            min_b, max_b = _project(b, normal)
            if max_a < min_b or max_b < min_a:
                return False
    return True


__all__ = ["do_polygons_intersect"]
