"""
Polygon Integrity

Boolean validation of simple planar outlines. The checks run in a fixed order
and the first failing rule rejects the outline:

1. at least three vertices
2. finite coordinates within MAX_COORDINATE
3. no explicit closing vertex (first == last)
4. edges at least MIN_EDGE_LENGTH long, interior angles within
   [MIN_INTERIOR_ANGLE_DEG, MAX_INTERIOR_ANGLE_DEG]
5. non-zero area with clockwise winding in the plan's (x, z) convention
6. no crossing between non-adjacent edges
7. no collinear overlap between non-adjacent edges
8. no duplicate vertices
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from scanqa.geometry.contract import (
    EPSILON,
    MAX_COORDINATE,
    MAX_INTERIOR_ANGLE_DEG,
    MIN_EDGE_LENGTH,
    MIN_INTERIOR_ANGLE_DEG,
)
from scanqa.geometry.segment import segments_intersect
from scanqa.geometry.vector import Point, cross, dot, magnitude, magnitude_squared, subtract


def _coordinates_in_range(points: Sequence[Point]) -> bool:
    for point in points:
        for value in point:
            if not math.isfinite(value) or abs(value) > MAX_COORDINATE:
                return False
    return True


def _is_explicitly_closed(points: Sequence[Point]) -> bool:
    first, last = points[0], points[-1]
    return abs(first.x - last.x) < EPSILON and abs(first.y - last.y) < EPSILON


def _edges_and_angles_valid(points: Sequence[Point]) -> bool:
    count = len(points)
    for i in range(count):
        p1 = points[i]
        p2 = points[(i + 1) % count]
        p3 = points[(i + 2) % count]

        if magnitude(subtract(p2, p1)) < MIN_EDGE_LENGTH:
            return False

        incoming = subtract(p1, p2)
        outgoing = subtract(p3, p2)
        len_in = magnitude(incoming)
        len_out = magnitude(outgoing)
        if len_in < EPSILON or len_out < EPSILON:
            return False
        cos_angle = max(-1.0, min(1.0, dot(incoming, outgoing) / (len_in * len_out)))
        angle_deg = math.degrees(math.acos(cos_angle))
        if angle_deg < MIN_INTERIOR_ANGLE_DEG or angle_deg > MAX_INTERIOR_ANGLE_DEG:
            return False
    return True


def signed_area(points: Sequence[Point]) -> float:
    """Trapezoid-sum area; negative for the winding scan outlines use."""
    count = len(points)
    total = 0.0
    for i in range(count):
        p1 = points[i]
        p2 = points[(i + 1) % count]
        total += (p2.x - p1.x) * (p2.y + p1.y)
    return total / 2.0


def _winding_valid(points: Sequence[Point]) -> bool:
    area = signed_area(points)
    if abs(area) < EPSILON:
        return False
    return area <= -EPSILON


def _is_adjacent(i: int, j: int, count: int) -> bool:
    return abs(i - j) == 1 or (i == 0 and j == count - 1)


def _has_self_intersection(points: Sequence[Point]) -> bool:
    count = len(points)
    for i in range(count):
        for j in range(i + 2, count):
            if i == 0 and j == count - 1:
                continue
            if segments_intersect(points[i], points[(i + 1) % count], points[j], points[(j + 1) % count]):
                return True
    return False


def _has_collinear_overlap(points: Sequence[Point]) -> bool:
    count = len(points)
    for i in range(count):
        p1 = points[i]
        p2 = points[(i + 1) % count]
        edge_a = subtract(p2, p1)
        for j in range(i + 1, count):
            if _is_adjacent(i, j, count):
                continue
            q1 = points[j]
            q2 = points[(j + 1) % count]
            edge_b = subtract(q2, q1)
            if abs(cross(edge_a, edge_b)) > EPSILON:
                continue
            if abs(cross(edge_a, subtract(q1, p1))) > EPSILON:
                continue
            # project onto the dominant axis of the first edge
            axis = 1 if abs(edge_a.x) < EPSILON else 0
            a_min, a_max = sorted((p1[axis], p2[axis]))
            b_min, b_max = sorted((q1[axis], q2[axis]))
            if min(a_max, b_max) - max(a_min, b_min) > EPSILON:
                return True
    return False


def _has_duplicate_vertices(points: Sequence[Point]) -> bool:
    threshold = EPSILON * EPSILON
    count = len(points)
    for i in range(count):
        for j in range(i + 1, count):
            if magnitude_squared(subtract(points[i], points[j])) < threshold:
                return True
    return False


def check_polygon_integrity(points: Sequence[Point]) -> bool:
    """Return True when ``points`` describes a valid open outline."""
    if len(points) < 3:
        return False
    if not _coordinates_in_range(points):
        return False
    if _is_explicitly_closed(points):
        return False
    if not _edges_and_angles_valid(points):
        return False
    if not _winding_valid(points):
        return False
    if _has_self_intersection(points):
        return False
    if _has_collinear_overlap(points):
        return False
    if _has_duplicate_vertices(points):
        return False
    return True


def corners_to_points(corners: Sequence[Sequence[float]]) -> list[Point]:
    """Map raw ``[x, z, ...]`` corner lists to points; missing components read as 0."""
    points = []
    for corner in corners:
        x = float(corner[0]) if len(corner) > 0 else 0.0
        y = float(corner[1]) if len(corner) > 1 else 0.0
        points.append(Point(x, y))
    return points


def check_corner_integrity(corners: Sequence[Sequence[float]]) -> bool:
    return check_polygon_integrity(corners_to_points(corners))


__all__ = [
    "check_corner_integrity",
    "check_polygon_integrity",
    "corners_to_points",
    "signed_area",
]
