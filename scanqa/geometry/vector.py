"""2D vector primitives on the floor plane (x, z stored as x, y)."""

from __future__ import annotations

import math
from typing import NamedTuple

from scanqa.geometry.contract import EPSILON


class Point(NamedTuple):
    """Immutable 2D point or vector in meters."""

    x: float
    y: float


ORIGIN = Point(0.0, 0.0)


def add(a: Point, b: Point) -> Point:
    return Point(a.x + b.x, a.y + b.y)


def subtract(a: Point, b: Point) -> Point:
    return Point(a.x - b.x, a.y - b.y)


def scale(a: Point, factor: float) -> Point:
    return Point(a.x * factor, a.y * factor)


def dot(a: Point, b: Point) -> float:
    return a.x * b.x + a.y * b.y


def cross(a: Point, b: Point) -> float:
    """Z component of the 3D cross product; positive when b is counter-clockwise of a."""
    return a.x * b.y - a.y * b.x


def magnitude_squared(a: Point) -> float:
    return a.x * a.x + a.y * a.y


def magnitude(a: Point) -> float:
    return math.sqrt(magnitude_squared(a))


def distance(a: Point, b: Point) -> float:
    return magnitude(subtract(a, b))


def normalize(a: Point) -> Point:
    """Unit vector in the direction of ``a``; the zero vector stays zero."""
    length = magnitude(a)
    if length < EPSILON:
        return ORIGIN
    return Point(a.x / length, a.y / length)


def angle_between(a: Point, b: Point) -> float:
    """Unsigned angle in radians, within [0, pi]. Zero if either vector is zero."""
    len_a = magnitude(a)
    len_b = magnitude(b)
    if len_a < EPSILON or len_b < EPSILON:
        return 0.0
    cos_angle = max(-1.0, min(1.0, dot(a, b) / (len_a * len_b)))
    return math.acos(cos_angle)


def equals(a: Point, b: Point, eps: float = EPSILON) -> bool:
    return abs(a.x - b.x) <= eps and abs(a.y - b.y) <= eps


def is_finite(a: Point) -> bool:
    return math.isfinite(a.x) and math.isfinite(a.y)


__all__ = [
    "ORIGIN",
    "Point",
    "add",
    "angle_between",
    "cross",
    "distance",
    "dot",
    "equals",
    "is_finite",
    "magnitude",
    "magnitude_squared",
    "normalize",
    "scale",
    "subtract",
]
