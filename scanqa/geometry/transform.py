"""
Placement transforms.

Scan entities carry a flat, column-major 4x4 matrix of 16 floats. Only the
floor-plane part is needed by the checks:

- ``rotation_xz``: [[m0, m8], [m2, m10]]
- ``translation_xz``: (m12, m14)
- ``translation_y``: m13 (vertical placement of the entity's centre)

Any other length is an invalid transform; the module-level helpers then fall
back to zeros for the missing slots.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from scanqa.geometry.contract import TRANSFORM_SIZE
from scanqa.geometry.vector import Point

_RXX, _RXZ, _RZX, _RZZ = 0, 8, 2, 10
_TX, _TY, _TZ = 12, 13, 14


def _slot(values: Sequence[float], index: int) -> float:
    if index < len(values):
        return float(values[index])
    return 0.0


def is_valid_transform(values: Sequence[float] | None) -> bool:
    return values is not None and len(values) == TRANSFORM_SIZE


@dataclass(frozen=True)
class Transform:
    """Floor-plane view of a 4x4 placement matrix."""

    rotation_xz: tuple[tuple[float, float], tuple[float, float]]
    translation_xz: Point
    translation_y: float
    is_valid: bool = True

    @classmethod
    def from_values(cls, values: Sequence[float] | None) -> "Transform":
        values = list(values or [])
        return cls(
            rotation_xz=(
                (_slot(values, _RXX), _slot(values, _RXZ)),
                (_slot(values, _RZX), _slot(values, _RZZ)),
            ),
            translation_xz=Point(_slot(values, _TX), _slot(values, _TZ)),
            translation_y=_slot(values, _TY),
            is_valid=is_valid_transform(values),
        )

    @classmethod
    def identity(cls) -> "Transform":
        return cls(rotation_xz=((1.0, 0.0), (0.0, 1.0)), translation_xz=Point(0.0, 0.0), translation_y=0.0)

    def apply(self, point: Point) -> Point:
        rotated = np.asarray(self.rotation_xz, dtype=float) @ np.array([point.x, point.y], dtype=float)
        return Point(
            float(rotated[0]) + self.translation_xz.x,
            float(rotated[1]) + self.translation_xz.y,
        )

    def apply_all(self, points: Sequence[Point]) -> list[Point]:
        if not points:
            return []
        local = np.asarray(points, dtype=float)
        world = local @ np.asarray(self.rotation_xz, dtype=float).T + np.asarray(self.translation_xz, dtype=float)
        return [Point(float(x), float(y)) for x, y in world]


def get_position(values: Sequence[float]) -> Point:
    """World (x, z) of a placement; the origin for an invalid transform."""
    if len(values) != TRANSFORM_SIZE:
        return Point(0.0, 0.0)
    return Point(float(values[_TX]), float(values[_TZ]))


def transform_point(point: Point, values: Sequence[float]) -> Point:
    """Project a local floor-plane point to world space."""
    return Transform.from_values(values).apply(point)


__all__ = [
    "Transform",
    "get_position",
    "is_valid_transform",
    "transform_point",
]
