"""World-space footprints of scan entities on the floor plane."""

from __future__ import annotations

from dataclasses import dataclass

from scanqa.geometry.contract import OBJECT_SHRINK_TOLERANCE
from scanqa.geometry.vector import Point, is_finite
from scanqa.scan.models import ObjectCategory, ObjectItem, Wall


@dataclass(frozen=True)
class WallFootprint:
    wall: Wall
    corners: list[Point]

    @property
    def story(self) -> int | None:
        return self.wall.story

    def edges(self) -> list[tuple[Point, Point]]:
        count = len(self.corners)
        return [(self.corners[k], self.corners[(k + 1) % count]) for k in range(count)]


@dataclass(frozen=True)
class ObjectBox:
    """Object footprint in world space, plus a copy shrunk inward by one inch."""

    object: ObjectItem
    corners: list[Point]
    inner_corners: list[Point]

    @property
    def story(self) -> int | None:
        return self.object.story

    @property
    def is_sink(self) -> bool:
        return self.object.category is ObjectCategory.SINK

    @property
    def is_storage(self) -> bool:
        return self.object.category is ObjectCategory.STORAGE

    def bounds(self) -> tuple[float, float, float, float]:
        xs = [p.x for p in self.corners]
        ys = [p.y for p in self.corners]
        return min(xs), min(ys), max(xs), max(ys)


def rectangle(half_width: float, half_depth: float) -> list[Point]:
    """Local axis-aligned rectangle centred on the origin."""
    return [
        Point(-half_width, -half_depth),
        Point(half_width, -half_depth),
        Point(half_width, half_depth),
        Point(-half_width, half_depth),
    ]


def all_finite(points: list[Point]) -> bool:
    return all(is_finite(point) for point in points)


def wall_world_corners(wall: Wall) -> WallFootprint | None:
    """Project a wall outline to world space.

    Walls without outline corners fall back to the centre line
    ``(-length/2, 0)-(length/2, 0)``. Returns None when the wall has no valid
    transform, no outline and no positive length, or fewer than two usable
    corners.
    """
    if not wall.has_valid_transform:
        return None
    corners = wall.polygon_corners
    if not corners:
        if wall.dimension(0) <= 0:
            return None
        half_length = wall.dimension(0) / 2.0
        corners = [[-half_length, 0.0], [half_length, 0.0]]
    placement = wall.placement
    world = [placement.apply(Point(c[0], c[1])) for c in corners if len(c) >= 2]
    if len(world) < 2 or not all_finite(world):
        return None
    return WallFootprint(wall=wall, corners=world)


def wall_footprints(walls: list[Wall]) -> list[WallFootprint]:
    return [footprint for footprint in (wall_world_corners(wall) for wall in walls) if footprint is not None]


def object_box(obj: ObjectItem, tolerance: float = OBJECT_SHRINK_TOLERANCE) -> ObjectBox | None:
    """Footprint box from ``dimensions[0]`` x ``dimensions[2]``.

    Objects with all-zero dimensions, a dimension count other than three, or an
    invalid transform have no box.
    """
    dims = obj.dimensions
    if len(dims) != 3 or all(d == 0 for d in dims) or not obj.has_valid_transform:
        return None
    half_w = dims[0] / 2.0
    half_d = dims[2] / 2.0
    placement = obj.placement
    corners = placement.apply_all(rectangle(half_w, half_d))
    if not all_finite(corners):
        return None
    return ObjectBox(
        object=obj,
        corners=corners,
        inner_corners=placement.apply_all(rectangle(max(0.0, half_w - tolerance), max(0.0, half_d - tolerance))),
    )


def build_object_boxes(objects: list[ObjectItem]) -> list[ObjectBox]:
    return [box for box in (object_box(obj) for obj in objects) if box is not None]


def bounds_overlap(a: tuple[float, float, float, float], b: tuple[float, float, float, float]) -> bool:
    return not (a[2] < b[0] or b[2] < a[0] or a[3] < b[1] or b[3] < a[1])


__all__ = [
    "ObjectBox",
    "WallFootprint",
    "all_finite",
    "bounds_overlap",
    "build_object_boxes",
    "object_box",
    "rectangle",
    "wall_footprints",
    "wall_world_corners",
]
