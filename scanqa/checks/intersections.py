"""
Overlap checks between scan entities.

Four independent flags are produced:

- object/object: footprints of two objects on the same story overlap by more
  than the one-inch tolerance (sink and storage may overlap, they form vanities)
- wall/object: an object's shrunk footprint overlaps a wall slab
- wall/wall: two wall centre lines cross, or overlap while collinear
- embedded/object: a door, window or opening footprint overlaps an object
  that is not attached to it
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain

from loguru import logger

from scanqa.geometry.contract import (
    COLLINEAR_AREA_EPSILON,
    DEFAULT_WALL_THICKNESS,
    EPSILON,
    OBJECT_SHRINK_TOLERANCE,
    SEGMENT_PARAM_EPSILON,
)
from scanqa.geometry.sat import do_polygons_intersect
from scanqa.geometry.vector import Point, cross, dot, magnitude_squared, subtract
from scanqa.scan.footprints import ObjectBox, all_finite, bounds_overlap, build_object_boxes, rectangle
from scanqa.scan.models import ScanEntity, Wall
from scanqa.scan.raw_scan import RawScan


@dataclass(frozen=True)
class IntersectionResult:
    has_object_intersection_errors: bool = False
    has_wall_object_intersection_errors: bool = False
    has_wall_wall_intersection_errors: bool = False
    has_embedded_object_intersection_errors: bool = False


def _is_vanity_pair(a: ObjectBox, b: ObjectBox) -> bool:
    return (a.is_sink and b.is_storage) or (a.is_storage and b.is_sink)


def _object_object(boxes: list[ObjectBox]) -> bool:
    for i, first in enumerate(boxes):
        first_bounds = first.bounds()
        for second in boxes[i + 1 :]:
            if first.story != second.story or _is_vanity_pair(first, second):
                continue
            if not bounds_overlap(first_bounds, second.bounds()):
                continue
            if do_polygons_intersect(first.inner_corners, second.inner_corners):
                logger.debug("Objects {} and {} overlap", first.object.identifier, second.object.identifier)
                return True
    return False


def _wall_slab(wall: Wall) -> list[Point] | None:
    if not wall.has_valid_transform:
        return None
    half_length = wall.dimension(0) / 2.0
    thickness = wall.dimensions[2] if len(wall.dimensions) > 2 else DEFAULT_WALL_THICKNESS
    slab = wall.placement.apply_all(rectangle(half_length, thickness / 2.0))
    if not all_finite(slab):
        return None
    return slab


def _wall_object(walls: list[Wall], boxes: list[ObjectBox]) -> bool:
    for wall in walls:
        slab = _wall_slab(wall)
        if slab is None:
            continue
        for box in boxes:
            if box.story != wall.story:
                continue
            if do_polygons_intersect(slab, box.inner_corners):
                logger.debug("Wall {} overlaps object {}", wall.identifier, box.object.identifier)
                return True
    return False


def _centre_line(wall: Wall) -> tuple[Point, Point] | None:
    """World centre line from the local x extent of the outline, else from ``dimensions[0]``."""
    if not wall.has_valid_transform:
        return None
    start = end = None
    if wall.polygon_corners:
        xs = [corner[0] if corner else 0.0 for corner in wall.polygon_corners]
        if max(xs) > min(xs):
            start, end = Point(min(xs), 0.0), Point(max(xs), 0.0)
    if start is None and wall.dimensions:
        half_length = wall.dimensions[0] / 2.0
        start, end = Point(-half_length, 0.0), Point(half_length, 0.0)
    if start is None or end is None:
        return None
    line = wall.placement.apply_all([start, end])
    if not all_finite(line):
        return None
    return line[0], line[1]


def _collinear_overlap(first: tuple[Point, Point], second: tuple[Point, Point]) -> bool:
    p1, p2 = first
    direction = subtract(p2, p1)
    if abs(cross(direction, subtract(second[0], p1))) > COLLINEAR_AREA_EPSILON:
        return False
    length_sq = magnitude_squared(direction)
    if length_sq < EPSILON:
        return False
    t3 = dot(subtract(second[0], p1), direction) / length_sq
    t4 = dot(subtract(second[1], p1), direction) / length_sq
    overlap = min(1.0, max(t3, t4)) - max(0.0, min(t3, t4))
    return overlap > SEGMENT_PARAM_EPSILON


def _centre_lines_cross(first: tuple[Point, Point], second: tuple[Point, Point]) -> bool:
    (x1, y1), (x2, y2) = first
    (x3, y3), (x4, y4) = second
    den = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if abs(den) < EPSILON:
        return _collinear_overlap(first, second)
    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / den
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / den
    low, high = SEGMENT_PARAM_EPSILON, 1.0 - SEGMENT_PARAM_EPSILON
    return low < t < high and low < u < high


def _wall_wall(walls: list[Wall]) -> bool:
    lines = [(wall, _centre_line(wall)) for wall in walls]
    lines = [(wall, line) for wall, line in lines if line is not None]
    for i, (first_wall, first) in enumerate(lines):
        for second_wall, second in lines[i + 1 :]:
            if first_wall.story != second_wall.story:
                continue
            if _centre_lines_cross(first, second):
                logger.debug("Walls {} and {} intersect", first_wall.identifier, second_wall.identifier)
                return True
    return False


def _embedded_footprint(entity: ScanEntity) -> list[Point] | None:
    if not entity.has_valid_transform or entity.dimension(0) <= 0:
        return None
    depth = entity.dimension(2)
    if depth <= 0:
        depth = DEFAULT_WALL_THICKNESS
    half_width = max(0.0, entity.dimension(0) / 2.0 - OBJECT_SHRINK_TOLERANCE)
    half_depth = max(0.0, depth / 2.0 - OBJECT_SHRINK_TOLERANCE)
    footprint = entity.placement.apply_all(rectangle(half_width, half_depth))
    if not all_finite(footprint):
        return None
    return footprint


def _embedded_object(scan: RawScan, boxes: list[ObjectBox]) -> bool:
    for entity in chain(scan.doors, scan.windows, scan.openings):
        footprint = _embedded_footprint(entity)
        if footprint is None:
            continue
        for box in boxes:
            if box.story != entity.story:
                continue
            if entity.identifier is not None and box.object.parent_identifier == entity.identifier:
                continue
            if do_polygons_intersect(footprint, box.inner_corners):
                logger.debug("Embedded {} overlaps object {}", entity.identifier, box.object.identifier)
                return True
    return False


def check_intersections(scan: RawScan) -> IntersectionResult:
    boxes = build_object_boxes(scan.objects)
    return IntersectionResult(
        has_object_intersection_errors=_object_object(boxes),
        has_wall_object_intersection_errors=_wall_object(scan.walls, boxes),
        has_wall_wall_intersection_errors=_wall_wall(scan.walls),
        has_embedded_object_intersection_errors=_embedded_object(scan, boxes),
    )


__all__ = ["IntersectionResult", "check_intersections"]
