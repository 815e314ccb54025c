"""Wall layout checks: gaps, duplicated (colinear) walls, nib walls and crooked joins."""

from __future__ import annotations

import math

from loguru import logger

from scanqa.geometry.contract import (
    COLINEAR_WALL_GAP_MAX,
    COLINEAR_WALL_PARALLEL_THRESHOLD,
    CROOKED_WALL_ANGLE_DEG,
    NIB_WALL_LENGTH,
    TOUCHING_THRESHOLD,
    WALL_GAP_MAX,
)
from scanqa.geometry.segment import dist_to_segment, min_distance_between_outlines
from scanqa.geometry.vector import ORIGIN, Point, distance, dot, is_finite, magnitude, subtract
from scanqa.scan.footprints import WallFootprint, wall_footprints
from scanqa.scan.models import Wall
from scanqa.scan.raw_scan import RawScan


def check_wall_gaps(scan: RawScan) -> bool:
    """True if two walls are close but not touching (between 1 and 12 inches apart)."""
    footprints = wall_footprints(scan.walls)
    for i, first in enumerate(footprints):
        for second in footprints[i + 1 :]:
            gap = min_distance_between_outlines(first.corners, second.corners)
            if TOUCHING_THRESHOLD < gap < WALL_GAP_MAX:
                logger.debug(
                    "Wall gap of {:.4f} m between {} and {}",
                    gap,
                    first.wall.identifier,
                    second.wall.identifier,
                )
                return True
    return False


def _dominant_direction(footprint: WallFootprint) -> Point:
    """Unit direction of the longest outline edge; zero when every edge is degenerate."""
    best_length = 0.0
    direction = ORIGIN
    for start, end in footprint.edges():
        edge = subtract(end, start)
        length = magnitude(edge)
        if length > best_length:
            best_length = length
            direction = Point(edge.x / length, edge.y / length)
    return direction


def check_colinear_walls(scan: RawScan) -> bool:
    """True if two near-parallel walls touch or overlap (double-scanned wall)."""
    footprints = wall_footprints(scan.walls)
    directions = [_dominant_direction(footprint) for footprint in footprints]
    for i, first in enumerate(footprints):
        for j in range(i + 1, len(footprints)):
            second = footprints[j]
            if first.story is not None and second.story is not None and first.story != second.story:
                continue
            if abs(dot(directions[i], directions[j])) <= COLINEAR_WALL_PARALLEL_THRESHOLD:
                continue
            if min_distance_between_outlines(first.corners, second.corners) < COLINEAR_WALL_GAP_MAX:
                logger.debug("Colinear walls {} and {}", first.wall.identifier, second.wall.identifier)
                return True
    return False


def check_nib_walls(scan: RawScan) -> bool:
    """True if a wall on the scan's story spans less than one foot."""
    walls = [wall for wall in scan.walls if wall.story is None or wall.story == scan.story]
    for footprint in wall_footprints(walls):
        corners = footprint.corners
        span = max(
            (distance(corners[i], corners[j]) for i in range(len(corners)) for j in range(i + 1, len(corners))),
            default=0.0,
        )
        if 0.0 < span < NIB_WALL_LENGTH:
            logger.debug("Nib wall {} spans {:.4f} m", footprint.wall.identifier, span)
            return True
    return False


def _base_segment(wall: Wall) -> tuple[Point, Point] | None:
    if not wall.has_valid_transform:
        return None
    placement = wall.placement
    start = placement.apply(Point(0.0, 0.0))
    end = placement.apply(Point(wall.dimension(0), 0.0))
    if not (is_finite(start) and is_finite(end)):
        return None
    return start, end


def _angle_deviation_deg(first: tuple[Point, Point], second: tuple[Point, Point]) -> float:
    """Deviation in degrees of two segment directions from parallel or anti-parallel."""
    v1 = subtract(first[1], first[0])
    v2 = subtract(second[1], second[0])
    diff = abs(math.degrees(math.atan2(v1.y, v1.x) - math.atan2(v2.y, v2.x))) % 360.0
    if diff > 180.0:
        diff = 360.0 - diff
    return min(diff, abs(180.0 - diff))


def check_crooked_walls(scan: RawScan) -> bool:
    """True if two connected walls on the same story join at a shallow angle.

    Each wall is reduced to the segment from its local origin to
    ``(dimensions[0], 0)``. Walls are connected when an endpoint lies within
    one inch of the other segment; the join is flagged when the directions are
    within CROOKED_WALL_ANGLE_DEG of parallel or anti-parallel.
    """
    walls = scan.walls
    segments = [_base_segment(wall) for wall in walls]
    for i, first in enumerate(segments):
        if first is None:
            continue
        for j in range(i + 1, len(walls)):
            second = segments[j]
            if second is None or walls[i].story != walls[j].story:
                continue
            gap = min(
                dist_to_segment(second[0], *first),
                dist_to_segment(second[1], *first),
                dist_to_segment(first[0], *second),
                dist_to_segment(first[1], *second),
            )
            if gap > TOUCHING_THRESHOLD:
                continue
            if _angle_deviation_deg(first, second) <= CROOKED_WALL_ANGLE_DEG:
                logger.debug("Crooked join between walls {} and {}", walls[i].identifier, walls[j].identifier)
                return True
    return False


__all__ = [
    "check_colinear_walls",
    "check_crooked_walls",
    "check_nib_walls",
    "check_wall_gaps",
]
