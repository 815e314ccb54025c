"""External opening check."""

from __future__ import annotations

from loguru import logger

from scanqa.geometry.contract import EXTERNAL_OPENING_PERIMETER_DISTANCE
from scanqa.geometry.segment import dist_to_segment
from scanqa.geometry.vector import Point, is_finite
from scanqa.scan.raw_scan import RawScan


def _floor_perimeter(scan: RawScan) -> list[Point] | None:
    if not scan.floors:
        return None
    corners = scan.floors[0].polygon_corners
    if len(corners) < 3:
        return None
    points = [
        Point(corner[0] if len(corner) > 0 else 0.0, corner[1] if len(corner) > 1 else 0.0) for corner in corners
    ]
    if not all(is_finite(point) for point in points):
        return None
    return points


def check_external_opening(scan: RawScan) -> bool:
    """True if an opening's parent wall sits on the perimeter of the first floor.

    The wall is located by the (m12, m13) slots of its transform and compared
    with the floor outline in the outline's stored coordinates. Openings without
    a parent, on another story, or whose parent wall is missing or has an
    invalid transform are skipped.
    """
    perimeter = _floor_perimeter(scan)
    if perimeter is None:
        return False
    count = len(perimeter)

    for opening in scan.openings:
        if opening.parent_identifier is None:
            continue
        if opening.story is not None and opening.story != scan.story:
            continue
        wall = scan.wall_by_identifier(opening.parent_identifier)
        if wall is None or not wall.has_valid_transform:
            continue
        anchor = Point(wall.placement.translation_xz.x, wall.placement.translation_y)
        if not is_finite(anchor):
            continue
        for i in range(count):
            if dist_to_segment(anchor, perimeter[i], perimeter[(i + 1) % count]) < EXTERNAL_OPENING_PERIMETER_DISTANCE:
                logger.debug("Opening {} is on the floor perimeter", opening.identifier)
                return True
    return False


__all__ = ["check_external_opening"]
