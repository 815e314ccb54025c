"""Whole-scan predicates that do not need geometry."""

from __future__ import annotations

from itertools import chain

from scanqa.geometry.contract import LOW_CEILING_THRESHOLD
from scanqa.scan.raw_scan import RawScan

RECTANGULAR_CORNER_COUNT = 4
DEFAULT_STORY = 0


def _embedded(scan: RawScan):
    return chain(scan.doors, scan.windows, scan.openings)


def has_unparented_embedded(scan: RawScan) -> bool:
    return any(entity.parent_identifier is None for entity in _embedded(scan))


def has_curved_embedded(scan: RawScan) -> bool:
    return any(entity.parent_identifier is not None and entity.is_curved for entity in _embedded(scan))


def has_non_rectangular_embedded(scan: RawScan) -> bool:
    return any(
        entity.parent_identifier is not None
        and len(entity.polygon_corners) > 0
        and len(entity.polygon_corners) != RECTANGULAR_CORNER_COUNT
        for entity in _embedded(scan)
    )


def has_non_empty_completed_edges(scan: RawScan) -> bool:
    entities = chain(scan.doors, scan.floors, scan.openings, scan.walls, scan.windows)
    return any(len(entity.completed_edges) > 0 for entity in entities)


def has_non_rect_wall(scan: RawScan) -> bool:
    return any(len(wall.polygon_corners) > RECTANGULAR_CORNER_COUNT for wall in scan.walls)


def has_curved_wall(scan: RawScan) -> bool:
    return any(wall.is_curved for wall in scan.walls)


def has_soffit(scan: RawScan) -> bool:
    return any(wall.has_soffit for wall in scan.walls)


def has_low_ceiling(scan: RawScan) -> bool:
    """True if some wall's lowest ceiling point is below 7.5 ft."""
    for wall in scan.walls:
        height = wall.minimum_ceiling_height()
        if height is not None and height < LOW_CEILING_THRESHOLD:
            return True
    return False


def has_floors_with_parent_id(scan: RawScan) -> bool:
    return any(floor.parent_identifier is not None for floor in scan.floors)


def story_indices(scan: RawScan) -> list[int]:
    """Sorted distinct wall stories; walls without a story count as story 0."""
    return sorted({DEFAULT_STORY if wall.story is None else wall.story for wall in scan.walls})
