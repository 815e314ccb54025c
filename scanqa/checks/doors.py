"""Door checks: blocked clearance and doors that do not reach the floor."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from scanqa.geometry.contract import DOOR_CLEARANCE, DOOR_FLOOR_TOLERANCE, DOOR_WIDTH_SHRINK, STEP_OVER_HEIGHT
from scanqa.geometry.sat import do_polygons_intersect
from scanqa.geometry.vector import Point
from scanqa.scan.footprints import all_finite, rectangle
from scanqa.scan.models import ObjectItem
from scanqa.scan.raw_scan import RawScan


@dataclass(frozen=True)
class _ObjectVolume:
    object: ObjectItem
    corners: list[Point]
    min_y: float
    max_y: float


def _object_volumes(objects: list[ObjectItem]) -> list[_ObjectVolume]:
    volumes = []
    for obj in objects:
        if not obj.has_valid_transform:
            continue
        placement = obj.placement
        corners = placement.apply_all(rectangle(obj.dimension(0) / 2.0, obj.dimension(2) / 2.0))
        if not all_finite(corners):
            continue
        half_height = obj.dimension(1) / 2.0
        volumes.append(
            _ObjectVolume(
                object=obj,
                corners=corners,
                min_y=placement.translation_y - half_height,
                max_y=placement.translation_y + half_height,
            )
        )
    return volumes


def check_door_blocking(scan: RawScan) -> bool:
    """True if an object stands in the clearance zone in front of a door.

    The clearance zone spans the door width less DOOR_WIDTH_SHRINK and extends
    DOOR_CLEARANCE along the door's local +z. Objects parented to the door,
    objects entirely above the door, and objects low enough to step over are
    ignored.
    """
    volumes = _object_volumes(scan.objects)
    for door in scan.doors:
        if not door.has_valid_transform:
            continue
        placement = door.placement
        half_width = max(0.0, door.dimension(0) - DOOR_WIDTH_SHRINK) / 2.0
        half_height = door.dimension(1) / 2.0
        door_min_y = placement.translation_y - half_height
        door_max_y = placement.translation_y + half_height
        clearance = placement.apply_all(
            [
                Point(-half_width, 0.0),
                Point(half_width, 0.0),
                Point(half_width, DOOR_CLEARANCE),
                Point(-half_width, DOOR_CLEARANCE),
            ]
        )
        if not all_finite(clearance):
            continue

        for volume in volumes:
            if volume.object.story != door.story:
                continue
            if volume.object.parent_identifier is not None and volume.object.parent_identifier == door.identifier:
                continue
            if volume.min_y > door_max_y or volume.max_y < door_min_y + STEP_OVER_HEIGHT:
                continue
            if do_polygons_intersect(clearance, volume.corners):
                logger.debug("Door {} blocked by {}", door.identifier, volume.object.identifier)
                return True
    return False


def floor_level(scan: RawScan) -> float:
    """Vertical level of the first floor: its transform, else its first corner, else 0."""
    if not scan.floors:
        return 0.0
    floor = scan.floors[0]
    if floor.has_valid_transform:
        return floor.placement.translation_y
    if floor.polygon_corners and len(floor.polygon_corners[0]) > 1:
        return floor.polygon_corners[0][1]
    return 0.0


def check_door_floor_contact(scan: RawScan) -> bool:
    """True if the bottom of any door is more than one inch off the floor level."""
    level = floor_level(scan)
    for door in scan.doors:
        if not door.has_valid_transform:
            continue
        door_min_y = door.placement.translation_y - door.dimension(1) / 2.0
        if abs(door_min_y - level) > DOOR_FLOOR_TOLERANCE:
            logger.debug("Door {} bottom {:.4f} m from floor", door.identifier, door_min_y - level)
            return True
    return False


__all__ = ["check_door_blocking", "check_door_floor_contact", "floor_level"]
