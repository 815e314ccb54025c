"""Vanity detection: which sink/storage object acts as the bathroom vanity."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from scanqa.geometry.sat import do_polygons_intersect
from scanqa.scan.footprints import ObjectBox, build_object_boxes
from scanqa.scan.models import ObjectCategory, ObjectItem
from scanqa.scan.raw_scan import RawScan


class VanityType(str, Enum):
    NORMAL = "normal"
    SINK_ONLY = "sink only"
    STORAGE_ONLY = "storage only"
    NO_VANITY = "no vanity"


@dataclass(frozen=True)
class VanityCandidate:
    selected_object: ObjectItem | None
    vanity_type: VanityType


def _storage_over_sink(boxes: list[ObjectBox]) -> ObjectItem | None:
    for storage in boxes:
        if not storage.is_storage:
            continue
        for sink in boxes:
            if not sink.is_sink or sink.story != storage.story:
                continue
            if do_polygons_intersect(storage.inner_corners, sink.inner_corners):
                return storage.object
    return None


def _footprint_area(obj: ObjectItem) -> float:
    return obj.dimension(0) * obj.dimension(2)


def find_vanity_candidate(scan: RawScan) -> VanityCandidate:
    """Pick the vanity object.

    In order of preference: a storage unit whose footprint overlaps a sink on
    the same story (normal vanity), the first sink (sink only), the storage
    unit with the largest footprint (storage only). Otherwise there is no vanity.
    """
    storage = _storage_over_sink(build_object_boxes(scan.objects))
    if storage is not None:
        return VanityCandidate(storage, VanityType.NORMAL)

    sinks = [obj for obj in scan.objects if obj.category is ObjectCategory.SINK]
    if sinks:
        return VanityCandidate(sinks[0], VanityType.SINK_ONLY)

    storages = [obj for obj in scan.objects if obj.category is ObjectCategory.STORAGE]
    if storages:
        largest = storages[0]
        for candidate in storages[1:]:
            if _footprint_area(candidate) > _footprint_area(largest):
                largest = candidate
        return VanityCandidate(largest, VanityType.STORAGE_ONLY)

    return VanityCandidate(None, VanityType.NO_VANITY)


def get_vanity_lengths(scan: RawScan) -> list[float]:
    """Local-x length of the vanity in meters, as a zero- or one-element list."""
    candidate = find_vanity_candidate(scan)
    if candidate.selected_object is None:
        return []
    length = candidate.selected_object.dimension(0)
    return [length] if length > 0 else []


def get_vanity_type(scan: RawScan) -> VanityType:
    return find_vanity_candidate(scan).vanity_type


__all__ = [
    "VanityCandidate",
    "VanityType",
    "find_vanity_candidate",
    "get_vanity_lengths",
    "get_vanity_type",
]
