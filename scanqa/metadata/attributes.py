"""Attribute histograms and wall-embedded counts."""

from __future__ import annotations

from collections import Counter

from scanqa.scan.raw_scan import RawScan

OBJECT_ATTRIBUTE_TYPES = (
    "ChairArmType",
    "ChairBackType",
    "ChairLegType",
    "ChairType",
    "SofaType",
    "StorageType",
    "TableShapeType",
    "TableType",
)


def door_is_open_counts(scan: RawScan) -> dict[str, int]:
    """Doors per state, keyed "Open", "Closed" or "Unknown"."""
    return dict(Counter(door.category.label for door in scan.doors))


def object_attribute_counts(scan: RawScan) -> dict[str, dict[str, int]]:
    """For each furniture attribute type present, how often each string value occurs."""
    counts: dict[str, Counter] = {}
    for obj in scan.objects:
        for attribute_type in OBJECT_ATTRIBUTE_TYPES:
            value = obj.attributes.get(attribute_type)
            if isinstance(value, str):
                counts.setdefault(attribute_type, Counter())[value] += 1
    return {attribute_type: dict(counter) for attribute_type, counter in counts.items()}


def wall_embedded_counts(scan: RawScan) -> dict[str, int]:
    """Number of distinct walls hosting at least one window, door or opening."""

    def distinct_parents(entities) -> int:
        return len({entity.parent_identifier for entity in entities if entity.parent_identifier is not None})

    return {
        "walls_with_windows": distinct_parents(scan.windows),
        "walls_with_doors": distinct_parents(scan.doors),
        "walls_with_openings": distinct_parents(scan.openings),
    }


__all__ = [
    "OBJECT_ATTRIBUTE_TYPES",
    "door_is_open_counts",
    "object_attribute_counts",
    "wall_embedded_counts",
]
