"""Dimension and area extraction for walls, embedded entities, floors and fixtures."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from shapely.geometry import MultiLineString

from scanqa.checks.vanity import get_vanity_lengths
from scanqa.scan.models import ObjectCategory, ScanEntity, Surface, Wall
from scanqa.scan.raw_scan import RawScan


def _pair(height: float, width: float) -> dict[str, float]:
    return {"height": height, "width": width}


def outline_perimeter(surface: Surface) -> float:
    """Closed-outline length over edges whose corners both have three components."""
    edges = surface.outline_edges()
    if not edges:
        return 0.0
    return float(MultiLineString(edges).length)


def _wall_size(wall: Wall) -> tuple[float | None, float | None]:
    if len(wall.polygon_corners) >= 3:
        height = wall.dimensions[1] if len(wall.dimensions) > 1 else None
        return outline_perimeter(wall), height
    if len(wall.dimensions) >= 2:
        return wall.dimensions[0], wall.dimensions[1]
    return None, None


def _wall_data(walls: Iterable[Wall]) -> dict[str, list[Any]]:
    heights, widths, areas, pairs = [], [], [], []
    for wall in walls:
        width, height = _wall_size(wall)
        has_width = width is not None and width > 0
        has_height = height is not None and height > 0
        if has_width and has_height:
            areas.append(width * height)
        if has_width:
            widths.append(width)
        if has_height:
            heights.append(height)
            if has_width:
                pairs.append(_pair(height, width))
    return {"wall_heights": heights, "wall_widths": widths, "wall_areas": areas, "wall_width_height_pairs": pairs}


def _panel_data(prefix: str, entities: Iterable[ScanEntity]) -> dict[str, list[Any]]:
    """Width/height data of windows, doors or openings; both must be positive."""
    heights, widths, areas, pairs = [], [], [], []
    for entity in entities:
        if len(entity.dimensions) < 2:
            continue
        width, height = entity.dimensions[0], entity.dimensions[1]
        if width > 0 and height > 0:
            heights.append(height)
            widths.append(width)
            areas.append(width * height)
            pairs.append(_pair(height, width))
    return {
        f"{prefix}_heights": heights,
        f"{prefix}_widths": widths,
        f"{prefix}_areas": areas,
        f"{prefix}_width_height_pairs": pairs,
    }


def _floor_size(floor: Surface) -> tuple[float | None, float | None]:
    """(length, width) of a floor: x and second-component extents of its outline."""
    if len(floor.polygon_corners) >= 3:
        points = floor.corner_xy()
        if not points:
            return None, None
        xs = [x for x, _ in points]
        ys = [y for _, y in points]
        return max(xs) - min(xs), max(ys) - min(ys)
    if len(floor.dimensions) >= 2:
        return floor.dimensions[0], floor.dimensions[1]
    return None, None


def _floor_data(floors: Iterable[Surface]) -> dict[str, list[Any]]:
    lengths, widths, pairs = [], [], []
    for floor in floors:
        length, width = _floor_size(floor)
        has_length = length is not None and length > 0
        if has_length:
            lengths.append(length)
        if width is not None and width > 0:
            widths.append(width)
            if has_length:
                pairs.append(_pair(length, width))
    return {"floor_lengths": lengths, "floor_widths": widths, "floor_width_height_pairs": pairs}


def extract_dimension_area_data(scan: RawScan) -> dict[str, list[Any]]:
    data: dict[str, list[Any]] = {}
    data.update(_wall_data(scan.walls))
    data.update(_panel_data("window", scan.windows))
    data.update(_panel_data("door", scan.doors))
    data.update(_panel_data("opening", scan.openings))
    data.update(_floor_data(scan.floors))
    data["tub_lengths"] = [
        obj.dimensions[0]
        for obj in scan.objects
        if obj.category is ObjectCategory.BATHTUB and obj.dimensions and obj.dimensions[0] > 0
    ]
    data["vanity_lengths"] = get_vanity_lengths(scan)
    return data


__all__ = ["extract_dimension_area_data", "outline_perimeter"]
