"""Entities of a raw room scan.

Every entity is placed by a flat 4x4 ``transform`` and may carry an outline in
``polygonCorners`` (local ``[x, z]`` for walls on the floor plane, ``[x, y, z]``
for surfaces). Raw ``category`` objects such as ``{"toilet": {}}`` or
``{"door": {"isOpen": true}}`` are converted to enums at parse time.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from shapely.geometry import Polygon

from scanqa.geometry.contract import SOFFIT_MAX_ANGLE_DEG, SOFFIT_MIN_ANGLE_DEG
from scanqa.geometry.transform import Transform, is_valid_transform


class ObjectCategory(str, Enum):
    TOILET = "toilet"
    STORAGE = "storage"
    SINK = "sink"
    BATHTUB = "bathtub"
    WASHER_DRYER = "washerDryer"
    STOVE = "stove"
    TABLE = "table"
    CHAIR = "chair"
    BED = "bed"
    SOFA = "sofa"
    DISHWASHER = "dishwasher"
    OVEN = "oven"
    REFRIGERATOR = "refrigerator"
    STAIRS = "stairs"
    FIREPLACE = "fireplace"
    TELEVISION = "television"
    UNKNOWN = "unknown"


class DoorCategory(str, Enum):
    OPEN = "open"
    CLOSED = "closed"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class SurfaceCategory(str, Enum):
    FLOOR = "floor"
    WALL = "wall"
    WINDOW = "window"
    OPENING = "opening"
    UNKNOWN = "unknown"


def _category_tag(value: Any) -> str | None:
    """First key of a raw ``{"<tag>": {...}}`` category, or a bare string tag."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, str):
        return value
    if isinstance(value, dict) and value:
        return next(iter(value))
    return None


def _enum_from_tag(enum_cls: type[Enum], value: Any) -> Enum:
    tag = _category_tag(value)
    try:
        return enum_cls(tag)
    except ValueError:
        return enum_cls("unknown")


def _is_number_list(value: Any) -> bool:
    return isinstance(value, list) and all(
        isinstance(item, (int, float)) and not isinstance(item, bool) for item in value
    )


class Section(BaseModel):
    model_config = ConfigDict(extra="allow")

    label: str | None = None

    @field_validator("label", mode="before")
    @classmethod
    def _text_label(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None


class ScanEntity(BaseModel):
    """Fields shared by every placed scan entity."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    identifier: str | None = None
    parent_identifier: str | None = Field(default=None, alias="parentIdentifier")
    polygon_corners: list[list[float]] = Field(default_factory=list, alias="polygonCorners")
    dimensions: list[float] = Field(default_factory=list)
    transform: list[float] = Field(default_factory=list)
    story: int | None = None
    completed_edges: list[Any] = Field(default_factory=list, alias="completedEdges")
    curve: Any = None
    confidence: Any = None

    @field_validator("completed_edges", mode="before")
    @classmethod
    def _list_or_empty(cls, value: Any) -> list[Any]:
        return value if isinstance(value, list) else []

    @field_validator("dimensions", "transform", mode="before")
    @classmethod
    def _numeric_or_empty(cls, value: Any) -> list[float]:
        """A vector with any non-numeric entry parses as empty."""
        if _is_number_list(value):
            return value
        return []

    @field_validator("polygon_corners", mode="before")
    @classmethod
    def _drop_bad_corners(cls, value: Any) -> list[list[float]]:
        if not isinstance(value, list):
            return []
        return [corner for corner in value if _is_number_list(corner)]

    @field_validator("story", mode="before")
    @classmethod
    def _integer_story(cls, value: Any) -> int | None:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        if isinstance(value, float) and not value.is_integer():
            return None
        return int(value)

    @property
    def placement(self) -> Transform:
        return Transform.from_values(self.transform)

    @property
    def has_valid_transform(self) -> bool:
        return is_valid_transform(self.transform)

    def dimension(self, index: int, default: float = 0.0) -> float:
        if index < len(self.dimensions):
            return self.dimensions[index]
        return default

    @property
    def is_curved(self) -> bool:
        return self.curve is not None


class Surface(ScanEntity):
    category: SurfaceCategory = SurfaceCategory.UNKNOWN

    @field_validator("category", mode="before")
    @classmethod
    def _parse_category(cls, value: Any) -> SurfaceCategory:
        return _enum_from_tag(SurfaceCategory, value)

    def corner_xy(self, min_components: int = 3) -> list[tuple[float, float]]:
        """(index 0, index 1) of every corner with at least ``min_components`` values."""
        return [(c[0], c[1]) for c in self.polygon_corners if len(c) >= min_components]

    def outline_edges(self, min_components: int = 3) -> list[tuple[tuple[float, float], tuple[float, float]]]:
        """Closed-outline edges whose two corners both have ``min_components`` values.

        An edge touching a short corner is left out; its neighbours are not joined.
        """
        corners = self.polygon_corners
        count = len(corners)
        edges = []
        for i in range(count):
            start, end = corners[i], corners[(i + 1) % count]
            if len(start) >= min_components and len(end) >= min_components:
                edges.append(((start[0], start[1]), (end[0], end[1])))
        return edges

    @property
    def area(self) -> float:
        """Outline area in square meters, falling back to the bounding dimensions."""
        if len(self.polygon_corners) >= 3:
            edges = self.outline_edges()
            if len(edges) == len(self.polygon_corners):
                return float(Polygon(self.corner_xy()).area)
            # shoelace terms of the usable edges only
            return abs(sum(x1 * y2 - x2 * y1 for (x1, y1), (x2, y2) in edges)) / 2.0
        if len(self.dimensions) == 3:
            return self.dimensions[0] * self.dimensions[1]
        return 0.0


class Floor(Surface):
    pass


class Wall(Surface):
    @property
    def has_soffit(self) -> bool:
        """True when the outline has a re-entrant corner of roughly 270 degrees."""
        corners = self.polygon_corners
        count = len(corners)
        if count < 3:
            return False
        for i in range(count):
            prev = corners[(i - 1) % count]
            curr = corners[i]
            nxt = corners[(i + 1) % count]
            angle_prev = math.atan2(_coord(prev, 1) - _coord(curr, 1), _coord(prev, 0) - _coord(curr, 0))
            angle_next = math.atan2(_coord(nxt, 1) - _coord(curr, 1), _coord(nxt, 0) - _coord(curr, 0))
            angle_diff = math.degrees(angle_next - angle_prev)
            if angle_diff < 0:
                angle_diff += 360.0
            if SOFFIT_MIN_ANGLE_DEG <= angle_diff <= SOFFIT_MAX_ANGLE_DEG:
                return True
        return False

    def minimum_ceiling_height(self) -> float | None:
        """Lowest top edge above the wall base, in meters, or None if unknown.

        Outline corners are ``[x, y, z]`` with y vertical; for a V-shaped top the
        lowest point of the top edge wins.
        """
        if len(self.polygon_corners) >= 3:
            heights = [corner[1] for corner in self.polygon_corners if len(corner) >= 3]
            if not heights:
                return None
            base = min(heights)
            tops = [y for y in heights if y > base]
            if tops:
                return min(tops) - base
            span = max(heights) - base
            return span if span > 0 else None
        if len(self.dimensions) >= 2 and self.dimensions[1] > 0:
            return self.dimensions[1]
        return None


def _coord(corner: list[float], index: int) -> float:
    if index < len(corner):
        return corner[index]
    return 0.0


class Window(Surface):
    pass


class Opening(Surface):
    pass


class Door(ScanEntity):
    category: DoorCategory = DoorCategory.UNKNOWN

    @field_validator("category", mode="before")
    @classmethod
    def _parse_category(cls, value: Any) -> DoorCategory:
        if isinstance(value, DoorCategory):
            return value
        if isinstance(value, str):
            return _enum_from_tag(DoorCategory, value)
        if isinstance(value, dict):
            door = value.get("door")
            if isinstance(door, dict):
                is_open = door.get("isOpen")
                if is_open is True:
                    return DoorCategory.OPEN
                if is_open is False:
                    return DoorCategory.CLOSED
        return DoorCategory.UNKNOWN


class ObjectItem(ScanEntity):
    category: ObjectCategory = ObjectCategory.UNKNOWN
    attributes: dict[str, Any] = Field(default_factory=dict)

    @field_validator("category", mode="before")
    @classmethod
    def _parse_category(cls, value: Any) -> ObjectCategory:
        return _enum_from_tag(ObjectCategory, value)

    @field_validator("attributes", mode="before")
    @classmethod
    def _none_attributes(cls, value: Any) -> Any:
        if value is None:
            return {}
        return value

    def is_category(self, category: ObjectCategory) -> bool:
        return self.category is category


__all__ = [
    "Door",
    "DoorCategory",
    "Floor",
    "ObjectCategory",
    "ObjectItem",
    "Opening",
    "ScanEntity",
    "Section",
    "Surface",
    "SurfaceCategory",
    "Wall",
    "Window",
]
