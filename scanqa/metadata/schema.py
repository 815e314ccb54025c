"""Output record of the metadata aggregator, serialized with camelCase keys."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Bump whenever a field is added, removed or changes meaning; cached records
# with another version are recomputed.
SCHEMA_VERSION = 2


class WidthHeightPair(BaseModel):
    height: float
    width: float


class RawScanMetadata(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    schema_version: int = Field(SCHEMA_VERSION)

    room_area_sq_ft: float
    wall_count: int
    door_count: int
    window_count: int
    opening_count: int
    toilet_count: int
    tub_count: int
    sink_count: int
    storage_count: int

    has_non_rect_wall: bool
    has_curved_wall: bool
    has_washer_dryer: bool
    has_stove: bool
    has_table: bool
    has_chair: bool
    has_bed: bool
    has_sofa: bool
    has_dishwasher: bool
    has_oven: bool
    has_refrigerator: bool
    has_stairs: bool
    has_fireplace: bool
    has_television: bool

    has_external_opening: bool
    has_soffit: bool
    has_low_ceiling: bool
    has_toilet_gap_errors: bool
    has_tub_gap_errors: bool
    has_unparented_embedded: bool
    has_curved_embedded: bool
    has_non_rectangular_embedded: bool
    has_wall_gap_errors: bool
    has_colinear_wall_errors: bool
    has_nib_walls: bool
    has_object_intersection_errors: bool
    has_wall_object_intersection_errors: bool
    has_wall_wall_intersection_errors: bool
    has_embedded_object_intersection_errors: bool
    has_crooked_wall_errors: bool
    has_door_blocking_error: bool
    has_door_floor_contact_error: bool
    has_floors_with_parent_id: bool
    has_non_empty_completed_edges: bool

    section_labels: list[str]
    stories: list[int]
    has_multiple_stories: bool

    # Dimensions in meters, areas in square meters
    wall_heights: list[float]
    wall_widths: list[float]
    wall_areas: list[float]
    wall_width_height_pairs: list[WidthHeightPair]
    window_heights: list[float]
    window_widths: list[float]
    window_areas: list[float]
    window_width_height_pairs: list[WidthHeightPair]
    door_heights: list[float]
    door_widths: list[float]
    door_areas: list[float]
    door_width_height_pairs: list[WidthHeightPair]
    opening_heights: list[float]
    opening_widths: list[float]
    opening_areas: list[float]
    opening_width_height_pairs: list[WidthHeightPair]
    floor_lengths: list[float]
    floor_widths: list[float]
    floor_width_height_pairs: list[WidthHeightPair]
    tub_lengths: list[float]
    vanity_lengths: list[float]

    door_is_open_counts: dict[str, int]
    object_attribute_counts: dict[str, dict[str, int]]

    walls_with_windows: int
    walls_with_doors: int
    walls_with_openings: int

    vanity_type: str | None

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


__all__ = ["RawScanMetadata", "SCHEMA_VERSION", "WidthHeightPair"]
