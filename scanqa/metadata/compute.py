"""Pure aggregation of every check and extractor into one RawScanMetadata record."""

from __future__ import annotations

from scanqa.checks.doors import check_door_blocking, check_door_floor_contact
from scanqa.checks.fixtures import check_toilet_gaps, check_tub_gaps
from scanqa.checks.intersections import check_intersections
from scanqa.checks.openings import check_external_opening
from scanqa.checks.vanity import get_vanity_type
from scanqa.checks.walls import check_colinear_walls, check_crooked_walls, check_nib_walls, check_wall_gaps
from scanqa.geometry.contract import to_square_feet
from scanqa.metadata import predicates
from scanqa.metadata.attributes import door_is_open_counts, object_attribute_counts, wall_embedded_counts
from scanqa.metadata.dimensions import extract_dimension_area_data
from scanqa.metadata.schema import SCHEMA_VERSION, RawScanMetadata
from scanqa.scan.models import ObjectCategory
from scanqa.scan.raw_scan import RawScan


def compute_raw_scan_metadata(scan: RawScan) -> RawScanMetadata:
    """Run every check on ``scan``; no file I/O and no caching."""
    categories = [obj.category for obj in scan.objects]

    def count(category: ObjectCategory) -> int:
        return categories.count(category)

    def has(category: ObjectCategory) -> bool:
        return category in categories

    intersections = check_intersections(scan)
    stories = predicates.story_indices(scan)

    return RawScanMetadata(
        schema_version=SCHEMA_VERSION,
        room_area_sq_ft=to_square_feet(sum(floor.area for floor in scan.floors)),
        wall_count=len(scan.walls),
        door_count=len(scan.doors),
        window_count=len(scan.windows),
        opening_count=len(scan.openings),
        toilet_count=count(ObjectCategory.TOILET),
        tub_count=count(ObjectCategory.BATHTUB),
        sink_count=count(ObjectCategory.SINK),
        storage_count=count(ObjectCategory.STORAGE),
        has_non_rect_wall=predicates.has_non_rect_wall(scan),
        has_curved_wall=predicates.has_curved_wall(scan),
        has_washer_dryer=has(ObjectCategory.WASHER_DRYER),
        has_stove=has(ObjectCategory.STOVE),
        has_table=has(ObjectCategory.TABLE),
        has_chair=has(ObjectCategory.CHAIR),
        has_bed=has(ObjectCategory.BED),
        has_sofa=has(ObjectCategory.SOFA),
        has_dishwasher=has(ObjectCategory.DISHWASHER),
        has_oven=has(ObjectCategory.OVEN),
        has_refrigerator=has(ObjectCategory.REFRIGERATOR),
        has_stairs=has(ObjectCategory.STAIRS),
        has_fireplace=has(ObjectCategory.FIREPLACE),
        has_television=has(ObjectCategory.TELEVISION),
        has_external_opening=check_external_opening(scan),
        has_soffit=predicates.has_soffit(scan),
        has_low_ceiling=predicates.has_low_ceiling(scan),
        has_toilet_gap_errors=check_toilet_gaps(scan),
        has_tub_gap_errors=check_tub_gaps(scan),
        has_unparented_embedded=predicates.has_unparented_embedded(scan),
        has_curved_embedded=predicates.has_curved_embedded(scan),
        has_non_rectangular_embedded=predicates.has_non_rectangular_embedded(scan),
        has_wall_gap_errors=check_wall_gaps(scan),
        has_colinear_wall_errors=check_colinear_walls(scan),
        has_nib_walls=check_nib_walls(scan),
        has_object_intersection_errors=intersections.has_object_intersection_errors,
        has_wall_object_intersection_errors=intersections.has_wall_object_intersection_errors,
        has_wall_wall_intersection_errors=intersections.has_wall_wall_intersection_errors,
        has_embedded_object_intersection_errors=intersections.has_embedded_object_intersection_errors,
        has_crooked_wall_errors=check_crooked_walls(scan),
        has_door_blocking_error=check_door_blocking(scan),
        has_door_floor_contact_error=check_door_floor_contact(scan),
        has_floors_with_parent_id=predicates.has_floors_with_parent_id(scan),
        has_non_empty_completed_edges=predicates.has_non_empty_completed_edges(scan),
        section_labels=[section.label for section in scan.sections if section.label is not None],
        stories=stories,
        has_multiple_stories=len(stories) > 1,
        door_is_open_counts=door_is_open_counts(scan),
        object_attribute_counts=object_attribute_counts(scan),
        vanity_type=get_vanity_type(scan).value,
        **extract_dimension_area_data(scan),
        **wall_embedded_counts(scan),
    )


__all__ = ["compute_raw_scan_metadata"]
