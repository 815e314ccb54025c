"""Tests for the metadata aggregator."""

import pytest

from scanqa.metadata import SCHEMA_VERSION, compute_raw_scan_metadata
from tests.utils_scan import door, floor, make_scan, scan_object, square_room_walls, wall, window

ROOM_CORNERS = [[0.0, 0.0, 0.0], [3.0, 0.0, 0.0], [3.0, 3.0, 0.0], [0.0, 3.0, 0.0]]

# Clockwise outline (x, y, 0) with a 0.3 m drop at the right end
STEPPED_OUTLINE = [
    [0.0, 0.0, 0.0],
    [0.0, 2.5, 0.0],
    [2.0, 2.5, 0.0],
    [2.0, 2.2, 0.0],
    [3.0, 2.2, 0.0],
    [3.0, 0.0, 0.0],
]


def _room(**sections):
    defaults = dict(
        walls=square_room_walls(),
        floors=[floor(ROOM_CORNERS)],
        doors=[door(parent="wall-s", x=1.5, is_open=True)],
        windows=[window(parent="wall-e", x=3.0, z=1.5, yaw_deg=90.0)],
        objects=[scan_object("chair", [0.5, 0.9, 0.5], x=1.5, z=1.5, attributes={"ChairType": "dining"})],
    )
    defaults.update(sections)
    return make_scan(**defaults)


def test_counts_and_areas():
    metadata = compute_raw_scan_metadata(_room())
    assert metadata.schema_version == SCHEMA_VERSION
    assert metadata.wall_count == 4
    assert metadata.door_count == 1
    assert metadata.window_count == 1
    assert metadata.opening_count == 0
    assert metadata.toilet_count == 0
    assert metadata.room_area_sq_ft == pytest.approx(96.875, rel=1e-4)
    assert metadata.floor_lengths == [3.0]
    assert metadata.floor_widths == [3.0]
    assert metadata.wall_heights == [2.5] * 4
    assert metadata.wall_widths == [3.0] * 4
    assert metadata.wall_areas == pytest.approx([7.5] * 4)
    assert metadata.door_widths == [0.9]
    assert metadata.door_heights == [2.1]
    assert metadata.door_areas == pytest.approx([1.89])
    assert metadata.window_width_height_pairs[0].width == 1.0


def test_object_flags_and_histograms():
    metadata = compute_raw_scan_metadata(_room())
    assert metadata.has_chair
    assert not metadata.has_table
    assert metadata.door_is_open_counts == {"Open": 1}
    assert metadata.object_attribute_counts == {"ChairType": {"dining": 1}}
    assert metadata.walls_with_doors == 1
    assert metadata.walls_with_windows == 1
    assert metadata.walls_with_openings == 0
    assert metadata.vanity_type == "no vanity"
    assert metadata.vanity_lengths == []


def test_clean_room_layout():
    metadata = compute_raw_scan_metadata(_room())
    assert metadata.stories == [0]
    assert not metadata.has_multiple_stories
    assert metadata.section_labels == ["bathroom"]
    assert not metadata.has_unparented_embedded
    assert not metadata.has_wall_gap_errors
    assert not metadata.has_colinear_wall_errors
    assert not metadata.has_nib_walls
    assert not metadata.has_soffit
    assert not metadata.has_low_ceiling
    assert not metadata.has_object_intersection_errors
    assert not metadata.has_floors_with_parent_id


def test_stepped_wall_is_soffit_and_low_ceiling():
    walls = square_room_walls()
    walls[0] = wall("wall-s", 3.0, x=1.5, corners=STEPPED_OUTLINE)
    metadata = compute_raw_scan_metadata(_room(walls=walls))
    assert metadata.has_soffit
    assert metadata.has_low_ceiling
    assert metadata.has_non_rect_wall
    assert metadata.wall_widths[0] == pytest.approx(11.0)


def test_multiple_stories_and_unparented_door():
    walls = square_room_walls() + square_room_walls(story=1)
    metadata = compute_raw_scan_metadata(_room(walls=walls, doors=[door(parent=None)]))
    assert metadata.stories == [0, 1]
    assert metadata.has_multiple_stories
    assert metadata.has_unparented_embedded
    assert metadata.door_is_open_counts == {"Closed": 1}


def test_json_record_uses_camel_case_keys():
    record = compute_raw_scan_metadata(_room()).to_json_dict()
    assert record["schemaVersion"] == SCHEMA_VERSION
    assert record["roomAreaSqFt"] == pytest.approx(96.875, rel=1e-4)
    assert "hasWallGapErrors" in record
    assert "has_wall_gap_errors" not in record
    assert record["doorWidthHeightPairs"] == [{"height": 2.1, "width": 0.9}]


def test_sections_without_label_are_left_out():
    metadata = compute_raw_scan_metadata(_room(sections=[{"label": None}, {"label": "bathroom", "story": 0}]))
    assert metadata.section_labels == ["bathroom"]
