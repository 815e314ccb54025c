"""Tests for entity overlap checks."""

from scanqa.checks.intersections import IntersectionResult, check_intersections
from tests.utils_scan import door, make_scan, opening, scan_object, square_room_walls, wall, window

BOX = [1.0, 1.0, 1.0]


def test_clean_room_has_no_intersections():
    scan = make_scan(walls=square_room_walls(), objects=[scan_object("toilet", [0.4, 0.8, 0.7], x=1.5, z=1.5)])
    assert check_intersections(scan) == IntersectionResult()


def test_overlapping_objects():
    scan = make_scan(objects=[scan_object("table", BOX), scan_object("chair", BOX, x=0.5)])
    assert check_intersections(scan).has_object_intersection_errors


def test_objects_within_tolerance_do_not_overlap():
    # footprints share an edge; the shrunk boxes are two inches apart
    scan = make_scan(objects=[scan_object("table", BOX), scan_object("chair", BOX, x=1.0)])
    assert not check_intersections(scan).has_object_intersection_errors


def test_sink_and_storage_may_overlap():
    scan = make_scan(objects=[scan_object("sink", [0.5, 0.2, 0.4]), scan_object("storage", BOX)])
    assert not check_intersections(scan).has_object_intersection_errors


def test_object_overlap_requires_same_story():
    scan = make_scan(objects=[scan_object("table", BOX), scan_object("chair", BOX, story=1)])
    assert not check_intersections(scan).has_object_intersection_errors


def test_zero_sized_object_is_ignored():
    scan = make_scan(objects=[scan_object("table", BOX), scan_object("chair", [0.0, 0.0, 0.0])])
    assert not check_intersections(scan).has_object_intersection_errors


def test_object_through_wall():
    scan = make_scan(walls=[wall("a", 4.0)], objects=[scan_object("storage", BOX)])
    assert check_intersections(scan).has_wall_object_intersection_errors


def test_object_near_wall():
    scan = make_scan(walls=[wall("a", 4.0)], objects=[scan_object("storage", BOX, z=0.6)])
    assert not check_intersections(scan).has_wall_object_intersection_errors


def test_wall_object_overlap_requires_same_story():
    scan = make_scan(walls=[wall("a", 4.0, story=1)], objects=[scan_object("storage", BOX)])
    assert not check_intersections(scan).has_wall_object_intersection_errors


def test_crossing_walls():
    scan = make_scan(walls=[wall("a", 4.0), wall("b", 4.0, yaw_deg=90.0)])
    assert check_intersections(scan).has_wall_wall_intersection_errors


def test_corner_join_is_not_a_crossing():
    scan = make_scan(walls=[wall("a", 4.0), wall("b", 4.0, x=2.0, z=2.0, yaw_deg=90.0)])
    assert not check_intersections(scan).has_wall_wall_intersection_errors


def test_overlapping_collinear_walls():
    scan = make_scan(walls=[wall("a", 4.0), wall("b", 4.0, x=1.0)])
    assert check_intersections(scan).has_wall_wall_intersection_errors


def test_collinear_walls_meeting_end_to_end():
    scan = make_scan(walls=[wall("a", 4.0), wall("b", 4.0, x=4.0)])
    assert not check_intersections(scan).has_wall_wall_intersection_errors


def test_wall_centre_line_from_outline():
    # outline spans x in [0, 4]; the crossing wall sits at x = 3
    outlined = wall("a", 1.0, corners=[[0.0, 0.0], [4.0, 0.0], [4.0, 0.1], [0.0, 0.1]])
    crossing = wall("b", 2.0, x=3.0, yaw_deg=90.0)
    assert check_intersections(make_scan(walls=[outlined, crossing])).has_wall_wall_intersection_errors


def test_object_in_door_opening():
    scan = make_scan(doors=[door()], objects=[scan_object("storage", [0.5, 0.5, 0.5])])
    assert check_intersections(scan).has_embedded_object_intersection_errors


def test_object_attached_to_embedded_entity_is_ignored():
    scan = make_scan(
        windows=[window()],
        objects=[scan_object("storage", [0.5, 0.5, 0.5], parent="window-1")],
    )
    assert not check_intersections(scan).has_embedded_object_intersection_errors


def test_object_clear_of_embedded_entities():
    scan = make_scan(
        doors=[door()],
        openings=[opening(x=3.0)],
        objects=[scan_object("storage", [0.5, 0.5, 0.5], z=1.0)],
    )
    assert not check_intersections(scan).has_embedded_object_intersection_errors
