"""Tests for external opening, toilet gap and tub gap checks."""

import pytest

from scanqa.checks.fixtures import check_toilet_gaps, check_tub_gaps
from scanqa.checks.openings import check_external_opening
from tests.utils_scan import INCH, floor, make_scan, opening, scan_object, wall

FLOOR_CORNERS = [[0.0, 0.0, 0.0], [4.0, 0.0, 0.0], [4.0, 4.0, 0.0], [0.0, 4.0, 0.0]]


def _opening_scan(wall_x: float, wall_y: float, **opening_kwargs) -> dict:
    return dict(
        floors=[floor(FLOOR_CORNERS)],
        walls=[wall("wall-1", 4.0, x=wall_x, y=wall_y)],
        openings=[opening(**opening_kwargs)],
    )


def test_opening_in_perimeter_wall_is_external():
    assert check_external_opening(make_scan(**_opening_scan(0.2, 2.0)))


def test_opening_in_interior_wall_is_not_external():
    assert not check_external_opening(make_scan(**_opening_scan(2.0, 2.0)))


def test_unparented_opening_is_skipped():
    assert not check_external_opening(make_scan(**_opening_scan(0.2, 2.0, parent=None)))


def test_opening_on_other_story_is_skipped():
    assert not check_external_opening(make_scan(**_opening_scan(0.2, 2.0, story=1)))
    assert check_external_opening(make_scan(**_opening_scan(0.2, 2.0, story=None)))


def test_opening_with_missing_parent_wall_is_skipped():
    assert not check_external_opening(make_scan(**_opening_scan(0.2, 2.0, parent="wall-9")))


def test_external_opening_needs_floor_outline():
    document = _opening_scan(0.2, 2.0)
    document["floors"] = [floor([])]
    assert not check_external_opening(make_scan(**document))
    document["floors"] = []
    assert not check_external_opening(make_scan(**document))


TOILET = [0.4, 0.8, 0.7]


def _back_wall(gap: float, story: int | None = 0) -> dict:
    # toilet at the origin faces +z; its back face is at z = -0.35
    return wall("back", 3.0, z=-0.35 - gap, story=story)


def test_toilet_against_wall():
    scan = make_scan(objects=[scan_object("toilet", TOILET)], walls=[_back_wall(0.0)])
    assert not check_toilet_gaps(scan)


def test_toilet_pulled_away_from_wall():
    scan = make_scan(objects=[scan_object("toilet", TOILET)], walls=[_back_wall(3 * INCH)])
    assert check_toilet_gaps(scan)


def test_toilet_without_walls_is_flagged():
    assert check_toilet_gaps(make_scan(objects=[scan_object("toilet", TOILET)]))
    other_story = make_scan(objects=[scan_object("toilet", TOILET)], walls=[_back_wall(0.0, story=1)])
    assert check_toilet_gaps(other_story)


def test_toilet_wall_without_story_is_compatible():
    scan = make_scan(objects=[scan_object("toilet", TOILET, story=2)], walls=[_back_wall(0.0, story=None)])
    assert not check_toilet_gaps(scan)


def test_toilet_with_incomplete_data_is_skipped():
    flat = scan_object("toilet", [0.4, 0.8])
    assert not check_toilet_gaps(make_scan(objects=[flat]))


def test_no_toilets_no_error():
    assert not check_toilet_gaps(make_scan(walls=[_back_wall(1.0)]))


TUB = [1.5, 0.5, 0.7]


@pytest.mark.parametrize(
    ("gap_inches", "expected"),
    [(0.0, False), (3.0, True), (5.5, True), (7.0, False)],
)
def test_tub_gap_band(gap_inches, expected):
    tub = scan_object("bathtub", TUB)
    back = wall("back", 3.0, z=-0.35 - gap_inches * INCH)
    assert check_tub_gaps(make_scan(objects=[tub], walls=[back])) is expected


def test_tub_gap_ignores_walls_on_other_story():
    tub = scan_object("bathtub", TUB)
    back = wall("back", 3.0, z=-0.35 - 3 * INCH, story=1)
    assert not check_tub_gaps(make_scan(objects=[tub], walls=[back]))


def test_tub_gap_measures_wall_corners_to_tub_edges():
    # short wall stub pointing at the long side of the tub; only its end is near the tub
    tub = scan_object("bathtub", TUB)
    stub = wall("stub", 1.0, z=-0.35 - 2 * INCH - 0.5, yaw_deg=90.0)
    assert check_tub_gaps(make_scan(objects=[tub], walls=[stub]))


def test_tub_without_transform_is_skipped():
    tub = scan_object("bathtub", TUB)
    tub["transform"] = []
    back = wall("back", 3.0, z=-0.35 - 3 * INCH)
    assert not check_tub_gaps(make_scan(objects=[tub], walls=[back]))
