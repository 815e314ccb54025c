"""Tests for wall gap, colinear, nib and crooked wall checks."""

import pytest

from scanqa.checks.walls import check_colinear_walls, check_crooked_walls, check_nib_walls, check_wall_gaps
from tests.utils_scan import INCH, make_scan, square_room_walls, wall


def _walls_end_to_end(gap: float) -> list[dict]:
    # wall A spans x in [-1, 1], wall B starts ``gap`` after it on the same line
    return [wall("a", 2.0), wall("b", 2.0, x=2.0 + gap)]


@pytest.mark.parametrize(
    ("gap_inches", "expected"),
    [(0.0, False), (0.5, False), (6.0, True), (11.0, True), (13.0, False)],
)
def test_wall_gaps(gap_inches, expected):
    scan = make_scan(walls=_walls_end_to_end(gap_inches * INCH))
    assert check_wall_gaps(scan) is expected


def test_wall_gaps_ignore_walls_without_transform():
    walls = _walls_end_to_end(6.0 * INCH)
    walls[1]["transform"] = [1.0, 0.0, 0.0]
    assert not check_wall_gaps(make_scan(walls=walls))


def test_square_room_has_no_wall_defects():
    scan = make_scan(walls=square_room_walls())
    assert not check_wall_gaps(scan)
    assert not check_colinear_walls(scan)
    assert not check_nib_walls(scan)
    assert not check_crooked_walls(scan)


def test_wall_gap_uses_outline_corners():
    # outline walls: second wall's corner is 4 inches from the first wall's edge
    first = wall("a", corners=[[-1.0, -0.05], [1.0, -0.05], [1.0, 0.05], [-1.0, 0.05]])
    second = wall("b", x=1.0 + 4 * INCH, z=1.0, yaw_deg=90.0, corners=[[-0.9, 0.0], [0.9, 0.0]])
    assert check_wall_gaps(make_scan(walls=[first, second]))


def test_colinear_antiparallel_touching_walls():
    scan = make_scan(walls=[wall("a", 2.0), wall("b", 2.0, x=2.0, yaw_deg=180.0)])
    assert check_colinear_walls(scan)


def test_colinear_requires_parallel_walls():
    scan = make_scan(walls=[wall("a", 2.0), wall("b", 2.0, x=1.0, z=1.0, yaw_deg=90.0)])
    assert not check_colinear_walls(scan)


def test_colinear_requires_small_gap():
    scan = make_scan(walls=[wall("a", 2.0), wall("b", 2.0, z=4 * INCH)])
    assert not check_colinear_walls(scan)
    scan = make_scan(walls=[wall("a", 2.0), wall("b", 2.0, z=2 * INCH)])
    assert check_colinear_walls(scan)


def test_colinear_skips_walls_on_other_stories():
    scan = make_scan(walls=[wall("a", 2.0, story=0), wall("b", 2.0, x=2.0, story=1)])
    assert not check_colinear_walls(scan)
    scan = make_scan(walls=[wall("a", 2.0, story=None), wall("b", 2.0, x=2.0, story=1)])
    assert check_colinear_walls(scan)


def test_nib_wall():
    assert check_nib_walls(make_scan(walls=[wall("stub", 0.2)]))
    assert not check_nib_walls(make_scan(walls=[wall("long", 2.0)]))
    assert not check_nib_walls(make_scan(walls=[wall("zero", 0.0)]))


def test_nib_wall_on_other_story_is_ignored():
    scan = make_scan(walls=[wall("stub", 0.2, story=1)], story=0)
    assert not check_nib_walls(scan)


def test_crooked_walls_shallow_join():
    first = wall("a", 2.0)
    # starts where ``a`` ends, turned by 3 degrees
    second = wall("b", 2.0, x=2.0, yaw_deg=3.0)
    assert check_crooked_walls(make_scan(walls=[first, second]))


def test_crooked_walls_right_angle_join_is_fine():
    scan = make_scan(walls=[wall("a", 2.0), wall("b", 2.0, x=2.0, yaw_deg=30.0)])
    assert not check_crooked_walls(scan)


def test_crooked_walls_require_connection():
    scan = make_scan(walls=[wall("a", 2.0), wall("b", 2.0, x=2.0 + 2 * INCH, yaw_deg=3.0)])
    assert not check_crooked_walls(scan)


def test_crooked_walls_require_same_story():
    scan = make_scan(walls=[wall("a", 2.0, story=0), wall("b", 2.0, x=2.0, yaw_deg=3.0, story=1)])
    assert not check_crooked_walls(scan)
