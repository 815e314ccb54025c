"""Geometric scan-quality checks. Each check returns a flag and never raises."""

from scanqa.checks.doors import check_door_blocking, check_door_floor_contact
from scanqa.checks.fixtures import check_toilet_gaps, check_tub_gaps
from scanqa.checks.intersections import IntersectionResult, check_intersections
from scanqa.checks.openings import check_external_opening
from scanqa.checks.vanity import VanityCandidate, VanityType, find_vanity_candidate, get_vanity_lengths, get_vanity_type
from scanqa.checks.walls import check_colinear_walls, check_crooked_walls, check_nib_walls, check_wall_gaps

__all__ = [
    "IntersectionResult",
    "VanityCandidate",
    "VanityType",
    "check_colinear_walls",
    "check_crooked_walls",
    "check_door_blocking",
    "check_door_floor_contact",
    "check_external_opening",
    "check_intersections",
    "check_nib_walls",
    "check_toilet_gaps",
    "check_tub_gaps",
    "check_wall_gaps",
    "find_vanity_candidate",
    "get_vanity_lengths",
    "get_vanity_type",
]
