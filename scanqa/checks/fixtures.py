"""Bathroom fixture checks: toilets pushed against a wall, tubs with a reachable gap."""

from __future__ import annotations

import math

from loguru import logger

from scanqa.geometry.contract import TOILET_BACK_GAP_MAX, TUB_GAP_EPSILON, TUB_GAP_MAX, TUB_GAP_MIN
from scanqa.geometry.segment import dist_to_segment, min_distance_between_outlines
from scanqa.geometry.vector import Point, is_finite
from scanqa.scan.footprints import all_finite, rectangle, wall_footprints
from scanqa.scan.models import ObjectCategory
from scanqa.scan.raw_scan import RawScan


def check_toilet_gaps(scan: RawScan) -> bool:
    """True if a toilet's back face is more than one inch from every wall.

    The back face is the local point ``(0, -depth/2)``. A toilet with no wall
    on its story (walls without a story always qualify) is flagged as well.
    """
    footprints = wall_footprints(scan.walls)
    for toilet in scan.objects:
        if toilet.category is not ObjectCategory.TOILET:
            continue
        if not toilet.has_valid_transform or len(toilet.dimensions) < 3:
            continue
        back_face = toilet.placement.apply(Point(0.0, -toilet.dimensions[2] / 2.0))
        if not is_finite(back_face):
            continue

        compatible = [fp for fp in footprints if fp.story is None or fp.story == toilet.story]
        if not compatible:
            logger.debug("Toilet {} has no wall on its story", toilet.identifier)
            return True

        nearest = min(
            dist_to_segment(back_face, start, end) for footprint in compatible for start, end in footprint.edges()
        )
        if nearest > TOILET_BACK_GAP_MAX:
            logger.debug("Toilet {} is {:.4f} m from the nearest wall", toilet.identifier, nearest)
            return True
    return False


def check_tub_gaps(scan: RawScan) -> bool:
    """True if any wall is between one and six inches from a tub outline.

    Both directions are measured (tub corners to wall edges and wall corners to
    tub edges) and the band is inclusive, widened by TUB_GAP_EPSILON.
    """
    footprints = wall_footprints(scan.walls)
    for tub in scan.objects:
        if tub.category is not ObjectCategory.BATHTUB:
            continue
        if not tub.has_valid_transform or len(tub.dimensions) < 3:
            continue
        tub_corners = tub.placement.apply_all(rectangle(tub.dimensions[0] / 2.0, tub.dimensions[2] / 2.0))
        if not all_finite(tub_corners):
            continue

        for footprint in footprints:
            if footprint.story is not None and footprint.story != tub.story:
                continue
            gap = min_distance_between_outlines(tub_corners, footprint.corners)
            if math.isinf(gap):
                continue
            if TUB_GAP_MIN - TUB_GAP_EPSILON <= gap <= TUB_GAP_MAX + TUB_GAP_EPSILON:
                logger.debug("Tub {} is {:.4f} m from wall {}", tub.identifier, gap, footprint.wall.identifier)
                return True
    return False


__all__ = ["check_toilet_gaps", "check_tub_gaps"]
