"""
Geometry Check Contract

Single source of truth for tolerances and thresholds used by the scan checks.
All modules import from here instead of hardcoding numbers.
"""

from __future__ import annotations

# Lengths in meters unless noted

METERS_PER_INCH = 0.0254
METERS_PER_FOOT = 0.3048
SQ_FEET_PER_SQ_METER = 1.0 / (METERS_PER_FOOT * METERS_PER_FOOT)

# Numeric tolerance for zero tests, parallelism and degenerate geometry
EPSILON = 1e-9

# Flat 4x4 placement matrices
TRANSFORM_SIZE = 16

# Polygon integrity
MAX_COORDINATE = 10000.0  # m
MIN_EDGE_LENGTH = 0.001  # m
MIN_INTERIOR_ANGLE_DEG = 5.0
MAX_INTERIOR_ANGLE_DEG = 175.0

# Walls
TOUCHING_THRESHOLD = 1.0 * METERS_PER_INCH  # closer than this counts as touching
WALL_GAP_MAX = 12.0 * METERS_PER_INCH
COLINEAR_WALL_GAP_MAX = 3.0 * METERS_PER_INCH
COLINEAR_WALL_PARALLEL_THRESHOLD = 0.996  # |cos| of direction angle
NIB_WALL_LENGTH = 1.0 * METERS_PER_FOOT
CROOKED_WALL_ANGLE_DEG = 5.0
DEFAULT_WALL_THICKNESS = 0.15  # m
LOW_CEILING_THRESHOLD = 7.5 * METERS_PER_FOOT
SOFFIT_MIN_ANGLE_DEG = 260.0
SOFFIT_MAX_ANGLE_DEG = 280.0

# Doors
DOOR_CLEARANCE = 0.6  # m in front of the door
DOOR_WIDTH_SHRINK = 0.1  # m removed from the clearance width
STEP_OVER_HEIGHT = 0.05  # m, objects lower than this can be stepped over
DOOR_FLOOR_TOLERANCE = 1.0 * METERS_PER_INCH

# Openings
EXTERNAL_OPENING_PERIMETER_DISTANCE = 0.5  # m

# Fixtures
TOILET_BACK_GAP_MAX = 1.0 * METERS_PER_INCH
TUB_GAP_MIN = 1.0 * METERS_PER_INCH
TUB_GAP_MAX = 6.0 * METERS_PER_INCH
TUB_GAP_EPSILON = 1e-5  # widens the band on both ends

# Intersections
OBJECT_SHRINK_TOLERANCE = 1.0 * METERS_PER_INCH  # per side
SEGMENT_PARAM_EPSILON = 1e-5
COLLINEAR_AREA_EPSILON = 1e-5


def inches(value_in: float) -> float:
    """Convert inches to meters."""
    return float(value_in * METERS_PER_INCH)


def feet(value_ft: float) -> float:
    """Convert feet to meters."""
    return float(value_ft * METERS_PER_FOOT)


def to_square_feet(value_m2: float) -> float:
    """Convert square meters to square feet."""
    return float(value_m2 * SQ_FEET_PER_SQ_METER)
