"""Raw scan data model and strict parser."""

from scanqa.scan.models import (
    Door,
    DoorCategory,
    Floor,
    ObjectCategory,
    ObjectItem,
    Opening,
    Section,
    SurfaceCategory,
    Wall,
    Window,
)
from scanqa.scan.raw_scan import RawScan, load_raw_scan, parse_raw_scan

__all__ = [
    "Door",
    "DoorCategory",
    "Floor",
    "ObjectCategory",
    "ObjectItem",
    "Opening",
    "RawScan",
    "Section",
    "SurfaceCategory",
    "Wall",
    "Window",
    "load_raw_scan",
    "parse_raw_scan",
]
