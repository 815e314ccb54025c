"""Aggregation of scan checks into one metadata record."""

from scanqa.metadata.compute import compute_raw_scan_metadata
from scanqa.metadata.extract import extract_raw_scan_metadata
from scanqa.metadata.schema import SCHEMA_VERSION, RawScanMetadata, WidthHeightPair

__all__ = [
    "RawScanMetadata",
    "SCHEMA_VERSION",
    "WidthHeightPair",
    "compute_raw_scan_metadata",
    "extract_raw_scan_metadata",
]
