"""Cache-or-recompute wrapper around the metadata aggregator."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from scanqa.exceptions import CacheError
from scanqa.metadata.compute import compute_raw_scan_metadata
from scanqa.metadata.schema import SCHEMA_VERSION, RawScanMetadata
from scanqa.scan.raw_scan import RawScan, load_raw_scan
from scanqa.storage import MetadataCache


def _cached_metadata(cache: MetadataCache, key: Path) -> RawScanMetadata | None:
    try:
        record = cache.get(key)
    except CacheError as exc:
        logger.debug("Metadata cache miss for {}: {}", key, exc.message)
        return None
    if record is None:
        return None
    if record.get("schemaVersion") != SCHEMA_VERSION:
        logger.debug("Metadata cache for {} has schema {}, expected {}", key, record.get("schemaVersion"), SCHEMA_VERSION)
        return None
    try:
        return RawScanMetadata.model_validate(record)
    except PydanticValidationError as exc:
        logger.debug("Metadata cache for {} has an outdated shape ({} errors)", key, exc.error_count())
        return None


def extract_raw_scan_metadata(
    scan_dir: Path,
    cache: MetadataCache | None = None,
    loader: Callable[[Path], RawScan] = load_raw_scan,
) -> RawScanMetadata:
    """Metadata for the scan in ``scan_dir``, served from ``cache`` when current.

    A cached record is used only if it carries the current schema version and
    validates against RawScanMetadata. Otherwise the scan is loaded, the record
    recomputed and written back; a failing write is logged and ignored.

    Raises:
        ScanLoadError: If the scan file cannot be read.
        RawScanValidationError: If the scan document is malformed.
    """
    scan_dir = Path(scan_dir)
    log = logger.bind(scan=scan_dir.name)
    if cache is not None:
        cached = _cached_metadata(cache, scan_dir)
        if cached is not None:
            log.debug("Using cached metadata")
            return cached

    metadata = compute_raw_scan_metadata(loader(scan_dir))
    log.debug("Computed metadata ({} walls)", metadata.wall_count)

    if cache is not None:
        try:
            cache.put(scan_dir, metadata.to_json_dict())
        except CacheError as exc:
            log.warning("Could not cache metadata: {}", exc.message)
    return metadata


__all__ = ["extract_raw_scan_metadata"]
