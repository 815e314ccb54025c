"""Command line entry point: print the metadata record of one or more scans."""

from __future__ import annotations

import argparse
import json
import sys
from functools import partial
from pathlib import Path

from loguru import logger

from scanqa.exceptions import ConfigurationError, ScanLoadError, ValidationError
from scanqa.logging_config import setup_logging
from scanqa.metadata.extract import extract_raw_scan_metadata
from scanqa.scan.raw_scan import load_raw_scan
from scanqa.settings import Settings
from scanqa.storage import SidecarMetadataCache


def _scan_dir(path: Path) -> Path:
    """The directory holding the scan: the parent of an existing file, else ``path`` itself."""
    return path.parent if path.is_file() else path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="scanqa", description="Run geometric quality checks on room scans")
    parser.add_argument("scans", type=Path, nargs="+", help="Scan directories or rawScan.json files")
    parser.add_argument("--config", type=Path, help="YAML configuration file")
    parser.add_argument("--no-cache", action="store_true", help="Ignore and do not write cached metadata")
    parser.add_argument("--output", type=Path, help="Write the JSON result here instead of stdout")
    parser.add_argument("--log-level", help="Override the configured log level")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON lines")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = Settings.load(args.config)
    except ConfigurationError as exc:
        print(f"scanqa: {exc.message}", file=sys.stderr)
        return 2

    setup_logging(
        level=(args.log_level or settings.logging.level).upper(),
        json_format=args.json_logs or settings.logging.json_format,
        log_file=settings.logging.log_file,
    )

    cache = None
    if settings.cache.enabled and not args.no_cache:
        cache = SidecarMetadataCache(settings.cache.filename, settings.cache.indent)
    loader = partial(load_raw_scan, filename=settings.scan.filename)

    results: dict[str, dict] = {}
    failures = 0
    for path in args.scans:
        scan_dir = _scan_dir(path)
        log = logger.bind(scan=scan_dir.name)
        log.info("Checking {}", scan_dir)
        try:
            metadata = extract_raw_scan_metadata(scan_dir, cache=cache, loader=loader)
        except (ScanLoadError, ValidationError) as exc:
            log.error("Skipping {}: {}", scan_dir, exc.message)
            failures += 1
            continue
        results[str(scan_dir)] = metadata.to_json_dict()

    text = json.dumps(results, indent=2)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(text + "\n", encoding="utf-8")
        logger.info("Wrote {} record(s) to {}", len(results), args.output)
    else:
        print(text)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
