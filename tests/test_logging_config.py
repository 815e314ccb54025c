"""Tests for logging setup."""

import json

from loguru import logger

from scanqa.exceptions import CacheError
from scanqa.logging_config import JSONFormatter, setup_logging
from scanqa.metadata import extract_raw_scan_metadata
from tests.utils_scan import scan_document


def test_json_log_file(tmp_path):
    log_file = tmp_path / "logs" / "scanqa.log"
    setup_logging(level="DEBUG", json_format=True, log_file=log_file)
    try:
        logger.info("Checked {} with {braces}", "scan-1", braces="{}")
        logger.complete()
    finally:
        logger.remove()

    lines = log_file.read_text(encoding="utf-8").strip().splitlines()
    record = json.loads(lines[-1])
    assert record["level"] == "INFO"
    assert record["message"] == "Checked scan-1 with {}"
    assert record["function"] == "test_json_log_file"
    assert record["scan"] == "-"


def test_formatter_escapes_braces():
    messages = []
    logger.remove()
    sink_id = logger.add(messages.append, format=JSONFormatter(), level="INFO")
    try:
        logger.bind(scan="a{b}").info("payload {}", "{x}")
    finally:
        logger.remove(sink_id)

    record = json.loads(str(messages[0]))
    assert record["message"] == "payload {x}"
    assert record["scan"] == "a{b}"


class ReadOnlyCache:
    def get(self, key):
        return None

    def put(self, key, record):
        raise CacheError("read-only")


def test_extraction_logs_carry_scan_name(tmp_path):
    scan_dir = tmp_path / "scan-042"
    scan_dir.mkdir()
    (scan_dir / "rawScan.json").write_text(json.dumps(scan_document()), encoding="utf-8")
    log_file = tmp_path / "scanqa.log"
    setup_logging(level="WARNING", json_format=True, log_file=log_file)
    try:
        extract_raw_scan_metadata(scan_dir, cache=ReadOnlyCache())
        logger.complete()
    finally:
        logger.remove()

    records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert [(r["level"], r["scan"]) for r in records] == [("WARNING", "scan-042")]
    assert records[0]["message"] == "Could not cache metadata: read-only"
