"""Logging setup for scanqa.

Records carry the scan they belong to in ``extra["scan"]`` (bound with
``logger.bind(scan=...)``); records logged outside a scan show ``-``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

from loguru import logger

NO_SCAN = "-"

TEXT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[scan]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


class JSONFormatter:
    """One JSON object per record, with the scan name as a top-level field."""

    def __call__(self, record: dict[str, Any]) -> str:
        extra = dict(record.get("extra") or {})
        log_data = {
            "timestamp": record["time"].isoformat(),
            "level": record["level"].name,
            "scan": str(extra.pop("scan", NO_SCAN)),
            "message": record["message"],
            "module": record.get("module", ""),
            "function": record.get("function", ""),
            "line": record.get("line", 0),
        }

        exception = record.get("exception")
        if exception is not None:
            log_data["exception"] = {
                "type": exception.type.__name__ if exception.type else None,
                "value": str(exception.value) if exception.value else None,
            }

        log_data.update({key: str(value) for key, value in extra.items()})

        # loguru treats the returned string as a format template
        return json.dumps(log_data, ensure_ascii=False).replace("{", "{{").replace("}", "}}") + "\n"


def setup_logging(
    *,
    level: str = "INFO",
    json_format: bool = False,
    log_file: Path | None = None,
) -> None:
    """Replace loguru's default sink with the scanqa sinks.

    Args:
        level: Minimum level name (TRACE through CRITICAL).
        json_format: JSON lines instead of coloured text, on stderr and in the file.
        log_file: Optional rotating log file; stderr only when None.
    """
    logger.remove()
    logger.configure(extra={"scan": NO_SCAN})

    formatter: Any = JSONFormatter() if json_format else TEXT_FORMAT
    logger.add(sys.stderr, format=formatter, level=level, colorize=not json_format)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format=formatter,
            level=level,
            rotation="10 MB",
            retention="7 days",
            compression="zip",
        )
