"""Strict parsing of rawScan.json documents."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from scanqa.exceptions import RawScanValidationError, ScanLoadError
from scanqa.scan.models import Door, Floor, ObjectItem, Opening, Section, Wall, Window

RAW_SCAN_FILENAME = "rawScan.json"

ALLOWED_KEYS = frozenset(
    {
        "version",
        "sections",
        "coreModel",
        "floors",
        "walls",
        "objects",
        "windows",
        "doors",
        "referenceOriginTransform",
        "story",
        "openings",
    }
)

# (key, kind) in the order fields are checked
_FIELD_CHECKS: tuple[tuple[str, str], ...] = (
    ("version", "number"),
    ("sections", "array"),
    ("coreModel", "string"),
    ("floors", "array"),
    ("walls", "array"),
    ("objects", "array"),
    ("windows", "array"),
    ("doors", "array"),
    ("referenceOriginTransform", "optional array"),
    ("story", "number"),
    ("openings", "array"),
)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_shape(data: Any) -> None:
    if not isinstance(data, dict):
        raise ValueError("Invalid raw scan: data must be an object")

    for key in data:
        if key not in ALLOWED_KEYS:
            raise ValueError(f'Invalid raw scan: unknown key "{key}"')

    for key, kind in _FIELD_CHECKS:
        value = data.get(key)
        if kind == "number" and not _is_number(value):
            raise ValueError(f'Invalid raw scan: missing or invalid "{key}"')
        if kind == "string" and not isinstance(value, str):
            raise ValueError(f'Invalid raw scan: missing or invalid "{key}" string')
        if kind == "array" and not isinstance(value, list):
            raise ValueError(f'Invalid raw scan: missing or invalid "{key}" array')
        if kind == "optional array" and key in data and not isinstance(value, list):
            raise ValueError(f'Invalid raw scan: missing or invalid "{key}" array')


class RawScan(BaseModel):
    """A complete room scan: the root every check and the aggregator read from."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    version: int | float
    sections: list[Section]
    core_model: str = Field(alias="coreModel")
    floors: list[Floor]
    walls: list[Wall]
    objects: list[ObjectItem]
    windows: list[Window]
    doors: list[Door]
    reference_origin_transform: list[float] = Field(default_factory=list, alias="referenceOriginTransform")
    story: int
    openings: list[Opening]

    @model_validator(mode="before")
    @classmethod
    def _strict_document(cls, data: Any) -> Any:
        _check_shape(data)
        return data

    @classmethod
    def parse(cls, data: Any) -> "RawScan":
        """Validate a decoded JSON document.

        Raises:
            RawScanValidationError: On the first unknown key, missing or mistyped
                field, or malformed entity.
        """
        try:
            return cls.model_validate(data)
        except PydanticValidationError as exc:
            raise _wrap_validation_error(exc) from exc

    def wall_by_identifier(self, identifier: str) -> Wall | None:
        for wall in self.walls:
            if wall.identifier == identifier:
                return wall
        return None


def _wrap_validation_error(exc: PydanticValidationError) -> RawScanValidationError:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    error = first.get("ctx", {}).get("error")
    if isinstance(error, ValueError) and str(error).startswith("Invalid raw scan"):
        message = str(error)
    else:
        message = f'Invalid raw scan: invalid "{location}": {first.get("msg", "invalid value")}'
    return RawScanValidationError(message, {"location": location, "errors": str(exc.error_count())})


def parse_raw_scan(data: Any) -> RawScan:
    return RawScan.parse(data)


def resolve_scan_path(path: Path, filename: str = RAW_SCAN_FILENAME) -> Path:
    """Accept either a scan directory or the rawScan.json file itself."""
    if path.is_dir():
        return path / filename
    return path


def load_raw_scan(path: Path, filename: str = RAW_SCAN_FILENAME) -> RawScan:
    """Read and parse a rawScan.json file (or the one inside directory ``path``).

    Raises:
        ScanLoadError: If the file cannot be read or is not valid JSON.
        RawScanValidationError: If the document does not match the scan shape.
    """
    scan_path = resolve_scan_path(Path(path), filename)
    try:
        payload = json.loads(scan_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ScanLoadError(f"Cannot read raw scan: {scan_path}", {"path": str(scan_path)}) from exc
    except json.JSONDecodeError as exc:
        raise ScanLoadError(f"Raw scan is not valid JSON: {exc}", {"path": str(scan_path)}) from exc
    logger.debug("Loaded raw scan from {}", scan_path)
    return RawScan.parse(payload)


__all__ = [
    "ALLOWED_KEYS",
    "RAW_SCAN_FILENAME",
    "RawScan",
    "load_raw_scan",
    "parse_raw_scan",
    "resolve_scan_path",
]
