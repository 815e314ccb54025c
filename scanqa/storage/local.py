from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

from scanqa.exceptions import CacheError

METADATA_FILENAME = "rawScanMetadata.json"


class SidecarMetadataCache:
    """Stores each record as a JSON file inside the scan directory it describes."""

    def __init__(self, filename: str = METADATA_FILENAME, indent: int = 2) -> None:
        self.filename = filename
        self.indent = indent

    def path_for(self, key: Path) -> Path:
        return Path(key) / self.filename

    def get(self, key: Path) -> dict[str, Any] | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise CacheError(f"Unreadable metadata cache: {exc}", {"path": str(path)}) from exc
        if not isinstance(payload, dict):
            raise CacheError("Metadata cache is not a JSON object", {"path": str(path)})
        return payload

    def put(self, key: Path, record: dict[str, Any]) -> None:
        path = self.path_for(key)
        try:
            path.write_text(json.dumps(record, indent=self.indent), encoding="utf-8")
        except OSError as exc:
            raise CacheError(f"Cannot write metadata cache: {exc}", {"path": str(path)}) from exc


class InMemoryMetadataCache:
    def __init__(self) -> None:
        self._records: dict[str, dict[str, Any]] = {}

    def get(self, key: Path) -> dict[str, Any] | None:
        record = self._records.get(str(key))
        return copy.deepcopy(record) if record is not None else None

    def put(self, key: Path, record: dict[str, Any]) -> None:
        self._records[str(key)] = copy.deepcopy(record)

    def __len__(self) -> int:
        return len(self._records)


__all__ = ["InMemoryMetadataCache", "METADATA_FILENAME", "SidecarMetadataCache"]
