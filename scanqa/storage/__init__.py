"""Metadata cache abstraction (sidecar files next to each scan, or in memory)."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol

from scanqa.storage.local import InMemoryMetadataCache, SidecarMetadataCache


class MetadataCache(Protocol):
    def get(self, key: Path) -> dict[str, Any] | None:  # None on miss, CacheError on unreadable entry
        ...

    def put(self, key: Path, record: dict[str, Any]) -> None:  # CacheError on write failure
        ...


__all__ = ["InMemoryMetadataCache", "MetadataCache", "SidecarMetadataCache"]
