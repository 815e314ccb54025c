"""Custom exception hierarchy for scanqa."""

from __future__ import annotations


class ScanQAError(Exception):
    """Base exception for all scanqa-specific errors."""

    def __init__(self, message: str, details: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(ScanQAError):
    """Raised when configuration is invalid or missing."""
    pass


class ValidationError(ScanQAError):
    """Base class for validation errors."""
    pass


class RawScanValidationError(ValidationError):
    """Raised when a raw scan document does not match the expected shape."""
    pass


class GeometryError(ScanQAError):
    """Raised when geometry operations receive unusable input."""
    pass


class ScanLoadError(ScanQAError):
    """Raised when a raw scan file cannot be read or decoded."""
    pass


class StorageError(ScanQAError):
    """Raised when storage operations fail."""
    pass


class CacheError(StorageError):
    """Raised when a metadata cache entry cannot be read or written."""
    pass
