from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from scanqa.exceptions import ConfigurationError

# Load .env file from project root
_env_path = Path(__file__).parent.parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)

CONFIG_ENV_VAR = "SCANQA_CONFIG"
DEFAULT_CONFIG_PATH = Path("config/default.yaml")


class CacheSettings(BaseModel):
    enabled: bool = True
    filename: str = "rawScanMetadata.json"
    indent: int = Field(2, ge=0, le=8)

    @field_validator("filename")
    @classmethod
    def _plain_filename(cls, value: str) -> str:
        if not value or Path(value).name != value:
            raise ValueError("cache filename must be a bare file name")
        return value


class LoggingSettings(BaseModel):
    level: str = "INFO"
    json_format: bool = False
    log_file: Path | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> str:
        if value is None:
            return "INFO"
        level = str(value).upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level '{value}'")
        return level


class ScanSettings(BaseModel):
    filename: str = "rawScan.json"


class Settings(BaseModel):
    scan: ScanSettings = Field(default_factory=ScanSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def load(cls, path: Path | None = None) -> "Settings":
        """Load settings from a YAML configuration file.

        Args:
            path: Optional path to configuration file. If not provided, uses the
                SCANQA_CONFIG environment variable or config/default.yaml.

        Returns:
            Settings instance with loaded configuration. When no path is given
            and the default file is absent, built-in defaults are returned.

        Raises:
            ConfigurationError: If an explicit file is missing or the content is invalid.
        """
        env_path = os.getenv(CONFIG_ENV_VAR)
        config_path = path or (Path(env_path) if env_path else DEFAULT_CONFIG_PATH)
        if not config_path.exists():
            if path is None and env_path is None:
                return cls()
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                {"path": str(config_path)},
            )
        try:
            with config_path.open("r", encoding="utf-8") as fp:
                payload = yaml.safe_load(fp) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid configuration: {exc}", {"path": str(config_path)}) from exc
        if not isinstance(payload, dict):
            raise ConfigurationError("Invalid configuration: top level must be a mapping", {"path": str(config_path)})
        try:
            return cls(**payload)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid configuration: {exc}", {"path": str(config_path)}) from exc


@lru_cache(maxsize=1)
def get_settings(path: str | None = None) -> Settings:
    return Settings.load(Path(path) if path else None)


__all__ = [
    "Settings",
    "ScanSettings",
    "CacheSettings",
    "LoggingSettings",
    "get_settings",
]
