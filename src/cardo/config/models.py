"""Pydantic models for Cardo configuration and its errors."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from cardo.common import LoggingConfig
from cardo.constants import DEFAULT_MAX_RETRIES, DEFAULT_OUTPUT_DIR, DEFAULT_TIMEOUT_SECONDS


class FetchConfig(BaseModel):
    """Settings for downloading dependencies."""

    model_config = ConfigDict(extra="forbid")

    output_dir: Path = Field(default=Path(DEFAULT_OUTPUT_DIR))
    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=0)
    timeout: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    max_workers: int = Field(default=1, ge=1)
    retry_not_found: bool = Field(default=True)


class CardoConfig(BaseModel):
    """Global configuration (~/.config/cardo/config.yaml)."""

    model_config = ConfigDict(extra="allow")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)


class ConfigNotFoundError(BaseModel):
    """Configuration file not found at expected location."""

    model_config = ConfigDict(extra="forbid")

    expected_path: Path
    message: str


class ConfigYamlError(BaseModel):
    """YAML parsing error in configuration file."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    line: int | None = None
    column: int | None = None
    message: str


class ConfigValidationError(BaseModel):
    """Schema validation error in configuration."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    field: str | None = None
    message: str


class ConfigIOError(BaseModel):
    """File I/O error reading configuration."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    message: str


type ConfigError = ConfigNotFoundError | ConfigYamlError | ConfigValidationError | ConfigIOError
