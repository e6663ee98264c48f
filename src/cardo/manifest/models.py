"""Manifest (markdown.toml) models and errors."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from result import Result

from cardo.common import NonEmptyString
from cardo.dependency import DependencyParseError, DependencySource, parse_dependencies


class PackageInfo(BaseModel):
    """The ``[package]`` table."""

    model_config = ConfigDict(extra="ignore")

    name: NonEmptyString
    version: NonEmptyString
    description: str | None = None


class Manifest(BaseModel):
    """Parsed manifest. Dependency declarations are kept raw until parsed."""

    model_config = ConfigDict(extra="ignore")

    package: PackageInfo
    dependencies: dict[str, Any] = Field(default_factory=dict)

    def parse_dependencies(self) -> Result[dict[str, DependencySource], DependencyParseError]:
        return parse_dependencies(self.dependencies)


class BaseManifestError(BaseModel):
    """Base manifest error model."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    message: str


class ManifestNotFoundError(BaseManifestError):
    """Manifest file does not exist."""


class ManifestReadError(BaseManifestError):
    """Manifest file could not be read."""


class ManifestParseError(BaseManifestError):
    """Manifest is not valid TOML."""

    line: int | None = None
    column: int | None = None


class ManifestValidationError(BaseManifestError):
    """Manifest does not match the expected schema."""

    field: str | None = None


type ManifestError = ManifestNotFoundError | ManifestReadError | ManifestParseError | ManifestValidationError
