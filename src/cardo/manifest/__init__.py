"""Manifest (markdown.toml) loading."""

from .loader import load_manifest, render_template
from .models import (
    Manifest,
    ManifestError,
    ManifestNotFoundError,
    ManifestParseError,
    ManifestReadError,
    ManifestValidationError,
    PackageInfo,
)

__all__ = [
    "Manifest",
    "ManifestError",
    "ManifestNotFoundError",
    "ManifestParseError",
    "ManifestReadError",
    "ManifestValidationError",
    "PackageInfo",
    "load_manifest",
    "render_template",
]
