"""Manifest loading and scaffolding."""

from __future__ import annotations

import json
import tomllib
from pathlib import Path

from pydantic import ValidationError
from result import Err, Ok, Result

from cardo.common import create_logger

from .models import (
    Manifest,
    ManifestError,
    ManifestNotFoundError,
    ManifestParseError,
    ManifestReadError,
    ManifestValidationError,
)

logger = create_logger("manifest")

DEFAULT_VERSION = "0.1.0"
DEFAULT_DESCRIPTION = "A collection of Markdown documentation files"


def load_manifest(path: Path) -> Result[Manifest, ManifestError]:
    """Load and validate a manifest from a TOML file."""
    if not path.is_file():
        return Err(ManifestNotFoundError(path=path, message=f"Manifest file not found: {path}"))

    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        return Err(ManifestReadError(path=path, message=f"Failed to read manifest: {exc}"))

    try:
        data = tomllib.loads(raw_text)
    except tomllib.TOMLDecodeError as exc:
        return Err(
            ManifestParseError(
                path=path,
                line=getattr(exc, "lineno", None),
                column=getattr(exc, "colno", None),
                message=f"Failed to parse TOML: {exc}",
            )
        )

    try:
        manifest = Manifest.model_validate(data)
    except ValidationError as exc:
        error_details = exc.errors()
        field = None
        message = str(exc)
        if error_details:
            first = error_details[0]
            loc = first.get("loc") or ()
            field = ".".join(str(part) for part in loc) or None
            message = first.get("msg", message)
        return Err(ManifestValidationError(path=path, field=field, message=f"Invalid manifest: {message}"))

    logger.debug("Manifest loaded", path=str(path), dependencies=len(manifest.dependencies))
    return Ok(manifest)


def render_template(name: str) -> str:
    """Return the text of a new manifest for project ``name``."""
    # JSON string literals are valid TOML basic strings
    return (
        "[package]\n"
        f"name = {json.dumps(name)}\n"
        f"version = {json.dumps(DEFAULT_VERSION)}\n"
        f"description = {json.dumps(DEFAULT_DESCRIPTION)}\n"
        "\n"
        "[dependencies]\n"
    )
