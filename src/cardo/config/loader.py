"""Configuration file loading and validation helpers."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError
from result import Err, Ok, Result

from .models import (
    CardoConfig,
    ConfigError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigValidationError,
    ConfigYamlError,
)


def load_config(path: Path) -> Result[CardoConfig, ConfigError]:
    """Load and validate the global config from a YAML file."""
    if not path.exists() or not path.is_file():
        return Err(
            ConfigNotFoundError(
                expected_path=path,
                message="Configuration file not found.",
            ),
        )

    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        return Err(ConfigIOError(path=path, message=str(exc)))

    try:
        data = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        line = getattr(mark, "line", None)
        column = getattr(mark, "column", None)
        return Err(
            ConfigYamlError(
                path=path,
                line=(line + 1) if line is not None else None,
                column=(column + 1) if column is not None else None,
                message=str(exc),
            ),
        )

    if data is None:
        data = {}

    if not isinstance(data, dict):
        return Err(
            ConfigValidationError(
                path=path,
                field=None,
                message="Configuration root must be a mapping of keys to values.",
            ),
        )

    try:
        config = CardoConfig.model_validate(data)
    except ValidationError as exc:
        error_details = exc.errors()
        field = None
        message = str(exc)
        if error_details:
            first = error_details[0]
            loc = first.get("loc") or ()
            field = ".".join(str(part) for part in loc) or None
            message = first.get("msg", message)
        return Err(ConfigValidationError(path=path, field=field, message=message))

    return Ok(config)


def load_config_or_default(path: Path) -> Result[CardoConfig, ConfigError]:
    """Like load_config, but a missing file yields the default configuration."""
    result = load_config(path)
    if isinstance(result.err(), ConfigNotFoundError):
        return Ok(CardoConfig())
    return result
