"""Public configuration API for Cardo."""

from __future__ import annotations

from .loader import load_config, load_config_or_default
from .models import (
    CardoConfig,
    ConfigError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigValidationError,
    ConfigYamlError,
    FetchConfig,
)

__all__ = [
    "CardoConfig",
    "ConfigError",
    "ConfigIOError",
    "ConfigNotFoundError",
    "ConfigValidationError",
    "ConfigYamlError",
    "FetchConfig",
    "load_config",
    "load_config_or_default",
]
