"""Loguru setup for cardo.

Run as a CLI, cardo writes its records to a rotating file in the data
directory and keeps the terminal for fetch results. Imported as a library it
stays silent until ``cardo.enable_logging()`` is called.
"""

import sys
from pathlib import Path
from typing import Any, Literal, TextIO

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from cardo.constants import APP_NAME

from .models import AppInfo, AppPaths
from .paths import get_data_directory

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["json", "text"]

# Keyword extras (dependency name, url, path) land in {extra}
TEXT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[scope]}:{function}:{line} - {message} | {extra}"


class LoggingConfig(BaseModel):
    """The ``logging`` section of the global config file."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    log_level: LogLevel = "INFO"
    log_file: Path | None = Field(default=None, description="Defaults to <data dir>/logs/cardo.log")
    rotation: str = "1 MB"
    retention: str = "7 days"
    format: LogFormat = "text"


def setup_cli_logging(app_info: AppInfo, config: LoggingConfig, paths: AppPaths) -> int:
    """Send cardo's records to the CLI log file and return the handler id."""
    log_file = resolve_log_file(config, paths)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    _reset_handlers(scope="cli", env=app_info.environment)
    handler_id = logger.add(
        log_file,
        level=config.log_level,
        rotation=config.rotation,
        retention=config.retention,
        encoding="utf-8",
        diagnose=(app_info.environment == "dev"),
        **_format_options(config.format),
    )

    logger.debug(
        "CLI logging initialized",
        log_file=str(log_file),
        level=config.log_level,
        format=config.format,
    )
    return handler_id


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: LogLevel = "INFO", sink: TextIO | None = None) -> int:
    """Turn on cardo's records for library users.

    Records are written as plain text to ``sink``, or to stderr when no sink is given.
    """
    _reset_handlers(scope=APP_NAME)
    return logger.add(
        sys.stderr if sink is None else sink,
        level=level,
        format=TEXT_FORMAT,
        colorize=False,
    )


def create_logger(scope: str) -> "loguru.Logger":
    return logger.bind(scope=scope)


def resolve_log_file(config: LoggingConfig, paths: AppPaths) -> Path:
    if config.log_file is not None:
        return config.log_file.expanduser()
    return get_default_log_file_path(paths)


def get_default_log_file_path(paths: AppPaths) -> Path:
    return get_data_directory(paths) / paths.logs_dir_name / f"{APP_NAME}.log"


def _reset_handlers(**extra: str) -> None:
    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra=extra)


def _format_options(log_format: LogFormat) -> dict[str, Any]:
    if log_format == "json":
        return {"serialize": True}
    return {"format": TEXT_FORMAT}
