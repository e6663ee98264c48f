"""Common models and types used across Cardo modules."""

from .fields import DirectUrl, NonEmptyString, RepoFilePath, RepoSegment
from .logging import (
    LoggingConfig,
    create_logger,
    disable_library_logging,
    enable_library_logging,
    get_default_log_file_path,
    resolve_log_file,
    setup_cli_logging,
)
from .models import AppInfo, AppPaths
from .paths import (
    find_manifest,
    get_data_directory,
    get_global_config_path,
    get_global_config_root,
    resolve_working_directory,
)

__all__ = [
    "AppInfo",
    "AppPaths",
    "DirectUrl",
    "LoggingConfig",
    "NonEmptyString",
    "RepoFilePath",
    "RepoSegment",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "find_manifest",
    "get_data_directory",
    "get_default_log_file_path",
    "get_global_config_path",
    "get_global_config_root",
    "resolve_log_file",
    "resolve_working_directory",
    "setup_cli_logging",
]
