"""Path discovery utilities for Cardo."""

from __future__ import annotations

import os
from pathlib import Path

from .models import AppPaths


def resolve_working_directory(working_dir: Path | None) -> Path:
    base = working_dir or Path.cwd()
    if base.is_file():
        base = base.parent
    try:
        return base.resolve(strict=False)
    except OSError:
        return base


def get_global_config_root(paths: AppPaths) -> Path:
    """Get global config root directory.

    Returns ~/.config/{app_name} (or XDG_CONFIG_HOME/{app_name} if set).
    """
    xdg_base = os.getenv("XDG_CONFIG_HOME")
    base_dir = Path(xdg_base).expanduser() if xdg_base else Path.home() / ".config"
    return base_dir / paths.config_dir_name


def get_global_config_path(paths: AppPaths) -> Path:
    return get_global_config_root(paths) / paths.global_config_filename


def get_data_directory(paths: AppPaths) -> Path:
    """Get XDG data directory.

    Returns ~/.local/share/{app_name} (or XDG_DATA_HOME/{app_name} if set).
    """
    xdg_data = os.getenv("XDG_DATA_HOME")
    base_dir = Path(xdg_data).expanduser() if xdg_data else Path.home() / ".local" / "share"
    return base_dir / paths.data_dir_name


def find_manifest(start_dir: Path | None, paths: AppPaths) -> Path | None:
    """Find the manifest file for the current project.

    Looks in the start directory first, then in its immediate parent.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)
        paths: Application path settings

    Returns:
        Path to the manifest, or None if not found
    """
    start = resolve_working_directory(start_dir)

    for directory in (start, start.parent):
        candidate = directory / paths.manifest_filename
        if candidate.is_file():
            return candidate
    return None
