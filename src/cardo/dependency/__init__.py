"""Dependency declarations: parsing and location resolution."""

from .models import (
    BaseDependencyError,
    BranchVersion,
    CommitVersion,
    DependencyParseError,
    DependencySource,
    GitHubSource,
    InvalidFormatError,
    InvalidGitHubUrlError,
    MissingFieldError,
    TagVersion,
    UrlSource,
    Version,
)
from .resolver import describe, fetch_url, file_name, output_path
from .sources import parse_dependencies, parse_source

__all__ = [
    "BaseDependencyError",
    "BranchVersion",
    "CommitVersion",
    "DependencyParseError",
    "DependencySource",
    "GitHubSource",
    "InvalidFormatError",
    "InvalidGitHubUrlError",
    "MissingFieldError",
    "TagVersion",
    "UrlSource",
    "Version",
    "describe",
    "fetch_url",
    "file_name",
    "output_path",
    "parse_dependencies",
    "parse_source",
]
