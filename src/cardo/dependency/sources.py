"""Dependency declaration parsing utilities."""

from __future__ import annotations

from collections.abc import Mapping

from result import Err, Ok, Result

from cardo.common import create_logger

from .models import (
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

logger = create_logger("dependency.sources")

GITHUB_PREFIX = "github:"
URL_PREFIXES = ("http://", "https://")

# Ref keys in precedence order
_REF_KEYS = (
    ("tag", TagVersion),
    ("branch", BranchVersion),
    ("rev", CommitVersion),
)

_UNSAFE_SEGMENTS = frozenset({"", ".", ".."})


def parse_source(raw: object) -> Result[DependencySource, DependencyParseError]:
    """Parse a raw declaration value into a typed DependencySource."""
    match raw:
        case str():
            return _parse_string(raw)
        case Mapping():
            return _parse_table(raw)
        case _:
            return Err(InvalidFormatError(message="Dependency must be a string or table"))


def parse_dependencies(
    declarations: Mapping[str, object],
) -> Result[dict[str, DependencySource], DependencyParseError]:
    """Parse every declaration, stopping at the first invalid one.

    The returned error carries the name of the offending dependency.
    """
    parsed: dict[str, DependencySource] = {}

    for name, raw in declarations.items():
        match parse_source(raw):
            case Ok(source):
                parsed[name] = source
            case Err(error):
                logger.error("Invalid dependency declaration", name=name, error=error.message)
                return Err(error.model_copy(update={"name": name}))

    logger.debug("Parsed dependency declarations", count=len(parsed))
    return Ok(parsed)


def _parse_string(value: str) -> Result[DependencySource, DependencyParseError]:
    if value.startswith(GITHUB_PREFIX):
        return _parse_github_path(value.removeprefix(GITHUB_PREFIX), version=None)

    if value.startswith(URL_PREFIXES):
        return Ok(UrlSource(url=value))

    return Err(InvalidFormatError(message=f"Unknown dependency format: {value}"))


def _parse_table(table: Mapping[object, object]) -> Result[DependencySource, DependencyParseError]:
    if "git" not in table:
        return Err(MissingFieldError(field="git", message="Missing required field: git"))

    git_value = table["git"]
    if not isinstance(git_value, str):
        return Err(InvalidFormatError(message="git field must be a string"))

    return _parse_github_path(git_value.removeprefix(GITHUB_PREFIX), version=_parse_version(table))


def _parse_version(table: Mapping[object, object]) -> Version | None:
    for key, version_cls in _REF_KEYS:
        value = table.get(key)
        if isinstance(value, str) and value:
            return version_cls(value=value)
    return None


def _parse_github_path(
    value: str,
    *,
    version: Version | None,
) -> Result[DependencySource, DependencyParseError]:
    # owner/repo/path/to/file.md
    parts = value.split("/")
    if len(parts) < 3:
        return Err(_invalid_github_url(value))

    owner, repo = parts[0], parts[1]
    path = "/".join(parts[2:]).lstrip("/")
    if not owner or not repo or not path:
        return Err(_invalid_github_url(value))

    # No empty, "." or ".." segments
    if any(segment in _UNSAFE_SEGMENTS for segment in path.split("/")):
        return Err(_invalid_github_url(value))

    return Ok(GitHubSource(owner=owner, repo=repo, path=path, version=version))


def _invalid_github_url(value: str) -> InvalidGitHubUrlError:
    return InvalidGitHubUrlError(
        value=value,
        message=f"Expected format: owner/repo/path/to/file.md, got: {value}",
    )
