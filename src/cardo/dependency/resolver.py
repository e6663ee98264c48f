"""Fetch URL and output path resolution for dependency sources."""

from __future__ import annotations

from cardo.constants import DEFAULT_FILE_NAME, DEFAULT_REF, GITHUB_RAW_BASE_URL

from .models import DependencySource, GitHubSource, UrlSource, Version


def fetch_url(source: DependencySource) -> str:
    """Return the URL the content of ``source`` is downloaded from."""
    match source:
        case GitHubSource(owner=owner, repo=repo, path=path, version=version):
            ref = version.value if version is not None else DEFAULT_REF
            return f"{GITHUB_RAW_BASE_URL}/{owner}/{repo}/{ref}/{path}"
        case UrlSource(url=url):
            return url


def file_name(source: DependencySource) -> str:
    match source:
        case GitHubSource(path=path):
            return _last_segment(path)
        case UrlSource(url=url):
            return _last_segment(url)


def output_path(source: DependencySource) -> str:
    """Return the destination of ``source`` relative to the output directory.

    Repository files land under ``{owner}-{repo}/`` keeping their directory
    layout, so files from different repositories never collide. Direct URLs
    land at the root under their file name.
    """
    match source:
        case GitHubSource(owner=owner, repo=repo, path=path):
            repo_dir = f"{owner}-{repo}"
            if "/" in path:
                directory = path.rsplit("/", 1)[0]
                repo_dir = f"{repo_dir}/{directory}"
            return f"{repo_dir}/{file_name(source)}"
        case UrlSource():
            return file_name(source)


def describe(source: DependencySource) -> str:
    match source:
        case GitHubSource(owner=owner, repo=repo, path=path, version=version):
            return f"github:{owner}/{repo}/{path} ({describe_version(version)})"
        case UrlSource(url=url):
            return url


def describe_version(version: Version | None) -> str:
    if version is None:
        return DEFAULT_REF
    return f"{version.kind}:{version.value}"


def _last_segment(value: str) -> str:
    segment = value.rsplit("/", 1)[-1]
    if segment in ("", ".", ".."):
        return DEFAULT_FILE_NAME
    return segment
