"""Data and error models for dependency declarations."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from cardo.common import DirectUrl, NonEmptyString, RepoFilePath, RepoSegment


class TagVersion(BaseModel):
    """Pin to a tag."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["tag"] = "tag"
    value: NonEmptyString


class BranchVersion(BaseModel):
    """Pin to a branch."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["branch"] = "branch"
    value: NonEmptyString


class CommitVersion(BaseModel):
    """Pin to a commit."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["commit"] = "commit"
    value: NonEmptyString


Version = TagVersion | BranchVersion | CommitVersion


class GitHubSource(BaseModel):
    """File inside a GitHub repository, optionally pinned to a ref."""

    model_config = ConfigDict(frozen=True)

    type: Literal["github"] = "github"
    owner: RepoSegment
    repo: RepoSegment
    path: RepoFilePath
    version: Version | None = None


class UrlSource(BaseModel):
    """Direct HTTP(S) location."""

    model_config = ConfigDict(frozen=True)

    type: Literal["url"] = "url"
    url: DirectUrl


DependencySource = GitHubSource | UrlSource


class BaseDependencyError(BaseModel):
    """Base dependency error model."""

    model_config = ConfigDict(extra="forbid")

    message: str
    name: str | None = None

    def describe(self) -> str:
        if self.name is None:
            return self.message
        return f"{self.name}: {self.message}"


class InvalidFormatError(BaseDependencyError):
    """Declaration has an unsupported shape or prefix."""


class InvalidGitHubUrlError(BaseDependencyError):
    """GitHub short path is not owner/repo/path."""

    value: str


class MissingFieldError(BaseDependencyError):
    """Table declaration lacks a required key."""

    field: str


type DependencyParseError = InvalidFormatError | InvalidGitHubUrlError | MissingFieldError


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
]
