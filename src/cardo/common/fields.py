"""Reusable Pydantic field annotations."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, StrictStr

NonEmptyString = Annotated[StrictStr, Field(min_length=1, frozen=True)]

# Repository owner or name segment (e.g. "rust-lang", "book")
RepoSegment = Annotated[
    StrictStr,
    Field(
        min_length=1,
        pattern=r"^[^/]+$",
        frozen=True,
        description="Single path segment naming a repository owner or repository",
    ),
]

# Slash-separated file path inside a repository, never absolute
RepoFilePath = Annotated[
    StrictStr,
    Field(
        min_length=1,
        pattern=r"^[^/]",
        frozen=True,
        description="Relative file path inside a repository",
    ),
]

# Direct HTTP/HTTPS location, kept verbatim
DirectUrl = Annotated[
    StrictStr,
    Field(
        pattern=r"^https?://",
        frozen=True,
        description="Direct HTTP/HTTPS URL",
    ),
]

__all__ = [
    "DirectUrl",
    "NonEmptyString",
    "RepoFilePath",
    "RepoSegment",
]
