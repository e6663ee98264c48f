"""Fetch outcome models."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict


class FetchResult(BaseModel):
    """Outcome of fetching a single declared dependency."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    success: bool
    error: str | None = None


class FetchSummary(BaseModel):
    """Aggregate counts for one batch."""

    model_config = ConfigDict(frozen=True)

    succeeded: int
    failed: int

    @property
    def ok(self) -> bool:
        return self.failed == 0

    @classmethod
    def from_results(cls, results: Iterable[FetchResult]) -> FetchSummary:
        succeeded = failed = 0
        for result in results:
            if result.success:
                succeeded += 1
            else:
                failed += 1
        return cls(succeeded=succeeded, failed=failed)
