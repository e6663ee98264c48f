"""Transport error models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TransportError(BaseModel):
    """Base transport error."""

    model_config = ConfigDict(extra="forbid")

    url: str
    message: str


class NotFoundError(TransportError):
    """Remote location answered 404."""


class NetworkError(TransportError):
    """Non-2xx response or transport-level failure."""

    status_code: int | None = None
