"""HTTP transport with bounded exponential-backoff retry."""

from .client import HttpClient, backoff_delay
from .models import NetworkError, NotFoundError, TransportError

__all__ = [
    "HttpClient",
    "NetworkError",
    "NotFoundError",
    "TransportError",
    "backoff_delay",
]
