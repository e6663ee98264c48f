"""Transport protocol consumed by the fetcher."""

from __future__ import annotations

from typing import Protocol

from result import Result

from cardo.transport import TransportError


class TextFetcher(Protocol):
    """Anything able to download text with retry."""

    def fetch_with_retry(self, url: str, max_retries: int) -> Result[str, TransportError]:
        """Fetch ``url`` as text, retrying up to ``max_retries`` times."""
        ...
