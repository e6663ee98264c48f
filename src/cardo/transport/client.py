"""HTTP client used to download dependency content."""

from __future__ import annotations

import time
from collections.abc import Callable
from types import TracebackType

import httpx
from result import Err, Ok, Result

from cardo.common import create_logger
from cardo.constants import APP_NAME, DEFAULT_TIMEOUT_SECONDS, VERSION

from .models import NetworkError, NotFoundError, TransportError

logger = create_logger("transport")

type FetchTextResult = Result[str, TransportError]


def backoff_delay(attempt: int) -> int:
    """Seconds to wait after failed attempt number ``attempt`` (0-based)."""
    return 2**attempt


class HttpClient:
    """GET-only HTTP client with optional token authentication and retry.

    Args:
        token: Credential sent as ``Authorization: token <token>`` when set
        timeout: Per-request timeout in seconds
        retry_not_found: Whether a 404 is retried like any other failure
        sleep: Called with the backoff delay between attempts
        transport: Optional httpx transport, mainly for tests
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = f"{APP_NAME}/{VERSION}",
        retry_not_found: bool = True,
        sleep: Callable[[float], None] = time.sleep,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers = {"User-Agent": user_agent}
        if token:
            headers["Authorization"] = f"token {token}"

        self._client = httpx.Client(
            headers=headers,
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )
        self._retry_not_found = retry_not_found
        self._sleep = sleep

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def fetch(self, url: str) -> FetchTextResult:
        try:
            response = self._client.get(url)
        # InvalidURL is not an HTTPError subclass
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return Err(NetworkError(url=url, message=f"Network error: {e}"))

        if response.is_success:
            return Ok(response.text)

        if response.status_code == httpx.codes.NOT_FOUND:
            return Err(NotFoundError(url=url, message=f"File not found: {url}"))

        return Err(
            NetworkError(
                url=url,
                status_code=response.status_code,
                message=f"Network error: HTTP {response.status_code}: {url}",
            )
        )

    def fetch_with_retry(self, url: str, max_retries: int) -> FetchTextResult:
        """Fetch ``url``, retrying up to ``max_retries`` times.

        Makes at most ``max_retries + 1`` attempts, sleeping ``2**attempt``
        seconds after every failed attempt except the last one.
        """
        result: FetchTextResult = Err(NetworkError(url=url, message="Network error: no attempt made"))

        for attempt in range(max_retries + 1):
            result = self.fetch(url)
            if result.is_ok():
                return result

            error = result.unwrap_err()
            if isinstance(error, NotFoundError) and not self._retry_not_found:
                logger.debug("Not retrying missing file", url=url)
                return result

            if attempt < max_retries:
                delay = backoff_delay(attempt)
                logger.warning(
                    "Fetch attempt failed, retrying",
                    url=url,
                    attempt=attempt + 1,
                    delay=delay,
                    error=error.message,
                )
                self._sleep(delay)

        logger.error("Fetch failed after retries", url=url, attempts=max_retries + 1, error=result.unwrap_err().message)
        return result
