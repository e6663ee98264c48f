from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest
from result import is_err, is_ok

from cardo.transport import HttpClient, NetworkError, NotFoundError, backoff_delay

URL = "https://raw.githubusercontent.com/owner/repo/main/a/b.md"


class RecordingSleep:
    def __init__(self) -> None:
        self.delays: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


class CountingHandler:
    """MockTransport handler answering from a list of responses, repeating the last one."""

    def __init__(self, *responses: httpx.Response | Exception) -> None:
        self._responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = min(len(self.requests), len(self._responses)) - 1
        response = self._responses[index]
        if isinstance(response, Exception):
            raise response
        return response


def _client(
    handler: Callable[[httpx.Request], httpx.Response],
    *,
    token: str | None = None,
    retry_not_found: bool = True,
) -> tuple[HttpClient, RecordingSleep]:
    sleep = RecordingSleep()
    client = HttpClient(
        token,
        retry_not_found=retry_not_found,
        sleep=sleep,
        transport=httpx.MockTransport(handler),
    )
    return client, sleep


def test_fetch_returns_body_on_success() -> None:
    handler = CountingHandler(httpx.Response(200, text="# Title\n"))
    client, _ = _client(handler)

    result = client.fetch(URL)

    assert is_ok(result)
    assert result.unwrap() == "# Title\n"
    assert str(handler.requests[0].url) == URL


def test_fetch_classifies_404_as_not_found() -> None:
    client, _ = _client(CountingHandler(httpx.Response(404)))

    result = client.fetch(URL)

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, NotFoundError)
    assert error.url == URL


@pytest.mark.parametrize("status", [500, 502, 403, 429])
def test_fetch_classifies_other_statuses_as_network_error(status: int) -> None:
    client, _ = _client(CountingHandler(httpx.Response(status)))

    result = client.fetch(URL)

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, NetworkError)
    assert error.status_code == status
    assert str(status) in error.message


def test_fetch_wraps_transport_failures() -> None:
    client, _ = _client(CountingHandler(httpx.ConnectError("connection refused")))

    result = client.fetch(URL)

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, NetworkError)
    assert error.status_code is None
    assert "connection refused" in error.message


def test_fetch_reports_malformed_url_as_network_error() -> None:
    handler = CountingHandler(httpx.Response(200, text="unreachable"))
    client, _ = _client(handler)

    result = client.fetch_with_retry("https://exa:mple/x.md", max_retries=1)

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, NetworkError)
    assert error.status_code is None
    assert handler.requests == []


def test_fetch_sends_token_header() -> None:
    handler = CountingHandler(httpx.Response(200, text="ok"))
    client, _ = _client(handler, token="secret")

    client.fetch(URL)

    assert handler.requests[0].headers["Authorization"] == "token secret"


def test_fetch_omits_authorization_without_token() -> None:
    handler = CountingHandler(httpx.Response(200, text="ok"))
    client, _ = _client(handler)

    client.fetch(URL)

    assert "Authorization" not in handler.requests[0].headers
    assert handler.requests[0].headers["User-Agent"].startswith("cardo/")


def test_backoff_delay_doubles() -> None:
    assert [backoff_delay(attempt) for attempt in range(4)] == [1, 2, 4, 8]


def test_fetch_with_retry_exhausts_attempts_and_sleeps_between() -> None:
    handler = CountingHandler(httpx.Response(500))
    client, sleep = _client(handler)

    result = client.fetch_with_retry(URL, max_retries=3)

    assert is_err(result)
    assert isinstance(result.unwrap_err(), NetworkError)
    assert len(handler.requests) == 4
    assert sleep.delays == [1, 2, 4]
    assert sum(sleep.delays) == 7


def test_fetch_with_retry_returns_most_recent_error() -> None:
    handler = CountingHandler(httpx.Response(500), httpx.Response(503))
    client, _ = _client(handler)

    result = client.fetch_with_retry(URL, max_retries=1)

    assert result.unwrap_err().status_code == 503


def test_fetch_with_retry_stops_on_first_success() -> None:
    handler = CountingHandler(httpx.Response(502), httpx.Response(200, text="hello"))
    client, sleep = _client(handler)

    result = client.fetch_with_retry(URL, max_retries=3)

    assert result.unwrap() == "hello"
    assert len(handler.requests) == 2
    assert sleep.delays == [1]


def test_fetch_with_retry_zero_retries_makes_single_attempt() -> None:
    handler = CountingHandler(httpx.Response(500))
    client, sleep = _client(handler)

    result = client.fetch_with_retry(URL, max_retries=0)

    assert is_err(result)
    assert len(handler.requests) == 1
    assert sleep.delays == []


def test_fetch_with_retry_retries_not_found_by_default() -> None:
    handler = CountingHandler(httpx.Response(404))
    client, sleep = _client(handler)

    result = client.fetch_with_retry(URL, max_retries=3)

    assert isinstance(result.unwrap_err(), NotFoundError)
    assert len(handler.requests) == 4
    assert sleep.delays == [1, 2, 4]


def test_fetch_with_retry_can_treat_not_found_as_terminal() -> None:
    handler = CountingHandler(httpx.Response(404))
    client, sleep = _client(handler, retry_not_found=False)

    result = client.fetch_with_retry(URL, max_retries=3)

    assert isinstance(result.unwrap_err(), NotFoundError)
    assert len(handler.requests) == 1
    assert sleep.delays == []


def test_terminal_not_found_still_retries_network_errors() -> None:
    handler = CountingHandler(httpx.Response(500), httpx.Response(404))
    client, sleep = _client(handler, retry_not_found=False)

    result = client.fetch_with_retry(URL, max_retries=3)

    assert isinstance(result.unwrap_err(), NotFoundError)
    assert len(handler.requests) == 2
    assert sleep.delays == [1]


def test_client_closes_as_context_manager() -> None:
    handler = CountingHandler(httpx.Response(200, text="ok"))
    client, _ = _client(handler)

    with client as active:
        assert active.fetch(URL).unwrap() == "ok"

    assert client._client.is_closed
