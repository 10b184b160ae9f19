# ABOUTME: HTTP abstractions the NDL scraper depends on.
# ABOUTME: Separates request building from sending, with an httpx-backed default and injectable transport.

from types import TracebackType
from typing import Any, Protocol, runtime_checkable

import httpx

DEFAULT_USER_AGENT = "ndlbook/0.1.0"
DEFAULT_TIMEOUT = 30.0


class TransportError(Exception):
    """Raised when a request to a book data source cannot complete.

    Covers connection failures, timeouts and protocol errors. An HTTP
    response with a non-2xx status is not a transport error. The
    underlying exception is chained as __cause__.
    """


@runtime_checkable
class RequestFactory(Protocol):
    """Protocol for building outbound requests."""

    def build_request(self, method: str, url: str) -> httpx.Request: ...


@runtime_checkable
class RequestSender(Protocol):
    """Protocol for sending a built request.

    Implementations raise httpx.HTTPError for communication faults and
    return the response as-is for any status code. With stream=True the
    body is left unread until the caller reads or closes the response.
    """

    def send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response: ...


class NdlHttpClient:
    """Default request factory and sender for NDL lookups.

    Wraps httpx.Client with a fixed User-Agent, a timeout and redirect
    following. Implements both RequestFactory and RequestSender so one
    instance can be passed for each.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": user_agent},
            "timeout": timeout,
            "follow_redirects": True,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)

    def build_request(self, method: str, url: str) -> httpx.Request:
        return self._client.build_request(method, url)

    def send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response:
        """Send a request and return the response regardless of status.

        A streamed response must be closed by the caller.

        Raises:
            httpx.HTTPError: When the request cannot complete.
        """
        return self._client.send(request, stream=stream)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "NdlHttpClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
