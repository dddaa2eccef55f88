"""HTTP client abstraction for the release API.

This module provides:
- HttpClient: Protocol for HTTP operations (injectable for tests)
- RealHttpClient: Real implementation using urllib
- MockHttpClient: Mock implementation for testing

Any HTTP status the server answers with, 4xx and 5xx included, comes back
as an ``Ok(HttpResponse)`` carrying the raw body. Only failures to build or
deliver the request are an ``Err(HttpError)``. Callers judge the status.
"""

from __future__ import annotations

import http.client
import json
import ssl
import urllib.error
import urllib.request
from collections.abc import Mapping
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Literal, Protocol, runtime_checkable

from ghrelease import __version__
from ghrelease.core.result import Err, Ok, Result

__all__ = [
    "HttpClient",
    "HttpError",
    "HttpErrorKind",
    "HttpResponse",
    "MockHttpClient",
    "RealHttpClient",
    "RecordedRequest",
]

HttpErrorKind = Literal["request", "transport"]


@dataclass(frozen=True, slots=True)
class HttpError:
    """A request that never produced an HTTP response.

    Attributes:
        url: The URL that failed
        message: Underlying cause text
        kind: ``request`` if the request could not be constructed (bad URL),
            ``transport`` for DNS, TCP, TLS, timeout and malformed-response failures
    """

    url: str
    message: str
    kind: HttpErrorKind = "transport"

    def __str__(self) -> str:
        return f"{self.message} ({self.url})"


@dataclass(frozen=True, slots=True)
class HttpResponse:
    """A completed HTTP exchange, whatever its status."""

    url: str
    status: int
    reason: str
    body: bytes = b""

    @property
    def status_line(self) -> str:
        """Status code and reason phrase, e.g. ``422 Unprocessable Entity``."""
        if self.reason:
            return f"{self.status} {self.reason}"
        return str(self.status)

    def text(self) -> str:
        """Body decoded as UTF-8, undecodable bytes replaced."""
        return self.body.decode("utf-8", errors="replace")


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP operations.

    This abstraction allows injecting mock clients for testing,
    avoiding real network calls in unit tests.
    """

    def post(
        self,
        url: str,
        body: bytes,
        headers: Mapping[str, str],
    ) -> Result[HttpResponse, HttpError]:
        """Send a POST request.

        Args:
            url: Target URL
            body: Raw request body
            headers: Request headers (User-Agent is added by the client)

        Returns:
            Ok with the response (any status), or Err with HttpError
        """
        ...


class RealHttpClient:
    """Real HTTP client using urllib.

    Handles:
    - HTTPS with system certificates
    - Error statuses returned as responses, body included
    - Timeout handling
    """

    def __init__(
        self,
        timeout: float = 60.0,
        user_agent: str = f"ghrelease/{__version__}",
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._ssl_context = ssl.create_default_context()

    def post(
        self,
        url: str,
        body: bytes,
        headers: Mapping[str, str],
    ) -> Result[HttpResponse, HttpError]:
        try:
            req = urllib.request.Request(
                url,
                data=body,
                headers={"User-Agent": self.user_agent, **headers},
                method="POST",
            )
        except ValueError as e:
            return Err(HttpError(url=url, message=str(e), kind="request"))

        try:
            with urllib.request.urlopen(
                req,
                timeout=self.timeout,
                context=self._ssl_context,
            ) as response:
                return Ok(
                    HttpResponse(
                        url=url,
                        status=response.status,
                        reason=response.reason or "",
                        body=response.read(),
                    )
                )
        except urllib.error.HTTPError as e:
            # Error statuses still carry the platform's explanation in the body.
            try:
                error_body = e.read()
            except (OSError, http.client.HTTPException):
                error_body = b""
            return Ok(HttpResponse(url=url, status=e.code, reason=str(e.reason), body=error_body))
        except urllib.error.URLError as e:
            return Err(HttpError(url=url, message=str(e.reason)))
        except http.client.HTTPException as e:
            # Malformed status line or truncated body; urllib does not wrap these.
            return Err(HttpError(url=url, message=str(e) or type(e).__name__))
        except TimeoutError:
            return Err(HttpError(url=url, message="Request timed out"))
        except ValueError as e:
            return Err(HttpError(url=url, message=str(e), kind="request"))
        except OSError as e:
            return Err(HttpError(url=url, message=str(e)))


@dataclass(frozen=True, slots=True)
class RecordedRequest:
    """A request seen by MockHttpClient."""

    url: str
    body: bytes
    headers: dict[str, str]


def _empty_calls() -> list[RecordedRequest]:
    return []


@dataclass
class MockHttpClient:
    """Mock HTTP client for testing.

    Responses are queued per URL and served in order; the last one is
    repeated once the queue is down to a single entry. Unknown URLs answer
    ``404 Not Found``.

    Usage:
        client = MockHttpClient()
        client.set_json("https://api.example.com/repos/o/r/releases", 201, {...})
        result = client.post("https://api.example.com/repos/o/r/releases", b"{}", {})
        assert result.value.status == 201
    """

    calls: list[RecordedRequest] = field(default_factory=_empty_calls)
    _responses: dict[str, list[HttpResponse | HttpError]] = field(default_factory=dict)

    def set_response(
        self,
        url: str,
        status: int,
        body: bytes | str = b"",
        reason: str | None = None,
    ) -> None:
        """Queue a response for URL."""
        if isinstance(body, str):
            body = body.encode("utf-8")
        if reason is None:
            reason = _reason_phrase(status)
        self._queue(url, HttpResponse(url=url, status=status, reason=reason, body=body))

    def set_json(self, url: str, status: int, data: object) -> None:
        """Queue a JSON response for URL."""
        self.set_response(url, status, json.dumps(data))

    def set_error(self, url: str, error: HttpError) -> None:
        """Queue a transport or request failure for URL."""
        self._queue(url, error)

    def post(
        self,
        url: str,
        body: bytes,
        headers: Mapping[str, str],
    ) -> Result[HttpResponse, HttpError]:
        self.calls.append(RecordedRequest(url=url, body=body, headers=dict(headers)))

        queue = self._responses.get(url)
        if not queue:
            return Ok(HttpResponse(url=url, status=404, reason="Not Found", body=b"{}"))

        response = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(response, HttpError):
            return Err(response)
        return Ok(response)

    # Test helper methods

    @property
    def urls(self) -> list[str]:
        """URLs of all recorded requests, in order."""
        return [c.url for c in self.calls]

    def _queue(self, url: str, response: HttpResponse | HttpError) -> None:
        self._responses.setdefault(url, []).append(response)


def _reason_phrase(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return ""
