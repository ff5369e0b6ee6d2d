"""HTTP adapter – HttpTransport port and the httpx-backed implementation."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Protocol

import httpx

from kc_adapter.kernel.errors import TransportError
from kc_adapter.observability.logging import get_logger

_log = get_logger(__name__)

RequestBody = Mapping[str, Any] | str


@dataclasses.dataclass(frozen=True)
class HttpResponse:
    """Status code plus JSON-decoded body (``None`` when there is none)."""

    status_code: int
    body: Any = None
    reason: str = ""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class HttpTransport(Protocol):
    """Port: blocking HTTP calls returning decoded responses.

    A mapping body is form-encoded; a ``str`` body is sent verbatim (used for
    pre-serialised JSON). Non-2xx statuses are returned, never raised.
    """

    def post(self, url: str, headers: Mapping[str, str], body: RequestBody) -> HttpResponse: ...
    def get(self, url: str, headers: Mapping[str, str]) -> HttpResponse: ...


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


class HttpxTransport:
    """Thin synchronous httpx wrapper with transport error mapping."""

    def __init__(self, timeout: float = 10.0, **kwargs: Any) -> None:
        self._client = httpx.Client(timeout=timeout, **kwargs)

    def __enter__(self) -> "HttpxTransport":
        self._client.__enter__()
        return self

    def __exit__(self, *args: Any) -> None:
        self._client.__exit__(*args)

    def close(self) -> None:
        self._client.close()

    def post(self, url: str, headers: Mapping[str, str], body: RequestBody) -> HttpResponse:
        if isinstance(body, str):
            return self._request("POST", url, headers=dict(headers), content=body)
        return self._request("POST", url, headers=dict(headers), data=dict(body))

    def get(self, url: str, headers: Mapping[str, str]) -> HttpResponse:
        return self._request("GET", url, headers=dict(headers))

    def _request(self, method: str, url: str, **kwargs: Any) -> HttpResponse:
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.TimeoutException as exc:
            _log.warning("http.timeout", method=method, url=url)
            raise TransportError(url, f"HTTP request timed out: {method} {url}", cause=exc) from exc
        except httpx.HTTPError as exc:
            _log.warning("http.error", method=method, url=url, error=str(exc))
            raise TransportError(url, f"HTTP request failed: {method} {url}: {exc}", cause=exc) from exc
        return HttpResponse(
            status_code=response.status_code,
            body=_decode_body(response),
            reason=response.reason_phrase,
        )


__all__ = ["HttpResponse", "HttpTransport", "HttpxTransport", "RequestBody"]
