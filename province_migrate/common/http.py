"""HTTP client with timeouts and a fixed credential header.

Requests are issued exactly once. A failed request surfaces as
``HttpRequestError`` and the caller decides whether it is fatal.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import TracebackType
from typing import Any

import requests

from province_migrate.common.constants import USER_AGENT
from province_migrate.common.errors import StageError


@dataclass(frozen=True)
class TimeoutConfig:
    connect: float = 20.0
    read: float = 60.0


class HttpRequestError(StageError):
    error_code = "HTTP_ERROR"


class HttpClient:
    def __init__(
        self,
        *,
        timeout: TimeoutConfig | None = None,
        default_headers: dict[str, str] | None = None,
    ) -> None:
        self.timeout = timeout or TimeoutConfig()
        self.default_headers = dict(default_headers or {})
        self.session = requests.Session()

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _headers(self, headers: dict[str, str] | None) -> dict[str, str]:
        out = {"User-Agent": USER_AGENT, "Accept": "application/json"}
        out.update(self.default_headers)
        if headers:
            out.update(headers)
        return out

    def _raise_for_status(self, response: requests.Response, url: str) -> None:
        status = response.status_code
        if status >= 400:
            raise HttpRequestError(f"HTTP {status} fetching {url}")

    def request_json(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        timeout: TimeoutConfig | None = None,
    ) -> dict[str, Any]:
        req_timeout = timeout or self.timeout
        try:
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                headers=self._headers(headers),
                timeout=(req_timeout.connect, req_timeout.read),
            )
        except requests.RequestException as exc:
            raise HttpRequestError(f"Request to {url} failed: {exc}") from exc

        self._raise_for_status(response, url)

        try:
            payload = response.json()
        except ValueError as exc:
            raise HttpRequestError(f"Invalid JSON payload from {url}") from exc

        return payload

    def get_json(
        self,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        timeout: TimeoutConfig | None = None,
    ) -> dict[str, Any]:
        return self.request_json(
            "GET",
            url,
            params=params,
            headers=headers,
            timeout=timeout,
        )
