"""HTTP fetching for scan targets."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Dict

import httpx
import structlog

from ..config.models import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from ..errors import NetworkError, StatusError


@dataclass(slots=True)
class FetchResponse:
    """Standardised response wrapper."""

    url: str
    status_code: int
    body: bytes
    started: float
    elapsed: float
    headers: Dict[str, str] = field(default_factory=dict, repr=False)

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class Fetcher:
    """Perform one GET per target with a fixed timeout and no TLS verification.

    Peer verification is disabled on purpose so internal and self-signed
    hosts can be scanned. The underlying ``httpx.Client`` is thread-safe and
    shared by all worker threads; every response is read in full before
    :meth:`fetch` returns, which releases its connection back to the pool.

    ``timeout`` bounds each blocking step as well as the whole fetch: the
    body is streamed and the read is abandoned once ``timeout`` seconds have
    passed since the request was sent.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        max_connections: int | None = None,
        transport: httpx.BaseTransport | None = None,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self.logger = logger or structlog.get_logger("fetch_secrets.fetcher")
        limits = httpx.Limits(max_connections=max_connections) if max_connections else None
        client_kwargs: dict = {
            "follow_redirects": True,
            "timeout": timeout,
            "verify": False,
            "headers": {"User-Agent": user_agent},
        }
        if limits is not None:
            client_kwargs["limits"] = limits
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "Fetcher":
        return self

    def __exit__(self, *_exc_info) -> None:
        self.close()

    def fetch(self, url: str) -> FetchResponse:
        """Return the body of ``url`` or raise ``NetworkError``/``StatusError``."""

        request = self._build_request(url)
        started = time.monotonic()
        deadline = started + self.timeout
        try:
            response = self._client.send(request, stream=True)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            self.logger.debug("fetch_error", url=url, error=str(exc))
            raise NetworkError(url, exc) from exc
        try:
            if not response.is_success:
                self.logger.debug("fetch_status", url=url, status=response.status_code)
                raise StatusError(url, response.status_code)
            body = self._read_body(url, request, response, deadline)
        finally:
            response.close()
        return FetchResponse(
            url=url,
            status_code=response.status_code,
            body=body,
            started=started,
            elapsed=time.monotonic() - started,
            headers=dict(response.headers),
        )

    def _read_body(
        self, url: str, request: httpx.Request, response: httpx.Response, deadline: float
    ) -> bytes:
        # httpx timeouts are per phase; the whole fetch shares one deadline.
        chunks: list[bytes] = []
        try:
            for chunk in response.iter_bytes():
                chunks.append(chunk)
                self._check_deadline(request, deadline)
            self._check_deadline(request, deadline)
        except httpx.HTTPError as exc:
            self.logger.debug("fetch_error", url=url, error=str(exc))
            raise NetworkError(url, exc) from exc
        return b"".join(chunks)

    @staticmethod
    def _check_deadline(request: httpx.Request, deadline: float) -> None:
        if time.monotonic() > deadline:
            raise httpx.ReadTimeout("total timeout exceeded", request=request)

    def _build_request(self, url: str) -> httpx.Request:
        try:
            request = self._client.build_request("GET", url)
        except httpx.InvalidURL as exc:
            raise NetworkError(url, exc) from exc
        if request.url.scheme not in ("http", "https") or not request.url.host:
            raise NetworkError(
                url,
                httpx.UnsupportedProtocol(
                    "Request URL is missing an 'http://' or 'https://' protocol."
                ),
            )
        return request


__all__ = ["FetchResponse", "Fetcher"]
