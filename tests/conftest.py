"""Shared fixtures: pattern sets, mock HTTP transports and captured consoles."""

from __future__ import annotations

import io
from typing import Callable, Mapping, Union

import httpx
import pytest
from rich.console import Console

from fetch_secrets.engine import Fetcher

Route = Union[tuple[int, str], Exception]


@pytest.fixture
def pattern_sources() -> dict[str, str]:
    return {
        "AWS Access Key": r"AKIA[0-9A-Z]{16}",
        "Slack Token": r"xox[baprs]-[0-9A-Za-z-]{10,48}",
        "Credit Card": r"\b\d{4}[- ]?\d{4}[- ]?\d{4}[- ]?\d{4}\b",
    }


def build_transport(routes: Mapping[str, Route]) -> httpx.MockTransport:
    """Serve ``routes`` keyed by URL; exceptions are raised as transport errors."""

    def handler(request: httpx.Request) -> httpx.Response:
        route = routes.get(str(request.url))
        if route is None:
            return httpx.Response(404, text="not found")
        if isinstance(route, Exception):
            raise route
        status, body = route
        return httpx.Response(status, text=body)

    return httpx.MockTransport(handler)


@pytest.fixture
def make_fetcher() -> Callable[[Mapping[str, Route]], Fetcher]:
    created: list[Fetcher] = []

    def _builder(routes: Mapping[str, Route]) -> Fetcher:
        fetcher = Fetcher(transport=build_transport(routes))
        created.append(fetcher)
        return fetcher

    yield _builder
    for fetcher in created:
        fetcher.close()


@pytest.fixture
def capture_console() -> Callable[..., tuple[Console, io.StringIO]]:
    def _builder(**kwargs) -> tuple[Console, io.StringIO]:
        buffer = io.StringIO()
        console = Console(file=buffer, width=400, highlight=False, **kwargs)
        return console, buffer

    return _builder


@pytest.fixture
def transport_factory() -> Callable[[Mapping[str, Route]], httpx.MockTransport]:
    return build_transport
