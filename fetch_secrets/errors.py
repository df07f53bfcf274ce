"""Exception hierarchy shared by the loader, engine and CLI."""

from __future__ import annotations

from pathlib import Path


class FetchSecretsError(Exception):
    """Base class for all errors raised by fetch-secrets."""


class ConfigError(FetchSecretsError):
    """Fatal configuration problem; aborts the run before scanning."""


class PatternCompileError(FetchSecretsError):
    """A single regex source could not be compiled."""

    def __init__(self, name: str, source: str, cause: Exception) -> None:
        super().__init__(f"invalid pattern {name!r}: {cause}")
        self.name = name
        self.source = source
        self.cause = cause


class FetchError(FetchSecretsError):
    """Per-target fetch failure."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class NetworkError(FetchError):
    """DNS, connect, timeout, transport or malformed-request failure."""

    def __init__(self, url: str, cause: Exception) -> None:
        super().__init__(url, f"failed to fetch {url}: {cause}")
        self.cause = cause


class StatusError(FetchError):
    """The server answered with a non-2xx status code."""

    def __init__(self, url: str, code: int) -> None:
        super().__init__(url, f"got status code {code} for URL {url}")
        self.code = code


class SinkError(FetchSecretsError):
    """The optional output file could not be opened or written."""

    def __init__(self, path: Path, cause: Exception) -> None:
        super().__init__(f"error writing output file {path}: {cause}")
        self.path = path
        self.cause = cause


__all__ = [
    "ConfigError",
    "FetchError",
    "FetchSecretsError",
    "NetworkError",
    "PatternCompileError",
    "SinkError",
    "StatusError",
]
