"""Render match records as text, JSON or CSV lines."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from datetime import timedelta

from ..config.models import OutputFormat
from .scanner import MatchRecord


def _trim(value: float) -> str:
    return f"{value:.3f}".rstrip("0").rstrip(".")


def format_duration(elapsed: timedelta) -> str:
    seconds = elapsed.total_seconds()
    if seconds < 0.001:
        return f"{_trim(seconds * 1_000_000)}µs"
    if seconds < 1:
        return f"{_trim(seconds * 1000)}ms"
    return f"{_trim(seconds)}s"


class ResultFormatter(ABC):
    """Uniform formatter contract; one record in, one line out."""

    colorize: bool = True
    header: str | None = None

    @abstractmethod
    def format(self, record: MatchRecord) -> str:
        """Return the single-line rendering of ``record``."""


class TextFormatter(ResultFormatter):
    def format(self, record: MatchRecord) -> str:
        return (
            f"[+] Type: {record.pattern_name}, Data: {record.matched_text}, "
            f"URL: {record.source_url} (Found in: {format_duration(record.elapsed)})"
        )


class JSONFormatter(ResultFormatter):
    """JSON object per line; ``duration`` is in seconds."""

    colorize = False

    def format(self, record: MatchRecord) -> str:
        return json.dumps(
            {
                "type": record.pattern_name,
                "data": record.matched_text,
                "url": record.source_url,
                "duration": record.elapsed.total_seconds(),
            },
            ensure_ascii=False,
        )

    @staticmethod
    def parse(line: str) -> MatchRecord:
        payload = json.loads(line)
        return MatchRecord(
            pattern_name=payload["type"],
            matched_text=payload["data"],
            source_url=payload["url"],
            elapsed=timedelta(seconds=payload["duration"]),
        )


class CSVFormatter(ResultFormatter):
    """Comma-joined fields. Values containing commas are written unescaped."""

    header = "Type,Data,URL,Duration"

    def format(self, record: MatchRecord) -> str:
        return ",".join(
            (
                record.pattern_name,
                record.matched_text,
                record.source_url,
                format_duration(record.elapsed),
            )
        )


_FORMATTERS: dict[OutputFormat, type[ResultFormatter]] = {
    OutputFormat.TEXT: TextFormatter,
    OutputFormat.JSON: JSONFormatter,
    OutputFormat.CSV: CSVFormatter,
}


def get_formatter(fmt: OutputFormat | str) -> ResultFormatter:
    return _FORMATTERS[OutputFormat(fmt)]()


__all__ = [
    "CSVFormatter",
    "JSONFormatter",
    "ResultFormatter",
    "TextFormatter",
    "format_duration",
    "get_formatter",
]
