"""Primary stdout sink."""

from __future__ import annotations

from threading import Lock

from rich.console import Console

from ..formatter import ResultFormatter
from ..scanner import MatchRecord
from .base import BaseExporter


class ConsoleExporter(BaseExporter):
    """Print one line per record, green unless colorless or JSON."""

    def __init__(
        self,
        formatter: ResultFormatter,
        console: Console | None = None,
        colorless: bool = False,
    ) -> None:
        super().__init__(formatter)
        self.console = console or Console(highlight=False)
        self.colorless = colorless
        self._lock = Lock()

    @property
    def style(self) -> str | None:
        if self.colorless or not self.formatter.colorize:
            return None
        return "green"

    def export(self, record: MatchRecord) -> None:
        line = self.formatter.format(record)
        with self._lock:
            self.console.print(
                line,
                style=self.style,
                markup=False,
                highlight=False,
                soft_wrap=True,
            )


__all__ = ["ConsoleExporter"]
