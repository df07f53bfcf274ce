"""Append-only file sink shared by all worker threads."""

from __future__ import annotations

from pathlib import Path
from threading import Lock

from ...errors import SinkError
from ..formatter import ResultFormatter
from ..scanner import MatchRecord
from .base import BaseExporter


class FileExporter(BaseExporter):
    """Append each record to ``path`` with open-append-close per write.

    Writes are serialised by a lock so lines from different threads never
    interleave. When the formatter declares a header and the file is empty at
    write time, the header is written first.
    """

    def __init__(self, path: Path, formatter: ResultFormatter) -> None:
        super().__init__(formatter)
        self.path = path
        self._lock = Lock()

    def export(self, record: MatchRecord) -> None:
        line = self.formatter.format(record)
        with self._lock:
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                empty = not self.path.exists() or self.path.stat().st_size == 0
                with self.path.open("a", encoding="utf-8", newline="") as stream:
                    if self.formatter.header and empty:
                        stream.write(self.formatter.header + "\n")
                    stream.write(line + "\n")
            except OSError as exc:
                raise SinkError(self.path, exc) from exc


__all__ = ["FileExporter"]
