"""Exporter Service Provider Interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..formatter import ResultFormatter
from ..scanner import MatchRecord


class BaseExporter(ABC):
    """Uniform sink contract for formatted match records."""

    def __init__(self, formatter: ResultFormatter) -> None:
        self.formatter = formatter

    @abstractmethod
    def export(self, record: MatchRecord) -> None:
        """Emit a single record."""

    def close(self) -> None:
        """Release underlying resources."""


__all__ = ["BaseExporter"]
