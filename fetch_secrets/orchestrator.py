"""Pipeline driver wiring fetching, scanning, dedup and export per target."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from typing import Iterable, Sequence

import structlog

from .config import ScanSettings
from .engine import DeduplicationStore, Fetcher, MatchRecord, Pattern, Scanner, ThreadPoolManager
from .engine import get_formatter, mask
from .engine.exporter import BaseExporter, ConsoleExporter, FileExporter
from .errors import FetchError, SinkError
from .logging_conf import configure_logging
from .ui import ErrorReporter


@dataclass(slots=True)
class TargetOutcome:
    """Result of processing one target: emitted records or a failure."""

    url: str
    records: list[MatchRecord] = field(default_factory=list)
    error: Exception | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass(slots=True)
class ScanSummary:
    targets: int = 0
    secrets: int = 0
    failed: int = 0
    suppressed: int = 0

    def as_dict(self) -> dict[str, int]:
        return {
            "targets": self.targets,
            "secrets": self.secrets,
            "failed": self.failed,
            "suppressed": self.suppressed,
        }


class Orchestrator:
    """Run fetch → scan → claim → format → emit for every target.

    At most ``thread_pool.workers`` targets are processed at once. Errors
    are collected from finished tasks and reported from the calling thread,
    so :meth:`run` only returns after every task and every error report has
    completed.
    """

    def __init__(
        self,
        patterns: Sequence[Pattern],
        fetcher: Fetcher,
        dedup_store: DeduplicationStore,
        exporters: Sequence[BaseExporter],
        error_reporter: ErrorReporter,
        thread_pool: ThreadPoolManager,
        scanner: Scanner | None = None,
        mask_visible: int | None = None,
    ) -> None:
        self.patterns = tuple(patterns)
        self.fetcher = fetcher
        self.dedup_store = dedup_store
        self.exporters = tuple(exporters)
        self.error_reporter = error_reporter
        self.thread_pool = thread_pool
        self.scanner = scanner or Scanner()
        self.mask_visible = mask_visible
        self.logger = configure_logging().bind(component="orchestrator")

    @classmethod
    def from_settings(
        cls,
        settings: ScanSettings,
        patterns: Sequence[Pattern],
        *,
        fetcher: Fetcher | None = None,
        stdout_exporter: BaseExporter | None = None,
        error_reporter: ErrorReporter | None = None,
    ) -> "Orchestrator":
        formatter = get_formatter(settings.output_format)
        exporters: list[BaseExporter] = [
            stdout_exporter or ConsoleExporter(formatter, colorless=settings.colorless)
        ]
        if settings.output_file is not None:
            exporters.append(FileExporter(settings.output_file, formatter))
        return cls(
            patterns=patterns,
            fetcher=fetcher
            or Fetcher(
                timeout=settings.timeout,
                user_agent=settings.user_agent,
                max_connections=settings.threads,
            ),
            dedup_store=DeduplicationStore(),
            exporters=exporters,
            error_reporter=error_reporter
            or ErrorReporter(silent=settings.silent, colorless=settings.colorless),
            thread_pool=ThreadPoolManager(settings.threads),
            mask_visible=settings.mask_visible,
        )

    # ------------------------------------------------------------------
    def run(self, targets: Iterable[str]) -> ScanSummary:
        summary = ScanSummary()
        for outcome in self.thread_pool.map_unordered(self.process_target, targets):
            summary.targets += 1
            summary.secrets += len(outcome.records)
            if outcome.error is None:
                continue
            summary.failed += 1
            if not self.error_reporter.report(outcome.error):
                summary.suppressed += 1
        self.logger.info("scan_finished", **summary.as_dict())
        return summary

    def close(self) -> None:
        self.thread_pool.shutdown()
        self.fetcher.close()
        for exporter in self.exporters:
            exporter.close()

    def process_target(self, url: str) -> TargetOutcome:
        outcome = TargetOutcome(url=url)
        try:
            response = self.fetcher.fetch(url)
            candidates = self.scanner.iter_matches(
                response.body, self.patterns, response.started, url
            )
            for record in candidates:
                if not self.dedup_store.claim(record.matched_text):
                    continue
                outcome.records.append(record)
                self.emit(record)
        except FetchError as exc:
            outcome.error = exc
        except Exception as exc:  # noqa: BLE001
            self.logger.exception("target_error", url=url, error=str(exc))
            outcome.error = exc
        return outcome

    def emit(self, record: MatchRecord) -> None:
        """Write ``record`` to every sink; sink failures go to the error stream."""

        self.logger.info("secret_found", pattern=record.pattern_name, url=record.source_url)
        if self.mask_visible is not None:
            record = record.masked(partial(mask, visible=self.mask_visible))
        for exporter in self.exporters:
            try:
                exporter.export(record)
            except SinkError as exc:
                self.logger.error("sink_error", path=str(exc.path), error=str(exc.cause))
                self.error_reporter.report(exc)


__all__ = ["Orchestrator", "ScanSummary", "TargetOutcome"]
