"""Error-reporting sink writing one line per target failure to stderr."""

from __future__ import annotations

from threading import Lock

from rich.console import Console

from ..errors import StatusError


class ErrorReporter:
    """Route per-target errors to stderr, hiding status errors when silent."""

    def __init__(
        self,
        console: Console | None = None,
        silent: bool = False,
        colorless: bool = False,
    ) -> None:
        self.console = console or Console(stderr=True, highlight=False)
        self.silent = silent
        self.colorless = colorless
        self._lock = Lock()

    def should_report(self, error: BaseException) -> bool:
        return not (self.silent and isinstance(error, StatusError))

    def report(self, error: BaseException) -> bool:
        """Write ``error`` unless filtered; return whether it was written."""

        with self._lock:
            if not self.should_report(error):
                return False
            self.console.print(
                f"Error: {error}",
                style=None if self.colorless else "red",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
            return True


__all__ = ["ErrorReporter"]
