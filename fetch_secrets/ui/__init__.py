"""Terminal-facing helpers."""

from .reporter import ErrorReporter

__all__ = ["ErrorReporter"]
