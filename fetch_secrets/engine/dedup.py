"""Run-wide deduplication of matched secret strings."""

from __future__ import annotations

from threading import Lock
from typing import Iterable


class DeduplicationStore:
    """First-sighting-wins set keyed purely on matched text.

    The set only grows for the lifetime of one run; there is no eviction.
    """

    def __init__(self, seen: Iterable[str] | None = None) -> None:
        self._seen: set[str] = set(seen or ())
        self._lock = Lock()

    def claim(self, matched_text: str) -> bool:
        """Atomically test-and-insert; True only for the very first claim."""

        with self._lock:
            if matched_text in self._seen:
                return False
            self._seen.add(matched_text)
            return True

    def __contains__(self, matched_text: object) -> bool:
        with self._lock:
            return matched_text in self._seen

    def __len__(self) -> int:
        with self._lock:
            return len(self._seen)


__all__ = ["DeduplicationStore"]
