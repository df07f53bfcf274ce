"""Scan fetched bodies against the compiled pattern set."""

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from datetime import timedelta
from typing import Callable, Iterable, Iterator

from .patterns import Pattern


@dataclass(frozen=True, slots=True)
class MatchRecord:
    """One occurrence of matched text found under a pattern."""

    pattern_name: str
    matched_text: str
    source_url: str
    elapsed: timedelta

    def masked(self, masker: Callable[[str], str]) -> "MatchRecord":
        return replace(self, matched_text=masker(self.matched_text))


class Scanner:
    """Produce match candidates; deduplication is left to the caller."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock

    def iter_matches(
        self, body: bytes | str, patterns: Iterable[Pattern], started: float, url: str
    ) -> Iterator[MatchRecord]:
        """Yield every accepted match, pattern by pattern.

        Byte bodies are decoded as UTF-8 with invalid sequences replaced by
        U+FFFD, so a match spanning such bytes carries the replacement
        character in its text and dedup key. Surrogate escapes would keep the
        raw bytes but could not be written to a UTF-8 console or file.
        """

        content = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
        for pattern in patterns:
            for match in pattern.regex.finditer(content):
                candidate = match.group(0)
                if not pattern.accepts(candidate):
                    continue
                yield MatchRecord(
                    pattern_name=pattern.name,
                    matched_text=candidate,
                    source_url=url,
                    elapsed=timedelta(seconds=self._clock() - started),
                )

    def scan(
        self, body: bytes | str, patterns: Iterable[Pattern], started: float, url: str = ""
    ) -> list[MatchRecord]:
        return list(self.iter_matches(body, patterns, started, url))


__all__ = ["MatchRecord", "Scanner"]
