"""Pattern set compilation plus optional value validators and masking."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Mapping

import structlog

from ..errors import PatternCompileError

Validator = Callable[[str], bool]

_CARD_NAME = re.compile(r"credit[\s_-]?card|card[\s_-]?number", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class Pattern:
    """A named, compiled secret shape."""

    name: str
    regex: re.Pattern[str]
    validator: Validator | None = field(default=None, compare=False)

    def accepts(self, candidate: str) -> bool:
        return self.validator is None or self.validator(candidate)


def luhn_check(number: str) -> bool:
    """Return True when ``number`` passes the Luhn checksum."""

    digits = number.replace(" ", "").replace("-", "")
    if not digits or not all(char in "0123456789" for char in digits):
        return False
    total = 0
    for index, char in enumerate(reversed(digits)):
        value = int(char)
        if index % 2 == 1:
            value *= 2
            if value > 9:
                value -= 9
        total += value
    return total % 10 == 0


def mask(data: str, visible: int) -> str:
    """Star out everything except the last ``visible`` characters."""

    if len(data) <= visible:
        return data
    hidden = len(data) - visible
    return "*" * hidden + data[hidden:]


def default_validator(name: str) -> Validator | None:
    if _CARD_NAME.search(name):
        return luhn_check
    return None


def compile_pattern(name: str, source: str) -> re.Pattern[str]:
    try:
        return re.compile(source)
    except re.error as exc:
        raise PatternCompileError(name, source, exc) from exc


def compile_patterns(
    sources: Mapping[str, str],
    validators: Mapping[str, Validator] | None = None,
    logger: structlog.BoundLogger | None = None,
) -> list[Pattern]:
    """Compile every entry of ``sources``, dropping the ones that fail.

    A malformed regex is logged and skipped so that one bad entry never
    prevents the rest of the set from loading. Explicit ``validators`` are
    keyed by pattern name and override the name-based defaults.
    """

    log = logger or structlog.get_logger("fetch_secrets.patterns")
    patterns: list[Pattern] = []
    for name, source in sources.items():
        if not name:
            log.warning("pattern_dropped", name=name, error="empty pattern name")
            continue
        try:
            regex = compile_pattern(name, source)
        except PatternCompileError as exc:
            log.warning("pattern_dropped", name=name, error=str(exc.cause))
            continue
        if validators and name in validators:
            validator = validators[name]
        else:
            validator = default_validator(name)
        patterns.append(Pattern(name=name, regex=regex, validator=validator))
    log.debug("patterns_compiled", loaded=len(patterns), dropped=len(sources) - len(patterns))
    return patterns


__all__ = [
    "Pattern",
    "Validator",
    "compile_pattern",
    "compile_patterns",
    "default_validator",
    "luhn_check",
    "mask",
]
