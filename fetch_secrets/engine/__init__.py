"""Engine components orchestrating fetch → scan → dedup → export."""

from .dedup import DeduplicationStore
from .fetcher import FetchResponse, Fetcher
from .formatter import ResultFormatter, get_formatter
from .patterns import Pattern, compile_patterns, luhn_check, mask
from .scanner import MatchRecord, Scanner
from .thread_pool import ThreadPoolManager

__all__ = [
    "DeduplicationStore",
    "FetchResponse",
    "Fetcher",
    "MatchRecord",
    "Pattern",
    "ResultFormatter",
    "Scanner",
    "ThreadPoolManager",
    "compile_patterns",
    "get_formatter",
    "luhn_check",
    "mask",
]
