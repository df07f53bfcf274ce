"""Configuration package exports."""

from .loader import DEFAULT_PATTERNS_FILE, load_patterns, load_settings, load_targets
from .models import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, OutputFormat, ScanSettings

__all__ = [
    "DEFAULT_PATTERNS_FILE",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "OutputFormat",
    "ScanSettings",
    "load_patterns",
    "load_settings",
    "load_targets",
]
