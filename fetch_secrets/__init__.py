"""Concurrent URL fetcher that scans response bodies for leaked secrets."""

__version__ = "2.0.0"
