"""Bounded worker pool dispatching one task per target."""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from threading import Lock
from typing import Callable, Iterable, Iterator, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class ThreadPoolManager:
    """Run at most ``workers`` tasks at once and signal when all are done.

    Each submitted item is handed to exactly one worker thread. Items beyond
    the worker count wait in the executor queue until a worker frees up.
    """

    def __init__(self, workers: int = 10, thread_name_prefix: str = "scanner") -> None:
        if workers < 1:
            raise ValueError("workers must be >= 1")
        self.workers = workers
        self._executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix=thread_name_prefix)
        self._lock = Lock()
        self._closed = False

    def submit_all(self, fn: Callable[[T], R], items: Iterable[T]) -> list[Future[R]]:
        with self._lock:
            if self._closed:
                raise RuntimeError("thread pool has been shut down")
            return [self._executor.submit(fn, item) for item in items]

    def map_unordered(self, fn: Callable[[T], R], items: Iterable[T]) -> Iterator[R]:
        """Yield results as tasks finish; returns only once every task is done."""

        futures = self.submit_all(fn, items)
        for future in as_completed(futures):
            yield future.result()

    def shutdown(self, wait: bool = True) -> None:
        with self._lock:
            self._closed = True
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "ThreadPoolManager":
        return self

    def __exit__(self, *_exc_info) -> None:
        self.shutdown()


__all__ = ["ThreadPoolManager"]
