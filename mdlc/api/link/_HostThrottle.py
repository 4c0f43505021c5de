"""Per-host cap on in-flight remote checks (private)."""

from __future__ import annotations

import threading
from collections import defaultdict, deque
from collections.abc import Callable
from concurrent.futures import Executor


class _HostThrottle:
    """Submit work to an executor with at most ``per_host_limit`` tasks in flight per host.

    Work over the cap waits in a per-host queue outside the executor, so pool
    threads are never parked on a host permit and other hosts and local checks
    keep the whole pool. A finishing task hands its slot to the next queued
    task for the same host.
    """

    def __init__(self, executor: Executor, per_host_limit: int):
        if per_host_limit < 1:
            raise ValueError("per_host_limit must be at least 1")
        self._executor = executor
        self._limit = per_host_limit
        self._lock = threading.Lock()
        self._in_flight: dict[str, int] = defaultdict(int)
        self._pending: dict[str, deque[Callable[[], None]]] = defaultdict(deque)
        self._closed = False

    def submit(self, host: str, fn: Callable[[], None]) -> None:
        with self._lock:
            if self._closed:
                return
            if self._in_flight[host] >= self._limit:
                self._pending[host].append(fn)
                return
            self._in_flight[host] += 1
        self._start(host, fn)

    def in_flight(self, host: str) -> int:
        with self._lock:
            return self._in_flight[host]

    def pending(self, host: str) -> int:
        with self._lock:
            return len(self._pending[host])

    def close(self) -> None:
        """Drop queued work; tasks already in the executor are unaffected."""
        with self._lock:
            self._closed = True
            self._pending.clear()

    def _start(self, host: str, fn: Callable[[], None]) -> None:
        try:
            future = self._executor.submit(fn)
        except RuntimeError:
            # Executor already shut down
            with self._lock:
                self._in_flight[host] -= 1
            return
        future.add_done_callback(lambda _future: self._release(host))

    def _release(self, host: str) -> None:
        with self._lock:
            queued = self._pending.get(host)
            if self._closed or not queued:
                self._in_flight[host] -= 1
                return
            next_fn = queued.popleft()
        self._start(host, next_fn)
