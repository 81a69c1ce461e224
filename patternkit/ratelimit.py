"""A single-token rate limiter refilled at a fixed interval."""

from __future__ import annotations

import threading


class RateLimiter:
    """Allows about ``limit`` calls per ``period`` seconds.

    One token is held at most; a background thread makes it available again
    every ``period / limit`` seconds.
    """

    def __init__(self, limit: int, period: float) -> None:
        if limit <= 0:
            raise ValueError("limit must be positive")
        if period <= 0:
            raise ValueError("period must be positive")
        self._interval = period / limit
        self._lock = threading.Lock()
        self._token_taken = False
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._refill, daemon=True)
        self._thread.start()

    def _refill(self) -> None:
        while not self._stop.wait(self._interval):
            with self._lock:
                self._token_taken = False

    def __enter__(self) -> RateLimiter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if not self._stop.is_set():
            self.stop()

    def allow_call(self) -> bool:
        """Take the token if it is available; return whether the call may proceed."""
        with self._lock:
            if self._token_taken:
                return False
            self._token_taken = True
            return True

    def stop(self) -> None:
        """Stop refilling and wait for the background thread to end."""
        with self._lock:
            if self._stop.is_set():
                raise RuntimeError("rate limiter already stopped")
            self._stop.set()
        self._thread.join()