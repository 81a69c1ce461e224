"""A single-threaded scheduler of one-shot and periodic tasks."""

from __future__ import annotations

import argparse
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

SchedulerTask = Callable[[], bool]


@dataclass
class _Entry:
    task: SchedulerTask
    period: float
    next_call: float


class Scheduler:
    """Runs tasks at their due times on the thread that calls ``run``.

    A task returns True to be removed; tasks with period 0 run once.
    """

    def __init__(self) -> None:
        self._tasks: dict[int, _Entry] = {}
        self._cond = threading.Condition()
        self._last_id = 0
        self._stopped = False
        self._runner: Optional[threading.Thread] = None
        self._finished = threading.Event()

    def add_one_shot(self, task: SchedulerTask) -> None:
        """Run ``task`` once, as soon as possible."""
        self.add_periodic(task, 0)

    def add_periodic(self, task: SchedulerTask, period: float) -> None:
        """Run ``task`` every ``period`` seconds, first after one period."""
        if period < 0:
            raise ValueError("period must not be negative")
        with self._cond:
            self._tasks[self._last_id] = _Entry(task, period, time.monotonic() + period)
            self._last_id += 1
            self._cond.notify_all()

    def stop(self) -> None:
        """Stop the scheduler and wait for ``run`` to return."""
        with self._cond:
            if self._stopped:
                raise RuntimeError("scheduler already stopped")
            self._stopped = True
            runner = self._runner
            self._cond.notify_all()
        if runner is not None and runner is not threading.current_thread():
            self._finished.wait()

    def _next_due(self) -> Optional[tuple[int, _Entry]]:
        with self._cond:
            while not self._stopped:
                if not self._tasks:
                    self._cond.wait()
                    continue
                task_id, entry = min(
                    self._tasks.items(), key=lambda item: item[1].next_call
                )
                delay = entry.next_call - time.monotonic()
                if delay <= 0:
                    return task_id, entry
                self._cond.wait(delay)
            return None

    def run(self) -> None:
        """Execute due tasks until ``stop`` is called."""
        with self._cond:
            if self._runner is not None:
                raise RuntimeError("scheduler already running")
            self._runner = threading.current_thread()
        try:
            while True:
                due = self._next_due()
                if due is None:
                    return
                task_id, entry = due
                remove = entry.task()
                with self._cond:
                    if task_id not in self._tasks:
                        continue
                    if remove or entry.period == 0:
                        del self._tasks[task_id]
                    else:
                        entry.next_call = time.monotonic() + entry.period
        finally:
            self._finished.set()


def main(argv: Optional[list[str]] = None) -> int:
    """Print a line periodically for a while, then stop."""
    parser = argparse.ArgumentParser(description="Print a line on a schedule.")
    parser.add_argument("--period", type=float, default=1.0)
    parser.add_argument("--duration", type=float, default=5.0)
    args = parser.parse_args(argv)

    scheduler = Scheduler()

    def tick() -> bool:
        print("Println", flush=True)
        return False

    scheduler.add_periodic(tick, args.period)
    timer = threading.Timer(args.duration, scheduler.stop)
    timer.daemon = True
    timer.start()
    scheduler.run()
    return 0