"""Shared state of the dining table: forks, philosophers and the stop flag."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import TextIO

from .config import Args


def timestamp_ms() -> int:
    """Wall-clock time in milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass(eq=False)
class Philosopher:
    """One diner; forks are taken first ``left_fork`` then ``right_fork``."""

    id: int
    table: Table
    left_fork: threading.Lock
    right_fork: threading.Lock
    meals_eaten: int = 0
    last_meal_time: int = 0
    thread: threading.Thread | None = field(default=None, repr=False)


class Table:
    """Forks, philosophers and the locks that guard the shared state."""

    def __init__(self, args: Args, out: TextIO | None = None) -> None:
        self.args = args
        self._out = out
        self.finished = False
        self.finish_lock = threading.Lock()
        self.print_lock = threading.Lock()
        self.start_time = 0
        count = args.number_of_philosophers
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = []
        for index, fork in enumerate(self.forks):
            left, right = fork, self.forks[(index + 1) % count]
            ident = index + 1
            # Even philosophers reach for the other fork first.
            if ident % 2 == 0:
                left, right = right, left
            self.philosophers.append(Philosopher(ident, self, left, right))

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def is_finished(self) -> bool:
        """Whether the simulation has stopped."""
        with self.finish_lock:
            return self.finished

    def finish(self) -> None:
        """Stop the simulation."""
        with self.finish_lock:
            self.finished = True

    def elapsed(self, now: int) -> int:
        """Milliseconds from the start of the simulation to ``now``."""
        return now - self.start_time

    def smart_sleep(self, duration_ms: int) -> None:
        """Sleep for ``duration_ms``, waking early once the simulation stops."""
        start = timestamp_ms()
        while not self.is_finished() and timestamp_ms() - start < duration_ms:
            time.sleep(0.001)

    def _write(self, line: str) -> None:
        with self.print_lock:
            self.out.write(line + "\n")
            self.out.flush()

    def safe_print(self, philo: Philosopher, message: str) -> bool:
        """Log a state change; returns False, printing nothing, once stopped."""
        if self.is_finished():
            return False
        self._write(f"{self.elapsed(timestamp_ms())} {philo.id} {message}")
        return True

    def announce_death(self, philo: Philosopher, now: int) -> bool:
        """Stop the simulation and report the death of ``philo`` at ``now``.

        Returns False when the simulation had already stopped.
        """
        with self.finish_lock:
            if self.finished:
                return False
            self.finished = True
            self._write(f"{self.elapsed(now)} {philo.id} died")
        return True