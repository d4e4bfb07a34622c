"""Starting, running and joining the whole simulation."""

from __future__ import annotations

import sys
import threading
from collections.abc import Iterable, Sequence
from typing import TextIO

from .config import USAGE, Args, UsageError, parse_args
from .monitor import death_monitor
from .routine import routine
from .table import Table, timestamp_ms


def launch_philosopher_threads(table: Table) -> list[threading.Thread]:
    """Start one thread per philosopher and return them.

    Raises ``RuntimeError`` when a thread cannot be started; the simulation is
    stopped first so that the threads already running end.
    """
    threads = []
    for philo in table.philosophers:
        thread = threading.Thread(
            target=routine, args=(philo,), name=f"philosopher-{philo.id}"
        )
        philo.thread = thread
        try:
            thread.start()
        except RuntimeError as error:
            print(
                f"Error: Failed to create thread for philosopher {philo.id}",
                file=table.out,
            )
            table.finish()
            raise RuntimeError(
                f"Failed to create thread for philosopher {philo.id}"
            ) from error
        threads.append(thread)
    return threads


def join_philosopher_threads(threads: Iterable[threading.Thread]) -> None:
    """Wait for every philosopher thread to end."""
    for thread in threads:
        thread.join()


def run(args: Args, out: TextIO | None = None) -> Table:
    """Run one simulation to its end and return the table it ran on."""
    table = Table(args, out)
    table.start_time = timestamp_ms()
    threads = launch_philosopher_threads(table)
    monitor = threading.Thread(target=death_monitor, args=(table,), name="monitor")
    monitor.start()
    join_philosopher_threads(threads)
    monitor.join()
    return table


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point; returns the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        args = parse_args(argv)
    except UsageError:
        print(USAGE)
        return 1
    try:
        run(args)
    except RuntimeError:
        print("Failed to launch philosopher threads")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())