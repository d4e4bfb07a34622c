"""Watcher that ends the simulation on a death or when everyone has eaten."""

from __future__ import annotations

import time

from .table import Philosopher, Table, timestamp_ms


def death_monitor(table: Table) -> Philosopher | None:
    """Watch the table until the simulation stops.

    Returns the philosopher whose death this monitor announced, or None when
    the simulation stopped for another reason.
    """
    args = table.args
    while True:
        time.sleep(0.001)
        full_count = 0
        for philo in table.philosophers:
            with table.finish_lock:
                if table.finished:
                    return None
                now = timestamp_ms()
                starved = now - philo.last_meal_time > args.time_to_die
                if args.has_meal_limit and philo.meals_eaten >= args.must_eat:
                    full_count += 1
            if starved:
                return philo if table.announce_death(philo, now) else None
        if args.has_meal_limit and full_count == len(table.philosophers):
            table.finish()
            return None