"""What each philosopher does: take forks, eat, sleep and think."""

from __future__ import annotations

import threading
import time

from .config import UNLIMITED_MEALS
from .table import Philosopher, timestamp_ms

TAKEN_FORK = "has taken a fork"
EATING = "is eating"
SLEEPING = "is sleeping"
THINKING = "is thinking"

_POLL_SECONDS = 0.001


def _take_fork(philo: Philosopher, fork: threading.Lock) -> bool:
    """Wait for ``fork``; give up and return False once the simulation stops."""
    while not fork.acquire(timeout=_POLL_SECONDS):
        if philo.table.is_finished():
            return False
    return True


def eat(philo: Philosopher) -> bool:
    """Take both forks and eat; returns True when a meal was had."""
    table = philo.table
    if not _take_fork(philo, philo.left_fork):
        return False
    try:
        if not table.safe_print(philo, TAKEN_FORK):
            return False
        if not _take_fork(philo, philo.right_fork):
            return False
        try:
            if not table.safe_print(philo, TAKEN_FORK):
                return False
            if not table.safe_print(philo, EATING):
                return False
            with table.finish_lock:
                philo.last_meal_time = timestamp_ms()
            table.smart_sleep(table.args.time_to_eat)
            philo.meals_eaten += 1
            return True
        finally:
            philo.right_fork.release()
    finally:
        philo.left_fork.release()


def sleep(philo: Philosopher) -> bool:
    """Announce sleeping and sleep; returns False when the simulation has stopped."""
    table = philo.table
    if not table.safe_print(philo, SLEEPING):
        return False
    table.smart_sleep(table.args.time_to_sleep)
    return True


def think(philo: Philosopher) -> bool:
    """Announce thinking; returns False when the simulation has stopped."""
    return philo.table.safe_print(philo, THINKING)


def routine(philo: Philosopher) -> None:
    """Eat, sleep and think until the meals are done or the simulation stops."""
    table = philo.table
    max_meals = table.args.must_eat
    with table.finish_lock:
        philo.last_meal_time = timestamp_ms()

    even = philo.id % 2 == 0
    if even:
        time.sleep((table.args.time_to_eat // 2) / 1000)

    while max_meals == UNLIMITED_MEALS or philo.meals_eaten < max_meals:
        if table.is_finished():
            break
        if even:
            time.sleep(_POLL_SECONDS)
        eat(philo)
        sleep(philo)
        think(philo)