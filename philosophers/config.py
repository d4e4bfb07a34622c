"""Command-line arguments of the dining philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

USAGE = (
    "Usage: ./philo number_of_philosophers time_to_die time_to_eat "
    "time_to_sleep [number_of_times_each_philosopher_must_eat]"
)

UNLIMITED_MEALS = -1


class UsageError(ValueError):
    """Raised when the command-line arguments are missing or invalid."""

    def __init__(self, message: str = USAGE) -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Args:
    """Simulation parameters; times are in milliseconds.

    ``must_eat`` is the number of meals each philosopher must have before the
    simulation stops, or ``UNLIMITED_MEALS`` when it was not given.
    """

    number_of_philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat: int = UNLIMITED_MEALS

    @property
    def has_meal_limit(self) -> bool:
        """True when a positive number of meals ends the simulation."""
        return self.must_eat > 0


def _atoi(text: str) -> int:
    """Read a leading integer the lenient way: junk after it is ignored, none gives 0."""
    stripped = text.lstrip(" \t\n\r\v\f")
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = ""
    for char in stripped:
        if not char.isascii() or not char.isdigit():
            break
        digits += char
    return sign * int(digits) if digits else 0


def parse_args(argv: Sequence[str]) -> Args:
    """Parse the arguments that follow the program name.

    Four or five values are expected. Raises ``UsageError`` when the count is
    wrong or any of the first four values is not positive.
    """
    if len(argv) not in (4, 5):
        raise UsageError()
    philosophers, die, eat, sleep = (_atoi(value) for value in argv[:4])
    must_eat = _atoi(argv[4]) if len(argv) == 5 else UNLIMITED_MEALS
    if min(philosophers, die, eat, sleep) <= 0:
        raise UsageError()
    return Args(
        number_of_philosophers=philosophers,
        time_to_die=die,
        time_to_eat=eat,
        time_to_sleep=sleep,
        must_eat=must_eat,
    )