# philosophers

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread. Neighbouring philosophers share forks, which are locks. A monitor
thread stops the simulation when a philosopher starves, or when every
philosopher has eaten the required number of meals.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

All times are in milliseconds. Each value is read as a leading integer. Any
text after the digits is ignored, and a value with no digits counts as 0. The
first four values must be positive. If a positive fifth value is given, the
simulation stops once every philosopher has eaten that many times.

If the arguments are missing or invalid, the command prints the usage line and
exits with status 1. It also exits with status 1, after printing
`Failed to launch philosopher threads`, if a philosopher thread cannot be
started. Otherwise it exits with status 0 when the simulation ends.

Each event is printed as `<elapsed ms> <philosopher id> <action>`. The action
is one of `has taken a fork`, `is eating`, `is sleeping`, `is thinking` or
`died`. Once a death has been reported, no more events are printed.

Example, five philosophers who each eat seven times:

```
philo 5 800 200 200 7
```

## From Python

```python
import sys
from philosophers.config import parse_args
from philosophers.simulation import run

args = parse_args(["4", "410", "200", "200", "3"])
table = run(args, sys.stdout)
print(table.finished, [p.meals_eaten for p in table.philosophers])
```

- `philosophers.config.parse_args(argv)` takes the values that follow the
  program name and returns an `Args`. It raises `UsageError`, a `ValueError`,
  when the number of values is wrong or one of the first four is not positive.
  When no fifth value is given, `Args.must_eat` is `UNLIMITED_MEALS` (-1).
- `philosophers.simulation.run(args, out=None)` runs one simulation to its end.
  It writes the events to `out`, or to standard output if `out` is not given,
  and returns the `Table` it ran on.
- `philosophers.simulation.main(argv=None)` is the `philo` command. It returns
  the exit status.
- `philosophers.table.Table` holds the forks, the `Philosopher` objects and the
  stop flag. `philosophers.routine` contains the eat, sleep and think steps, and
  `philosophers.monitor.death_monitor` is the monitor.

## Tests

```
pip install .[test]
pytest
```