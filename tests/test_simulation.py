import io
import threading
from unittest import mock

import pytest

from philosophers.config import USAGE, Args
from philosophers.simulation import (
    join_philosopher_threads,
    launch_philosopher_threads,
    main,
    run,
)
from philosophers.table import Table, timestamp_ms


def test_launch_and_join_runs_every_philosopher():
    out = io.StringIO()
    table = Table(Args(3, 100000, 5, 5, 1), out)
    table.start_time = timestamp_ms()
    threads = launch_philosopher_threads(table)
    assert len(threads) == 3
    assert [p.thread for p in table.philosophers] == threads
    join_philosopher_threads(threads)
    assert not any(thread.is_alive() for thread in threads)
    assert [p.meals_eaten for p in table.philosophers] == [1, 1, 1]


def test_launch_failure_stops_the_table():
    out = io.StringIO()
    table = Table(Args(2, 1000, 5, 5, 1), out)
    with mock.patch.object(
        threading.Thread, "start", side_effect=RuntimeError("cannot start")
    ):
        with pytest.raises(RuntimeError):
            launch_philosopher_threads(table)
    assert table.is_finished()
    assert out.getvalue() == "Error: Failed to create thread for philosopher 1\n"


def test_run_until_everyone_has_eaten():
    out = io.StringIO()
    table = run(Args(3, 2000, 10, 10, 2), out)
    assert table.is_finished()
    assert all(p.meals_eaten >= 2 for p in table.philosophers)
    assert "died" not in out.getvalue()


def test_run_single_philosopher_dies():
    out = io.StringIO()
    table = run(Args(1, 50, 10, 10), out)
    assert table.is_finished()
    lines = out.getvalue().splitlines()
    assert lines[0].split(" ", 1)[1] == "1 has taken a fork"
    elapsed, rest = lines[-1].split(" ", 1)
    assert rest == "1 died"
    assert int(elapsed) >= 50
    assert table.philosophers[0].meals_eaten == 0


@pytest.mark.parametrize(
    "argv",
    [[], ["1", "2", "3"], ["1", "2", "3", "4", "5", "6"], ["0", "100", "10", "10"]],
)
def test_main_rejects_bad_arguments(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out == USAGE + "\n"


def test_main_runs_simulation(capsys):
    assert main(["1", "30", "10", "10"]) == 0
    output = capsys.readouterr().out
    assert output.splitlines()[-1].endswith(" 1 died")


def test_main_reports_launch_failure(capsys):
    with mock.patch.object(
        threading.Thread, "start", side_effect=RuntimeError("cannot start")
    ):
        assert main(["2", "100", "10", "10"]) == 1
    assert capsys.readouterr().out.splitlines() == [
        "Error: Failed to create thread for philosopher 1",
        "Failed to launch philosopher threads",
    ]