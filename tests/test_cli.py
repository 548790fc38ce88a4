import pytest

from philo.cli import main


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["1", "2", "3"],
        ["1", "2", "3", "4", "5", "6"],
        ["2", "abc", "10", "10"],
        ["0", "100", "10", "10"],
        ["2", "-5", "10", "10"],
        ["2", "2147483647", "10", "10"],
    ],
)
def test_invalid_arguments_print_error(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out == "Error\n"


def test_single_philosopher(capsys):
    assert main(["1", "30", "10", "10"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "0 1 has taken a fork",
        "0 1 is thinking",
        "30 1 died",
    ]


def test_meal_limit_run(capsys):
    assert main(["2", "400", "10", "10", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert not any(line.endswith(" died") for line in lines)
    eaters = {line.split()[1] for line in lines if line.endswith(" is eating")}
    assert eaters == {"1", "2"}


def test_starving_run_reports_death(capsys):
    assert main(["2", "10", "50", "50"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1].endswith(" died")
    assert sum(line.endswith(" died") for line in lines) == 1