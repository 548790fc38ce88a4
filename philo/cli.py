"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from typing import Sequence

from philo.rules import ArgumentError, parse_rules
from philo.table import Table


def main(argv: Sequence[str] | None = None) -> int:
    """Run a dinner from command-line arguments and return the exit status.

    Arguments: number_of_philosophers time_to_die time_to_eat
    time_to_sleep [number_of_times_each_philosopher_must_eat].
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        rules = parse_rules(args)
    except ArgumentError:
        print("Error")
        return 1
    Table(rules, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())