# philo

A simulation of the dining philosophers problem. The philosophers sit at a
round table with one fork between each pair of neighbours. Each
philosopher runs in its own thread. Even-numbered philosophers eat first
and then sleep and think. Odd-numbered philosophers sleep and think first
and then eat. To eat, a philosopher takes both neighbouring forks. Even
and odd philosophers take the forks in opposite order, so the table cannot
deadlock. A monitor watches the table and ends the dinner when either of
these happens:

- a philosopher goes longer than the allowed time since the last meal
  started, or
- every philosopher has eaten the required number of meals, if that number
  was given.

## Installation

```
pip install .
```

## Usage

```
philo NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]
```

You can also run `python -m philo.cli` with the same arguments.

- `NUMBER_OF_PHILOSOPHERS`: the number of philosophers, which is also the
  number of forks.
- `TIME_TO_DIE`: the most milliseconds a philosopher may go without starting
  a meal.
- `TIME_TO_EAT`: how many milliseconds a meal lasts.
- `TIME_TO_SLEEP`: how many milliseconds a philosopher sleeps after eating.
- `MEALS` (optional): the dinner ends once every philosopher has eaten at
  least this many times.

Each argument may start with one `+` or `-` sign. After the sign it must
hold only digits. Its value must be greater than 0 and less than
2147483647. If the arguments are wrong, the command prints `Error` and
exits with status 1. Otherwise it runs the dinner and exits with status 0.

Each event is printed on its own line. A line holds three things: the
milliseconds since the dinner started, the philosopher's number (counting
from 1), and the action. The order of the lines depends on how the threads
are scheduled. For example:

```
$ philo 4 410 200 200 3
0 1 is sleeping
0 2 has taken a fork
0 2 has taken a fork
0 2 is eating
...
```

The possible actions are:

- `has taken a fork`
- `is eating`
- `is sleeping`
- `is thinking`
- `died`

No more actions are printed after the dinner has ended, except the one
`died` line. If the dinner ends because everyone has eaten enough, no
final line is printed.

A single philosopher has only one fork. That philosopher takes the fork,
thinks, and dies after `TIME_TO_DIE` milliseconds.

## Library use

```python
import sys

from philo.rules import parse_rules
from philo.table import Table

rules = parse_rules(["5", "800", "200", "200", "7"])
Table(rules, sys.stdout).run()
```

`philo.rules.parse_rules` builds a `Rules` value. It raises
`philo.rules.ArgumentError`, a subclass of `ValueError`, when the arguments
are not valid. `philo.rules.check_args` does the same check and returns
true or false. `philo.table.Table` writes its event lines to any text
stream you give it. `philo.clock` provides `current_time()`, which returns
the time in milliseconds, and `sleep_ms()`.