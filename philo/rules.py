"""Command-line argument validation and the simulation's fixed rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

_DIGITS = frozenset("0123456789")
_SPACES = frozenset("\t\n\v\f\r ")
_INT_MAX = 2147483647


class ArgumentError(ValueError):
    """Raised when the command-line arguments do not describe a valid dinner."""


@dataclass(frozen=True)
class Rules:
    """Timing and count parameters shared by every philosopher.

    Times are in milliseconds.  ``check_meal`` is true when a meal count
    was given, in which case the dinner ends once every philosopher has
    eaten ``num_meals`` times.
    """

    num_philo: int
    time_die: int
    time_eat: int
    time_sleep: int
    num_meals: int = 0
    check_meal: bool = False


def is_number(text: str) -> bool:
    """Return whether *text* is an optional sign followed only by ASCII digits."""
    body = text[1:] if text[:1] in ("+", "-") and len(text) > 1 else text
    return all(char in _DIGITS for char in body)


def parse_long(text: str) -> int:
    """Read a leading signed integer, ignoring leading whitespace.

    Parsing stops at the first character that is not a digit; text with
    no digits reads as zero.
    """
    rest = text.lstrip("".join(_SPACES))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if char not in _DIGITS:
            break
        value = value * 10 + ord(char) - ord("0")
    return sign * value


def check_args(args: Sequence[str]) -> bool:
    """Return whether *args* (without the program name) are acceptable.

    Four or five arguments are expected, each a number strictly between
    zero and the largest 32-bit signed integer.
    """
    if len(args) not in (4, 5):
        return False
    return all(
        is_number(arg) and 0 < parse_long(arg) < _INT_MAX for arg in args
    )


def parse_rules(args: Sequence[str]) -> Rules:
    """Build :class:`Rules` from arguments, raising :class:`ArgumentError` if invalid."""
    if not check_args(args):
        raise ArgumentError("invalid arguments")
    num_philo, time_die, time_eat, time_sleep = (parse_long(a) for a in args[:4])
    if len(args) == 5:
        return Rules(
            num_philo=num_philo,
            time_die=time_die,
            time_eat=time_eat,
            time_sleep=time_sleep,
            num_meals=parse_long(args[4]),
            check_meal=True,
        )
    return Rules(
        num_philo=num_philo,
        time_die=time_die,
        time_eat=time_eat,
        time_sleep=time_sleep,
    )