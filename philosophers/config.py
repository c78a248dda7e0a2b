"""Command-line configuration of the dining philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

MAX_PHILOSOPHERS = 200
INT_MAX = 2147483647
_DIGITS = frozenset("0123456789")


class ConfigError(ValueError):
    """Raised when the simulation arguments are invalid."""


@dataclass(frozen=True)
class Config:
    """Parameters of one simulation run; times are in milliseconds."""

    nbr: int
    time_die: int
    time_eat: int
    time_sleep: int
    must_eat: int = -1


def _is_numeric(text: str) -> bool:
    return all(ch in _DIGITS for ch in text)


def _to_number(text: str) -> int:
    # An empty argument counts as zero, as it carries no non-digit character.
    return int(text) if text else 0


def _to_int(text: str) -> int | None:
    value = _to_number(text)
    return value if value <= INT_MAX else None


def parse_args(args: Sequence[str]) -> Config:
    """Build a Config from the arguments that follow the program name.

    Expects four or five unsigned decimal arguments: number of philosophers,
    time to die, time to eat, time to sleep and, optionally, the number of
    meals each philosopher must eat.
    """
    if len(args) not in (4, 5):
        raise ConfigError("invalid arg count")
    if not all(_is_numeric(arg) for arg in args):
        raise ConfigError("non-numeric arg")

    nbr = _to_int(args[0])
    if nbr is None or nbr <= 0 or nbr > MAX_PHILOSOPHERS:
        raise ConfigError("bad nbr")
    time_die, time_eat, time_sleep = (_to_number(arg) for arg in args[1:4])

    must_eat = -1
    if len(args) == 5:
        parsed = _to_int(args[4])
        if parsed is None or parsed <= 0:
            raise ConfigError("bad must_eat")
        must_eat = parsed

    return Config(nbr, time_die, time_eat, time_sleep, must_eat)