# philosophers

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread, sits between two forks (locks), and loops through taking
forks, eating, sleeping and thinking. A monitor watches every philosopher
and stops the run as soon as one starves, or once everyone has eaten
enough times.

## Installation

```
pip install .
```

## Command line

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [must_eat]
```

- `number_of_philosophers`: 1 to 200
- `time_to_die`, `time_to_eat`, `time_to_sleep`: milliseconds
- `must_eat` (optional): at least 1; the run ends once every philosopher
  has eaten at least this many times

Every argument must be made of the digits 0-9 only, so negative numbers and
signs are rejected. Bad arguments print a short message (`invalid arg
count`, `non-numeric arg`, `bad nbr` or `bad must_eat`) to standard error
and the command exits with status 1.

Each event is printed as `<ms since start> <philosopher id> <state>`:

```
$ philo 5 800 200 200 3
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
...
```

States are `has taken a fork`, `is eating`, `is sleeping`, `is thinking`
and `died`. A philosopher dies when more than `time_to_die` milliseconds
have passed since the start of its last meal. Nothing is printed after a
death. Odd-numbered philosophers start a millisecond ahead of the
even-numbered ones.

## Library use

```python
import sys
from philosophers.config import parse_args
from philosophers.simulation import run_simulation

config = parse_args(["4", "410", "200", "200", "2"])
simulation = run_simulation(config, sys.stdout)
print([philo.meals for philo in simulation.philosophers])
```

- `philosophers.config.parse_args(args)` takes the arguments that follow
  the program name and returns a frozen `Config` (`nbr`, `time_die`,
  `time_eat`, `time_sleep`, `must_eat`, where `must_eat` is -1 when not
  given). It raises `ConfigError`, a `ValueError`, for invalid input.
- `philosophers.simulation.Simulation(config, output)` holds the forks, the
  `Philosopher` records (`id`, `left_fork`, `right_fork`, `last_meal`,
  `meals`, `thread`) and the `finished` flag; `run()` starts the threads,
  runs the monitor and joins the threads. `output` defaults to standard
  output.
- `run_simulation(config, output)` builds a `Simulation`, runs it and
  returns it.
- `philosophers.clock` offers `timestamp_ms()` (wall-clock milliseconds)
  and `msleep(ms)`.
- `philosophers.cli.main(argv)` is the command's entry point and returns
  the exit status.

## Helper library

`philosophers.libft` holds small helpers modelled on classic string and
memory routines:

- `chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `toupper`, `tolower`, taking a character code or a one-character string.
- `memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp` on
  byte buffers such as `bytearray`, and `calloc`, which returns a zeroed
  `bytearray` and raises `OverflowError` past a 32-bit unsigned size.
- `output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`, writing
  to a file descriptor.
- `strings`: `strlen`, `strlcpy` and `strlcat` (returning the resulting
  text and the full length), `strchr`, `strrchr` and `strnstr` (returning
  an index or `None`), `strncmp`, `strdup`.
- `text`: `atoi` (wrapping as a 32-bit integer), `itoa`, `substr`,
  `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`.

## Tests

```
pip install .[test]
pytest
```