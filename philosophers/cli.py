"""Command-line entry point of the dining philosophers simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from philosophers.config import ConfigError, parse_args
from philosophers.simulation import run_simulation


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, run the simulation and return an exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        config = parse_args(args)
    except ConfigError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    run_simulation(config, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())