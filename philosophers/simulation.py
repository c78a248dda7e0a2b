"""Threads, forks and the monitor of the dining philosophers simulation."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import TextIO

from philosophers.clock import msleep, timestamp_ms
from philosophers.config import Config

TAKEN_FORK = "has taken a fork"
EATING = "is eating"
SLEEPING = "is sleeping"
THINKING = "is thinking"
DIED = "died"

_MONITOR_PAUSE = 0.001
_FORK_POLL = 0.001


@dataclass(eq=False)
class Philosopher:
    """One diner: identifier, forks on each side and eating record."""

    id: int
    left_fork: threading.Lock = field(repr=False)
    right_fork: threading.Lock = field(repr=False)
    last_meal: int
    meals: int = 0
    thread: threading.Thread | None = field(default=None, repr=False)


class Simulation:
    """Shared state of a run: forks, philosophers, the print lock and the clock."""

    def __init__(self, config: Config, output: TextIO | None = None) -> None:
        self.config = config
        self.output = output if output is not None else sys.stdout
        self.print_lock = threading.Lock()
        self.forks = [threading.Lock() for _ in range(config.nbr)]
        self.philosophers = [
            Philosopher(
                id=i + 1,
                left_fork=self.forks[i],
                right_fork=self.forks[(i + 1) % config.nbr],
                last_meal=timestamp_ms(),
            )
            for i in range(config.nbr)
        ]
        self.start = timestamp_ms()
        self.finished = False

    def run(self) -> None:
        """Start every philosopher, watch them until the end, then join them."""
        for philo in self.philosophers:
            philo.thread = threading.Thread(
                target=self.philo_routine, args=(philo,), name=f"philosopher-{philo.id}"
            )
            philo.thread.start()
        self.monitor()
        for philo in self.philosophers:
            if philo.thread is not None:
                philo.thread.join()

    def monitor(self) -> None:
        """Watch for a starving philosopher or for everyone having eaten enough."""
        while not self.finished:
            for philo in self.philosophers:
                if self.finished or self._check_death(philo):
                    break
            if self._all_ate():
                self.finished = True
            time.sleep(_MONITOR_PAUSE)

    def philo_routine(self, philo: Philosopher) -> None:
        """Eat, sleep and think until the simulation finishes."""
        if philo.id % 2 == 0:
            time.sleep(0.001)
        while not self.finished:
            self._eat(philo)
            self._print_state(philo, SLEEPING)
            msleep(self.config.time_sleep)
            self._print_state(philo, THINKING)

    def _print_state(self, philo: Philosopher, message: str) -> None:
        with self.print_lock:
            if not self.finished:
                self._write(timestamp_ms() - self.start, philo.id, message)

    def _write(self, ts: int, philo_id: int, message: str) -> None:
        self.output.write(f"{ts} {philo_id} {message}\n")
        self.output.flush()

    def _take(self, fork: threading.Lock) -> bool:
        """Wait for ``fork``; give up once the simulation has finished."""
        while not self.finished:
            if fork.acquire(timeout=_FORK_POLL):
                return True
        return False

    def _eat(self, philo: Philosopher) -> None:
        if not self._take(philo.left_fork):
            return
        try:
            self._print_state(philo, TAKEN_FORK)
            if not self._take(philo.right_fork):
                return
            try:
                self._print_state(philo, TAKEN_FORK)
                self._print_state(philo, EATING)
                philo.last_meal = timestamp_ms()
                msleep(self.config.time_eat)
            finally:
                philo.right_fork.release()
        finally:
            philo.left_fork.release()
        philo.meals += 1

    def _check_death(self, philo: Philosopher) -> bool:
        now = timestamp_ms()
        if now - philo.last_meal > self.config.time_die:
            with self.print_lock:
                self._write(now - self.start, philo.id, DIED)
                self.finished = True
            return True
        return False

    def _all_ate(self) -> bool:
        if self.config.must_eat <= 0:
            return False
        return all(philo.meals >= self.config.must_eat for philo in self.philosophers)


def run_simulation(config: Config, output: TextIO | None = None) -> Simulation:
    """Run a full simulation and return its final state."""
    simulation = Simulation(config, output)
    simulation.run()
    return simulation