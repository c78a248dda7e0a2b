"""Dining philosophers simulation with threads, a monitor and a command-line entry point."""

__version__ = "0.1.0"