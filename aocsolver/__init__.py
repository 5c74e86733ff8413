"""Solvers for days 1 to 8 of a yearly programming puzzle calendar, with shared input helpers."""

__version__ = "0.1.0"

__all__ = [
    "common",
    "day01",
    "day02",
    "day03",
    "day04",
    "day05",
    "day06",
    "day07",
    "day08",
]