"""
Benford's Law goodness-of-fit tests (Cho-Gains's d, Leemis's m).
"""

from .detectors import (
    BenfordTestEngine,
    BenfordTestKind,
    BenfordTestResult,
    InvalidArgumentError,
    benfords_test,
    relative_frequencies,
)
from .report import benfords_table, legend_table, print_benfords, read_benfords, write_benfords

__all__ = [
    "BenfordTestEngine",
    "BenfordTestKind",
    "BenfordTestResult",
    "InvalidArgumentError",
    "benfords_test",
    "relative_frequencies",
    "benfords_table",
    "legend_table",
    "print_benfords",
    "read_benfords",
    "write_benfords",
]
