"""
Benford's Law conformance tests.

Two tests over first-digit frequencies:
1. Cho-Gains's d ('d'): largest signed deviation from Benford
2. Leemis's m ('m'): Euclidean norm of the deviations

BenfordTestEngine: evaluates either test and rates it with Stars.
"""

from .statistical import (
    BenfordTestEngine,
    BenfordTestKind,
    BenfordTestResult,
    InvalidArgumentError,
    REPORT_ORDER,
    TEST_DEFINITIONS,
    benfords_test,
    cho_gains_d,
    count_stars,
    leemis_m,
    relative_frequencies,
)

__all__ = [
    # Engine
    "BenfordTestEngine",
    "BenfordTestKind",
    "BenfordTestResult",
    "InvalidArgumentError",
    "REPORT_ORDER",
    "TEST_DEFINITIONS",
    # Statistics
    "cho_gains_d",
    "leemis_m",
    "count_stars",
    # Quick analysis
    "benfords_test",
    "relative_frequencies",
]
