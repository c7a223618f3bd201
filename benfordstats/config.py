"""
Configuration and constants for Benford's Law conformance tests.
"""

from pathlib import Path

import numpy as np

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent
RESULTS_DIR = PROJECT_ROOT / "results"

DEFAULT_REPORT_FILE = RESULTS_DIR / "benfords.csv"

# === Benford reference distribution ===
DIGITS = tuple(range(1, 10))

# P(first digit = d) = log10(1 + 1/d)
BENFORD_REFERENCE = np.log10(1 + 1 / np.arange(1, 10))
BENFORD_REFERENCE.setflags(write=False)

# === Significance levels ===
ALPHAS = ("0.10", "0.05", "0.01")

# === Critical values (ascending, one per alpha) ===
class CriticalValues:
    CHO_GAINS = (1.212, 1.330, 1.569)    # Cho-Gains's d
    LEEMIS = (0.851, 0.967, 1.212)       # Leemis's m

# === Test names ===
class ResultNames:
    CHO_GAINS = "Cho-Gains's d"
    LEEMIS = "Leemis's m"

# === Report layout ===
NAME_COLUMN = "Name"
STATISTIC_COLUMN = "Test.Statistic"
STARS_COLUMN = "Stars"
DIGIT_COLUMNS = [str(d) for d in DIGITS]

REPORT_COLUMNS = [NAME_COLUMN, STATISTIC_COLUMN, STARS_COLUMN] + DIGIT_COLUMNS

# Stars 4 (beyond 0.01) has no legend row
LEGEND = {
    "Alphas": list(ALPHAS),
    "Stars": [1, 2, 3],
}

# === Input tables ===
DIGIT_TABLE_COLUMN = "digit"
FREQUENCY_COLUMN = "frequency"
COUNT_COLUMN = "count"
