"""
Pytest fixtures for Benford test engine tests.
"""

import numpy as np
import pytest

from benfordstats.detectors import BenfordTestEngine


@pytest.fixture
def engine():
    return BenfordTestEngine()


@pytest.fixture
def benford_reference():
    """Exact Benford proportions for digits 1..9."""
    return np.log10(1 + 1 / np.arange(1, 10))


@pytest.fixture
def four_digit_frequencies():
    """Digits 1, 2, 8 and 9 each 25%, the rest never occur."""
    return [0.25, 0.25, 0, 0, 0, 0, 0, 0.25, 0.25]


@pytest.fixture
def digit_counts_csv(tmp_path):
    """Digit table with counts summing to 1000."""
    counts = [301, 176, 125, 97, 79, 67, 58, 51, 46]
    path = tmp_path / "counts.csv"
    lines = ["digit,count"] + [f"{d},{c}" for d, c in zip(range(1, 10), counts)]
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture
def digit_frequencies_csv(tmp_path, four_digit_frequencies):
    """Digit table with proportions, rows not in digit order."""
    path = tmp_path / "frequencies.csv"
    rows = [f"{d},{f}" for d, f in zip(range(1, 10), four_digit_frequencies)]
    path.write_text("\n".join(["digit,frequency"] + rows[::-1]) + "\n")
    return path
