"""
Benford's Law Conformance Tests

Statistical tests of observed first-digit frequencies against the
Benford distribution P(d) = log10(1 + 1/d):
1. Cho-Gains's d - largest signed deviation across digits 1-9
2. Leemis's m - Euclidean norm of the deviation vector

Each statistic is compared with three critical values (alpha 0.10, 0.05,
0.01) and rated with Stars:
- 1: below every critical value
- 2: exceeds the 0.10 value
- 3: exceeds the 0.10 and 0.05 values
- 4: exceeds all three (significant at 0.01)

Frequencies are proportions already computed by the caller; nothing here
reads raw amounts.
"""

from collections import abc
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, NamedTuple, Optional, Tuple, Union

import numpy as np
import pandas as pd

from ..config import (
    BENFORD_REFERENCE, DIGITS, DIGIT_COLUMNS,
    NAME_COLUMN, STATISTIC_COLUMN, STARS_COLUMN,
    CriticalValues, ResultNames,
)


FrequencyInput = Union[Mapping[int, float], pd.Series, np.ndarray, List[float], Tuple[float, ...]]


class InvalidArgumentError(ValueError):
    """Raised when a caller passes an argument outside the accepted domain."""


class BenfordTestKind(str, Enum):
    """Supported Benford tests, keyed by their one-letter code."""
    CHO_GAINS = "d"
    LEEMIS = "m"

    @classmethod
    def parse(cls, kind: Union["BenfordTestKind", str]) -> "BenfordTestKind":
        if isinstance(kind, cls):
            return kind
        try:
            return cls(kind)
        except ValueError:
            accepted = " or ".join(f"'{k.value}'" for k in cls)
            raise InvalidArgumentError(
                f"Unknown test kind {kind!r}: expected {accepted}"
            ) from None


# =============================================================================
# Test Statistics
# =============================================================================

def cho_gains_d(relative: np.ndarray) -> float:
    """Largest signed deviation. A large negative deviation does not count."""
    return float(np.max(relative))


def leemis_m(relative: np.ndarray) -> float:
    """Euclidean norm of the deviation vector."""
    return float(np.sqrt(np.sum(relative ** 2)))


class StatisticDefinition(NamedTuple):
    name: str
    statistic: Callable[[np.ndarray], float]
    critical_values: Tuple[float, float, float]


TEST_DEFINITIONS: Dict[BenfordTestKind, StatisticDefinition] = {
    BenfordTestKind.CHO_GAINS: StatisticDefinition(
        ResultNames.CHO_GAINS, cho_gains_d, CriticalValues.CHO_GAINS
    ),
    BenfordTestKind.LEEMIS: StatisticDefinition(
        ResultNames.LEEMIS, leemis_m, CriticalValues.LEEMIS
    ),
}

# Order of rows in the two-test report
REPORT_ORDER = (BenfordTestKind.LEEMIS, BenfordTestKind.CHO_GAINS)


@dataclass(frozen=True)
class BenfordTestResult:
    """Result of one Benford test."""
    name: str
    test_statistic: float
    stars: int
    deviations: Tuple[float, ...] = ()    # digits 1..9 in order
    kind: Optional[BenfordTestKind] = None
    sample_size: Optional[float] = None

    @property
    def relative_frequencies(self) -> Mapping[int, float]:
        """Read-only view of the deviations keyed by digit."""
        return MappingProxyType(dict(zip(DIGITS, self.deviations)))

    def to_row(self) -> dict:
        """Flat row for tabular export: Name, Test.Statistic, Stars, 1..9."""
        row = {
            NAME_COLUMN: self.name,
            STATISTIC_COLUMN: self.test_statistic,
            STARS_COLUMN: self.stars,
        }
        row.update(zip(DIGIT_COLUMNS, self.deviations))
        return row


# =============================================================================
# Helpers
# =============================================================================

def _digit_label(label) -> Optional[int]:
    """Digit for labels like 1, "1" or 1.0; None for anything else."""
    try:
        value = float(label)
    except (TypeError, ValueError):
        return None
    return int(value) if value.is_integer() else None


def _as_frequency_array(frequencies: FrequencyInput) -> np.ndarray:
    """Coerce supported inputs to a float array ordered by digit 1..9."""
    if isinstance(frequencies, pd.Series):
        digits = [_digit_label(label) for label in frequencies.index]
        if sorted(digits, key=lambda d: -1 if d is None else d) == list(DIGITS):
            frequencies = pd.Series(frequencies.to_numpy(), index=digits).reindex(list(DIGITS))
        values = frequencies.to_numpy(dtype=float)
    elif isinstance(frequencies, abc.Mapping):
        by_digit = {_digit_label(k): v for k, v in frequencies.items()}
        if set(by_digit) != set(DIGITS) or len(frequencies) != len(DIGITS):
            raise InvalidArgumentError(
                f"Frequency mapping must be keyed by digits 1-9, got {list(frequencies)}"
            )
        values = np.array([by_digit[d] for d in DIGITS], dtype=float)
    else:
        values = np.asarray(frequencies, dtype=float).ravel()

    if values.size != len(DIGITS):
        raise InvalidArgumentError(
            f"Expected 9 digit frequencies (digits 1-9), got {values.size}"
        )
    return values


def count_stars(statistic: float, critical_values: Tuple[float, ...]) -> int:
    """1 + number of critical values the statistic exceeds."""
    return 1 + sum(1 for cv in critical_values if cv < statistic)


# =============================================================================
# Main Engine Class
# =============================================================================

class BenfordTestEngine:
    """
    Benford's Law conformance tests over first-digit frequencies.

    The engine is stateless; one instance can serve any number of callers.

    Usage:
        engine = BenfordTestEngine()
        result = engine.evaluate([0.30, 0.18, 0.12, 0.10, 0.08, 0.07, 0.06, 0.05, 0.04], "m")
        print(result.test_statistic, result.stars)
    """

    reference = BENFORD_REFERENCE

    def relative_frequencies(self, frequencies: FrequencyInput) -> np.ndarray:
        """
        Deviation of observed frequencies from the Benford reference.

        Args:
            frequencies: 9 observed proportions for digits 1..9. Values are
                not checked for sign or sum.

        Returns:
            Array of 9 values, observed - log10(1 + 1/d)
        """
        return _as_frequency_array(frequencies) - self.reference

    def evaluate(
        self,
        frequencies: FrequencyInput,
        kind: Union[BenfordTestKind, str],
        sample_size: Optional[float] = None,
    ) -> BenfordTestResult:
        """
        Run one Benford test.

        Args:
            frequencies: 9 observed proportions for digits 1..9
            kind: 'd' (Cho-Gains) or 'm' (Leemis), or a BenfordTestKind
            sample_size: If given, the statistic is scaled by sqrt(sample_size)
                before it is compared with the critical values

        Returns:
            BenfordTestResult with statistic, stars and per-digit deviations
        """
        kind = BenfordTestKind.parse(kind)
        definition = TEST_DEFINITIONS[kind]

        relative = self.relative_frequencies(frequencies)
        statistic = definition.statistic(relative)

        if sample_size is not None:
            if not sample_size > 0:
                raise InvalidArgumentError(
                    f"sample_size must be positive, got {sample_size!r}"
                )
            statistic *= float(np.sqrt(sample_size))

        return BenfordTestResult(
            name=definition.name,
            test_statistic=statistic,
            stars=count_stars(statistic, definition.critical_values),
            deviations=tuple(float(v) for v in relative),
            kind=kind,
            sample_size=sample_size,
        )

    def evaluate_all(
        self,
        frequencies: FrequencyInput,
        sample_size: Optional[float] = None,
    ) -> List[BenfordTestResult]:
        """Run Leemis's m then Cho-Gains's d."""
        return [self.evaluate(frequencies, kind, sample_size) for kind in REPORT_ORDER]


# =============================================================================
# Standalone Functions for Quick Analysis
# =============================================================================

_ENGINE = BenfordTestEngine()


def relative_frequencies(frequencies: FrequencyInput) -> np.ndarray:
    """Observed minus Benford reference, per digit 1..9."""
    return _ENGINE.relative_frequencies(frequencies)


def benfords_test(
    frequencies: FrequencyInput,
    kind: Union[BenfordTestKind, str],
    sample_size: Optional[float] = None,
) -> BenfordTestResult:
    """
    Run Cho-Gains's d ('d') or Leemis's m ('m') test.

    Raises:
        InvalidArgumentError: unknown kind or not 9 frequencies
    """
    return _ENGINE.evaluate(frequencies, kind, sample_size)
