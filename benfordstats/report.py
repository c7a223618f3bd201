"""
Two-test Benford report: Leemis's m and Cho-Gains's d side by side.

The table has one row per test with columns Name, Test.Statistic, Stars
and the relative frequency of each digit 1-9. A fixed legend maps Stars
to significance levels.
"""

from pathlib import Path
from typing import Optional, Union

import pandas as pd

from .config import (
    DEFAULT_REPORT_FILE, LEGEND, REPORT_COLUMNS, DIGIT_COLUMNS,
    NAME_COLUMN, STATISTIC_COLUMN, STARS_COLUMN,
)
from .detectors.statistical import BenfordTestEngine, FrequencyInput


def benfords_table(
    frequencies: FrequencyInput,
    sample_size: Optional[float] = None,
    engine: Optional[BenfordTestEngine] = None,
) -> pd.DataFrame:
    """
    Run both tests and tabulate the results.

    Args:
        frequencies: 9 observed proportions for digits 1..9
        sample_size: Optional sample size used to scale the statistics
        engine: Engine to use (default: a new BenfordTestEngine)

    Returns:
        DataFrame with rows "Leemis's m" then "Cho-Gains's d"
    """
    engine = engine or BenfordTestEngine()
    results = engine.evaluate_all(frequencies, sample_size=sample_size)
    return pd.DataFrame([r.to_row() for r in results], columns=REPORT_COLUMNS)


def legend_table() -> pd.DataFrame:
    """Stars legend. Only Stars 1-3 are labelled."""
    return pd.DataFrame(LEGEND)


def format_table(df: pd.DataFrame) -> str:
    """Left-aligned text rendering without the row index."""
    return df.to_string(index=False, justify="left")


def print_benfords(
    frequencies: FrequencyInput,
    echo: bool = True,
    sample_size: Optional[float] = None,
) -> pd.DataFrame:
    """
    Build the report table and optionally print it with the legend.

    Returns:
        The report DataFrame
    """
    df = benfords_table(frequencies, sample_size=sample_size)
    if echo:
        print(format_table(df))
        print()
        print(format_table(legend_table()))
    return df


def write_benfords(
    frequencies: FrequencyInput,
    file: Union[str, Path] = DEFAULT_REPORT_FILE,
    sample_size: Optional[float] = None,
) -> Path:
    """
    Write the report table to a CSV file. Nothing is printed.

    The first column holds the 1-based row number.
    """
    path = Path(file)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = print_benfords(frequencies, echo=False, sample_size=sample_size)
    df.index = pd.RangeIndex(1, len(df) + 1)
    df.to_csv(path, index=True)
    return path


def read_benfords(file: Union[str, Path]) -> pd.DataFrame:
    """Read a report written by write_benfords."""
    df = pd.read_csv(file, index_col=0)
    missing = [c for c in REPORT_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Not a Benford report, missing columns: {missing}")

    df = df.astype({NAME_COLUMN: str, STATISTIC_COLUMN: float, STARS_COLUMN: int})
    df[DIGIT_COLUMNS] = df[DIGIT_COLUMNS].astype(float)
    return df.reset_index(drop=True)
